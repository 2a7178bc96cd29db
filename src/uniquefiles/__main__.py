from uniquefiles.cli import main

main()
