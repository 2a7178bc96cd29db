"""
Fixed values shared by the core pipeline and the CLI.
"""

COMMENT_START = "#"
ESCAPER = "\\"
DELIMITER = "|"
LINE_END = "\n"

DEFAULT_ALGORITHM = "sha256"
DEFAULT_CHUNK_SIZE = 64 * 1024  # 64 KiB read buffer

# Names served by the xxhash library; everything else goes through hashlib
XXHASH_ALGORITHMS = ("xxh32", "xxh64", "xxh3_64", "xxh3_128")

DESCRIPTION_TEXT = (
    "UniqueFiles — group files by content hash.\n"
    "Writes one line per distinct content: <sha256>|<path>|<path>...\n"
    "Progress comments (lines starting with '#') go to stderr."
)

EPILOG_TEXT = """
Report format:
  Every discovered file appears exactly once. Paths inside a line are sorted,
  lines are sorted by their first path. Literal '\\' and '|' inside a field
  are escaped as '\\\\' and '\\|'.

Examples:
  Report all files under two folders
  %(prog)s ~/Pictures /mnt/backup/Pictures

  Save the report, keep progress on the console
  %(prog)s ~/Downloads > report.txt

  Lines with two or more paths are the duplicates.
"""
