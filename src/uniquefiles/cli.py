#!/usr/bin/env python3
"""
UniqueFiles CLI — Command line interface for grouping files by content hash.
The report goes to stdout; progress comments go to stderr.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import os
import sys
from typing import List, NoReturn, Optional
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from uniquefiles.commands import UniqueFilesCommand
from uniquefiles.constants import COMMENT_START, DESCRIPTION_TEXT, EPILOG_TEXT
from uniquefiles.core.exceptions import UniqueFilesError
from uniquefiles.core.models import ScanParams


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        # Undecodable filename bytes are written back unchanged
        sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="uniquefiles",
            description=DESCRIPTION_TEXT,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )
        parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="Files or directories to include, processed in the given order"
        )
        return parser.parse_args(args)

    @staticmethod
    def progress_callback(message: str) -> None:
        """Writes one progress comment line to stderr."""
        sys.stderr.write(f"{COMMENT_START}{message}\n")
        sys.stderr.flush()

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args: Optional[List[str]] = None) -> None:
        """Main entry point."""
        parsed = self.parse_args(args)
        params = ScanParams(roots=parsed.paths)

        try:
            UniqueFilesCommand().run(
                params,
                sys.stdout,
                progress_callback=self.progress_callback
            )
        except UniqueFilesError as e:
            self.error_exit(str(e))


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
