"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Expands a root path into the regular files beneath it.
Features:
- Uses pathlib.Path for consistent cross-platform path handling
- Breadth-first traversal over an explicit queue (no recursion depth limit)
- Children are queued in the order the filesystem lists them
- Unlistable directories and unclassifiable entries are skipped, never fatal
"""

import os
import stat
from collections import deque
from pathlib import Path
from typing import Callable, Deque, List, Optional
import logging

logger = logging.getLogger(__name__)

# Local imports
from uniquefiles.core.models import FileRef
from uniquefiles.core.interfaces import FileScanner


class FileScannerImpl(FileScanner):
    """
    Breadth-first scanner producing FileRef objects.

    Attributes:
        directories_visited: Number of directories seen since this scanner was created
    """

    def __init__(self):
        self.directories_visited = 0

    def scan(self,
             root: str,
             progress_callback: Optional[Callable[[str], None]] = None) -> List[FileRef]:
        """
        Returns every regular file reachable from root.
        A regular file root yields itself; anything that is neither file nor directory yields nothing.
        """
        logger.debug(f"Starting scan of {root}")

        found_files: List[FileRef] = []
        queue: Deque[Path] = deque([Path(root)])

        if not os.path.lexists(root):
            logger.warning(f"Path does not exist: {root}")
            return found_files

        while queue:
            path = queue.popleft()
            mode = self._stat_mode(path)
            if mode is None:
                continue

            if stat.S_ISREG(mode):
                found_files.append(FileRef(path=str(path)))
            elif stat.S_ISDIR(mode):
                self.directories_visited += 1
                if progress_callback:
                    progress_callback(f"- Found directory: {path}")
                try:
                    queue.extend(self._list_children(path))
                except OSError as e:
                    logger.warning(f"Cannot list directory {path}: {e}")
            else:
                logger.debug(f"Skipping special file: {path}")

        logger.debug(f"Scan of {root} completed. Found {len(found_files)} files.")
        return found_files

    @staticmethod
    def _stat_mode(path: Path) -> Optional[int]:
        """
        Single stat per entry, following symlinks.
        Returns None for broken links and entries that cannot be inspected.
        """
        try:
            return path.stat().st_mode
        except (OSError, ValueError) as e:
            logger.debug(f"Could not inspect {path}: {e}")
            return None

    @staticmethod
    def _list_children(directory: Path) -> List[Path]:
        return list(directory.iterdir())
