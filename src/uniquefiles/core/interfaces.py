"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the report pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so the
scanner, hasher and grouper can be swapped or mocked independently.

Key Components:
---------------
- HashState: Incremental hash object (update/digest), as returned by hashlib or xxhash.
- HashAlgorithm: Factory for fresh HashState objects (e.g., SHA-256, xxHash64).
- Hasher: Interface for computing the full content digest of a file.
- FileScanner: Interface for expanding one root path into regular files.
- FileGrouper: Interface for accumulating files into digest buckets.
"""

from typing import Protocol, List, Optional, Callable
from uniquefiles.core.models import FileRef, Bucket


# ===== Interfaces =====

class HashState(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the pipeline.
    """
    name: str
    digest_size: int

    def new(self) -> HashState:
        """Returns an empty hash state ready to be fed."""
        ...


class Hasher(Protocol):
    """Interface for hashing the whole content of a file."""
    def compute_full_hash(self, file: FileRef) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for expanding a filesystem path into the regular files under it.
    """
    def scan(
        self,
        root: str,
        progress_callback: Optional[Callable[[str], None]] = None
    ) -> List[FileRef]:
        """
        Args:
            root: File or directory path.
            progress_callback: Receives one human-readable line per visited directory.

        Returns:
            Regular files in breadth-first discovery order.
        """
        ...


class FileGrouper(Protocol):
    """Interface for grouping files by content digest."""
    bucket: Bucket

    def add_files(self, files: List[FileRef]) -> Bucket: ...
