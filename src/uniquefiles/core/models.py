"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file discovery, content grouping and run configuration.
"""

from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Iterator, List, Tuple

from uniquefiles.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_CHUNK_SIZE,
    DELIMITER,
    ESCAPER,
)


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRef:
    """
    Reference to one regular file found during traversal.
    The path string is both the sort key and the text written to the report,
    so two refs with equal paths are the same logical entry.
    """
    path: str

    def open(self) -> BinaryIO:
        """Opens the referenced file for binary reading."""
        return open(self.path, "rb")

    def __str__(self) -> str:
        return self.path

    def __repr__(self):
        return f"<FileRef path={self.path}>"


class Bucket:
    """
    Files grouped by content digest.
    Refs are kept in discovery order inside each digest; nothing is re-sorted here.
    """

    def __init__(self):
        self._groups: Dict[bytes, List[FileRef]] = {}

    def add(self, digest: bytes, file: FileRef) -> None:
        self._groups.setdefault(digest, []).append(file)

    def items(self) -> Iterator[Tuple[bytes, List[FileRef]]]:
        return iter(self._groups.items())

    def file_count(self) -> int:
        """Total number of refs across all digests."""
        return sum(len(files) for files in self._groups.values())

    def duplicate_groups(self) -> Dict[bytes, List[FileRef]]:
        """Only the digests shared by at least two files."""
        return {digest: files for digest, files in self._groups.items() if len(files) >= 2}

    def __contains__(self, digest: bytes) -> bool:
        return digest in self._groups

    def __getitem__(self, digest: bytes) -> List[FileRef]:
        return self._groups[digest]

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self):
        return f"<Bucket groups={len(self)}, files={self.file_count()}>"


@dataclass
class ScanStats:
    """
    Counters collected while building a report.
    """
    roots: int = 0
    directories: int = 0
    files: int = 0
    groups: int = 0
    duplicate_groups: int = 0
    total_time: float = 0.0

    def summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Roots: {self.roots}",
            f"Directories: {self.directories}",
            f"Files hashed: {self.files}",
            f"Groups: {self.groups} ({self.duplicate_groups} with duplicates)",
        ]
        return "\n".join(lines)


def check_markers(escaper: str, delimiter: str) -> None:
    """
    Raises ValueError unless escaped fields can always be split and unescaped again.
    Markers must be non-empty, neither may contain the other, and no proper suffix of
    either may equal a proper prefix of itself or of the other.
    """
    if not escaper:
        raise ValueError("Escape marker cannot be empty")

    if not delimiter:
        raise ValueError("Delimiter cannot be empty")

    if escaper in delimiter or delimiter in escaper:
        raise ValueError("Escape marker and delimiter must not contain each other")

    for size in range(1, min(len(escaper), len(delimiter))):
        if escaper[-size:] == delimiter[:size] or delimiter[-size:] == escaper[:size]:
            raise ValueError("Escape marker and delimiter must not overlap")

    for marker in (escaper, delimiter):
        for size in range(1, len(marker)):
            if marker[-size:] == marker[:size]:
                raise ValueError(f"Marker must not overlap itself: {marker!r}")


# DTO for report parameters with built-in validation

@dataclass
class ScanParams:
    """Parameters for one report run with validation."""
    roots: List[str] = field(default_factory=list)
    algorithm: str = DEFAULT_ALGORITHM
    escaper: str = ESCAPER
    delimiter: str = DELIMITER
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        check_markers(self.escaper, self.delimiter)

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if not self.algorithm:
            raise ValueError("Hash algorithm name cannot be empty")

        self.roots = [str(root) for root in self.roots]
