"""
UniqueFiles — group files by identical content.

Core features:
- Breadth-first traversal of any number of file or directory roots
- Streamed SHA-256 content hashing (any hashlib or xxHash algorithm from code)
- Deterministic, escaped, delimited report: one line per distinct content
- CLI with report on stdout and progress comments on stderr
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("uniquefiles")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from uniquefiles.commands import UniqueFilesCommand
from uniquefiles.core import (
    FileRef, Bucket, ScanParams, ScanStats, ReportSerializer,
    UniqueFilesError, UnreadableFileError, UnknownAlgorithmError,
)

__all__ = [
    "UniqueFilesCommand",
    "FileRef",
    "Bucket",
    "ScanParams",
    "ScanStats",
    "ReportSerializer",
    "UniqueFilesError",
    "UnreadableFileError",
    "UnknownAlgorithmError",
    "__version__",
]
