"""
Core report engine — scanner, hasher, grouper, and serializer.

This package contains the whole content-grouping pipeline:
- FileScannerImpl: breadth-first traversal of one root path
- HasherImpl + get_algorithm: streamed full-content hashing (hashlib or xxHash)
- FileGrouperImpl: digest-keyed accumulation into a Bucket
- ReportSerializer: sorted, escaped, delimited report lines
- Models: FileRef, Bucket, ScanParams, ScanStats

All components are pure Python with no console dependencies.
"""

from .exceptions import UniqueFilesError, UnreadableFileError, UnknownAlgorithmError
from .models import FileRef, Bucket, ScanParams, ScanStats
from .scanner import FileScannerImpl
from .hasher import HasherImpl, HashlibAlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .grouper import FileGrouperImpl
from .serializer import ReportSerializer

__all__ = [
    "UniqueFilesError",
    "UnreadableFileError",
    "UnknownAlgorithmError",
    "FileRef",
    "Bucket",
    "ScanParams",
    "ScanStats",
    "FileScannerImpl",
    "HasherImpl",
    "HashlibAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "FileGrouperImpl",
    "ReportSerializer",
]
