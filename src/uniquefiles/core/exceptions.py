"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Errors that abort a report run.
Directories that cannot be listed are not errors: the scanner logs and skips them.
"""


class UniqueFilesError(Exception):
    """Base class for fatal report errors."""


class UnreadableFileError(UniqueFilesError):
    """A file could not be opened or read to the end while hashing."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Cannot read file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownAlgorithmError(UniqueFilesError, ValueError):
    """The configured hash algorithm is not available."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown hash algorithm: {name}")
