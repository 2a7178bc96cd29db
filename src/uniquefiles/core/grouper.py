"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Accumulates files into a Bucket keyed by full content hash.
"""

import logging
from typing import List

from uniquefiles.core.interfaces import FileGrouper, Hasher
from uniquefiles.core.models import Bucket, FileRef

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Groups files by content using an injected Hasher.
    One grouper serves a whole run: files from every root land in the same bucket.
    """

    def __init__(self, hasher: Hasher, bucket: Bucket = None):
        self.hasher = hasher
        self.bucket = bucket if bucket is not None else Bucket()

    def add_file(self, file: FileRef) -> bytes:
        digest = self.hasher.compute_full_hash(file)
        self.bucket.add(digest, file)
        logger.debug(f"{digest.hex()} {file.path}")
        return digest

    def add_files(self, files: List[FileRef]) -> Bucket:
        """
        Hashes files in the given order and appends each to its digest group.
        Hash errors are not caught: a single unreadable file aborts the run.
        """
        for file in files:
            self.add_file(file)
        return self.bucket
