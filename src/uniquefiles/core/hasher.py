"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing using the FileRef class and pluggable hash algorithms.

File content is streamed through a single reusable buffer, so memory use does not
depend on file size. Any read failure is fatal for the run.
"""

import hashlib
import logging

import xxhash

from uniquefiles.constants import DEFAULT_CHUNK_SIZE, XXHASH_ALGORITHMS
from uniquefiles.core.exceptions import UnknownAlgorithmError, UnreadableFileError
from uniquefiles.core.interfaces import Hasher, HashAlgorithm, HashState
from uniquefiles.core.models import FileRef

logger = logging.getLogger(__name__)


class HashlibAlgorithmImpl(HashAlgorithm):
    """Any algorithm hashlib knows about (sha256, sha512, blake2b, md5, ...)."""

    def __init__(self, name: str):
        try:
            probe = hashlib.new(name)
        except (ValueError, TypeError) as e:
            raise UnknownAlgorithmError(name) from e
        # Variable-length digests (shake_*) need a length argument on digest()
        if probe.digest_size == 0:
            raise UnknownAlgorithmError(name)
        self.name = probe.name
        self.digest_size = probe.digest_size

    def new(self) -> HashState:
        return hashlib.new(self.name)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    def __init__(self, name: str = "xxh64"):
        if name not in XXHASH_ALGORITHMS:
            raise UnknownAlgorithmError(name)
        self.name = name
        self._factory = getattr(xxhash, name)
        self.digest_size = self._factory().digest_size

    def new(self) -> HashState:
        return self._factory()


def get_algorithm(name: str) -> HashAlgorithm:
    """
    Resolves an algorithm name.
    Raises UnknownAlgorithmError if neither xxhash nor hashlib provides it.
    """
    key = name.strip().lower()
    if key in XXHASH_ALGORITHMS:
        return XXHashAlgorithmImpl(key)
    # "SHA-256" -> "sha256", "sha3-256" -> "sha3_256"
    for candidate in (key, key.replace("-", ""), key.replace("-", "_")):
        if candidate in hashlib.algorithms_available:
            return HashlibAlgorithmImpl(candidate)
    return HashlibAlgorithmImpl(key)


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm
        self._buffer = bytearray(chunk_size)

    def compute_full_hash(self, file: FileRef) -> bytes:
        """
        Feeds the whole file through the algorithm.
        The file handle is closed before returning or raising.
        """
        state = self.algorithm.new()
        view = memoryview(self._buffer)
        try:
            with file.open() as f:
                while True:
                    read = f.readinto(view)
                    if not read:
                        break
                    state.update(view[:read])
        except OSError as e:
            logger.debug(f"Error reading {file.path}: {e}")
            raise UnreadableFileError(file.path, e.strerror or str(e)) from e
        return state.digest()
