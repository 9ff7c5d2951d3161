"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Front-chunk hashing used as a cheap pre-filter before byte comparison.

A digest mismatch proves two files differ. A digest match proves nothing:
the caller must still compare the full content.
"""

import logging
from typing import Dict

import xxhash
from dirdedupe.core.models import FileDescriptor
from dirdedupe.core.interfaces import HashAlgorithm
from dirdedupe.errors import FileOperationError

logger = logging.getLogger(__name__)

FRONT_CHUNK_SIZE = 64 * 1024


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh64(data).digest()


class HasherImpl:
    """
    Computes and caches the hash of the first bytes of a file.
    Descriptors are immutable, so digests are cached here by path.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = FRONT_CHUNK_SIZE):
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size
        self._front_hashes: Dict[str, bytes] = {}

    def compute_front_hash(self, file: FileDescriptor) -> bytes:
        """Computes and caches hash of the first N bytes of a file."""
        cached = self._front_hashes.get(file.path)
        if cached is not None:
            return cached
        data = self._read_chunk(file)
        result = self.algorithm.hash(data)
        self._front_hashes[file.path] = result
        return result

    def _read_chunk(self, file: FileDescriptor) -> bytes:
        try:
            with open(file.path, 'rb') as f:
                return f.read(self.chunk_size)
        except OSError as e:
            logger.error(f"Error reading {file.path}: {e}")
            raise FileOperationError(file.path, "read", e) from e
