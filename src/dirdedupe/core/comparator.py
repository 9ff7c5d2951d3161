"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Byte-exact comparison of two files of the same length.

Both files are streamed in lockstep, one chunk at a time, and the comparison stops
at the first differing chunk. Memory use is two chunk buffers regardless of file size.
"""

import logging
from typing import BinaryIO, Optional

from dirdedupe.core.models import FileDescriptor, DEFAULT_CHUNK_SIZE
from dirdedupe.core.interfaces import ContentComparator
from dirdedupe.core.hasher import HasherImpl
from dirdedupe.errors import FileOperationError

logger = logging.getLogger(__name__)


class ChunkedContentComparator(ContentComparator):
    """
    Streams two files side by side and compares them chunk by chunk.

    Args:
        chunk_size: Bytes read from each file per step (default 1 MiB)
        hasher: Optional front-chunk hasher used as a pre-filter
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE, hasher: Optional[HasherImpl] = None):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
        self.hasher = hasher

    def equal(self, first: FileDescriptor, second: FileDescriptor) -> bool:
        """
        True if both files hold exactly the same bytes.

        Raises:
            ValueError: if the descriptors have different sizes (caller bug)
            FileOperationError: if either file cannot be opened or read
        """
        if first.size != second.size:
            raise ValueError(
                f"Cannot compare files of different size: {first.size} != {second.size}"
            )

        if self.hasher is not None:
            if self.hasher.compute_front_hash(first) != self.hasher.compute_front_hash(second):
                logger.debug(f"Front hash mismatch: {first.path} / {second.path}")
                return False

        with self._open(first) as left, self._open(second) as right:
            return self._compare_streams(first, left, second, right)

    def _compare_streams(
            self,
            first: FileDescriptor,
            left: BinaryIO,
            second: FileDescriptor,
            right: BinaryIO
    ) -> bool:
        length = first.size
        # Buffers are never larger than the file
        buffer_size = min(self.chunk_size, length)
        left_buffer = bytearray(buffer_size)
        right_buffer = bytearray(buffer_size)
        left_view = memoryview(left_buffer)
        right_view = memoryview(right_buffer)
        offset = 0

        while offset < length:
            wanted = min(self.chunk_size, length - offset)
            left_read = self._read_into(first, left, left_view[:wanted])
            right_read = self._read_into(second, right, right_view[:wanted])

            # A short read before the known length means the file shrank after the scan
            if left_read != wanted or right_read != wanted:
                logger.debug(f"Unexpected end of file at offset {offset}: {first.path} / {second.path}")
                return False

            if left_view[:wanted] != right_view[:wanted]:
                logger.debug(f"Content differs near offset {offset}: {first.path} / {second.path}")
                return False

            offset += wanted

        return True

    @staticmethod
    def _open(file: FileDescriptor) -> BinaryIO:
        try:
            return open(file.path, 'rb', buffering=0)
        except OSError as e:
            logger.error(f"Error opening {file.path}: {e}")
            raise FileOperationError(file.path, "read", e) from e

    @staticmethod
    def _read_into(file: FileDescriptor, stream: BinaryIO, view: memoryview) -> int:
        """
        Fill `view` completely unless the stream ends first.
        A single raw read may return fewer bytes than requested, so keep reading.
        """
        total = 0
        size = len(view)
        try:
            while total < size:
                count = stream.readinto(view[total:])
                if not count:
                    break
                total += count
        except OSError as e:
            logger.error(f"Error reading {file.path}: {e}")
            raise FileOperationError(file.path, "read", e) from e
        return total
