"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
Size bucket index: survivors grouped by byte length.
All files inside one bucket have pairwise different content, so a new file
needs at most one comparison per distinct content already seen at that size.
"""

from typing import Dict, List
from collections import defaultdict
from dirdedupe.core.models import FileDescriptor


class SizeBucketIndex:
    """Append-only mapping from file size to the survivors of that size."""

    def __init__(self):
        self._buckets: Dict[int, List[FileDescriptor]] = defaultdict(list)

    def lookup(self, size: int) -> List[FileDescriptor]:
        """Survivors of the given size in insertion order; empty list if none."""
        bucket = self._buckets.get(size)
        return list(bucket) if bucket else []

    def insert(self, size: int, descriptor: FileDescriptor) -> None:
        """Append a new survivor to the bucket for its size."""
        if descriptor.size != size:
            raise ValueError("Cannot add file with different size to a bucket.")
        self._buckets[size].append(descriptor)

    def __len__(self) -> int:
        """Total number of survivors across all buckets."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def __contains__(self, size: int) -> bool:
        return size in self._buckets

    def __repr__(self):
        return f"<SizeBucketIndex buckets={len(self._buckets)}, files={len(self)}>"
