"""
Core deduplication engine — scanner, sorter, size index, comparator and engine.

This package contains the algorithmic foundation of dirdedupe:
- FileScannerImpl: directory traversal producing FileDescriptor snapshots
- Sorter: orders the catalog so the first copy of each content group survives
- SizeBucketIndex: survivors grouped by byte length
- ChunkedContentComparator: streaming byte-exact comparison with early exit
- HasherImpl + XXHashAlgorithmImpl: optional xxHash64 front-chunk pre-filter
- DeduplicatorImpl: the sequential pass producing duplicate decisions

All components are pure Python with no UI dependencies.
"""

from .scanner import FileScannerImpl
from .sorter import Sorter
from .index import SizeBucketIndex
from .hasher import HasherImpl, XXHashAlgorithmImpl
from .comparator import ChunkedContentComparator
from .deduplicator import DeduplicatorImpl
from .models import (
    FileDescriptor, DuplicateDecision, RunSummary, DeduplicationParams,
    SortKey, SortDirection, DEFAULT_CHUNK_SIZE)

__all__ = [
    "FileScannerImpl",
    "Sorter",
    "SizeBucketIndex",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "ChunkedContentComparator",
    "DeduplicatorImpl",
    "FileDescriptor",
    "DuplicateDecision",
    "RunSummary",
    "DeduplicationParams",
    "SortKey",
    "SortDirection",
    "DEFAULT_CHUNK_SIZE",
]
