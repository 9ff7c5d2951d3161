"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` so that
scanner, comparator and reporter can be swapped in tests without inheritance.

Key Components:
---------------
- HashAlgorithm: Standardized interface for hash functions (e.g., xxHash).
- FileScanner: Interface for enumerating files under a directory.
- ContentComparator: Interface for byte-exact comparison of two same-size files.
- DuplicateReporter: Sink for duplicate decisions and the final summary.
- Deduplicator: Interface for the engine coordinating all of the above.
"""

from typing import Protocol, Iterable, Iterator, Optional
from dirdedupe.core.models import (
    FileDescriptor,
    DuplicateDecision,
    RunSummary,
)


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions without affecting
    the rest of the comparison logic.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


class FileScanner(Protocol):
    """Interface for enumerating regular files under the configured root."""

    def scan(self) -> Iterator[FileDescriptor]:
        """
        Lazily yield a descriptor for every accessible regular file.

        Raises:
            DirectoryNotFoundError: if the root is missing or not a directory.
        """
        ...


class ContentComparator(Protocol):
    """Interface for deciding whether two files of equal length have equal content."""

    def equal(self, first: FileDescriptor, second: FileDescriptor) -> bool:
        ...


class DuplicateReporter(Protocol):
    """Receives decisions while the scan runs and the summary when it ends."""

    def on_duplicate(self, decision: DuplicateDecision) -> None:
        ...

    def on_finish(self, summary: RunSummary, force: bool) -> None:
        ...


class Deduplicator(Protocol):
    """Interface for the sequential deduplication pass over an ordered catalog."""

    def run(
        self,
        files: Iterable[FileDescriptor],
        force: bool = False,
        reporter: Optional[DuplicateReporter] = None
    ) -> RunSummary:
        ...
