"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory scanning and duplicate detection.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional
import os
from enum import Enum


DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MiB


# =============================
# Enums
# =============================

class SortKey(Enum):
    """
    File property used to order the catalog before deduplication.
    The first file of every content-equality group in that order is kept.
    """
    NAME = "Name"
    MODIFIED_TIME = "ModifiedTime"

    @property
    def display_name(self) -> str:
        """Human-readable name for help and report output."""
        mapping = {
            SortKey.NAME: "Name",
            SortKey.MODIFIED_TIME: "Modified Time",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class SortDirection(Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileDescriptor:
    """
    Snapshot of a regular file taken at enumeration time.
    Never refreshed: if the file changes afterwards the descriptor is stale.
    """
    path: str
    size: int  # in bytes
    modified_time: float  # POSIX timestamp
    creation_time: float  # POSIX timestamp
    modified_time_ns: Optional[int] = None  # exact value used for ordering

    def __post_init__(self):
        if self.modified_time_ns is None:
            object.__setattr__(self, "modified_time_ns", round(self.modified_time * 1_000_000_000))

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return f"<FileDescriptor path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class DuplicateDecision:
    """A file found to be a byte-exact copy of a survivor seen earlier in sort order."""
    duplicate: FileDescriptor
    original: FileDescriptor


@dataclass(frozen=True)
class RunSummary:
    """
    Totals of a run. Each recorded decision yields a new summary,
    so the value is threaded through the scan instead of being shared.
    """
    duplicate_count: int = 0
    duplicate_total_bytes: int = 0

    def record(self, decision: DuplicateDecision) -> 'RunSummary':
        return replace(
            self,
            duplicate_count=self.duplicate_count + 1,
            duplicate_total_bytes=self.duplicate_total_bytes + decision.duplicate.size,
        )

    @property
    def has_duplicates(self) -> bool:
        return self.duplicate_count > 0


"""
DTO for deduplication parameters with built-in validation.
"""

@dataclass
class DeduplicationParams:
    """Parameters for a deduplication run with validation."""
    root_dir: str
    sort_key: SortKey
    sort_direction: SortDirection
    force: bool = False
    recursive: bool = False
    verbose: bool = False
    use_trash: bool = False
    include_hidden: bool = False
    excluded_dirs: List[str] = field(default_factory=list)
    prefilter: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not isinstance(self.sort_key, SortKey):
            raise ValueError(f"Invalid sort key: {self.sort_key!r}")

        if not isinstance(self.sort_direction, SortDirection):
            raise ValueError(f"Invalid sort direction: {self.sort_direction!r}")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.use_trash and not self.force:
            raise ValueError("Moving to trash requires force mode")

        # Normalize excluded directories to absolute paths
        self.excluded_dirs = [
            os.path.abspath(d.strip()) for d in self.excluded_dirs if d and d.strip()
        ]
