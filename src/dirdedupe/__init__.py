"""
dirdedupe — find byte-identical files in a directory and keep only one copy.

Core features:
- Size grouping + chunked byte-for-byte comparison (no cryptographic hashing)
- The kept copy is chosen by sort policy: Name or ModifiedTime, ascending or descending
- Dry run by default; --force deletes (or moves to trash via send2trash)
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dirdedupe")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0+unknown"

# Public API — only what users should import directly
from dirdedupe.commands import DeduplicationCommand
from dirdedupe.core import (
    DeduplicationParams, SortKey, SortDirection, FileDescriptor, DuplicateDecision, RunSummary)
from dirdedupe.reporter import ConsoleReporter
from dirdedupe.utils.convert_utils import ConvertUtils
from dirdedupe.services import FileService
from dirdedupe.errors import DeduplicationError, DirectoryNotFoundError, FileOperationError

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "SortKey",
    "SortDirection",
    "FileDescriptor",
    "DuplicateDecision",
    "RunSummary",
    "ConsoleReporter",
    "ConvertUtils",
    "FileService",
    "DeduplicationError",
    "DirectoryNotFoundError",
    "FileOperationError",
    "__version__",
]
