"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

errors.py
Exceptions that abort a deduplication run.
Inaccessible entries found while scanning are not errors: they are skipped.
"""


class DeduplicationError(RuntimeError):
    """Base class for failures that abort the whole run."""


class DirectoryNotFoundError(DeduplicationError):
    """Root path does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Specified directory does not exist: {path}")


class FileOperationError(DeduplicationError):
    """Reading or deleting a file failed in the middle of a scan."""

    def __init__(self, path: str, action: str, cause: Exception):
        self.path = path
        self.action = action
        super().__init__(f"Failed to {action} {path}: {cause}")
