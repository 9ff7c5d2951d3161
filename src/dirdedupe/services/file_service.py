"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal for force mode: permanent unlink or move to the system trash.
Every failure is raised, never retried.
"""
import logging
import os
from pathlib import Path
from send2trash import send2trash

from dirdedupe.errors import FileOperationError

logger = logging.getLogger(__name__)


class FileService:
    """Cross-platform file removal used by the deduplication engine."""

    @staticmethod
    def delete_file(file_path: str):
        """Permanently removes a file."""
        try:
            os.remove(file_path)
        except OSError as e:
            logger.error(f"Failed to delete {file_path}: {e}")
            raise FileOperationError(file_path, "delete", e) from e
        logger.debug(f"Deleted {file_path}")

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileOperationError(file_path, "move to trash", FileNotFoundError("file not found"))

        try:
            send2trash(str(path))
        except Exception as e:
            logger.error(f"Failed to move {file_path} to trash: {e}")
            raise FileOperationError(file_path, "move to trash", e) from e
        logger.debug(f"Moved {file_path} to trash")

    @classmethod
    def remove(cls, file_path: str, use_trash: bool = False):
        """Removes a duplicate the way the run was configured to."""
        if use_trash:
            cls.move_to_trash(file_path)
        else:
            cls.delete_file(file_path)
