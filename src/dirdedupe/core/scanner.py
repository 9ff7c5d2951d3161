"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the file catalog builder.
Features:
- Uses os.walk for fast traversal and pathlib.Path for per-file handling
- Optionally descends into subdirectories
- Yields descriptors lazily, in filesystem enumeration order
- Silently skips anything it cannot access
"""

import os
import stat
from typing import Iterator, List, Optional
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

# Local imports
from dirdedupe.core.models import FileDescriptor
from dirdedupe.core.interfaces import FileScanner
from dirdedupe.errors import DirectoryNotFoundError


class FileScannerImpl(FileScanner):
    """
    Enumerates regular files below a root directory.

    Attributes:
        root_dir: Absolute root directory to scan
        recursive: Whether subdirectories are scanned too
        include_hidden: Whether dot-files and dot-directories are included
        excluded_dirs: Directories whose subtrees are never entered
    """

    def __init__(
        self,
        root_dir: str,
        recursive: bool = False,
        include_hidden: bool = False,
        excluded_dirs: Optional[List[str]] = None
    ):
        self.root_dir = os.path.abspath(root_dir)
        self.recursive = recursive
        self.include_hidden = include_hidden
        self.excluded_dirs = [os.path.abspath(d) for d in excluded_dirs] if excluded_dirs else []

    def scan(self) -> Iterator[FileDescriptor]:
        """
        Validate the root and return a lazy iterator of file descriptors.
        The root check runs immediately so a bad root fails before any enumeration.
        """
        root_path = Path(self.root_dir)
        if not root_path.is_dir():
            logger.error(f"Directory does not exist: {self.root_dir}")
            raise DirectoryNotFoundError(self.root_dir)

        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Options: recursive={self.recursive}, include_hidden={self.include_hidden}, "
                     f"excluded_dirs={self.excluded_dirs}")
        return self._walk(root_path)

    def _walk(self, root_path: Path) -> Iterator[FileDescriptor]:
        yielded = 0
        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            if self.recursive:
                # Pre-filter subdirectories BEFORE os.walk enters them
                dirs[:] = [d for d in dirs if self._prefilter_dirs(Path(root) / d)]
            else:
                dirs[:] = []

            for filename in files:
                if not self.include_hidden and filename.startswith("."):
                    logger.debug(f"Skipping hidden file: {filename}")
                    continue
                descriptor = self._process_file(Path(root) / filename)
                if descriptor is not None:
                    yielded += 1
                    yield descriptor

        logger.debug(f"Scan completed. Found {yielded} files.")

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping inaccessible directory: {error.filename} ({error.strerror})")

    @staticmethod
    def _is_excluded_directory(path: Path, excluded_dirs: List[str]) -> bool:
        """Check if path is within an excluded directory."""
        path_str = os.path.abspath(str(path))
        for excluded_dir in excluded_dirs:
            normalized_excluded = os.path.normpath(excluded_dir)
            if path_str.startswith(normalized_excluded + os.sep) or \
                    path_str == normalized_excluded:
                return True
        return False

    def _prefilter_dirs(self, path: Path) -> bool:
        """Decide whether os.walk should descend into a subdirectory."""
        if not self.include_hidden and path.name.startswith("."):
            logger.debug(f"Skipping hidden directory: {path}")
            return False

        if self.excluded_dirs and self._is_excluded_directory(path, self.excluded_dirs):
            logger.debug(f"Skipping excluded directory: {path}")
            return False

        try:
            if path.is_symlink():
                logger.debug(f"Skipping symlinked directory: {path}")
                return False
            return os.access(path, os.R_OK | os.X_OK)
        except OSError:
            logger.debug(f"Skipping inaccessible directory: {path}")
            return False

    def _process_file(self, path: Path) -> Optional[FileDescriptor]:
        """
        Build a descriptor for a single path.
        Returns None for anything that is not an accessible regular file.
        """
        try:
            stat_result = path.lstat()
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        # Symbolic links, sockets, fifos and devices are not regular files
        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        if not os.access(path, os.R_OK):
            logger.debug(f"Skipping unreadable file: {path}")
            return None

        creation_time = getattr(stat_result, "st_birthtime", stat_result.st_ctime)
        return FileDescriptor(
            path=str(path),
            size=stat_result.st_size,
            modified_time=stat_result.st_mtime,
            modified_time_ns=stat_result.st_mtime_ns,
            creation_time=creation_time,
        )
