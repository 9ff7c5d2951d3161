"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the sequential deduplication pass over an ordered file catalog.

For every file, in order:
    - look up the survivors that have the same size
    - compare against them one by one until a byte-exact match is found
    - on a match the file is a duplicate (deleted right away in force mode)
    - otherwise the file becomes a new survivor of its size
"""
import logging
from typing import Iterable, Optional

from dirdedupe.core.models import FileDescriptor, DuplicateDecision, RunSummary
from dirdedupe.core.interfaces import ContentComparator, Deduplicator, DuplicateReporter
from dirdedupe.core.index import SizeBucketIndex
from dirdedupe.core.comparator import ChunkedContentComparator
from dirdedupe.services.file_service import FileService

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Single-threaded engine. The first file of each content group in the given
    order is kept, so the caller controls survivors through the ordering alone.
    Any I/O error aborts the run; deletions already done are not rolled back.
    """

    def __init__(self, comparator: Optional[ContentComparator] = None, use_trash: bool = False):
        self.comparator = comparator or ChunkedContentComparator()
        self.use_trash = use_trash

    def run(
        self,
        files: Iterable[FileDescriptor],
        force: bool = False,
        reporter: Optional[DuplicateReporter] = None
    ) -> RunSummary:
        """
        Process files strictly in the given order.
        Args:
            files: Catalog, already ordered by the survivor policy
            force: Remove every duplicate from storage as soon as it is found
            reporter: Receives each decision and, at the end, the summary
        Returns:
            RunSummary with duplicate count and total duplicate bytes
        Raises:
            FileOperationError: on any read or delete failure
        """
        index = SizeBucketIndex()
        summary = RunSummary()
        processed = 0

        for file in files:
            processed += 1
            original = self.find_original(index, file)

            if original is None:
                index.insert(file.size, file)
                continue

            decision = DuplicateDecision(duplicate=file, original=original)
            summary = summary.record(decision)
            logger.debug(f"Duplicate: {file.path} == {original.path}")

            if reporter is not None:
                reporter.on_duplicate(decision)

            if force:
                FileService.remove(file.path, use_trash=self.use_trash)

        logger.debug(f"Processed {processed} files, {len(index)} unique, "
                     f"{summary.duplicate_count} duplicates ({summary.duplicate_total_bytes} bytes)")

        if reporter is not None:
            reporter.on_finish(summary, force)

        return summary

    def find_original(self, index: SizeBucketIndex, file: FileDescriptor) -> Optional[FileDescriptor]:
        """First survivor of the same size whose content equals `file`, if any."""
        for candidate in index.lookup(file.size):
            if self.comparator.equal(candidate, file):
                return candidate
        return None
