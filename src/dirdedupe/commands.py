"""
Unified command orchestrator for deduplication.
This is the single place where scanner, sorter and engine are wired together.
"""
import logging
from typing import Optional
from dirdedupe.core.models import DeduplicationParams, RunSummary
from dirdedupe.core.interfaces import DuplicateReporter
from dirdedupe.core.scanner import FileScannerImpl
from dirdedupe.core.sorter import Sorter
from dirdedupe.core.hasher import HasherImpl, XXHashAlgorithmImpl
from dirdedupe.core.comparator import ChunkedContentComparator
from dirdedupe.core.deduplicator import DeduplicatorImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow:
    1. Enumerate files under the root directory
    2. Order the whole catalog by the survivor policy
    3. Run the engine over the ordered catalog, deleting duplicates in force mode

    Usage:
        params = DeduplicationParams(
            root_dir="/data",
            sort_key=SortKey.MODIFIED_TIME,
            sort_direction=SortDirection.ASCENDING,
        )
        summary = DeduplicationCommand().execute(params, reporter=ConsoleReporter("/data"))
    """

    def execute(
            self,
            params: DeduplicationParams,
            reporter: Optional[DuplicateReporter] = None
    ) -> RunSummary:
        """
        Execute deduplication with given parameters.

        Returns:
            RunSummary of the run

        Raises:
            DirectoryNotFoundError: If the root directory is missing
            FileOperationError: If a read or delete fails mid-scan
        """
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            recursive=params.recursive,
            include_hidden=params.include_hidden,
            excluded_dirs=params.excluded_dirs
        )

        # Ordering needs the complete catalog before the first comparison
        files = Sorter.sort_files(scanner.scan(), params.sort_key, params.sort_direction)
        logger.debug(f"Catalog: {len(files)} files ordered by "
                     f"{params.sort_key.display_name} {params.sort_direction.value}")

        hasher = HasherImpl(XXHashAlgorithmImpl()) if params.prefilter else None
        comparator = ChunkedContentComparator(chunk_size=params.chunk_size, hasher=hasher)
        deduplicator = DeduplicatorImpl(comparator=comparator, use_trash=params.use_trash)

        return deduplicator.run(files, force=params.force, reporter=reporter)
