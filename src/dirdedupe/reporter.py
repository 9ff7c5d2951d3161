"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

reporter.py
Console output of a deduplication run: one line per duplicate, then a summary.
Paths are printed relative to the scanned root.
"""
import os
import sys
from typing import Optional, TextIO

from dirdedupe.core.models import FileDescriptor, DuplicateDecision, RunSummary
from dirdedupe.core.interfaces import DuplicateReporter
from dirdedupe.utils.convert_utils import ConvertUtils


NO_DUPLICATES_MESSAGE = "No duplicate files were found."
DRY_RUN_REMINDER = "No files were deleted. Use the --force option to remove duplicates."


class ConsoleReporter(DuplicateReporter):
    """
    Prints decisions as they arrive, then a one-line summary.

    Args:
        root_dir: Scanned directory; report paths are relative to it
        verbose: Append creation and modification timestamps to every path
        quiet: Skip per-duplicate lines, still print the summary
        stream: Output stream (stdout by default)
    """

    def __init__(
            self,
            root_dir: str,
            verbose: bool = False,
            quiet: bool = False,
            stream: Optional[TextIO] = None
    ):
        self.root_dir = os.path.abspath(root_dir)
        self.verbose = verbose
        self.quiet = quiet
        self.stream = stream

    def on_duplicate(self, decision: DuplicateDecision) -> None:
        line = (f"{self.describe(decision.duplicate)} is a duplicate of "
                f"{self.describe(decision.original)}")
        if not self.quiet:
            self._emit(line)

    def on_finish(self, summary: RunSummary, force: bool) -> None:
        if not summary.has_duplicates:
            self._emit(NO_DUPLICATES_MESSAGE)
            return

        size_str = ConvertUtils.bytes_to_human(summary.duplicate_total_bytes)
        self._emit(f"Found {summary.duplicate_count} duplicate(s) occupying {size_str}.")
        if not force:
            self._emit(DRY_RUN_REMINDER)

    def describe(self, file: FileDescriptor) -> str:
        relative = self.relative_path(file.path)
        if not self.verbose:
            return relative
        return (f"{relative} (created at {ConvertUtils.timestamp_to_iso(file.creation_time)}, "
                f"last modified at {ConvertUtils.timestamp_to_iso(file.modified_time)})")

    def relative_path(self, path: str) -> str:
        return os.path.relpath(os.path.abspath(path), self.root_dir)

    def _emit(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)
