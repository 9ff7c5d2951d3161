#!/usr/bin/env python3
"""
dirdedupe CLI — find and remove duplicate files inside a directory.
Without --force this is a dry run: duplicates are reported, nothing is deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

from dirdedupe import __version__
from dirdedupe.core.models import DeduplicationParams, RunSummary
from dirdedupe.commands import DeduplicationCommand
from dirdedupe.reporter import ConsoleReporter
from dirdedupe.errors import DeduplicationError
from dirdedupe.aliases import (
    SORT_KEY_ALIASES, SORT_KEY_CHOICES, SORT_KEY_HELP_TEXT,
    SORT_DIRECTION_ALIASES, SORT_DIRECTION_CHOICES, SORT_DIRECTION_HELP_TEXT,
    LOG_LEVEL_CHOICES, EPILOG_TEXT, parse_alias
)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"
LOG_LEVEL_ENV = "DEDUPE_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _sort_key_type(value: str):
    sort_key = parse_alias(value, SORT_KEY_ALIASES)
    if sort_key is None:
        raise argparse.ArgumentTypeError(
            f"invalid choice: '{value}' (choose from {', '.join(SORT_KEY_CHOICES)})"
        )
    return sort_key


def _sort_direction_type(value: str):
    direction = parse_alias(value, SORT_DIRECTION_ALIASES)
    if direction is None:
        raise argparse.ArgumentTypeError(
            f"invalid choice: '{value}' (choose from {', '.join(SORT_DIRECTION_CHOICES)})"
        )
    return direction


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError on file names
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dedupe",
            description="Find and remove duplicate files inside a directory",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "directory",
            type=str,
            help="Directory to scan for duplicates"
        )
        parser.add_argument(
            "--sort-by",
            required=True,
            type=_sort_key_type,
            dest="sort_by",
            metavar="{" + ",".join(SORT_KEY_CHOICES) + "}",
            help=SORT_KEY_HELP_TEXT
        )
        parser.add_argument(
            "--sort-direction",
            required=True,
            type=_sort_direction_type,
            dest="sort_direction",
            metavar="{" + ",".join(SORT_DIRECTION_CHOICES) + "}",
            help=SORT_DIRECTION_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--force",
            action="store_true",
            help="Delete duplicate files. A dry run is performed without this option specified"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="With --force, move duplicates to the system trash instead of deleting them"
        )

        # Scan options
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Scan sub-directories recursively"
        )
        parser.add_argument(
            "--include-hidden",
            action="store_true",
            dest="include_hidden",
            help="Include hidden files and directories (names starting with a dot)"
        )
        parser.add_argument(
            "--excluded-dirs", '-e',
            nargs="+",
            default=[],
            type=str,
            metavar='',
            dest="excluded_dirs",
            help="Excluded/ignored directories (space separated)"
        )
        parser.add_argument(
            "--no-prefilter",
            action="store_false",
            dest="prefilter",
            help="Skip the quick front-chunk hash check and always compare full content"
        )

        # Output options
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Print file attributes on match"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Print only the summary, not every duplicate"
        )
        parser.add_argument(
            "--log-level",
            choices=LOG_LEVEL_CHOICES,
            type=str.upper,
            default=None,
            dest="log_level",
            help=f"Diagnostic log level (default: ${LOG_LEVEL_ENV} or ERROR)"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    @staticmethod
    def configure_logging(level_name: Optional[str] = None) -> None:
        """Configure diagnostics: CLI flag first, then environment, then ERROR."""
        level_name = (level_name or os.environ.get(LOG_LEVEL_ENV) or "ERROR").upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.ERROR
        logging.basicConfig(level=level, format=LOG_FORMAT)
        logging.getLogger("dirdedupe").setLevel(level)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.trash and not args.force:
            self.error_exit("--trash can only be used with --force")

        if args.verbose and args.quiet:
            self.error_exit("--verbose and --quiet cannot be used together")

        root_path = Path(args.directory)
        if not root_path.exists():
            self.error_exit(f"Specified directory does not exist: {args.directory}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.directory}")

        # Validate excluded directories
        for excl_dir in args.excluded_dirs:
            excl_path = Path(excl_dir)
            if not excl_path.exists():
                self.warning(f"Excluded directory not found: {excl_dir}")
            elif not excl_path.is_dir():
                self.warning(f"Excluded path is not a directory: {excl_dir}")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams(
                root_dir=os.path.abspath(args.directory),
                sort_key=args.sort_by,
                sort_direction=args.sort_direction,
                force=args.force,
                recursive=args.recursive,
                verbose=args.verbose,
                use_trash=args.trash,
                include_hidden=args.include_hidden,
                excluded_dirs=list(args.excluded_dirs),
                prefilter=args.prefilter,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_deduplication(self, params: DeduplicationParams) -> RunSummary:
        """Execute the scan and print the report."""
        logger.info(f"Scanning directory: {params.root_dir}")
        reporter = ConsoleReporter(params.root_dir, verbose=params.verbose, quiet=self.quiet)
        summary = DeduplicationCommand().execute(params, reporter=reporter)

        elapsed = time.time() - self.start_time
        logger.info(f"Completed in {elapsed:.2f} seconds")
        return summary

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"Warning: {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Parse, validate and run one scan. Returns the process exit code."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(args.log_level)

        self.validate_args(args)
        params = self.create_params(args)
        self.run_deduplication(params)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point. Returns the exit code instead of raising SystemExit."""
    app = CLIApplication()
    try:
        return app.run(argv)
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        return 130
    except DeduplicationError as e:
        logger.error(f"Run aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
