#!/usr/bin/env python3
"""
Tidy CLI — command line interface for empty-directory and duplicate-file detection.
Scans every INPUT root once and prints what could be trimmed or deduplicated.
All operations are read-only: nothing is ever deleted, moved or renamed.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from tidy.core.models import ErrorPolicy, ScanParams, ScanReport, DuplicateGroup
from tidy.core.exceptions import ScanError
from tidy.commands import ScanCommand
from tidy.utils.convert_utils import ConvertUtils
from tidy.services.duplicate_service import DuplicateService
from tidy.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    SORT_ALIASES, SORT_CHOICES, SORT_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="tidy",
            description="Tidy — find empty directories and duplicate files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="+",
            metavar="INPUT",
            help="Directory roots to process"
        )

        # Actions (report only)
        parser.add_argument(
            "--dry-run",
            action="store_true",
            dest="dry_run",
            help="Dry run (no actions will be applied)"
        )
        parser.add_argument(
            "--dedup", "-D",
            action="store_true",
            help="Deduplicate files: report duplicate groups and what a dedup would remove"
        )
        parser.add_argument(
            "--trim", "-T",
            action="store_true",
            help="Trim small directories: report empty (and optionally small) directories"
        )
        parser.add_argument(
            "--trim-max", "-t",
            default="0",
            type=str,
            metavar='',
            dest="trim_max",
            help="Maximum directory size to trim (e.g., 4KB). Default: 0 (empty only)"
        )

        # Engine options
        parser.add_argument(
            "--workers", "-j",
            default=None,
            type=int,
            metavar='',
            help="Number of hashing threads. Default: chosen by the interpreter"
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="xxh128",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--sort", "-s",
            choices=SORT_CHOICES,
            default="shortest-path",
            type=str,
            help=SORT_HELP_TEXT
        )
        parser.add_argument(
            "--skip-errors",
            action="store_true",
            dest="skip_errors",
            help="Skip unreadable directories/files and report them, instead of aborting"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics, progress and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        for item in args.paths:
            root_path = Path(item).resolve()
            if not root_path.exists():
                self.error_exit(f"Directory not found: {item}")
            if not root_path.is_dir():
                self.error_exit(f"Path is not a directory: {item}")

        if not ConvertUtils.is_valid_size_format(args.trim_max):
            self.error_exit(f"Invalid size format: {args.trim_max}")

        if args.workers is not None and args.workers < 1:
            self.error_exit("Number of workers must be at least 1")

        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                roots=[str(Path(item).resolve()) for item in args.paths],
                trim_max_str=args.trim_max,
                dedup=args.dedup,
                trim=args.trim,
                dry_run=args.dry_run,
                workers=args.workers,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                on_error=ErrorPolicy.SKIP if args.skip_errors else ErrorPolicy.ABORT,
                sort_order=SORT_ALIASES[args.sort],
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} processed...")
        sys.stderr.flush()

    def run_scan(self, root: str, params: ScanParams) -> ScanReport:
        """Execute the scan workflow for one root."""
        command = ScanCommand()
        try:
            report = command.execute(
                root,
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ScanError as e:
            self.error_exit(f"Scan of {root} failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(report.stats.print_summary())

        return report

    def output_directories(self, title: str, paths: List[str]) -> None:
        if not paths:
            print(f"{title}: none")
            return
        print(f"{title} ({len(paths)}):")
        for path in sorted(paths):
            print(f"   {path}")

    def output_duplicates(self, groups: List[DuplicateGroup], params: ScanParams) -> None:
        """Output duplicate groups and the keep-one plan."""
        if not groups:
            print("No duplicate groups found.")
            return

        total_files = sum(g.duplicate_count for g in groups)
        print(f"Found {len(groups)} duplicate groups ({total_files} files)")

        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"\n📁 Group {idx} | Size: {size_str} | Files: {group.duplicate_count} "
                  f"| {params.algorithm.value}: {group.hex_fingerprint}")
            print(f"   [KEEP] {group.paths[0]}")
            for path in group.paths[1:]:
                print(f"   [DUP]  {path}")

        redundant, _ = DuplicateService.keep_only_one_file_per_group(groups)
        space_saved = DuplicateService.calculate_space_savings(groups)
        print()
        print("=" * 60)
        print(f"Summary: {len(redundant)} redundant files, "
              f"potential space savings: {ConvertUtils.bytes_to_human(space_saved)}")

    def output_report(self, report: ScanReport, params: ScanParams) -> None:
        """Print everything learned about one root."""
        if self.quiet:
            return

        print(f"\nRoot: {report.root} "
              f"({report.tree.directory_count} directories, {report.tree.file_count} files)")

        if params.trim:
            self.output_directories("Empty directories", report.empty_directories)
            if params.trim_max_bytes > 0:
                limit = ConvertUtils.bytes_to_human(params.trim_max_bytes)
                self.output_directories(f"Trim candidates up to {limit}", report.small_directories)

        if params.dedup and report.content is not None:
            groups = report.content.duplicate_groups()
            DuplicateService.sort_paths_inside_groups(groups, params.sort_order)
            groups = DuplicateService.sort_groups(groups)
            self.output_duplicates(groups, params)

        issues = report.issues
        if issues:
            print(f"\n⚠️  {len(issues)} item(s) skipped:")
            for issue in issues[:20]:
                print(f"  • {issue}")
            if len(issues) > 20:
                print(f"  ...and {len(issues) - 20} more")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger("tidy").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        if not self.quiet:
            if params.dry_run:
                print("Dry run: reporting only, nothing will be modified.")
            else:
                print("Reporting only: trim/dedup actions are not applied.")

        for root in params.roots:
            if not self.quiet:
                print(f"Scanning directory: {root}")
            report = self.run_scan(root, params)
            self.output_report(report, params)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
