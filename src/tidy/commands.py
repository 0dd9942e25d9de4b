"""
Unified command orchestrator for a scan.
This is the SINGLE source of truth for the scan workflow — the CLI only parses and prints.
"""
import time
import logging
from typing import Optional, Callable

from tidy.core.models import ScanParams, ScanReport, ScanStats
from tidy.core.builder import TreeBuilderImpl
from tidy.core.analyzer import ContentGrouperImpl, find_empty_directories, find_small_directories
from tidy.core.hasher import HasherImpl, get_algorithm

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the scan of one root:
    1. Build the directory tree
    2. Find empty directories and trim candidates (if trimming was requested)
    3. Group files by content fingerprint (if deduplication was requested)

    Usage:
        params = ScanParams(roots=["/data"])
        command = ScanCommand()
        for root in params.roots:
            report = command.execute(root, params, progress_callback=cli_progress_printer)
    """

    def execute(
            self,
            root: str,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ScanReport:
        """
        Scan one root with the given parameters.

        Args:
            root: Directory to scan (one of params.roots)
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ScanReport for the root

        Raises:
            ScanError: If the tree build or hashing fails under ErrorPolicy.ABORT
        """
        stats = ScanStats()

        # Step 1: Build the tree
        builder = TreeBuilderImpl(on_error=params.on_error)
        start = time.time()
        tree = builder.build(root, progress_callback=progress_callback)
        stats.update_stage("tree", tree.file_count, time.time() - start)

        report = ScanReport(root=tree.root, tree=tree, stats=stats)

        # Step 2: Trim candidates
        if params.trim:
            start = time.time()
            report.empty_directories = find_empty_directories(tree)
            stats.update_stage("empty", len(report.empty_directories), time.time() - start)

            if params.trim_max_bytes > 0:
                start = time.time()
                report.small_directories = find_small_directories(
                    tree, params.trim_max_bytes, on_error=params.on_error, issues=report.trim_issues)
                stats.update_stage("small", len(report.small_directories), time.time() - start)

        # Step 3: Content grouping
        if params.dedup:
            grouper = ContentGrouperImpl(
                hasher=HasherImpl(get_algorithm(params.algorithm)),
                workers=params.workers,
                on_error=params.on_error,
            )
            start = time.time()
            report.content = grouper.group(tree, progress_callback=progress_callback)
            stats.update_stage("hash", report.content.file_count, time.time() - start)

        logger.debug(f"Scan of {tree.root} finished in {stats.total_time:.2f} seconds")
        return report
