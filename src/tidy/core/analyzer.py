"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/analyzer.py
Read-only analyses over a completed DirTree:
- find_empty_directories: directories with no files and no subdirectories
- find_small_directories: leaf directories whose files total at most N bytes
- ContentGrouperImpl / group_by_content: files grouped by full-content fingerprint

Hashing is the only parallel region. Workers share nothing: each one reads a
single file and returns a single digest. The grouping dict is filled afterwards,
sequentially and in tree order, so the result does not depend on completion order.
"""

import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Dict, Optional, Callable, Tuple

logger = logging.getLogger(__name__)

# Local imports
from tidy.core.models import DirTree, ContentGrouping, ErrorPolicy, ScanIssue
from tidy.core.interfaces import ContentGrouper, Hasher
from tidy.core.hasher import HasherImpl
from tidy.core.exceptions import ScanError, FileReadError


def find_empty_directories(tree: DirTree) -> List[str]:
    """
    Paths of directories that had neither files nor subdirectories at scan time.
    Emptiness does not propagate: a directory holding only an empty directory is not reported.
    """
    return [directory.path for directory in tree.directories if directory.is_empty]


def find_small_directories(tree: DirTree,
                           max_bytes: int,
                           on_error: ErrorPolicy = ErrorPolicy.ABORT,
                           issues: Optional[List[ScanIssue]] = None) -> List[str]:
    """
    Leaf directories (no subdirectories) whose direct files total at most `max_bytes`.
    Empty directories are always included.
    Under ErrorPolicy.SKIP a directory with an unreadable file is left out and,
    when `issues` is given, a ScanIssue for that file is appended to it.

    Raises:
        FileReadError: A file cannot be stat'ed under ErrorPolicy.ABORT
    """
    if max_bytes < 0:
        raise ValueError("Maximum size cannot be negative")

    result = []
    for directory in tree.directories:
        if directory.subdirectories:
            continue
        total = 0
        try:
            for path in directory.files:
                total += _file_size(path)
                if total > max_bytes:
                    break
        except FileReadError as e:
            if on_error is ErrorPolicy.ABORT:
                raise
            logger.warning(f"Skipping trim candidate {directory.path}: {e}")
            if issues is not None:
                issues.append(e.to_issue())
            continue
        if total <= max_bytes:
            result.append(directory.path)
    return result


def _file_size(path: str) -> int:
    try:
        return os.stat(path, follow_symlinks=False).st_size
    except OSError as e:
        raise FileReadError(path, "Cannot stat file") from e


class ContentGrouperImpl(ContentGrouper):
    """
    Groups every file of a tree by content fingerprint using a thread pool.

    Attributes:
        hasher: Hasher computing one digest per file (default: XXH3-128 over the whole content)
        workers: Thread pool size (None lets concurrent.futures pick)
        on_error: ABORT fails the whole analysis on the first unreadable file,
                  SKIP records it as a ScanIssue and groups the rest
    """

    def __init__(self,
                 hasher: Hasher = None,
                 workers: Optional[int] = None,
                 on_error: ErrorPolicy = ErrorPolicy.ABORT):
        if workers is not None and workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.hasher = hasher or HasherImpl()
        self.workers = workers
        self.on_error = on_error

    def fingerprint_files(
            self,
            paths: List[str],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[Tuple[str, bytes]], List[ScanIssue]]:
        """
        Hash every path in parallel.

        Returns:
            (path, fingerprint) pairs in input order, and issues for files that failed (SKIP only)
        Raises:
            FileReadError: First unreadable file under ErrorPolicy.ABORT
        """
        if not paths:
            return [], []

        digests: List[Optional[bytes]] = [None] * len(paths)
        failures: Dict[int, ScanIssue] = {}
        total = len(paths)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            future_to_index = {
                executor.submit(self.hasher.compute_full_hash, path): index
                for index, path in enumerate(paths)
            }

            for done, future in enumerate(as_completed(future_to_index), 1):
                index = future_to_index[future]
                try:
                    digests[index] = future.result()
                except ScanError as e:
                    if self.on_error is ErrorPolicy.ABORT:
                        for pending in future_to_index:
                            pending.cancel()
                        logger.error(f"Content hashing aborted: {e}")
                        raise
                    logger.warning(f"Skipping unreadable file: {e}")
                    failures[index] = e.to_issue()

                if progress_callback:
                    progress_callback('hash', done, total)

        pairs = [(paths[i], digest) for i, digest in enumerate(digests) if digest is not None]
        issues = [failures[i] for i in sorted(failures)]
        return pairs, issues

    def group(
            self,
            tree: DirTree,
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> ContentGrouping:
        """Flatten the tree, fingerprint every file, then fold results into groups."""
        files = tree.all_files()
        logger.debug(f"Hashing {len(files)} files with {self.workers or 'default'} workers")
        start_time = time.time()

        pairs, issues = self.fingerprint_files(files, progress_callback=progress_callback)

        grouping = ContentGrouping(issues=issues)
        for path, fingerprint in pairs:
            grouping.add(path, fingerprint)

        logger.debug(f"Hashed {len(pairs)} files into {len(grouping.groups)} groups "
                     f"in {time.time() - start_time:.2f} seconds")
        return grouping


def group_by_content(tree: DirTree,
                     hasher: Hasher = None,
                     workers: Optional[int] = None) -> Dict[bytes, List[str]]:
    """
    Mapping from content fingerprint to every path that produced it.
    Always aborts on the first unreadable file; use ContentGrouperImpl.group with
    ErrorPolicy.SKIP to keep going and get the skipped files as issues.
    """
    return ContentGrouperImpl(hasher=hasher, workers=workers).group(tree).groups
