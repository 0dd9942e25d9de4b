"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/builder.py
Walks a directory subtree into a DirTree using an explicit pending list (no recursion).

The walk pops one directory, reads it, pushes its subdirectories and stores the
record, until nothing is pending. Deep trees never hit the interpreter's
recursion limit, and the visiting order is an implementation detail: only
"every reachable directory exactly once" is guaranteed.
"""

import time
import logging
from typing import List, Optional, Callable, Set

logger = logging.getLogger(__name__)

# Local imports
from tidy.core.models import Directory, DirTree, ErrorPolicy, ScanIssue
from tidy.core.interfaces import DirectoryReader, TreeBuilder
from tidy.core.reader import DirectoryReaderImpl
from tidy.core.exceptions import ScanError


class TreeBuilderImpl(TreeBuilder):
    """
    Assembles a DirTree from a root path.

    Attributes:
        reader: DirectoryReader used for every directory
        on_error: ABORT re-raises the first failure, SKIP records it and keeps walking
    """

    # Report progress every N directories
    PROGRESS_INTERVAL = 1000

    def __init__(self, reader: DirectoryReader = None, on_error: ErrorPolicy = ErrorPolicy.ABORT):
        self.reader = reader or DirectoryReaderImpl()
        self.on_error = on_error

    def build(self,
              root: str,
              progress_callback: Optional[Callable[[str, int, object], None]] = None) -> DirTree:
        """
        Walk `root` and return the complete tree.

        The root itself must be readable under every policy.

        Raises:
            ScanError: Root cannot be read, or any directory fails under ErrorPolicy.ABORT
        """
        logger.debug(f"Building tree for: {root}")
        start_time = time.time()

        root_record = self.reader.read(str(root))

        directories: List[Directory] = [root_record]
        issues: List[ScanIssue] = []
        seen: Set[str] = {root_record.path}
        pending: List[str] = list(root_record.subdirectories)

        while pending:
            path = pending.pop()
            if path in seen:
                logger.debug(f"Already visited, skipping: {path}")
                continue
            seen.add(path)

            try:
                record = self.reader.read(path)
            except ScanError as e:
                if self.on_error is ErrorPolicy.ABORT:
                    logger.error(f"Tree build aborted: {e}")
                    raise
                logger.warning(f"Skipping directory {path}: {e}")
                issues.append(e.to_issue())
                continue

            directories.append(record)
            pending.extend(record.subdirectories)

            if progress_callback and len(directories) % self.PROGRESS_INTERVAL == 0:
                progress_callback('tree', len(directories), None)

        if progress_callback:
            progress_callback('tree', len(directories), len(directories))

        tree = DirTree(root=root_record.path, directories=tuple(directories), issues=tuple(issues))
        logger.debug(f"Tree built in {time.time() - start_time:.2f} seconds: "
                     f"{tree.directory_count} directories, {tree.file_count} files, {len(issues)} issues")
        return tree


def build_tree(root_path: str, on_error: ErrorPolicy = ErrorPolicy.ABORT) -> DirTree:
    """Full scan of `root_path` with the default reader."""
    return TreeBuilderImpl(on_error=on_error).build(root_path)
