"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scanning system.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- DirectoryReader: Interface for reading the immediate contents of one directory.
- TreeBuilder: Interface for walking a whole subtree into a DirTree.
- HashAlgorithm: Standardized interface for hash functions (e.g., XXH3-128, MD5).
- Hasher: Interface for computing the full-content fingerprint of a file.
- ContentGrouper: Interface for grouping all files of a tree by fingerprint.
"""

from typing import Protocol, List, Tuple, Optional, Callable
from tidy.core.models import Directory, DirTree, ContentGrouping, ScanIssue


# ===== Interfaces =====

class DirectoryReader(Protocol):
    """Interface for listing one directory into a Directory record."""
    def read(self, path: str) -> Directory:
        """
        Read immediate children of `path`.

        Raises:
            ListingError, TypeResolutionError, PathResolutionError
        """
        ...


class TreeBuilder(Protocol):
    """Interface for assembling a DirTree from a root path."""
    def build(
        self,
        root: str,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> DirTree:
        ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like XXH3-128 or MD5
    without affecting the rest of the grouping logic.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting a whole file."""
    def compute_full_hash(self, path: str) -> bytes: ...


class ContentGrouper(Protocol):
    """
    Interface for grouping files by content fingerprint.

    Methods:
        fingerprint_files: Hash every path (in parallel) and return results in input order.
        group: Flatten a tree, fingerprint its files and fold them into a ContentGrouping.
    """
    def fingerprint_files(
        self,
        paths: List[str],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[Tuple[str, bytes]], List[ScanIssue]]:
        ...

    def group(
        self,
        tree: DirTree,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> ContentGrouping:
        ...
