"""
Core scanning engine — directory reader, tree builder, hasher and analyses.

This package contains the performance-critical foundation of tidy:
- DirectoryReaderImpl: lists one directory into a Directory record (symlinks skipped)
- TreeBuilderImpl: explicit-stack walk assembling a DirTree
- HasherImpl + XXH3_128AlgorithmImpl: whole-file content fingerprints
- ContentGrouperImpl: thread-pool hashing and fingerprint grouping
- find_empty_directories / find_small_directories: trim candidates
- Models: Directory, DirTree, ContentGrouping, DuplicateGroup and configuration objects

All components are pure Python with no UI dependencies.
"""

from .reader import DirectoryReaderImpl
from .builder import TreeBuilderImpl, build_tree
from .hasher import HasherImpl, XXH3_128AlgorithmImpl, Md5AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .analyzer import ContentGrouperImpl, find_empty_directories, find_small_directories, group_by_content
from .exceptions import ScanError, ListingError, TypeResolutionError, PathResolutionError, FileReadError
from .models import (
    Directory, DirTree, ContentGrouping, DuplicateGroup, ScanIssue, IssueStage,
    ErrorPolicy, HashAlgorithmName, SortOrder, ScanParams, ScanStats, ScanReport)

__all__ = [
    "DirectoryReaderImpl",
    "TreeBuilderImpl",
    "build_tree",
    "HasherImpl",
    "XXH3_128AlgorithmImpl",
    "Md5AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "ContentGrouperImpl",
    "find_empty_directories",
    "find_small_directories",
    "group_by_content",
    "ScanError",
    "ListingError",
    "TypeResolutionError",
    "PathResolutionError",
    "FileReadError",
    "Directory",
    "DirTree",
    "ContentGrouping",
    "DuplicateGroup",
    "ScanIssue",
    "IssueStage",
    "ErrorPolicy",
    "HashAlgorithmName",
    "SortOrder",
    "ScanParams",
    "ScanStats",
    "ScanReport",
]
