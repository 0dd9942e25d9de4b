"""
Tidy — find empty directories and duplicate files.

Core features:
- Explicit-stack directory walk building a typed tree (Directory / DirTree)
- Empty-directory and small-directory (trim candidate) detection
- Duplicate detection by whole-file content fingerprint (xxHash3 128-bit by default),
  hashed in parallel on a thread pool
- Detection only: nothing on disk is ever modified
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("tidy")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from tidy.commands import ScanCommand
from tidy.core import (
    Directory, DirTree, ContentGrouping, DuplicateGroup, ScanIssue,
    ErrorPolicy, HashAlgorithmName, SortOrder, ScanParams, ScanReport,
    ScanError, build_tree, find_empty_directories, group_by_content)
from tidy.utils.convert_utils import ConvertUtils
from tidy.services import DuplicateService

__all__ = [
    "ScanCommand",
    "Directory",
    "DirTree",
    "ContentGrouping",
    "DuplicateGroup",
    "ScanIssue",
    "ErrorPolicy",
    "HashAlgorithmName",
    "SortOrder",
    "ScanParams",
    "ScanReport",
    "ScanError",
    "build_tree",
    "find_empty_directories",
    "group_by_content",
    "ConvertUtils",
    "DuplicateService",
    "__version__",
]
