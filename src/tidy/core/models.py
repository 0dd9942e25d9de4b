"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory tree scanning, empty-directory detection and content grouping.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import os
from enum import Enum


# =============================
# Enums
# =============================

class ErrorPolicy(Enum):
    """
    What to do when a single directory or file cannot be processed.
    """
    ABORT = "abort"
    SKIP = "skip"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            ErrorPolicy.ABORT: "Abort",
            ErrorPolicy.SKIP: "Skip",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            ErrorPolicy.ABORT:
                "First failure aborts the whole scan (no partial result)",
            ErrorPolicy.SKIP:
                "Failed directories/files are recorded as issues and skipped",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    XXH128 = "xxh128"
    MD5 = "md5"
    XXH64 = "xxh64"

    @property
    def display_name(self) -> str:
        mapping = {
            HashAlgorithmName.XXH128: "xxHash3 128-bit",
            HashAlgorithmName.MD5: "MD5 128-bit",
            HashAlgorithmName.XXH64: "xxHash 64-bit",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class SortOrder(Enum):
    SHORTEST_PATH = "shortest-path"
    SHORTEST_FILENAME = "shortest-filename"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            SortOrder.SHORTEST_PATH: "Shortest Path",
            SortOrder.SHORTEST_FILENAME: "Shortest Filename",
        }
        return mapping.get(self, self.value)


class IssueStage(str, Enum):
    LISTING = "listing"
    TYPE_RESOLUTION = "type-resolution"
    PATH_RESOLUTION = "path-resolution"
    READ = "read"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class ScanIssue:
    """A directory or file that could not be processed and was skipped."""
    path: str
    stage: IssueStage
    message: str

    def __str__(self):
        return f"[{self.stage.value}] {self.path}: {self.message}"


@dataclass(frozen=True)
class Directory:
    """
    Immediate contents of one directory at scan time.
    Paths are canonical (absolute, symlinks and relative segments resolved).
    Symlinks, sockets, devices and other entry kinds are not listed.
    """
    path: str
    files: Tuple[str, ...] = ()
    subdirectories: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True if the directory has neither files nor subdirectories."""
        return not self.files and not self.subdirectories

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return (f"<Directory path={self.path}, files={len(self.files)}, "
                f"subdirectories={len(self.subdirectories)}>")


@dataclass(frozen=True)
class DirTree:
    """
    Fully walked subtree rooted at `root`.
    Holds one Directory record per directory reachable through real (non-symlink) edges.
    """
    root: str
    directories: Tuple[Directory, ...] = ()
    issues: Tuple[ScanIssue, ...] = ()

    def all_files(self) -> List[str]:
        """Every file of the tree, each exactly once."""
        return [path for directory in self.directories for path in directory.files]

    def all_directories(self) -> List[str]:
        """Every directory path of the tree, each exactly once."""
        return [directory.path for directory in self.directories]

    def get(self, path: str) -> Optional[Directory]:
        """Look up the record for a canonical directory path."""
        for directory in self.directories:
            if directory.path == path:
                return directory
        return None

    @property
    def file_count(self) -> int:
        return sum(len(d.files) for d in self.directories)

    @property
    def directory_count(self) -> int:
        return len(self.directories)

    def __repr__(self):
        return f"<DirTree root={self.root}, directories={self.directory_count}, files={self.file_count}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing one content fingerprint.
    The first path is the one a deduplication would keep.
    """
    fingerprint: bytes
    paths: List[str]
    size: int = 0  # bytes per copy

    @property
    def hex_fingerprint(self) -> str:
        return self.fingerprint.hex()

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    @property
    def reclaimable_bytes(self) -> int:
        """Space freed by keeping a single copy."""
        return self.size * max(0, self.duplicate_count - 1)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup fingerprint={self.hex_fingerprint}, count={len(self.paths)}>"


@dataclass
class ContentGrouping:
    """
    Mapping from content fingerprint to the paths that produced it,
    plus any files that could not be read (only populated under ErrorPolicy.SKIP).
    """
    groups: Dict[bytes, List[str]] = field(default_factory=dict)
    issues: List[ScanIssue] = field(default_factory=list)

    def add(self, path: str, fingerprint: bytes) -> None:
        """Append to an existing group or open a new singleton group."""
        self.groups.setdefault(fingerprint, []).append(path)

    def duplicate_groups(self) -> List[DuplicateGroup]:
        """Groups with more than one path, sized from the first readable copy."""
        result = []
        for fingerprint, paths in self.groups.items():
            if len(paths) < 2:
                continue
            result.append(DuplicateGroup(
                fingerprint=fingerprint,
                paths=list(paths),
                size=_first_size(paths),
            ))
        return result

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self.groups.values())


def _first_size(paths: List[str]) -> int:
    for path in paths:
        try:
            return os.stat(path).st_size
        except OSError:
            continue
    return 0


@dataclass
class ScanStats:
    """
    Timings and counts collected while scanning one root.
    """
    total_time: float = 0.0
    stage_stats: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def update_stage(self, stage_name: str, items: int, duration: float) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {"items": 0, "time": 0.0}
        self.stage_stats[stage_name]["items"] += items
        self.stage_stats[stage_name]["time"] += duration
        self.total_time += duration

    def print_summary(self) -> str:
        labels = {
            "tree": "Directory tree",
            "empty": "Empty directories",
            "small": "Trim candidates",
            "hash": "Content hashing",
        }

        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: ITEMS / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {int(data['items'])} / {data['time']:.3f}s")

        return "\n".join(lines)


@dataclass
class ScanReport:
    """Everything learned about a single root."""
    root: str
    tree: DirTree
    empty_directories: List[str] = field(default_factory=list)
    small_directories: List[str] = field(default_factory=list)
    trim_issues: List[ScanIssue] = field(default_factory=list)
    content: Optional[ContentGrouping] = None
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def issues(self) -> List[ScanIssue]:
        issues = list(self.tree.issues)
        issues.extend(self.trim_issues)
        if self.content is not None:
            issues.extend(self.content.issues)
        return issues


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — built by the CLI, consumed by ScanCommand.
"""
from tidy.utils.convert_utils import ConvertUtils


@dataclass
class ScanParams:
    """Parameters for a scan run with validation."""
    roots: List[str]
    dedup: bool = False
    trim: bool = False
    trim_max_bytes: int = 0
    dry_run: bool = False
    workers: Optional[int] = None
    algorithm: HashAlgorithmName = HashAlgorithmName.XXH128
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    sort_order: SortOrder = SortOrder.SHORTEST_PATH

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.roots:
            raise ValueError("At least one root directory is required")

        if any(not root for root in self.roots):
            raise ValueError("Root directory cannot be empty")

        if self.trim_max_bytes < 0:
            raise ValueError("Maximum trim size cannot be negative")

        if self.workers is not None and self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        # Neither action requested → report everything
        if not self.dedup and not self.trim:
            self.dedup = True
            self.trim = True

    @staticmethod
    def from_human_readable(
            roots: List[str],
            trim_max_str: str = "0",
            dedup: bool = False,
            trim: bool = False,
            dry_run: bool = False,
            workers: Optional[int] = None,
            algorithm: HashAlgorithmName = HashAlgorithmName.XXH128,
            on_error: ErrorPolicy = ErrorPolicy.ABORT,
            sort_order: SortOrder = SortOrder.SHORTEST_PATH,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        return ScanParams(
            roots=list(roots),
            dedup=dedup,
            trim=trim,
            trim_max_bytes=ConvertUtils.human_to_bytes(trim_max_str),
            dry_run=dry_run,
            workers=workers,
            algorithm=algorithm,
            on_error=on_error,
            sort_order=sort_order,
        )
