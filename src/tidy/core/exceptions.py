"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Errors raised while reading directories and hashing files.

Every error keeps the offending path and chains the original OSError,
so callers can either abort or turn it into a ScanIssue.
"""
from tidy.core.models import IssueStage, ScanIssue


class ScanError(RuntimeError):
    """Base class for all scan failures."""
    stage: IssueStage = IssueStage.LISTING

    def __init__(self, path: str, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message

    def to_issue(self) -> ScanIssue:
        cause = f" ({self.__cause__})" if self.__cause__ else ""
        return ScanIssue(path=self.path, stage=self.stage, message=f"{self.message}{cause}")


class ListingError(ScanError):
    """Directory cannot be enumerated."""
    stage = IssueStage.LISTING


class TypeResolutionError(ScanError):
    """Entry kind (file or directory) cannot be determined."""
    stage = IssueStage.TYPE_RESOLUTION


class PathResolutionError(ScanError):
    """Canonical path of an entry cannot be resolved."""
    stage = IssueStage.PATH_RESOLUTION


class FileReadError(ScanError):
    """File cannot be opened or read during hashing."""
    stage = IssueStage.READ
