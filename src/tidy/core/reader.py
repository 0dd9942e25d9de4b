"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reader.py
Reads the immediate children of one directory into a Directory record.
Features:
- Uses os.scandir so entry kinds come from the directory listing itself
- Never follows symbolic links: only real files and directories are kept
- Canonicalizes every stored path with pathlib before it is recorded
"""

import os
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

# Local imports
from tidy.core.models import Directory
from tidy.core.interfaces import DirectoryReader
from tidy.core.exceptions import ListingError, TypeResolutionError, PathResolutionError


class DirectoryReaderImpl(DirectoryReader):
    """
    Lists one directory and splits its entries into files and subdirectories.
    Symlinks, sockets, fifos and device nodes are silently skipped.
    """

    def read(self, path: str) -> Directory:
        """
        Read a directory.

        Args:
            path: Directory to list
        Returns:
            Directory: Canonical record of the directory's immediate contents
        Raises:
            ListingError: Directory cannot be enumerated
            TypeResolutionError: An entry's kind cannot be determined
            PathResolutionError: An entry's canonical path cannot be resolved
        """
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Cannot list {path}: {e}")
            raise ListingError(str(path), "Cannot list directory") from e

        canonical_dir = self.canonicalize(path)
        files: List[str] = []
        subdirectories: List[str] = []

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Cannot determine type of {entry.path}: {e}")
                raise TypeResolutionError(entry.path, "Cannot determine entry type") from e

            if is_dir:
                subdirectories.append(self.canonicalize(entry.path))
            elif is_file:
                files.append(self.canonicalize(entry.path))
            else:
                logger.debug(f"Skipping non-regular entry: {entry.path}")

        return Directory(
            path=canonical_dir,
            files=tuple(files),
            subdirectories=tuple(subdirectories),
        )

    @staticmethod
    def canonicalize(path: str) -> str:
        """
        Absolute path with symlinks and relative segments resolved.
        Raises:
            PathResolutionError: Path does not exist, is a broken link, or cannot be resolved
        """
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            logger.debug(f"Cannot resolve {path}: {e}")
            raise PathResolutionError(str(path), "Cannot resolve path") from e
