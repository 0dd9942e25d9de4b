"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/duplicate_service.py
Helpers over duplicate groups: ordering, the keep-one plan and space savings.
Nothing here touches the filesystem beyond what the groups already carry.
"""
import os
from typing import List, Tuple
from tidy.core.models import DuplicateGroup, SortOrder


class DuplicateService:
    @staticmethod
    def sort_paths_inside_groups(groups: List[DuplicateGroup],
                                 sort_order: SortOrder = SortOrder.SHORTEST_PATH) -> None:
        """
        Sorts paths inside each group in-place; the first path is the one to keep.
        Ties are broken by the full path so the order is deterministic.
        """
        if not groups:
            return

        if sort_order == SortOrder.SHORTEST_FILENAME:
            key_func = lambda p: (len(os.path.basename(p)), p)
        else:
            key_func = lambda p: (p.rstrip(os.sep).count(os.sep), len(p), p)

        for group in groups:
            group.paths.sort(key=key_func)

    @staticmethod
    def sort_groups(groups: List[DuplicateGroup]) -> List[DuplicateGroup]:
        """Largest reclaimable space first."""
        return sorted(groups, key=lambda g: (-g.reclaimable_bytes, g.paths[0] if g.paths else ""))

    @staticmethod
    def keep_only_one_file_per_group(groups: List[DuplicateGroup]) -> Tuple[List[str], List[DuplicateGroup]]:
        """
        Keeps the first path of every group and marks the rest as redundant.
        Returns:
            - List of redundant paths (what a deduplication would remove)
            - Groups reduced to their kept path
        """
        redundant = []
        kept_groups = []
        for group in groups:
            if not group.paths:
                continue
            redundant.extend(group.paths[1:])
            kept_groups.append(DuplicateGroup(
                fingerprint=group.fingerprint,
                paths=group.paths[:1],
                size=group.size,
            ))
        return redundant, kept_groups

    @staticmethod
    def calculate_space_savings(groups: List[DuplicateGroup]) -> int:
        """Total bytes freed by keeping one copy per group."""
        return sum(group.reclaimable_bytes for group in groups)
