from tidy.core.models import HashAlgorithmName, SortOrder

ALGORITHM_ALIASES = {
    "xxh128": HashAlgorithmName.XXH128,
    "md5": HashAlgorithmName.MD5,
    "xxh64": HashAlgorithmName.XXH64,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content fingerprint algorithm:\n"
    "  xxh128 : xxHash3 128-bit (default, fastest)\n"
    "  md5    : MD5 128-bit\n"
    "  xxh64  : xxHash 64-bit\n"
)

SORT_ALIASES = {
    "shortest-path": SortOrder.SHORTEST_PATH,
    "shortest-filename": SortOrder.SHORTEST_FILENAME,
}

SORT_CHOICES = list(SORT_ALIASES.keys())

SORT_HELP_TEXT = (
    "Order inside duplicate groups (first file is the one to keep):\n"
    "  shortest-path     : files closer to root first (default)\n"
    "  shortest-filename : shorter filenames first\n"
)

EPILOG_TEXT = """
Examples:
  Report empty directories and duplicate files
  %(prog)s ~/Downloads

  Only duplicates, across two roots, with 8 hashing threads
  %(prog)s -D -j 8 ~/Downloads ~/Pictures

  Only trim candidates: empty directories and leaf directories up to 4KB
  %(prog)s -T --trim-max 4KB ~/projects

  Keep going past unreadable directories/files and list them at the end
  %(prog)s --skip-errors /mnt/share

Nothing is ever deleted: tidy only reports what could be removed.
"""
