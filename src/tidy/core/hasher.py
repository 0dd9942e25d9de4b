"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file fingerprinting with pluggable hash algorithms.

Each file is read into memory in one pass and digested once.
Read failures are raised, never replaced by an empty digest.
"""

import hashlib
import logging

import xxhash

from tidy.core.exceptions import FileReadError
from tidy.core.interfaces import Hasher, HashAlgorithm
from tidy.core.models import HashAlgorithmName

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXH3_128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh3_128(data).digest()


class Md5AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return hashlib.md5(data).digest()


class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh64(data).digest()


_ALGORITHMS = {
    HashAlgorithmName.XXH128: XXH3_128AlgorithmImpl,
    HashAlgorithmName.MD5: Md5AlgorithmImpl,
    HashAlgorithmName.XXH64: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName = HashAlgorithmName.XXH128) -> HashAlgorithm:
    """Return an algorithm instance for the given name."""
    try:
        return _ALGORITHMS[name]()
    except KeyError as e:
        raise ValueError(f"Unsupported hash algorithm: {name}") from e


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Stateless: safe to share between worker threads.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or XXH3_128AlgorithmImpl()

    def compute_full_hash(self, path: str) -> bytes:
        """
        Reads the entire file and returns its digest.

        Raises:
            FileReadError: If the file cannot be opened or read
        """
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.debug(f"Error reading full content of {path}: {e}")
            raise FileReadError(path, "Cannot read file") from e
        return self.algorithm.hash(data)
