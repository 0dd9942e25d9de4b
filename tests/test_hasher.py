"""
Unit tests for HasherImpl and the pluggable hash algorithms.
Verifies whole-content fingerprints and that read failures are raised, not hidden.
"""
import hashlib

import pytest
import xxhash

from tidy.core.hasher import (
    HasherImpl, XXH3_128AlgorithmImpl, Md5AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm)
from tidy.core.exceptions import FileReadError
from tidy.core.models import HashAlgorithmName, IssueStage


class TestHashAlgorithms:
    def test_default_is_128_bit_xxh3(self):
        digest = XXH3_128AlgorithmImpl.hash(b"hello")
        assert len(digest) == 16
        assert digest == xxhash.xxh3_128(b"hello").digest()

    def test_md5_matches_hashlib(self):
        assert Md5AlgorithmImpl.hash(b"hello") == hashlib.md5(b"hello").digest()

    def test_xxh64_is_8_bytes(self):
        assert len(XXHashAlgorithmImpl.hash(b"hello")) == 8

    @pytest.mark.parametrize("name, impl", [
        (HashAlgorithmName.XXH128, XXH3_128AlgorithmImpl),
        (HashAlgorithmName.MD5, Md5AlgorithmImpl),
        (HashAlgorithmName.XXH64, XXHashAlgorithmImpl),
    ])
    def test_get_algorithm(self, name, impl):
        assert isinstance(get_algorithm(name), impl)

    def test_get_algorithm_rejects_unknown(self):
        with pytest.raises(ValueError) as exc_info:
            get_algorithm("sha1")
        assert isinstance(exc_info.value.__cause__, KeyError)


class TestHasherImpl:
    """Test whole-file fingerprinting."""

    def test_same_content_produces_same_hash(self, temp_dir):
        content = b"test content " * 1000
        (temp_dir / "one.bin").write_bytes(content)
        (temp_dir / "two.bin").write_bytes(content)

        hasher = HasherImpl()
        assert hasher.compute_full_hash(str(temp_dir / "one.bin")) == \
            hasher.compute_full_hash(str(temp_dir / "two.bin"))

    def test_tail_difference_changes_hash(self, temp_dir):
        """The whole content is hashed, so a change in the last byte is detected."""
        (temp_dir / "one.bin").write_bytes(b"A" * 100000 + b"1")
        (temp_dir / "two.bin").write_bytes(b"A" * 100000 + b"2")

        hasher = HasherImpl()
        assert hasher.compute_full_hash(str(temp_dir / "one.bin")) != \
            hasher.compute_full_hash(str(temp_dir / "two.bin"))

    def test_uses_injected_algorithm(self, temp_dir):
        (temp_dir / "f.txt").write_bytes(b"hello")
        hasher = HasherImpl(Md5AlgorithmImpl())
        assert hasher.compute_full_hash(str(temp_dir / "f.txt")) == hashlib.md5(b"hello").digest()

    def test_empty_file_has_a_digest(self, temp_dir):
        (temp_dir / "empty").write_bytes(b"")
        digest = HasherImpl().compute_full_hash(str(temp_dir / "empty"))
        assert digest == xxhash.xxh3_128(b"").digest()

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(FileReadError) as exc_info:
            HasherImpl().compute_full_hash(str(temp_dir / "gone.txt"))
        assert exc_info.value.stage == IssueStage.READ
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_raises(self, temp_dir):
        """A path that became a directory cannot be read."""
        (temp_dir / "now_a_dir").mkdir()
        with pytest.raises(FileReadError):
            HasherImpl().compute_full_hash(str(temp_dir / "now_a_dir"))
