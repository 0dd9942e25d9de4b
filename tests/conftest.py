"""
Shared fixtures for scanning tests.
Creates isolated temporary directories with controlled trees.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory (canonical path), auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def sample_tree(temp_dir) -> Dict[str, Path]:
    """
    Root with:
    - a/          empty directory
    - b/x.txt     "hello"
    - c.txt       "hello"  (duplicate of b/x.txt)
    """
    paths = {"root": temp_dir}

    paths["a"] = temp_dir / "a"
    paths["a"].mkdir()

    paths["b"] = temp_dir / "b"
    paths["b"].mkdir()
    paths["x"] = paths["b"] / "x.txt"
    paths["x"].write_bytes(b"hello")

    paths["c"] = temp_dir / "c.txt"
    paths["c"].write_bytes(b"hello")

    return paths


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates a nested tree for grouping scenarios:
    - 2 identical files at the root + 1 copy in a nested subdirectory (3-file group)
    - 2 identical files of a second content (2-file group)
    - 2 unique files
    - 2 empty (zero-byte) files, which are duplicates of each other
    - deep/er/est/ chain ending in an empty leaf directory
    - only_empty/ holding a single empty directory
    """
    files = {"root": temp_dir}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty_a"] = temp_dir / "empty_a.txt"
    files["empty_a"].write_bytes(b"")
    files["empty_b"] = temp_dir / "empty_b.txt"
    files["empty_b"].write_bytes(b"")

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["subdir"] = subdir
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    files["deep_leaf"] = temp_dir / "deep" / "er" / "est"
    files["deep_leaf"].mkdir(parents=True)

    files["only_empty"] = temp_dir / "only_empty"
    files["only_empty_child"] = files["only_empty"] / "child"
    files["only_empty_child"].mkdir(parents=True)

    return files
