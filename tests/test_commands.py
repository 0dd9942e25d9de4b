"""
Integration tests for ScanCommand — the orchestration layer between CLI and core.
Verifies correct wiring of tree builder → analyses with stats and error policies.
"""
import pytest

from tidy import ScanCommand, ScanParams, ErrorPolicy, HashAlgorithmName
from tidy.core.exceptions import FileReadError, ListingError


class TestScanCommand:
    """Test command orchestration logic."""

    def test_execute_runs_all_analyses_by_default(self, sample_tree):
        root = str(sample_tree["root"])
        report = ScanCommand().execute(root, ScanParams(roots=[root]))

        assert report.root == root
        assert report.empty_directories == [str(sample_tree["a"])]
        duplicates = report.content.duplicate_groups()
        assert len(duplicates) == 1
        assert set(duplicates[0].paths) == {str(sample_tree["x"]), str(sample_tree["c"])}
        assert {"tree", "empty", "hash"} <= set(report.stats.stage_stats)
        assert report.issues == []

    def test_dedup_only_skips_trim(self, sample_tree):
        root = str(sample_tree["root"])
        report = ScanCommand().execute(root, ScanParams(roots=[root], dedup=True))

        assert report.content is not None
        assert report.empty_directories == []
        assert "empty" not in report.stats.stage_stats

    def test_trim_only_skips_hashing(self, sample_tree):
        root = str(sample_tree["root"])
        report = ScanCommand().execute(root, ScanParams(roots=[root], trim=True))

        assert report.content is None
        assert report.empty_directories == [str(sample_tree["a"])]
        assert "hash" not in report.stats.stage_stats

    def test_trim_max_adds_small_directories(self, sample_tree):
        root = str(sample_tree["root"])
        params = ScanParams(roots=[root], trim=True, trim_max_bytes=1024)
        report = ScanCommand().execute(root, params)

        assert set(report.small_directories) == {str(sample_tree["a"]), str(sample_tree["b"])}

    def test_algorithm_is_honoured(self, sample_tree):
        root = str(sample_tree["root"])
        params = ScanParams(roots=[root], dedup=True, algorithm=HashAlgorithmName.XXH64)
        report = ScanCommand().execute(root, params)

        assert all(len(key) == 8 for key in report.content.groups)

    def test_missing_root_raises(self, temp_dir):
        root = str(temp_dir / "missing")
        with pytest.raises(ListingError):
            ScanCommand().execute(root, ScanParams(roots=[root]))

    def test_abort_on_vanished_file(self, sample_tree, monkeypatch):
        """A file deleted after the tree is built fails the whole scan."""
        from tidy.core import builder as builder_module

        real_build = builder_module.TreeBuilderImpl.build

        def build_then_delete(self, root, progress_callback=None):
            tree = real_build(self, root, progress_callback)
            sample_tree["x"].unlink()
            return tree

        monkeypatch.setattr(builder_module.TreeBuilderImpl, "build", build_then_delete)
        root = str(sample_tree["root"])

        with pytest.raises(FileReadError):
            ScanCommand().execute(root, ScanParams(roots=[root], dedup=True))

    def test_skip_collects_issues(self, sample_tree, monkeypatch):
        from tidy.core import builder as builder_module

        real_build = builder_module.TreeBuilderImpl.build

        def build_then_delete(self, root, progress_callback=None):
            tree = real_build(self, root, progress_callback)
            sample_tree["x"].unlink()
            return tree

        monkeypatch.setattr(builder_module.TreeBuilderImpl, "build", build_then_delete)
        root = str(sample_tree["root"])
        params = ScanParams(roots=[root], dedup=True, on_error=ErrorPolicy.SKIP)

        report = ScanCommand().execute(root, params)

        assert [issue.path for issue in report.issues] == [str(sample_tree["x"])]
        assert report.content.duplicate_groups() == []

    def test_progress_callback_receives_stages(self, sample_tree):
        root = str(sample_tree["root"])
        stages = set()
        ScanCommand().execute(root, ScanParams(roots=[root]),
                              progress_callback=lambda stage, current, total: stages.add(stage))
        assert stages == {"tree", "hash"}

    def test_skip_reports_unreadable_trim_candidate(self, sample_tree, monkeypatch):
        """A file vanishing before trim sizing is listed among the report issues."""
        from tidy.core import builder as builder_module

        real_build = builder_module.TreeBuilderImpl.build

        def build_then_delete(self, root, progress_callback=None):
            tree = real_build(self, root, progress_callback)
            sample_tree["x"].unlink()
            return tree

        monkeypatch.setattr(builder_module.TreeBuilderImpl, "build", build_then_delete)
        root = str(sample_tree["root"])
        params = ScanParams(roots=[root], trim=True, trim_max_bytes=4096, on_error=ErrorPolicy.SKIP)

        report = ScanCommand().execute(root, params)

        assert report.small_directories == [str(sample_tree["a"])]
        assert [issue.path for issue in report.trim_issues] == [str(sample_tree["x"])]
        assert [issue.path for issue in report.issues] == [str(sample_tree["x"])]
