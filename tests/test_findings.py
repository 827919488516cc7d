"""Tests for the flat-file findings writer."""

from pathlib import Path

import pytest

from api_scanner.core.exceptions import OutputError
from api_scanner.reports.findings import FindingsWriter


class TestFindingsWriter:
    """Tests for result file handling."""

    def test_prepare_creates_nested_directory(self, tmp_path: Path):
        writer = FindingsWriter(tmp_path / "a" / "b")
        writer.prepare()
        assert (tmp_path / "a" / "b").is_dir()

    def test_prepare_is_idempotent(self, writer: FindingsWriter):
        writer.prepare()
        assert writer.output_dir.is_dir()

    def test_files_created_lazily(self, writer: FindingsWriter):
        """No result file should exist until something is found."""
        assert not writer.cors_file.exists()
        assert not writer.discovery_file.exists()

    def test_appends_one_url_per_line(self, writer: FindingsWriter):
        writer.add_discovered_endpoint("https://api.test/a")
        writer.add_discovered_endpoint("https://api.test/b")

        assert writer.discovery_file.read_text(encoding="utf-8") == (
            "https://api.test/a\nhttps://api.test/b\n"
        )

    def test_appends_across_writers(self, output_dir: Path):
        """Existing results should be kept, not overwritten."""
        first = FindingsWriter(output_dir)
        first.prepare()
        first.add_cors_vulnerability("https://one.test")

        second = FindingsWriter(output_dir)
        second.add_cors_vulnerability("https://two.test")

        assert second.cors_file.read_text(encoding="utf-8").splitlines() == [
            "https://one.test",
            "https://two.test",
        ]

    def test_file_names(self, writer: FindingsWriter):
        assert writer.cors_file.name == "cors_vulnerabilities.txt"
        assert writer.discovery_file.name == "discovered_endpoints.txt"

    def test_unwritable_directory_raises(self, tmp_path: Path):
        """A file where the directory should be is an OutputError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        with pytest.raises(OutputError):
            FindingsWriter(blocker).prepare()

        with pytest.raises(OutputError):
            FindingsWriter(blocker).add_cors_vulnerability("https://api.test")
