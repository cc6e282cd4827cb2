"""Unit tests for FileOutputTarget."""

from pathlib import Path

import pytest

from classilist.application.ports import OutputTargetPort
from classilist.domain.entities import OverwritePolicy
from classilist.infrastructure.io import FileOutputTarget, OutputTargetError


class TestFileOutputTarget:
    """Test suite for FileOutputTarget."""

    def test_implements_port(self, tmp_path: Path):
        assert isinstance(FileOutputTarget(tmp_path / "out.csv"), OutputTargetPort)

    def test_new_file(self, tmp_path: Path):
        # Arrange
        path = tmp_path / "nested" / "out.csv"
        target = FileOutputTarget(path)

        # Act
        sink = target.open()
        sink.write("a\r\nb\n")
        target.close()

        # Assert
        assert target.existed_before is False
        assert path.read_bytes() == b"a\r\nb\n"

    def test_overwrite_replaces_content(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        path.write_text("old\n")
        target = FileOutputTarget(path)

        target.open().write("new\n")
        target.close()

        assert target.existed_before
        assert path.read_text() == "new\n"

    def test_append_keeps_content(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        path.write_text("old\n")
        target = FileOutputTarget(path, overwrite_policy=OverwritePolicy.APPEND)

        target.open().write("new\n")
        target.close()

        assert target.has_content
        assert path.read_text() == "old\nnew\n"

    def test_abort_refuses_existing_file(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        path.write_text("old\n")
        target = FileOutputTarget(path, overwrite_policy=OverwritePolicy.ABORT)

        with pytest.raises(OutputTargetError, match="must not be overwritten"):
            target.open()
        assert path.read_text() == "old\n"

    def test_abort_allows_new_file(self, tmp_path: Path):
        target = FileOutputTarget(
            tmp_path / "out.csv", overwrite_policy=OverwritePolicy.ABORT
        )
        target.open()
        target.close()
        assert (tmp_path / "out.csv").exists()

    def test_directory_is_rejected(self, tmp_path: Path):
        with pytest.raises(OutputTargetError, match="directory"):
            FileOutputTarget(tmp_path).open()

    def test_empty_existing_file_has_no_content(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        path.write_text("")
        assert FileOutputTarget(path).has_content is False

    def test_discard_deletes_created_file(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        target = FileOutputTarget(path)
        target.open().write("partial")

        target.discard()

        assert not path.exists()

    def test_discard_truncates_appended_file(self, tmp_path: Path):
        path = tmp_path / "out.csv"
        path.write_text("old\n")
        target = FileOutputTarget(path, overwrite_policy=OverwritePolicy.APPEND)
        target.open().write("partial row")

        target.discard()

        assert path.read_text() == "old\n"

    def test_discard_without_open(self, tmp_path: Path):
        FileOutputTarget(tmp_path / "missing.csv").discard()

    def test_unknown_encoding(self, tmp_path: Path):
        target = FileOutputTarget(tmp_path / "out.csv", encoding="no-such-codec")
        with pytest.raises(OutputTargetError, match="Cannot open"):
            target.open()
