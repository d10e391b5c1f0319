"""Tests for cli module."""

from pathlib import Path

import yaml

from src.cli import EXIT_ERROR, EXIT_FAILED, EXIT_OK, main
from src.fixtures import DOXYGEN_BASIC_TRANSLATE

CONF_DIR = Path(__file__).resolve().parents[1] / "conf"


def _fixture_file(tmp_path: Path, pairs: list[tuple[str, str]]) -> Path:
    path = tmp_path / "fixtures.yaml"
    path.write_text(yaml.dump({"fixtures": [{"signature": s, "body": b} for s, b in pairs]}))
    return path


class TestMain:
    """Tests for main exit codes."""

    def test_conforming_file_exits_zero(self, write_doc) -> None:
        """Test success against the embedded fixtures."""
        path = write_doc(list(DOXYGEN_BASIC_TRANSLATE))

        assert main([str(path)]) == EXIT_OK

    def test_shipped_config(self, write_doc) -> None:
        """Test running with the shipped config and fixture file."""
        path = write_doc(list(DOXYGEN_BASIC_TRANSLATE))

        assert main([str(path), "--config", str(CONF_DIR / "doccheck.yaml")]) == EXIT_OK

    def test_mismatch_exits_one(self, write_doc, tmp_path, caplog) -> None:
        """Test a mismatch fails and logs both texts."""
        path = write_doc([("M:pkg.function", "<summary>X</summary>")])
        fixtures = _fixture_file(tmp_path, [("M:pkg.function", "<summary>Y</summary>")])

        assert main([str(path), "--fixtures", str(fixtures)]) == EXIT_FAILED
        assert "<summary>X</summary>" in caplog.text
        assert "<summary>Y</summary>" in caplog.text

    def test_fail_fast_mismatch_exits_one(self, write_doc, tmp_path) -> None:
        """Test fail-fast mismatches use the same exit code."""
        path = write_doc([("M:a", "1"), ("M:b", "2")])
        fixtures = _fixture_file(tmp_path, [("M:a", "x"), ("M:b", "y")])

        assert main([str(path), "--fixtures", str(fixtures), "--fail-fast"]) == EXIT_FAILED

    def test_unused_fixture_exits_one(self, write_doc, tmp_path) -> None:
        """Test unused fixtures fail unless allowed."""
        path = write_doc([("M:a", "x")])
        fixtures = _fixture_file(tmp_path, [("M:a", "x"), ("M:gone", "y")])

        assert main([str(path), "--fixtures", str(fixtures)]) == EXIT_FAILED
        assert main([str(path), "--fixtures", str(fixtures), "--allow-unused"]) == EXIT_OK

    def test_malformed_input_exits_two(self, tmp_path) -> None:
        """Test malformed XML is an input error."""
        path = tmp_path / "doc.xml"
        path.write_text("<doc><member name='M:a'>")

        assert main([str(path)]) == EXIT_ERROR

    def test_missing_file_exits_two(self, tmp_path) -> None:
        """Test a missing documentation file is an input error."""
        assert main([str(tmp_path / "missing.xml")]) == EXIT_ERROR

    def test_duplicate_fixture_exits_two(self, write_doc, tmp_path) -> None:
        """Test duplicate fixtures fail before the file is read."""
        path = write_doc([("M:a", "x")])
        fixtures = _fixture_file(tmp_path, [("M:a", "x"), ("M:a", "y")])

        assert main([str(path), "--fixtures", str(fixtures)]) == EXIT_ERROR

    def test_summary_table(self, write_doc, tmp_path, capsys) -> None:
        """Test --summary prints one row per fixture."""
        path = write_doc([("M:a", "x")])
        fixtures = _fixture_file(tmp_path, [("M:a", "x"), ("M:gone", "y")])

        code = main([str(path), "--fixtures", str(fixtures), "--summary", "--allow-unused"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "M:a" in out and "pass" in out
        assert "M:gone" in out and "unused" in out
