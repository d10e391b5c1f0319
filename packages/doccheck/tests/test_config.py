"""Tests for config module."""

from pathlib import Path

import pytest
import yaml

from src.config import CheckerSettings, get_nested, load_config, load_settings

CONF_DIR = Path(__file__).resolve().parents[1] / "conf"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Test loading a valid YAML file."""
        config_data = {"doccheck": {"mode": "fail_fast", "chunk_size": 128}}
        config_file = tmp_path / "doccheck.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(config_file)

        assert result == config_data

    def test_load_missing_file(self) -> None:
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/doccheck.yaml")

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading an empty YAML file returns empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        result = load_config(config_file)

        assert result == {}

    def test_load_string_path(self, tmp_path: Path) -> None:
        """Test loading with string path instead of Path object."""
        config_data = {"doccheck": {"require_all_fixtures": False}}
        config_file = tmp_path / "doccheck.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(str(config_file))

        assert result == config_data


class TestGetNested:
    """Tests for get_nested function."""

    def test_get_nested_key(self) -> None:
        """Test getting a nested key."""
        config = {"doccheck": {"member_tag": "member"}}

        assert get_nested(config, "doccheck", "member_tag") == "member"

    def test_get_missing_key_returns_default(self) -> None:
        """Test that missing key returns default value."""
        config = {"doccheck": {}}

        assert get_nested(config, "doccheck", "mode", default="batch") == "batch"

    def test_get_through_non_dict_returns_default(self) -> None:
        """Test traversing past a scalar returns the default."""
        config = {"doccheck": "oops"}

        assert get_nested(config, "doccheck", "mode") is None


class TestCheckerSettings:
    """Tests for CheckerSettings and load_settings."""

    def test_defaults(self) -> None:
        """Test default settings: batch mode, all fixtures required."""
        settings = CheckerSettings()

        assert settings.fixture_path is None
        assert settings.member_tag == "member"
        assert settings.signature_attribute == "name"
        assert settings.fail_fast is False
        assert settings.require_all_fixtures is True

    def test_from_config(self) -> None:
        """Test values are read from the doccheck section."""
        config = {"doccheck": {
            "fixture_path": "golden.yaml",
            "member_tag": "entry",
            "mode": "fail_fast",
            "require_all_fixtures": False,
            "chunk_size": 512,
        }}

        settings = CheckerSettings.from_config(config)

        assert settings.fixture_path == Path("golden.yaml")
        assert settings.member_tag == "entry"
        assert settings.signature_attribute == "name"
        assert settings.fail_fast is True
        assert settings.require_all_fixtures is False
        assert settings.chunk_size == 512

    def test_from_empty_config(self) -> None:
        """Test an empty config gives the defaults."""
        assert CheckerSettings.from_config({}) == CheckerSettings()

    def test_unknown_mode(self) -> None:
        """Test an unknown mode raises ValueError."""
        with pytest.raises(ValueError, match="mode"):
            CheckerSettings.from_config({"doccheck": {"mode": "lenient"}})

    @pytest.mark.parametrize("value", ["false", "no", 0, None])
    def test_require_all_fixtures_must_be_bool(self, value) -> None:
        """Test a quoted or non-boolean require_all_fixtures is rejected, not coerced."""
        with pytest.raises(ValueError, match="require_all_fixtures"):
            CheckerSettings.from_config({"doccheck": {"require_all_fixtures": value}})

    def test_require_all_fixtures_from_yaml(self, tmp_path: Path) -> None:
        """Test unquoted YAML booleans are accepted."""
        config_file = tmp_path / "doccheck.yaml"
        config_file.write_text("doccheck:\n  require_all_fixtures: false\n")

        assert load_settings(config_file).require_all_fixtures is False

    def test_non_positive_chunk_size(self) -> None:
        """Test chunk_size must be positive."""
        with pytest.raises(ValueError, match="chunk_size"):
            CheckerSettings(chunk_size=0)

    def test_relative_fixture_path_resolved_against_config(self, tmp_path: Path) -> None:
        """Test load_settings resolves fixture_path next to the config file."""
        config_file = tmp_path / "conf" / "doccheck.yaml"
        config_file.parent.mkdir()
        config_file.write_text(yaml.dump({"doccheck": {"fixture_path": "fixtures/golden.yaml"}}))

        settings = load_settings(config_file)

        assert settings.fixture_path == tmp_path / "conf" / "fixtures" / "golden.yaml"

    def test_shipped_config(self) -> None:
        """Test the shipped configuration points at the shipped fixtures."""
        settings = load_settings(CONF_DIR / "doccheck.yaml")

        assert settings.mode == "batch"
        assert settings.fixture_path.exists()
