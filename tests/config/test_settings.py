"""Tests for loading schemacheck settings."""

import pytest

from schemacheck.config import SettingsModel, load_settings


class TestLoadSettings:
    def test_defaults_without_file(self):
        settings = load_settings()

        assert settings == SettingsModel()
        assert settings.examples.max_depth == 10
        assert settings.examples.required_only is False
        assert settings.validation.warnings is True
        assert settings.logging.level == "WARNING"

    def test_reads_env_var_path(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            "examples:\n  max_depth: 4\n  required_only: true\nlogging:\n  level: DEBUG\n"
        )
        monkeypatch.setenv("SCHEMACHECK_CONFIG", str(config_file))

        settings = load_settings()

        assert settings.examples.max_depth == 4
        assert settings.examples.required_only is True
        assert settings.logging.level == "DEBUG"
        assert settings.validation.warnings is True

    def test_reads_home_config(self, tmp_path):
        config_dir = tmp_path / "home" / ".schemacheck"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yml").write_text("validation:\n  warnings: false\n")

        assert load_settings().validation.warnings is False

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("")
        assert load_settings(config_file) == SettingsModel()

    def test_missing_explicit_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SCHEMACHECK_CONFIG", str(tmp_path / "missing.yml"))
        with pytest.raises(FileNotFoundError):
            load_settings()

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("examples:\n  max_depth: -1\n")
        with pytest.raises(ValueError, match="Invalid schemacheck config"):
            load_settings(config_file)

    def test_unknown_section(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("cache:\n  ttl: 60\n")
        with pytest.raises(ValueError, match="Invalid schemacheck config"):
            load_settings(config_file)

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("- one\n- two\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_settings(config_file)
