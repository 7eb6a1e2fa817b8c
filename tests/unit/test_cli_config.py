#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli_config.py
"""Unit tests for api2md CLI configuration management.

This module tests configuration file discovery, loading of every supported
format, merging, and priority handling.
"""

import argparse
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from api2md.cli.config import (
    _load_pyproject_api2md_section,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading each configuration file format."""

    def test_load_toml(self, tmp_path):
        path = tmp_path / ".api2md.toml"
        path.write_text('input_folder = "etc"\n\n[html]\nescape_code = true\n', encoding="utf-8")
        assert load_config_file(path) == {"input_folder": "etc", "html": {"escape_code": True}}

    def test_load_yaml(self, tmp_path):
        path = tmp_path / ".api2md.yml"
        path.write_text("markdown:\n  skip_line_before_table: false\n", encoding="utf-8")
        assert load_config_file(path) == {"markdown": {"skip_line_before_table": False}}

    def test_load_json(self, tmp_path):
        path = tmp_path / ".api2md.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
        assert load_config_file(str(path)) == {"log_level": "DEBUG"}

    def test_load_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.api2md.markdown]\nindent_prefix = "    "\n', encoding="utf-8")
        assert load_config_file(path) == {"markdown": {"indent_prefix": "    "}}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert _load_pyproject_api2md_section(path) == {}

    def test_pyproject_section_must_be_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool]\napi2md = "yes"\n', encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="must be a table"):
            _load_pyproject_api2md_section(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[markdown]\n", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported config file format"):
            load_config_file(path)

    @pytest.mark.parametrize("name,content", [("a.json", "{"), ("a.yaml", "key: [unclosed"), ("a.toml", "x = ")])
    def test_malformed_file(self, tmp_path, name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid config file"):
            load_config_file(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="must contain a mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery."""

    def test_finds_file_in_start_dir(self, tmp_path):
        config = tmp_path / ".api2md.toml"
        config.write_text("", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config.resolve()

    def test_finds_file_in_parent(self, tmp_path):
        config = tmp_path / ".api2md.yaml"
        config.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_wins_over_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.api2md]\nlog_level = 'INFO'\n", encoding="utf-8")
        config = tmp_path / ".api2md.json"
        config.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config.resolve()

    def test_pyproject_with_section_is_found(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.api2md]\nlog_level = 'INFO'\n", encoding="utf-8")
        nested = tmp_path / "src"
        nested.mkdir()
        assert find_config_in_parents(nested) == pyproject.resolve()

    def test_unrelated_pyproject_is_skipped(self, tmp_path):
        config = tmp_path / ".api2md.toml"
        config.write_text("", encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.black]\nline-length = 100\n", encoding="utf-8")
        assert find_config_in_parents(project) == config.resolve()

    def test_broken_pyproject_is_skipped(self, tmp_path):
        config = tmp_path / ".api2md.toml"
        config.write_text("", encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.api2md\n", encoding="utf-8")
        assert find_config_in_parents(project) == config.resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        config = tmp_path / ".api2md.toml"
        config.write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert find_config_in_parents() == config.resolve()


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test merging and priority handling."""

    def test_merge_configs_is_deep(self):
        base = {"html": {"escape_code": True, "code_language": "js"}, "log_level": "INFO"}
        override = {"html": {"code_language": "ts"}, "output_folder": "site"}
        assert merge_configs(base, override) == {
            "html": {"escape_code": True, "code_language": "ts"},
            "log_level": "INFO",
            "output_folder": "site",
        }
        assert base["html"]["code_language"] == "js"

    def test_explicit_path_wins(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"source": "explicit"}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"source": "env"}', encoding="utf-8")
        assert load_config_with_priority(str(explicit), str(env)) == {"source": "explicit"}

    def test_environment_path_before_discovery(self, tmp_path):
        env = tmp_path / "env.json"
        env.write_text('{"source": "env"}', encoding="utf-8")
        with patch("api2md.cli.config.find_config_in_parents") as mock_find:
            assert load_config_with_priority(None, str(env)) == {"source": "env"}
            mock_find.assert_not_called()

    def test_discovered_config(self, tmp_path):
        discovered = tmp_path / ".api2md.json"
        discovered.write_text('{"source": "discovered"}', encoding="utf-8")
        with patch("api2md.cli.config.find_config_in_parents", return_value=discovered):
            assert load_config_with_priority() == {"source": "discovered"}

    def test_no_config(self):
        with patch("api2md.cli.config.find_config_in_parents", return_value=None):
            assert load_config_with_priority() == {}

    def test_explicit_path_must_exist(self):
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_with_priority(str(Path("definitely") / "missing.toml"))
