# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for YAML loader utilities."""

from pathlib import Path

import pytest

from curriculum_parser.core.config.yaml_loader import (
    YAMLLoadError,
    find_yaml_file,
    load_yaml,
)


class TestLoadYaml:
    """Tests for load_yaml function."""

    def test_load_catalog_tree(self, tmp_path: Path) -> None:
        """Test loading a nested learning objective tree."""
        yaml_file = tmp_path / "data.yml"
        yaml_file.write_text("html:\n  - semantics\njs:\n  data-types:\n    strings:\n")

        result = load_yaml(yaml_file)

        assert result == {"html": ["semantics"], "js": {"data-types": {"strings": None}}}

    def test_load_empty_yaml_file_returns_empty_dict(self, tmp_path: Path) -> None:
        """Test that empty YAML files return empty dict."""
        yaml_file = tmp_path / "empty.yml"
        yaml_file.write_text("# only a comment\n")

        assert load_yaml(yaml_file) == {}

    def test_load_list_root(self, tmp_path: Path) -> None:
        """Test that a list root is returned as a list."""
        yaml_file = tmp_path / "data.yml"
        yaml_file.write_text("- html\n- css:\n    - selectors\n")

        assert load_yaml(yaml_file) == ["html", {"css": ["selectors"]}]

    def test_load_yaml_with_scalar_root_raises_error(self, tmp_path: Path) -> None:
        """Test that YAML files with a scalar root raise error."""
        yaml_file = tmp_path / "scalar.yml"
        yaml_file.write_text("42\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(yaml_file)

        assert "YAML root must be a mapping or a list, got int" in str(exc_info.value)
        assert exc_info.value.path == yaml_file

    def test_load_nonexistent_file_raises_error(self, tmp_path: Path) -> None:
        """Test that loading non-existent file raises error."""
        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(tmp_path / "missing.yml")

        assert exc_info.value.reason == "File does not exist"

    def test_load_directory_instead_of_file_raises_error(self, tmp_path: Path) -> None:
        """Test that loading a directory raises error."""
        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(tmp_path)

        assert "Path is not a file" in str(exc_info.value)

    def test_load_invalid_yaml_syntax_raises_error(self, tmp_path: Path) -> None:
        """Test that invalid YAML syntax raises error."""
        yaml_file = tmp_path / "invalid.yml"
        yaml_file.write_text("html: [semantics\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            load_yaml(yaml_file)

        assert "Invalid YAML syntax" in str(exc_info.value)


class TestFindYamlFile:
    """Tests for find_yaml_file function."""

    def test_prefers_yml_over_yaml(self, tmp_path: Path) -> None:
        """Test that data.yml wins when both extensions exist."""
        (tmp_path / "data.yml").write_text("html:\n")
        (tmp_path / "data.yaml").write_text("css:\n")

        assert find_yaml_file(tmp_path, "data") == tmp_path / "data.yml"

    def test_finds_yaml_extension(self, tmp_path: Path) -> None:
        """Test that data.yaml is found when data.yml is absent."""
        (tmp_path / "data.yaml").write_text("css:\n")

        assert find_yaml_file(tmp_path, "data") == tmp_path / "data.yaml"

    def test_other_files_are_not_read(self, tmp_path: Path) -> None:
        """Test that unrelated and invalid YAML files do not matter."""
        (tmp_path / "data.yml").write_text("css:\n")
        (tmp_path / "intl.yml").write_text("- es\n")
        (tmp_path / "broken.yml").write_text("css: [\n")

        assert load_yaml(find_yaml_file(tmp_path, "data")) == {"css": None}

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        """Test that a directory without the file raises error."""
        (tmp_path / "intl.yml").write_text("- es\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            find_yaml_file(tmp_path, "data")

        assert exc_info.value.reason == "No data.yml or data.yaml in directory"
        assert exc_info.value.path == tmp_path

    def test_load_nonexistent_directory_raises_error(self, tmp_path: Path) -> None:
        """Test that non-existent directory raises error."""
        with pytest.raises(YAMLLoadError) as exc_info:
            find_yaml_file(tmp_path / "nonexistent", "data")

        assert "Directory does not exist" in str(exc_info.value)

    def test_load_file_instead_of_directory_raises_error(self, tmp_path: Path) -> None:
        """Test that passing a file raises error."""
        yaml_file = tmp_path / "data.yml"
        yaml_file.write_text("html:\n")

        with pytest.raises(YAMLLoadError) as exc_info:
            find_yaml_file(yaml_file, "data")

        assert "Path is not a directory" in str(exc_info.value)
