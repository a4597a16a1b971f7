"""Tests for file_filter module."""

import pytest

from DevfileRes.file_filter import (
    file_extension,
    get_language_hint,
    has_file_extension,
    is_yaml_path,
    looks_like_devfile_path,
)

REGISTRY = "https://dummyurlpath/devfile/registry/main/stacks/python/3.0.0"


class TestLooksLikeDevfilePath:
    @pytest.mark.parametrize(
        "name", ["devfile.yaml", "devfile.yml", ".devfile.yaml", ".devfile.yml"]
    )
    def test_recognised_names(self, name):
        assert looks_like_devfile_path(f"{REGISTRY}/{name}") is True

    def test_relative_path(self):
        assert looks_like_devfile_path("stacks/python/3.0.0/devfile.yaml") is True

    def test_bare_name(self):
        assert looks_like_devfile_path("devfile.yaml") is True

    def test_other_yaml(self):
        assert looks_like_devfile_path(f"{REGISTRY}/deploy.yaml") is False

    def test_case_sensitive(self):
        assert looks_like_devfile_path("stacks/Devfile.yaml") is False

    def test_devfile_in_directory_name(self):
        assert looks_like_devfile_path("devfile.yaml/README.md") is False

    def test_empty(self):
        assert looks_like_devfile_path("") is False


class TestFileExtension:
    def test_simple(self):
        assert file_extension("dir/devfile.yaml") == ".yaml"

    def test_dot_in_directory_only(self):
        assert file_extension("v1.0/stacks") == ""

    def test_hidden_file(self):
        assert file_extension("dir/.devfile") == ".devfile"

    def test_has_file_extension(self):
        assert has_file_extension("stacks/python/devfile.yaml") is True
        assert has_file_extension("stacks/python") is False
        assert has_file_extension("Dockerfile") is False


class TestIsYamlPath:
    def test_yaml(self):
        assert is_yaml_path("deploy.yaml") is True
        assert is_yaml_path("deploy.YML") is True

    def test_not_yaml(self):
        assert is_yaml_path("README.md") is False


class TestGetLanguageHint:
    def test_yaml(self):
        assert get_language_hint("stacks/devfile.yaml") == "yaml"

    def test_special_filename(self):
        assert get_language_hint("docker/Dockerfile") == "dockerfile"

    def test_unknown(self):
        assert get_language_hint("LICENSE") == ""
