"""Unit tests for settings loading."""

import pytest
from omegaconf.errors import ReadonlyConfigError

from skillbench.utils.settings import get_settings, load_default_settings, load_settings


@pytest.mark.unit
def test_default_settings():
    """Test values shipped with the package."""
    settings = load_default_settings()

    assert settings.text.hide_placeholder == "X"
    assert settings.text.hide_separators == " .@"
    assert settings.word_counter.strip_chars == '.,;:!?"()-'
    assert settings.word_counter.exclude_bracketed is True
    assert settings.tree.path_separator == "->"
    assert settings.tree.empty_token == "empty"


@pytest.mark.unit
def test_override_file_merges(tmp_path):
    """Test that an override file only needs the keys it changes."""
    override = tmp_path / "settings.yaml"
    override.write_text("tree:\n  path_separator: /\n")

    settings = load_settings(override)

    assert settings.tree.path_separator == "/"
    assert settings.tree.empty_token == "empty"


@pytest.mark.unit
def test_override_file_missing(tmp_path):
    """Test error handling for a missing override file."""
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yaml")


@pytest.mark.unit
def test_settings_are_read_only():
    """Test that loaded settings cannot be modified."""
    settings = load_settings()
    with pytest.raises(ReadonlyConfigError):
        settings.text.hide_placeholder = "*"


@pytest.mark.unit
def test_environment_override(tmp_path, monkeypatch, clean_settings):
    """Test SKILLBENCH_SETTINGS and the settings cache."""
    override = tmp_path / "settings.yaml"
    override.write_text("text:\n  hide_placeholder: '#'\n")
    monkeypatch.setenv("SKILLBENCH_SETTINGS", str(override))

    assert get_settings().text.hide_placeholder == "#"
    assert get_settings() is get_settings()
