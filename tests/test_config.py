"""Tests for settings loading, validation and process-wide settings."""

import logging

import pytest

from assertkit.config import (
    CONFIG_ENV_VAR,
    Palette,
    Settings,
    SettingsParser,
    SettingsValidator,
    configure,
    get_settings,
    load_settings,
    load_settings_yaml,
    reset_settings,
)

FULL_YAML = """
version: 1
diff:
  color: true
  context_lines: 3
  indent: 4
palette:
  added: green
  removed: "#ff0000"
  context: grey50
trace:
  max_frames: 2
"""


# --- load_settings_yaml ---


def test_full_settings():
    settings, result = load_settings_yaml(FULL_YAML)
    assert result.is_valid, str(result)
    assert settings == Settings(
        color=True,
        context_lines=3,
        indent=4,
        palette=Palette(added="green", removed="#ff0000", context="grey50"),
        max_trace_frames=2,
    )


def test_minimal_settings_use_defaults():
    settings, result = load_settings_yaml("version: 1\n")
    assert result.is_valid
    assert settings == Settings()


def test_partial_sections_keep_other_defaults():
    settings, result = load_settings_yaml("version: 1\npalette:\n  added: cyan\n")
    assert result.is_valid
    assert settings.palette == Palette(added="cyan")
    assert settings.context_lines == 1


def test_empty_document_is_all_defaults():
    settings, result = load_settings_yaml("")
    assert result.is_valid
    assert settings == Settings()


def test_invalid_yaml_syntax():
    settings, result = load_settings_yaml("version: [1\n")
    assert settings is None
    assert not result.is_valid
    assert "Invalid YAML syntax" in str(result)


def test_non_mapping_document():
    settings, result = load_settings_yaml("- 1\n- 2\n")
    assert settings is None
    assert "YAML object" in str(result)


# --- validation ---


@pytest.mark.parametrize(
    "yaml_text, error_path",
    [
        ("diff:\n  color: true\n", "version"),
        ("version: 2\n", "version"),
        ("version: '1'\n", "version"),
        ("version: 1\ncolors: true\n", "colors"),
        ("version: 1\ndiff:\n  color: 'yes'\n", "diff.color"),
        ("version: 1\ndiff:\n  context_lines: -1\n", "diff.context_lines"),
        ("version: 1\ndiff:\n  indent: 1.5\n", "diff.indent"),
        ("version: 1\ndiff:\n  width: 80\n", "diff.width"),
        ("version: 1\ndiff: true\n", "diff"),
        ("version: 1\npalette:\n  added: not-a-color\n", "palette.added"),
        ("version: 1\npalette:\n  removed: 12\n", "palette.removed"),
        ("version: 1\ntrace:\n  max_frames: 0\n", "trace.max_frames"),
        ("version: 1\ntrace:\n  max_frames: true\n", "trace.max_frames"),
    ],
)
def test_validation_errors(yaml_text, error_path):
    settings, result = load_settings_yaml(yaml_text)
    assert settings is None
    assert error_path in [e.path for e in result.errors]


def test_validation_error_formatting():
    _, result = load_settings_yaml("version: 1\npalette:\n  added: not-a-color\n")
    text = str(result)
    assert "❌ palette.added: Unknown color" in text
    assert "Got: 'not-a-color'" in text
    assert "💡" in text


def test_validation_collects_every_error():
    _, result = load_settings_yaml(
        "version: 1\ndiff:\n  color: 1\n  indent: -2\ntrace:\n  max_frames: 0\n"
    )
    assert len(result.errors) == 3


def test_validator_and_parser_directly():
    data = {"version": 1, "diff": {"indent": 8}}
    assert SettingsValidator(data).validate().is_valid
    assert SettingsParser(data).parse().indent == 8


# --- load_settings ---


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "assertkit.yaml"
    path.write_text(FULL_YAML)
    settings, result = load_settings(path)
    assert result.is_valid
    assert settings.color is True


def test_load_settings_missing_file(tmp_path):
    settings, result = load_settings(tmp_path / "missing.yaml")
    assert settings is None
    assert "File not found" in str(result)


# --- process-wide settings ---


def test_get_settings_defaults():
    assert get_settings() == Settings()


def test_configure_installs_settings():
    configure(Settings(indent=8))
    assert get_settings().indent == 8
    reset_settings()
    assert get_settings() == Settings()


def test_get_settings_loads_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "assertkit.yaml"
    path.write_text("version: 1\ntrace:\n  max_frames: 3\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    reset_settings()

    assert get_settings().max_trace_frames == 3


def test_get_settings_invalid_environment_file_warns(tmp_path, monkeypatch, caplog):
    path = tmp_path / "assertkit.yaml"
    path.write_text("version: 9\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    reset_settings()

    with caplog.at_level(logging.WARNING, logger="assertkit.config.loader"):
        settings = get_settings()

    assert settings == Settings()
    assert any("Ignoring invalid settings file" in r.getMessage() for r in caplog.records)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.color = True


def test_empty_keys_keep_defaults():
    settings, result = load_settings_yaml("version: 1\ndiff:\n  indent:\npalette:\n  added:\n")
    assert result.is_valid
    assert settings == Settings()
