"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from cfgdiff.config import load_config


def test_load_config_defaults(tmp_path, monkeypatch):
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    monkeypatch.chdir(tmp_path)
    settings = load_config()
    assert settings.diff_disabled is False
    assert settings.diff_filesize_threshold == 10_000_000
    assert settings.diff_output_threshold == 1_000_000
    assert settings.context_lines == 3
    assert settings.encoding == "utf-8"


def test_load_config_reads_config_yaml(tmp_path, monkeypatch):
    """Values in config.yaml replace defaults."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("diff_output_threshold: 500\ncontext_lines: 1\n")
    settings = load_config()
    assert settings.diff_output_threshold == 500
    assert settings.context_lines == 1


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """CFGDIFF_DIFF_FILESIZE_THRESHOLD takes precedence over config.yaml."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("diff_filesize_threshold: 100\n")
    monkeypatch.setenv("CFGDIFF_DIFF_FILESIZE_THRESHOLD", "200")
    settings = load_config()
    assert settings.diff_filesize_threshold == 200


def test_load_config_env_bool(tmp_path, monkeypatch):
    """CFGDIFF_DIFF_DISABLED is coerced to bool."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CFGDIFF_DIFF_DISABLED", "true")
    assert load_config().diff_disabled is True


def test_load_config_cli_overrides_env(tmp_path, monkeypatch):
    """A non-None override beats the env var; None overrides are ignored."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CFGDIFF_CONTEXT_LINES", "5")
    assert load_config(overrides={"context_lines": 0}).context_lines == 0
    assert load_config(overrides={"context_lines": None}).context_lines == 5


def test_load_config_invalid_yaml(tmp_path, monkeypatch):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_negative_threshold(tmp_path, monkeypatch):
    """Thresholds must be non-negative."""
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValidationError):
        load_config(overrides={"diff_output_threshold": -1})


@pytest.mark.parametrize("field", ["encoding", "output_encoding"])
def test_load_config_rejects_unknown_codec(tmp_path, monkeypatch, field):
    """Encodings are checked against the codec registry at load time."""
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValidationError, match="unknown encoding"):
        load_config(overrides={field: "no-such-codec"})


def test_load_config_accepts_codec_alias(tmp_path, monkeypatch):
    """Any name the codec registry knows is accepted as given."""
    monkeypatch.chdir(tmp_path)
    assert load_config(overrides={"output_encoding": "latin1"}).output_encoding == "latin1"
