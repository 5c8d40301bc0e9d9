"""Root test configuration: settings and file-writing fixtures"""

import pytest

from cfgdiff.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CFGDIFF_* variables from the developer's shell out of tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"CFGDIFF_{name.upper()}", raising=False)


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="write")
def write_fixture(tmp_path):
    """Write str or bytes to tmp_path/name and return the path."""
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write
