"""Shared pytest fixtures for preset loading tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    """Point CODEX_HOME at an empty temp directory and clear CODEX_MODELS_FILE.

    Keeps tests independent of the developer's real ~/.codex.
    """
    home = tmp_path / "codex-home"
    home.mkdir()
    monkeypatch.delenv("CODEX_MODELS_FILE", raising=False)
    monkeypatch.setenv("CODEX_HOME", str(home))
    return home


@pytest.fixture
def write_presets(isolated_env: Path):
    """Write a models.json into the isolated home directory.

    Accepts either raw text or a JSON-serializable value.
    """

    def _write(content: object) -> Path:
        path = isolated_env / "models.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
