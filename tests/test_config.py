"""Unit tests for home directory and presets path resolution."""

from pathlib import Path

import pytest

from codex_presets.config import (
    CodexHomeError,
    PresetError,
    describe_presets_source,
    find_codex_home,
    user_presets_path,
)


class TestFindCodexHome:
    """Test locating the tool home directory."""

    def test_uses_codex_home_env(self, tmp_path: Path):
        """CODEX_HOME pointing at a directory is used."""
        assert find_codex_home({"CODEX_HOME": str(tmp_path)}) == tmp_path.resolve()

    def test_missing_codex_home_dir_raises(self, tmp_path: Path):
        """CODEX_HOME must name an existing directory."""
        with pytest.raises(CodexHomeError, match="not a directory"):
            find_codex_home({"CODEX_HOME": str(tmp_path / "missing")})

    def test_unknown_user_codex_home_raises(self):
        """CODEX_HOME naming an unknown user's home is reported as CodexHomeError."""
        with pytest.raises(CodexHomeError):
            find_codex_home({"CODEX_HOME": "~nosuchuser_zz"})

    def test_defaults_to_dot_codex(self, monkeypatch, tmp_path: Path):
        """Without CODEX_HOME, falls back to ~/.codex."""
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert find_codex_home({}) == tmp_path / ".codex"

    def test_blank_codex_home_ignored(self, monkeypatch, tmp_path: Path):
        """Whitespace-only CODEX_HOME counts as unset."""
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert find_codex_home({"CODEX_HOME": "  "}) == tmp_path / ".codex"

    def test_no_user_home_raises(self, monkeypatch):
        """Unresolvable user home is reported as CodexHomeError."""

        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))
        with pytest.raises(CodexHomeError):
            find_codex_home({})

    def test_error_hierarchy(self):
        """CodexHomeError is a PresetError."""
        assert issubclass(CodexHomeError, PresetError)


class TestUserPresetsPath:
    """Test the presets path resolution order."""

    def test_env_file_wins(self, tmp_path: Path):
        """CODEX_MODELS_FILE takes precedence over CODEX_HOME."""
        env = {"CODEX_MODELS_FILE": "/etc/presets.json", "CODEX_HOME": str(tmp_path)}
        assert user_presets_path(env) == Path("/etc/presets.json")

    def test_env_file_need_not_exist(self):
        """The override path is returned without checking the filesystem."""
        env = {"CODEX_MODELS_FILE": "/nonexistent/models.json"}
        assert user_presets_path(env) == Path("/nonexistent/models.json")

    def test_home_default(self, tmp_path: Path):
        """Falls back to models.json in the home directory."""
        assert user_presets_path({"CODEX_HOME": str(tmp_path)}) == (
            tmp_path.resolve() / "models.json"
        )

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_env_file_ignored(self, tmp_path: Path, value: str):
        """Blank CODEX_MODELS_FILE behaves as if unset."""
        env = {"CODEX_MODELS_FILE": value, "CODEX_HOME": str(tmp_path)}
        assert user_presets_path(env) == tmp_path.resolve() / "models.json"

    def test_no_location(self, tmp_path: Path):
        """No path when the home directory cannot be found."""
        assert user_presets_path({"CODEX_HOME": str(tmp_path / "missing")}) is None

    def test_reads_process_environment(self, isolated_env: Path):
        """Without an explicit env, the process environment is used."""
        assert user_presets_path() == isolated_env.resolve() / "models.json"


class TestDescribePresetsSource:
    """Test reporting where the presets path came from."""

    def test_env_source(self):
        """CODEX_MODELS_FILE reports source 'env'."""
        path, source = describe_presets_source({"CODEX_MODELS_FILE": "p.json"})
        assert path == Path("p.json")
        assert source == "env"

    def test_home_source(self, tmp_path: Path):
        """Home directory default reports source 'home'."""
        path, source = describe_presets_source({"CODEX_HOME": str(tmp_path)})
        assert path == tmp_path.resolve() / "models.json"
        assert source == "home"

    def test_no_source(self, tmp_path: Path):
        """Nothing resolvable reports (None, None)."""
        assert describe_presets_source({"CODEX_HOME": str(tmp_path / "x")}) == (None, None)
