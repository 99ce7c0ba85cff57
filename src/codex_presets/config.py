"""Environment configuration and override file location."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

# Exact path to a user presets file, takes precedence over CODEX_HOME
MODELS_FILE_ENV = "CODEX_MODELS_FILE"
# Tool home directory, defaults to ~/.codex
CODEX_HOME_ENV = "CODEX_HOME"
MODELS_FILE_NAME = "models.json"

PresetsSource = Literal["env", "home"]


class PresetError(Exception):
    """Base exception for preset configuration errors."""


class CodexHomeError(PresetError):
    """Raised when the tool home directory cannot be determined."""


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def find_codex_home(env: Mapping[str, str] | None = None) -> Path:
    """Locate the tool home directory.

    Uses $CODEX_HOME when set, which must point at an existing directory.
    Otherwise falls back to ~/.codex, which does not need to exist yet.

    Args:
        env: Environment to read. If None, uses the process environment.

    Returns:
        Absolute path of the home directory

    Raises:
        CodexHomeError: If $CODEX_HOME is not a directory or the user
            home directory cannot be determined
    """
    value = _environ(env).get(CODEX_HOME_ENV, "")
    if value.strip():
        try:
            home = Path(value).expanduser()
        except RuntimeError as e:
            raise CodexHomeError(f"Could not expand {CODEX_HOME_ENV}: {e}") from e
        if not home.is_dir():
            raise CodexHomeError(f"{CODEX_HOME_ENV} is not a directory: {value}")
        return home.resolve()

    try:
        return Path.home() / ".codex"
    except RuntimeError as e:
        raise CodexHomeError(f"Could not determine home directory: {e}") from e


def _resolve_presets_path(
    env: Mapping[str, str] | None,
) -> tuple[Path, PresetsSource] | None:
    environ = _environ(env)
    override = environ.get(MODELS_FILE_ENV, "")
    if override.strip():
        # Used verbatim, whitespace included
        return Path(override), "env"

    try:
        home = find_codex_home(environ)
    except CodexHomeError:
        return None
    return home / MODELS_FILE_NAME, "home"


def user_presets_path(env: Mapping[str, str] | None = None) -> Path | None:
    """Determine the JSON file path for user-defined model presets.

    Resolution order:
    - $CODEX_MODELS_FILE when set and not blank
    - $CODEX_HOME/models.json (defaults to ~/.codex/models.json)

    No filesystem access beyond locating the home directory.

    Returns:
        Path to consult, or None if no location is available
    """
    resolved = _resolve_presets_path(env)
    return resolved[0] if resolved else None


def describe_presets_source(
    env: Mapping[str, str] | None = None,
) -> tuple[Path | None, PresetsSource | None]:
    """Report the presets path together with the rule that produced it.

    Returns:
        (path, source) where source is "env" or "home", or (None, None)
    """
    resolved = _resolve_presets_path(env)
    if resolved is None:
        return None, None
    return resolved
