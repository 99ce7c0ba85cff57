"""Load model presets from a user JSON file, falling back to the built-ins.

The user file holds a JSON array. Each entry is either a bare model slug:

    ["Qwen3-coder", "Qwen3-235B", "Qwen3-Max.Preview"]

or an object with optional metadata:

    [{"model": "Qwen3-coder", "label": "Qwen3 coder", "effort": "low"}]

Entries matching neither form are skipped. A file yielding no usable
entries is ignored entirely.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from .config import user_presets_path
from .effort import ReasoningEffort, parse_effort
from .presets import ModelPreset, builtin_model_presets_owned

logger = logging.getLogger(__name__)

PathResolver = Callable[[], Path | None]
PresetsReader = Callable[[Path], str | None]


class UserPresetEntry(BaseModel):
    """Full object form of a user preset entry."""

    model: str
    id: str | None = None
    label: str | None = None
    description: str | None = None
    effort: ReasoningEffort | None = None

    @field_validator("effort", mode="before")
    @classmethod
    def validate_effort(cls, v: object) -> ReasoningEffort | None:
        """Accept only the exact lowercase effort tokens."""
        if v is None:
            return None
        return parse_effort(v)

    def to_preset(self) -> ModelPreset:
        """Fill in defaults: id and label fall back to the model slug."""
        return ModelPreset(
            id=self.id if self.id is not None else self.model,
            label=self.label if self.label is not None else self.model,
            description=self.description or "",
            model=self.model,
            effort=self.effort,
        )


def _parse_entry(value: object) -> ModelPreset | None:
    # Shorthand: just a model slug, everything else inferred
    if isinstance(value, str):
        return ModelPreset(id=value, label=value, model=value)

    try:
        entry = UserPresetEntry.model_validate(value)
    except ValidationError:
        return None
    return entry.to_preset()


def parse_user_presets(text: str) -> list[ModelPreset] | None:
    """Parse the contents of a user presets file.

    Args:
        text: Raw JSON text

    Returns:
        Presets in file order, or None if the text is not a JSON array
        or contains no valid entries
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None
    if not isinstance(data, list):
        return None

    presets = [preset for preset in map(_parse_entry, data) if preset is not None]
    return presets or None


def read_presets_file(path: Path) -> str | None:
    """Read a presets file as UTF-8 text.

    Returns:
        File contents, or None if the file is missing or unreadable
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read presets file %s: %s", path, e)
        return None


def load_model_presets(
    path_resolver: PathResolver = user_presets_path,
    reader: PresetsReader = read_presets_file,
) -> list[ModelPreset]:
    """Load presets from the user file if usable, otherwise the built-ins.

    User presets replace the built-ins entirely; the two are never merged.

    Args:
        path_resolver: Returns the user presets path, or None
        reader: Reads a path, returning None on failure

    Returns:
        Non-empty list of presets, freshly created on every call
    """
    path = path_resolver()
    if path is not None:
        text = reader(path)
        if text is not None:
            presets = parse_user_presets(text)
            if presets is not None:
                logger.debug("Loaded %d presets from %s", len(presets), path)
                return presets
            logger.debug("No usable presets in %s, using built-ins", path)

    return builtin_model_presets_owned()


def load_presets() -> list[ModelPreset]:
    """Load presets using the process environment and filesystem."""
    return load_model_presets()
