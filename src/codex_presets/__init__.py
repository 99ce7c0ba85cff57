"""Model presets for Codex front ends.

Quick usage:
    from codex_presets import load_presets

    for preset in load_presets():
        print(preset.id, preset.model, preset.effort_label)
"""

from .config import (
    CODEX_HOME_ENV,
    MODELS_FILE_ENV,
    MODELS_FILE_NAME,
    CodexHomeError,
    PresetError,
    describe_presets_source,
    find_codex_home,
    user_presets_path,
)
from .effort import ReasoningEffort, parse_effort
from .loader import (
    UserPresetEntry,
    load_model_presets,
    load_presets,
    parse_user_presets,
    read_presets_file,
)
from .presets import (
    BUILTIN_PRESETS,
    FLAGSHIP_MODEL,
    BuiltinPreset,
    ModelPreset,
    builtin_model_presets,
    builtin_model_presets_owned,
    find_preset,
)

__version__ = "0.1.0"

__all__ = [
    # Records
    "BuiltinPreset",
    "ModelPreset",
    "ReasoningEffort",
    "UserPresetEntry",
    # Built-in catalog
    "BUILTIN_PRESETS",
    "FLAGSHIP_MODEL",
    "builtin_model_presets",
    "builtin_model_presets_owned",
    "find_preset",
    # Loading
    "load_presets",
    "load_model_presets",
    "parse_user_presets",
    "read_presets_file",
    "parse_effort",
    # Configuration
    "CODEX_HOME_ENV",
    "MODELS_FILE_ENV",
    "MODELS_FILE_NAME",
    "find_codex_home",
    "user_presets_path",
    "describe_presets_source",
    # Exceptions
    "PresetError",
    "CodexHomeError",
]
