"""Model preset records and the built-in preset catalog.

Keep this UI-agnostic so the same catalog serves the interactive UI and
the automation server.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from .effort import ReasoningEffort

# Model slug shared by every flagship preset
FLAGSHIP_MODEL = "gpt-5"


@dataclass(frozen=True, slots=True)
class BuiltinPreset:
    """A preset compiled into the package.

    Attributes:
        id: Stable identifier for the preset
        label: Display label shown in UIs
        description: Short description shown next to the label
        model: Model slug (e.g., "gpt-5")
        effort: Reasoning effort to apply, None for the model default
    """

    id: str
    label: str
    description: str
    model: str
    effort: ReasoningEffort | None = None

    def to_owned(self) -> "ModelPreset":
        """Copy this preset into an owned ModelPreset."""
        return ModelPreset.from_builtin(self)


class ModelPreset(BaseModel):
    """A preset produced at runtime, from the built-ins or a user file."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str = ""
    model: str
    effort: ReasoningEffort | None = None

    @classmethod
    def from_builtin(cls, preset: BuiltinPreset) -> "ModelPreset":
        """Create an owned copy of a built-in preset."""
        return cls(
            id=preset.id,
            label=preset.label,
            description=preset.description,
            model=preset.model,
            effort=preset.effort,
        )

    @property
    def effort_label(self) -> str:
        """Effort token, or "default" when the model default applies."""
        if self.effort is None:
            return "default"
        return self.effort.value

    @property
    def display_name(self) -> str:
        """Label with the description appended when there is one."""
        if self.description:
            return f"{self.label} ({self.description})"
        return self.label


# Variant presets first, then flagship presets, each from low to high effort.
# UIs rely on this ordering.
BUILTIN_PRESETS: tuple[BuiltinPreset, ...] = (
    BuiltinPreset(
        id="variant-low",
        label="variant low",
        description="",
        model="variant-low",
    ),
    BuiltinPreset(
        id="variant-medium",
        label="variant medium",
        description="",
        model="variant-medium",
    ),
    BuiltinPreset(
        id="variant-high",
        label="variant high",
        description="",
        model="variant-high",
    ),
    BuiltinPreset(
        id="flagship-minimal",
        label="flagship minimal",
        description=(
            "fastest responses with limited reasoning; "
            "ideal for coding, instructions, or lightweight tasks"
        ),
        model=FLAGSHIP_MODEL,
        effort=ReasoningEffort.MINIMAL,
    ),
    BuiltinPreset(
        id="flagship-low",
        label="flagship low",
        description=(
            "balances speed with some reasoning; "
            "useful for straightforward queries and short explanations"
        ),
        model=FLAGSHIP_MODEL,
        effort=ReasoningEffort.LOW,
    ),
    BuiltinPreset(
        id="flagship-medium",
        label="flagship medium",
        description=(
            "default setting; provides a solid balance of reasoning depth "
            "and latency for general-purpose tasks"
        ),
        model=FLAGSHIP_MODEL,
        effort=ReasoningEffort.MEDIUM,
    ),
    BuiltinPreset(
        id="flagship-high",
        label="flagship high",
        description="maximizes reasoning depth for complex or ambiguous problems",
        model=FLAGSHIP_MODEL,
        effort=ReasoningEffort.HIGH,
    ),
)


def builtin_model_presets() -> tuple[BuiltinPreset, ...]:
    """Get the built-in presets in display order."""
    return BUILTIN_PRESETS


def builtin_model_presets_owned() -> list[ModelPreset]:
    """Get fresh owned copies of the built-in presets, in display order."""
    return [preset.to_owned() for preset in BUILTIN_PRESETS]


def find_preset(presets: Iterable[ModelPreset], preset_id: str) -> ModelPreset | None:
    """Find a preset by id.

    User files may repeat ids; the first match wins.

    Args:
        presets: Presets to search, typically from load_presets()
        preset_id: The id to look for

    Returns:
        The matching preset, or None if not found
    """
    for preset in presets:
        if preset.id == preset_id:
            return preset
    return None
