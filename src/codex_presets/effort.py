"""Reasoning effort levels understood by preset files."""

from enum import Enum


class ReasoningEffort(str, Enum):
    """How much reasoning a model applies per request."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def parse_effort(token: object) -> ReasoningEffort:
    """Decode an effort token such as ``"high"``.

    Only the exact lowercase tokens are accepted.

    Raises:
        ValueError: If the token is not a recognized effort level
    """
    if isinstance(token, str):
        for effort in ReasoningEffort:
            if effort.value == token:
                return effort
    raise ValueError(f"Unknown reasoning effort: {token!r}")
