"""
Field mappings from Claude Code header values to OpenCode equivalents.

Both mappings are total: every input produces an output and nothing raises.
"""

from collections.abc import Iterable
from typing import Any, Final

from opencode_convert.core.config import DEFAULT_FAST_MODEL, DEFAULT_MAIN_MODEL

TARGET_MODEL_PREFIXES: Final[tuple[str, ...]] = ("openai/", "opencode/")
SOURCE_MODEL_PREFIXES: Final[tuple[str, ...]] = ("anthropic/",)
SOURCE_MODEL_MARKER: Final[str] = "claude-"
MAIN_TIER_ALIASES: Final[frozenset[str]] = frozenset({"opus", "sonnet"})
FAST_TIER_ALIASES: Final[frozenset[str]] = frozenset({"haiku"})
QUALIFIER_SEPARATOR: Final[str] = "/"

# Checked in this order; the output keeps it.
HIGH_IMPACT_TOOLS: Final[tuple[str, ...]] = ("write", "edit", "bash")


def map_model(
    model: Any,
    main_model: str = DEFAULT_MAIN_MODEL,
    fast_model: str = DEFAULT_FAST_MODEL,
) -> str:
    """
    Map a Claude Code model value to an OpenCode provider/model identifier.

    - target-ecosystem ids pass through
    - Anthropic ids and ``claude-*`` names become the main default
    - ``opus`` and ``sonnet`` become the main default, ``haiku`` the fast one
    - other qualified ids (``provider/model``) pass through
    - anything else, including a missing value, becomes the main default
    """
    text = "" if model is None else str(model).strip()
    lowered = text.lower()

    if lowered.startswith(TARGET_MODEL_PREFIXES):
        return text
    if lowered.startswith(SOURCE_MODEL_PREFIXES) or SOURCE_MODEL_MARKER in lowered:
        return main_model
    if lowered in MAIN_TIER_ALIASES:
        return main_model
    if lowered in FAST_TIER_ALIASES:
        return fast_model
    if QUALIFIER_SEPARATOR in lowered:
        return text
    return main_model


def declared_tools(value: Any) -> set[str]:
    """
    Normalize a ``tools`` header value into a set of lowercase tool names.

    Only a list (``["Read", "Grep"]``) declares tools. Any other value,
    including a ``Read, Grep`` string, declares none, so every high-impact
    tool ends up disabled.
    """
    if not isinstance(value, list):
        return set()

    return {str(name).strip().lower() for name in value if str(name).strip()}


def map_tools(declared: Iterable[str]) -> dict[str, bool]:
    """
    Disable each high-impact tool the agent did not declare.

    Declared tools are left out of the result so they keep the OpenCode
    default. The result never contains True.
    """
    allowed = {name.strip().lower() for name in declared}
    return {name: False for name in HIGH_IMPACT_TOOLS if name not in allowed}


def as_text(value: Any) -> str:
    """Header value as plain text; a missing value is the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(str(item) for item in value)
    return str(value)
