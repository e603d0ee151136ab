"""Frontmatter renderer for generated OpenCode documents."""

import json
import re
from collections.abc import Mapping
from typing import Any, Final

from .parser import DELIMITER

# Characters that would change the meaning of a bare scalar.
_NEEDS_QUOTING: Final[re.Pattern[str]] = re.compile(r"[:\n\r\t#]")


def to_scalar(value: Any) -> str:
    """
    Render one value for a ``key: value`` line.

    Booleans become ``true``/``false``. Lists and mappings become JSON flow
    literals. Everything else is stringified and trimmed, then quoted as a JSON
    string only when it is empty or contains a character that needs it.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)

    text = "" if value is None else str(value).strip()
    if not text:
        return '""'
    if _NEEDS_QUOTING.search(text):
        return json.dumps(text, ensure_ascii=False)
    return text


def render_frontmatter(header: Mapping[str, Any]) -> str:
    """
    Render a header mapping as a delimited frontmatter block.

    Mapping values are written as an indented block, one level deep; an empty
    mapping is written inline as ``{}``. The block is followed by one blank line.
    """
    lines = [DELIMITER]
    for key, value in header.items():
        if isinstance(value, Mapping):
            if not value:
                lines.append(f"{key}: {{}}")
                continue

            lines.append(f"{key}:")
            lines.extend(f"  {sub}: {to_scalar(item)}" for sub, item in value.items())
            continue

        lines.append(f"{key}: {to_scalar(value)}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n\n"


def render_document(header: Mapping[str, Any], body: str) -> str:
    """Render a full document: the header block followed by the body."""
    return render_frontmatter(header) + body
