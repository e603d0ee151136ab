"""
Minimal frontmatter parser.

Only flat ``key: value`` lines are understood, plus a single level of
indented ``subkey: value`` lines under a key with an empty value. Values that
look like JSON arrays or objects are decoded when they are valid JSON. Lines
that do not fit are skipped; parsing never fails on document content.
"""

import json
from pathlib import Path
from typing import Final

from opencode_convert.core.common.base_parser import BaseDocumentParser
from opencode_convert.models.document import Document, HeaderValue

DELIMITER: Final[str] = "---"
_BOM: Final[str] = "\ufeff"
_NESTED_BOOLEANS: Final[dict[str, bool]] = {"true": True, "false": False}


def _is_delimiter(line: str) -> bool:
    return line in (DELIMITER, DELIMITER + "\r")


def split_frontmatter(text: str) -> tuple[list[str] | None, str]:
    """
    Split raw text into header lines and the remaining body.

    The header opens on the first line and closes at the next ``---`` line
    after at least one header line; delimiter lines may end in ``\\r`` but
    carry nothing else.

    Returns:
        (header_lines, body). header_lines is None when the text does not
        open with a delimited header block; the body is then the whole text.
    """
    content = text.removeprefix(_BOM)
    lines = content.split("\n")

    if not _is_delimiter(lines[0]):
        return None, content

    for end in range(2, len(lines)):
        if _is_delimiter(lines[end]):
            header_lines = [line.rstrip("\r") for line in lines[1:end]]
            return header_lines, "\n".join(lines[end + 1 :])

    return None, content


def decode_value(value: str) -> HeaderValue:
    """Decode one header value: unquote, then try JSON for arrays and objects."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = _unquote(value)

    if (value.startswith("[") and value.endswith("]")) or (
        value.startswith("{") and value.endswith("}")
    ):
        try:
            return json.loads(value)
        except ValueError:
            pass

    return value


def _unquote(value: str) -> str:
    if value[0] == '"':
        try:
            decoded = json.loads(value)
        except ValueError:
            decoded = None
        if isinstance(decoded, str):
            return decoded
    return value[1:-1]


def parse_header_lines(lines: list[str]) -> dict[str, HeaderValue]:
    """
    Decode header lines into an ordered mapping.

    A repeated key keeps its first position and its last value.
    """
    header: dict[str, HeaderValue] = {}
    open_key: str | None = None

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()

        if open_key is not None and raw[:1] in (" ", "\t"):
            nested = header[open_key]
            if not isinstance(nested, dict):
                nested = header[open_key] = {}
            if value in _NESTED_BOOLEANS:
                nested[key] = _NESTED_BOOLEANS[value]
            else:
                nested[key] = decode_value(value)
            continue

        if value:
            header[key] = decode_value(value)
            open_key = None
        else:
            header[key] = ""
            open_key = key

    return header


def parse_frontmatter(text: str) -> Document:
    """Split text into a Document; the body has its leading whitespace trimmed."""
    header_lines, body = split_frontmatter(text)
    header = parse_header_lines(header_lines) if header_lines is not None else None
    return Document(header=header, body=body.lstrip())


class FrontmatterParser(BaseDocumentParser):
    """Parser for Markdown documents carrying a frontmatter header."""

    def get_supported_extensions(self) -> list[str]:
        return [".md"]

    def _parse_content(self, content: str, file_path: Path) -> Document:
        document = parse_frontmatter(content)
        if not document.has_header:
            self._logger.debug(f"No header block in {file_path}")
        return document
