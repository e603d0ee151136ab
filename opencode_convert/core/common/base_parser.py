"""Base implementation for source document parsers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from ..protocols import DocumentParser

if TYPE_CHECKING:
    from opencode_convert.models.document import Document

logger = logging.getLogger(__name__)

REPLACEMENT_CHARACTER = "\ufffd"


class BaseDocumentParser(DocumentParser, ABC):
    """
    Abstract base class for document parsers.

    Source documents are read as UTF-8 with undecodable bytes replaced, so a
    stray byte in one document never stops the conversion.

    Subclasses must implement:
    - get_supported_extensions(): File suffixes this parser accepts
    - _parse_content(): Split the decoded text into a Document
    """

    def __init__(self):
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def get_supported_extensions(self) -> list[str]:
        pass

    @abstractmethod
    def _parse_content(self, content: str, file_path: Path) -> "Document":
        pass

    def can_parse(self, file_path: Path) -> bool:
        """True for regular files whose name ends with a supported extension."""
        return file_path.is_file() and any(
            file_path.name.endswith(ext) for ext in self.get_supported_extensions()
        )

    def validate_file(self, file_path: Path) -> None:
        """
        Raises:
            FileNotFoundError: If file_path is not an existing regular file
            ValueError: If its extension is not supported
        """
        if not file_path.is_file():
            raise FileNotFoundError(f"Not a file: {file_path}")

        if not self.can_parse(file_path):
            raise ValueError(
                f"Unsupported document '{file_path.name}'. "
                f"Supported extensions: {self.get_supported_extensions()}"
            )

    def parse(self, file_path: Path) -> "Document":
        """
        Parse one document.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not supported
            OSError: If the file cannot be read
        """
        self.validate_file(file_path)
        self._logger.debug(f"Parsing file: {file_path}")
        return self._parse_content(self._read_file(file_path), file_path)

    def _read_file(self, file_path: Path) -> str:
        content = file_path.read_text(encoding="utf-8", errors="replace")
        if REPLACEMENT_CHARACTER in content:
            self._logger.debug(f"Replaced undecodable bytes in {file_path}")
        return content
