"""Base implementation for category converters."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import ConversionConfig
from ..protocols import CategoryConverter, DocumentParser

if TYPE_CHECKING:
    from opencode_convert.models.document import Document


logger = logging.getLogger(__name__)


class BaseCategoryConverter(CategoryConverter, ABC):
    """
    Abstract base class for category converters.

    Handles the missing-source case and logging around the conversion while
    the category-specific work stays abstract.

    Subclasses must implement:
    - _convert(): Convert an existing source directory and return a count
    """

    category: str = ""

    def __init__(self, config: ConversionConfig | None = None):
        """
        Initialize the converter.

        Args:
            config: Conversion settings; defaults are used when omitted
        """
        self._config = config or ConversionConfig()
        self._logger = logger.getChild(self.__class__.__name__)

    def convert(self, source_path: Path, output_path: Path) -> int:
        """
        Convert a category source directory into its output directory.

        A missing source directory is not an error: the category simply
        contributes nothing.

        Args:
            source_path: Source directory for this category
            output_path: Destination directory owned by this converter

        Returns:
            Number of documents or bundles converted
        """
        if not source_path.is_dir():
            self._logger.debug(
                f"No {self.category} source at {source_path}, skipping category"
            )
            return 0

        self._logger.info(f"Converting {self.category}: {source_path} -> {output_path}")

        try:
            count = self._convert(source_path, output_path)
        except Exception as e:
            self._logger.error(f"Conversion of {self.category} failed: {e}")
            raise

        self._logger.info(f"Converted {count} {self.category}")
        return count

    @abstractmethod
    def _convert(self, source_path: Path, output_path: Path) -> int:
        """
        Category-specific conversion of an existing source directory.

        Args:
            source_path: Existing source directory
            output_path: Destination directory

        Returns:
            Number of documents or bundles converted
        """
        pass


class BaseDocumentConverter(BaseCategoryConverter, ABC):
    """
    Base class for converters that rewrite one document per source file.

    Subclasses must implement:
    - get_parser(): Return the parser used for the source documents
    - render_document(): Produce the output text for one parsed document

    Subclasses can optionally override:
    - find_source_files(): Custom file discovery logic
    - document_name(): How the identifier is derived from the file name
    """

    @abstractmethod
    def get_parser(self) -> DocumentParser:
        """Get the parser for the source documents."""
        pass

    @abstractmethod
    def render_document(self, name: str, document: "Document") -> str:
        """
        Render the converted output for one source document.

        Args:
            name: Identifier derived from the source file name
            document: The parsed source document

        Returns:
            Full text of the output document
        """
        pass

    def find_source_files(self, source_path: Path) -> list[Path]:
        """
        Find the documents directly inside source_path, sorted by name.

        Args:
            source_path: Directory to search

        Returns:
            Files the parser can handle
        """
        parser = self.get_parser()
        return sorted(f for f in source_path.iterdir() if parser.can_parse(f))

    def document_name(self, file_path: Path) -> str:
        """Derive the document identifier by stripping the extension."""
        return file_path.stem

    def _convert(self, source_path: Path, output_path: Path) -> int:
        output_path.mkdir(parents=True, exist_ok=True)
        parser = self.get_parser()

        count = 0
        for source_file in self.find_source_files(source_path):
            self._logger.debug(f"Processing file: {source_file}")

            document = parser.parse(source_file)
            name = self.document_name(source_file)
            output_file = output_path / f"{name}{source_file.suffix}"
            output_file.write_text(
                self.render_document(name, document), encoding="utf-8"
            )
            count += 1

        return count
