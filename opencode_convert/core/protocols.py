from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from opencode_convert.models.document import Document


class DocumentParser(Protocol):
    """Defines the contract for parsing a single source document."""

    def get_supported_extensions(self) -> list[str]:
        """
        Returns the list of file extensions supported
        (e.g., [".md"]).
        """

        ...

    def can_parse(self, file_path: Path) -> bool:
        """
        Checks whether this parser can handle the given file.

        Args:
            file_path: Path to the file to check

        Returns:
            True if the parser can handle this path, False otherwise
        """
        ...

    def parse(self, file_path: Path) -> "Document":
        """Parses a single file into a header mapping and a body."""
        ...


class CategoryConverter(Protocol):
    """Defines the contract for converting one category of source documents."""

    category: str

    def convert(self, source_path: Path, output_path: Path) -> int:
        """
        Convert everything under source_path into output_path.

        Args:
            source_path: Source directory for this category
            output_path: Destination directory owned by this converter

        Returns:
            Number of documents or bundles converted
        """
        ...
