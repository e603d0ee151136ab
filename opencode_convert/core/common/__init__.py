"""Common base classes for core functionality."""

from .base_converter import BaseCategoryConverter, BaseDocumentConverter
from .base_parser import BaseDocumentParser

__all__ = ["BaseDocumentParser", "BaseCategoryConverter", "BaseDocumentConverter"]
