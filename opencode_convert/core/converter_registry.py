"""Category name to converter class lookup used by the orchestrator."""

import logging
from typing import Any

from .protocols import CategoryConverter

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """Maps category names ('agents', 'skills', ...) to converter classes."""

    def __init__(self):
        self._converters: dict[str, type[CategoryConverter]] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    @staticmethod
    def _key(category: str) -> str:
        key = category.strip().lower()
        if not key:
            raise ValueError("Category cannot be empty")
        return key

    def register_converter(
        self, category: str, converter_class: type[CategoryConverter]
    ) -> None:
        """
        Register converter_class for category, replacing any earlier one.

        Raises:
            ValueError: If category is blank
        """
        key = self._key(category)
        if key in self._converters:
            self._logger.warning(f"Replacing converter registered for '{key}'")

        self._converters[key] = converter_class
        self._logger.debug(f"Registered {converter_class.__name__} for '{key}'")

    def is_category_available(self, category: str) -> bool:
        return bool(category.strip()) and self._key(category) in self._converters

    def create_converter(self, category: str, **kwargs: Any) -> CategoryConverter:
        """
        Instantiate the converter for category with the given keyword arguments.

        Raises:
            ValueError: If no converter is registered for category
        """
        key = self._key(category)
        if key not in self._converters:
            known = ", ".join(sorted(self._converters)) or "none"
            raise ValueError(f"Unknown category '{key}'. Registered: {known}")

        return self._converters[key](**kwargs)


_global_registry = ConverterRegistry()


def get_global_registry() -> ConverterRegistry:
    return _global_registry


def register_builtin_converters() -> None:
    """Register the agent, command, skill and rule converters once."""
    # Import here to avoid circular imports
    from opencode_convert.plugins.opencode.converters import (
        AgentConverter,
        CommandConverter,
        RuleConverter,
        SkillConverter,
    )

    registry = get_global_registry()
    for converter_class in (AgentConverter, CommandConverter, SkillConverter, RuleConverter):
        if not registry.is_category_available(converter_class.category):
            registry.register_converter(converter_class.category, converter_class)
