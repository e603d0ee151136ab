"""Pipeline runner for executing category converters in sequence."""

import logging
from dataclasses import dataclass
from pathlib import Path

from opencode_convert.exceptions import ConversionError

from .protocols import CategoryConverter

logger = logging.getLogger(__name__)


@dataclass
class ConversionStep:
    """One category conversion: which converter, from where, to where."""

    converter: CategoryConverter
    source_path: Path
    output_path: Path

    @property
    def category(self) -> str:
        return self.converter.category


class PipelineRunner:
    """
    Coordinates the execution of category converters in sequence.

    Each step writes to its own output subtree, so the steps have no
    ordering dependency on one another.
    """

    def __init__(self, steps: list[ConversionStep] | None = None):
        """
        Initialize the pipeline runner.

        Args:
            steps: Conversion steps to execute in order
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._steps: list[ConversionStep] = steps or []

    def add_step(
        self, converter: CategoryConverter, source_path: Path, output_path: Path
    ) -> "PipelineRunner":
        """
        Add a conversion step to the pipeline.

        Returns:
            Self for method chaining
        """
        self._steps.append(ConversionStep(converter, source_path, output_path))
        return self

    def get_steps(self) -> list[ConversionStep]:
        """Get a copy of the configured steps."""
        return self._steps.copy()

    def execute(self) -> dict[str, int]:
        """
        Execute every configured step.

        Returns:
            Mapping of category name to converted count, in step order

        Raises:
            ValueError: If no steps are configured
            ConversionError: If a converter fails
        """
        if not self._steps:
            raise ValueError("No conversion steps configured")

        self._logger.info("Starting pipeline execution")

        counts: dict[str, int] = {}
        for i, step in enumerate(self._steps):
            self._logger.debug(
                f"Executing step {i + 1}/{len(self._steps)}: "
                f"{step.converter.__class__.__name__}"
            )

            try:
                counts[step.category] = step.converter.convert(
                    step.source_path, step.output_path
                )
            except Exception as e:
                raise ConversionError(step.category, e) from e

        self._logger.info("Pipeline execution completed successfully")
        return counts
