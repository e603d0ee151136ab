"""
Exception classes for the OpenCode conversion.

Malformed header lines and registry entries are skipped rather than raised;
these exceptions cover the conditions that stop a run.
"""


class OpenCodeConvertError(Exception):
    """Base exception for all conversion errors."""

    pass


class ProjectRootError(OpenCodeConvertError):
    """Raised when the project-root marker file is missing."""

    def __init__(self, marker_file: str):
        self.marker_file = marker_file
        super().__init__(f"{marker_file} not found at repo root. Refusing to run.")


class ConversionError(OpenCodeConvertError):
    """Raised when a category converter fails."""

    def __init__(self, category: str, cause: Exception):
        self.category = category
        self.cause = cause
        super().__init__(f"Failed to convert {category}: {cause}")
