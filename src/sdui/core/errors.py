"""
Error types for SDUI document loading, registration, and node building.
"""

from collections.abc import Mapping
from pathlib import Path


class SduiError(Exception):
    """Base exception for all SDUI errors."""

    def __init__(self, message: str, source: Path | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source file if available."""
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class NodeFieldError(SduiError):
    """
    Raised by a builder when a node field is present but has the wrong type.

    Examples:
    - ``"text": 42`` on a text node
    - ``"children": {}`` on a column
    - ``"shrinkWrap": "yes"`` on a list view

    The interpreter turns this into an inline error node.
    """

    def __init__(self, field: str, expected: str, actual: object):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"field '{field}' must be {expected}, got {json_type_name(actual)}"
        )


class RegistryError(SduiError, ValueError):
    """
    Raised when a builder registration is invalid.

    Examples:
    - Empty type tag
    - Builder that is not callable
    """

    pass


class DocumentLoadError(SduiError):
    """
    Raised when the host cannot load a UI document.

    Examples:
    - File not found
    - Invalid JSON
    - Root value is not an object
    """

    pass


class ManifestError(SduiError):
    """Raised when ``sdui.toml`` cannot be parsed or has invalid values."""

    pass


def json_type_name(value: object) -> str:
    """Name a decoded JSON value by its JSON type, for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__
