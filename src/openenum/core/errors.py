"""
Error types for openenum schema loading, type synthesis and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


class OpenEnumError(Exception):
    """Base exception for all openenum errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class GenerationError(OpenEnumError):
    """
    Raised when an open enumeration type cannot be synthesized.

    Examples:
    - Type name that cannot be made a legal identifier
    - Literal values that cannot be interned (unhashable)
    - Interface bases that cannot be combined
    """

    pass


class InvalidBackingTypeError(GenerationError):
    """Raised when an explicitly requested type name denotes a primitive type."""

    pass


class UnresolvableInterfaceError(GenerationError):
    """Raised when a requested capability interface cannot be resolved."""

    pass


class SchemaError(OpenEnumError):
    """
    Raised when an input document is not a valid enum definition.

    Examples:
    - Missing or non-list "enum" keyword
    - Malformed JSON
    - Custom names that are not strings
    """

    pass


class ConfigError(OpenEnumError):
    """Raised when openenum configuration cannot be read."""

    pass


class ClassAlreadyExists(Exception):  # noqa: N818
    """
    Signal raised during name resolution when the requested type already exists.

    Not a failure: the synthesizer catches it and hands back ``existing_type``
    instead of declaring a new one.
    """

    def __init__(self, existing_type: type):
        self.existing_type = existing_type
        super().__init__(f"{existing_type.__module__}.{existing_type.__qualname__}")


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        node: Name of the schema node being processed
        file: Optional path of the schema document
        detail: Optional extra value (a literal, an interface name)
    """

    node: str
    file: Path | None = None
    detail: Any = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "status.json#status ('open')"
        """
        location = f"{self.file}#{self.node}" if self.file else self.node
        if self.detail is not None:
            location += f" ({self.detail!r})"
        return location


def make_generation_error(
    message: str,
    node: str | None = None,
    detail: Any = None,
    error_class: type[GenerationError] = GenerationError,
) -> GenerationError:
    """
    Helper to create a GenerationError with optional context.

    Args:
        message: Error description
        node: Optional schema node name
        detail: Optional offending value
        error_class: GenerationError subclass to instantiate

    Returns:
        GenerationError with context if a node name was provided
    """
    if node:
        return error_class(message, ErrorContext(node=node, detail=detail))
    return error_class(message)
