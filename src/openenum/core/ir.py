"""
Enum definition types for openenum.

An EnumDefinition is the read-only input of type synthesis. It mirrors the
JSON Schema enum node it was loaded from, including the ``python*``
extension keywords.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EnumLiteral(BaseModel):
    """
    A declared literal value and its optional custom constant name.

    Attributes:
        value: The literal, as found in the schema (str, int, float, bool)
        custom_name: Constant name override, used verbatim when not blank
    """

    value: Any
    custom_name: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        """Raw textual form of the literal, as JSON would print a scalar."""
        return literal_text(self.value)


class EnumDefinition(BaseModel):
    """
    Declarative definition of an open enumeration.

    Examples:
        - {"enum": ["open", "closed"]}
        - {"type": "integer", "enum": [1, 2], "pythonEnumNames": ["ONE", "TWO"]}
        - {"enum": ["a"], "pythonType": "myapp.types.Status"}
    """

    values: list[Any] = Field(default_factory=list, alias="enum")
    names: list[str | None] = Field(default_factory=list, alias="pythonEnumNames")
    type: str | list[str] | None = None
    python_type: str | None = Field(default=None, alias="pythonType")
    python_name: str | None = Field(default=None, alias="pythonName")
    interfaces: list[str] = Field(default_factory=list, alias="pythonInterfaces")
    title: str | None = None
    description: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("python_type", "python_name")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        """Treat blank type names as absent."""
        if v is not None and not v.strip():
            return None
        return v

    def literals(self) -> Iterator[EnumLiteral]:
        """
        Yield declared literals in declaration order.

        Null values are skipped; custom names are aligned by index with the
        original value list, so skipping a null does not shift them.
        """
        for index, value in enumerate(self.values):
            if value is None:
                continue
            custom_name = self.names[index] if index < len(self.names) else None
            yield EnumLiteral(value=value, custom_name=custom_name)


def literal_text(value: Any) -> str:
    """
    Render a literal the way JSON prints scalars.

    Booleans become ``true``/``false``; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)
