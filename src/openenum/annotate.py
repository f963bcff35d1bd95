"""
Serialization metadata for generated open enumerations.

An annotator is told which method of a generated type is its canonical
deserializer (the factory) and which is its canonical serializer (string
rendering). Annotations are purely additive: they never change how the type
interns or renders values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class Annotator(ABC):
    """Hook invoked on the factory and rendering methods of a generated type."""

    @abstractmethod
    def enum_creator_method(self, cls: type, method: Callable[[Any], Any]) -> None:
        """Mark ``method`` as the deserializer of ``cls``."""

    @abstractmethod
    def enum_value_method(self, cls: type, method: Callable[[Any], str]) -> None:
        """Mark ``method`` as the serializer of ``cls``."""

    def annotate(self, cls: Any) -> None:
        """Annotate an already built open enumeration."""
        self.enum_creator_method(cls, cls.from_string)
        self.enum_value_method(cls, cls.__str__)


class NoopAnnotator(Annotator):
    """Annotator that attaches nothing."""

    def enum_creator_method(self, cls: type, method: Callable[[Any], Any]) -> None:
        pass

    def enum_value_method(self, cls: type, method: Callable[[Any], str]) -> None:
        pass


class PydanticAnnotator(Annotator):
    """
    Makes generated types usable as pydantic v2 field types.

    Input is validated against the backing type and then canonicalized
    through the creator method; instances serialize through the value
    method in both python and JSON mode.
    """

    def enum_creator_method(self, cls: type, method: Callable[[Any], Any]) -> None:
        setattr(cls, "__openenum_creator__", staticmethod(method))

    def enum_value_method(self, cls: type, method: Callable[[Any], str]) -> None:
        setattr(cls, "__openenum_serializer__", staticmethod(method))
        setattr(cls, "__get_pydantic_core_schema__", classmethod(_open_enum_core_schema))


def annotate_pydantic(cls: Any) -> Any:
    """Attach pydantic hooks to an open enumeration and return it."""
    PydanticAnnotator().annotate(cls)
    return cls


def _open_enum_core_schema(
    cls: Any, source_type: Any, handler: GetCoreSchemaHandler
) -> core_schema.CoreSchema:
    creator = cls.__openenum_creator__
    serializer = cls.__openenum_serializer__
    from_backing = core_schema.no_info_after_validator_function(
        creator, handler.generate_schema(cls.__backing__)
    )
    return core_schema.json_or_python_schema(
        json_schema=from_backing,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_backing]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(serializer),
    )
