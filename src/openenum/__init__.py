"""
openenum - open enumeration types from JSON Schema enum definitions.

An open enumeration preseeds named constants for the declared literals yet
accepts and canonicalizes unseen values at runtime instead of rejecting
them, so consumers keep working while a schema grows new values.
"""

from __future__ import annotations

from ._version import get_version
from .annotate import Annotator, NoopAnnotator, PydanticAnnotator, annotate_pydantic
from .core.errors import (
    ConfigError,
    GenerationError,
    InvalidBackingTypeError,
    OpenEnumError,
    SchemaError,
    UnresolvableInterfaceError,
)
from .core.ir import EnumDefinition, EnumLiteral
from .core.types import TypeCatalog, TypeNamespace, TypeResolver
from .runtime import OpenEnum, OpenEnumMeta, declare
from .synth import EnumTypeSynthesizer, SynthesisState, synthesize

__version__ = get_version()

__all__ = [
    "__version__",
    "Annotator",
    "ConfigError",
    "EnumDefinition",
    "EnumLiteral",
    "EnumTypeSynthesizer",
    "GenerationError",
    "InvalidBackingTypeError",
    "NoopAnnotator",
    "OpenEnum",
    "OpenEnumError",
    "OpenEnumMeta",
    "PydanticAnnotator",
    "SchemaError",
    "SynthesisState",
    "TypeCatalog",
    "TypeNamespace",
    "TypeResolver",
    "UnresolvableInterfaceError",
    "annotate_pydantic",
    "declare",
    "synthesize",
]
