"""
Type resolution services for openenum.

- TypeResolver maps a definition's JSON Schema ``type`` to a Python backing type
- TypeCatalog finds types that already exist under a fully-qualified name
- TypeNamespace is the enclosing module that generated types are declared in
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator

from .ir import EnumDefinition

logger = logging.getLogger(__name__)

# JSON Schema type keyword to Python backing type
TYPE_MAPPING: dict[str, type] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "null": type(None),
    "object": object,
    "array": object,
    "any": object,
}

# Names that cannot denote an open enumeration: value types without identity
PRIMITIVE_TYPE_NAMES = frozenset(
    {"int", "float", "bool", "complex", "str", "bytes", "bytearray", "None", "NoneType"}
)


def is_primitive(name: str) -> bool:
    """Check whether a type name denotes a builtin value type."""
    if name.startswith("builtins."):
        name = name[len("builtins.") :]
    return name in PRIMITIVE_TYPE_NAMES


class TypeResolver:
    """
    Resolves the backing value type of an enum definition.

    Definitions without a ``type`` are backed by ``str``. Union types such as
    ``["string", "null"]`` resolve through their first non-null member.
    Unknown type names fall back to ``object``.
    """

    def __init__(self, mapping: dict[str, type] | None = None, default: type = str):
        self.mapping = dict(TYPE_MAPPING)
        if mapping:
            self.mapping.update(mapping)
        self.default = default

    def resolve(self, definition: EnumDefinition) -> type:
        """Return the backing type for ``definition``."""
        type_name = definition.type
        if type_name is None:
            return self.default
        if isinstance(type_name, list):
            candidates = [t for t in type_name if t != "null"] or type_name
            if not candidates:
                return self.default
            type_name = candidates[0]
        resolved = self.mapping.get(type_name)
        if resolved is None:
            logger.debug("Unknown schema type %r, backing with object", type_name)
            return object
        return resolved


class TypeNamespace:
    """
    The module generated types are declared in.

    Keeps declared types in declaration order, keyed by fully-qualified name.
    """

    def __init__(self, module: str = "generated"):
        self.module = module
        self._types: dict[str, type] = {}

    def declare(self, cls: type) -> None:
        """Record a newly generated type."""
        self._types[qualified_name(cls)] = cls

    def get(self, fqn: str) -> type | None:
        """Look up a declared type by fully-qualified name."""
        return self._types.get(fqn)

    def names(self) -> list[str]:
        """Simple names of the types declared directly in this module."""
        return [cls.__name__ for cls in self._types.values() if cls.__module__ == self.module]

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, type):
            return any(cls is item for cls in self._types.values())
        return item in self._types


class TypeCatalog:
    """
    Resolves fully-qualified names to types that already exist.

    Lookup order: explicit registrations, types declared in the given
    namespace, then importable modules. Nothing found means ``None``.
    Set ``allow_import=False`` to restrict lookups to the first two.
    """

    def __init__(self, registry: dict[str, type] | None = None, allow_import: bool = True):
        self.registry: dict[str, type] = dict(registry or {})
        self.allow_import = allow_import

    def register(self, fqn: str, cls: type) -> None:
        """Make ``cls`` resolvable under ``fqn``."""
        self.registry[fqn] = cls

    def resolve(self, fqn: str, namespace: TypeNamespace | None = None) -> type | None:
        """Return the type registered, declared or importable under ``fqn``."""
        if fqn in self.registry:
            return self.registry[fqn]
        if namespace is not None:
            declared = namespace.get(fqn)
            if declared is not None:
                return declared
        if self.allow_import:
            return _import_type(fqn)
        return None


def qualified_name(cls: type) -> str:
    """Return ``module.QualName`` for a class."""
    module = cls.__module__
    if not module or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def _import_type(fqn: str) -> type | None:
    """Import ``fqn`` by trying successively shorter module prefixes."""
    parts = fqn.split(".")
    if not all(parts):
        return None
    if len(parts) == 1:
        parts = ["builtins", *parts]
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj = importlib.import_module(module_name)
        except ImportError:
            continue
        try:
            for attr in parts[split:]:
                obj = getattr(obj, attr)
        except AttributeError:
            return None
        if isinstance(obj, type):
            return obj
        return None
    return None
