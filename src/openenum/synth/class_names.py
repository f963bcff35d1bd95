"""
Class name allocation.

Decides the name and module a generated open enumeration is declared under,
or reports that the requested type already exists.
"""

from __future__ import annotations

import keyword
import logging
import unicodedata
from dataclasses import dataclass

from openenum.core.errors import (
    ClassAlreadyExists,
    InvalidBackingTypeError,
    make_generation_error,
)
from openenum.core.ir import EnumDefinition
from openenum.core.naming import (
    capitalize,
    make_unique,
    normalize_name,
    replace_illegal_characters,
)
from openenum.core.types import TypeCatalog, TypeNamespace, is_primitive
from openenum.emit import MODULE_NAMES

logger = logging.getLogger(__name__)

# Class names that would not compile, or would shadow the emitted module imports
RESERVED_CLASS_NAMES = frozenset(keyword.kwlist) | MODULE_NAMES


@dataclass(frozen=True)
class TypeSlot:
    """Name and module reserved for a type about to be generated."""

    name: str
    module: str

    @property
    def qualified_name(self) -> str:
        return f"{self.module}.{self.name}" if self.module else self.name


class ClassNameAllocator:
    """
    Allocates unique type names within a TypeNamespace.

    Explicit ``pythonType`` names are taken literally, unless they denote a
    primitive (an error) or an existing type (``ClassAlreadyExists``).
    Other names derive from the schema node name, or from ``pythonName`` /
    ``title`` when present, and are made unique case-insensitively.
    """

    def __init__(self, catalog: TypeCatalog | None = None, use_title_as_class_name: bool = False):
        self.catalog = catalog or TypeCatalog()
        self.use_title_as_class_name = use_title_as_class_name

    def allocate(
        self, node_name: str, definition: EnumDefinition, namespace: TypeNamespace
    ) -> TypeSlot:
        """
        Reserve a slot for the type generated from ``definition``.

        Raises:
            InvalidBackingTypeError: explicit type name is a primitive
            ClassAlreadyExists: explicit type name already resolves
            GenerationError: no legal name can be derived
        """
        if definition.python_type:
            return self._explicit_slot(node_name, definition.python_type, namespace)

        source_name = self._source_name(node_name, definition)
        name = self.derive_name(source_name, namespace.names())
        if not name:
            raise make_generation_error("Cannot derive a class name", node=node_name or "<anonymous>")
        return TypeSlot(name=name, module=namespace.module)

    def derive_name(self, source_name: str, existing: list[str]) -> str:
        """
        Legalize and PascalCase ``source_name``, then make it unique among
        ``existing``. Keywords and the names an emitted module imports get
        ``_`` appended, so ``none`` becomes ``None_``.
        """
        text = unicodedata.normalize("NFKC", source_name)
        class_name = replace_illegal_characters(capitalize(text))
        normalized = normalize_name(class_name)
        if not normalized:
            return ""
        return make_unique(normalized, existing, RESERVED_CLASS_NAMES)

    def _source_name(self, node_name: str, definition: EnumDefinition) -> str:
        if definition.python_name:
            return definition.python_name
        if self.use_title_as_class_name and definition.title:
            return definition.title
        return node_name

    def _explicit_slot(self, node_name: str, fqn: str, namespace: TypeNamespace) -> TypeSlot:
        if is_primitive(fqn):
            raise make_generation_error(
                f"Primitive type '{fqn}' cannot be used as an enum",
                node=node_name,
                error_class=InvalidBackingTypeError,
            )

        existing = self.catalog.resolve(fqn, namespace)
        if existing is not None:
            logger.debug("Type %s already exists, reusing it", fqn)
            raise ClassAlreadyExists(existing)

        module, _, name = fqn.rpartition(".")
        parts = fqn.split(".")
        if not all(part.isidentifier() and not keyword.iskeyword(part) for part in parts):
            raise make_generation_error(f"'{fqn}' is not a valid type name", node=node_name)
        return TypeSlot(name=name, module=module or namespace.module)
