"""
Open enumeration type synthesis.

EnumTypeSynthesizer turns an EnumDefinition into a generated OpenEnum
subclass:

    NAME_RESOLUTION -> EXISTING_TYPE_FOUND
    NAME_RESOLUTION -> TYPE_ALLOCATED -> BACKING_TYPE_RESOLVED
        -> FACTORY_INSTALLED -> CONSTANTS_POPULATED -> RENDERING_INSTALLED

A failure in any state raises GenerationError and nothing is declared in
the target namespace.
"""

from __future__ import annotations

import logging
from abc import ABCMeta
from enum import Enum
from typing import Any

from openenum.annotate import Annotator, PydanticAnnotator
from openenum.core.errors import (
    ClassAlreadyExists,
    UnresolvableInterfaceError,
    make_generation_error,
)
from openenum.core.ir import EnumDefinition
from openenum.core.types import TypeCatalog, TypeNamespace, TypeResolver
from openenum.runtime import OpenEnum, OpenEnumMeta, install_rendering

from .class_names import ClassNameAllocator, TypeSlot
from .constant_names import ConstantNameGenerator

logger = logging.getLogger(__name__)


class SynthesisState(str, Enum):
    """States of a single synthesis run."""

    NAME_RESOLUTION = "name_resolution"
    EXISTING_TYPE_FOUND = "existing_type_found"
    TYPE_ALLOCATED = "type_allocated"
    BACKING_TYPE_RESOLVED = "backing_type_resolved"
    FACTORY_INSTALLED = "factory_installed"
    CONSTANTS_POPULATED = "constants_populated"
    RENDERING_INSTALLED = "rendering_installed"


_TRANSITIONS: dict[SynthesisState | None, set[SynthesisState]] = {
    None: {SynthesisState.NAME_RESOLUTION},
    SynthesisState.NAME_RESOLUTION: {
        SynthesisState.EXISTING_TYPE_FOUND,
        SynthesisState.TYPE_ALLOCATED,
    },
    SynthesisState.TYPE_ALLOCATED: {SynthesisState.BACKING_TYPE_RESOLVED},
    SynthesisState.BACKING_TYPE_RESOLVED: {SynthesisState.FACTORY_INSTALLED},
    SynthesisState.FACTORY_INSTALLED: {SynthesisState.CONSTANTS_POPULATED},
    SynthesisState.CONSTANTS_POPULATED: {SynthesisState.RENDERING_INSTALLED},
    SynthesisState.EXISTING_TYPE_FOUND: set(),
    SynthesisState.RENDERING_INSTALLED: set(),
}


class EnumTypeSynthesizer:
    """
    Builds open enumeration types from enum definitions.

    Attributes:
        type_resolver: Resolves the backing value type
        catalog: Finds types that already exist under an explicit name
        annotator: Attaches serialization hooks to factory and rendering
        history: States visited by the most recent ``synthesize`` call
    """

    def __init__(
        self,
        type_resolver: TypeResolver | None = None,
        catalog: TypeCatalog | None = None,
        annotator: Annotator | None = None,
        use_title_as_class_name: bool = False,
    ):
        self.type_resolver = type_resolver or TypeResolver()
        self.catalog = catalog or TypeCatalog()
        self.annotator = annotator or PydanticAnnotator()
        self.class_names = ClassNameAllocator(self.catalog, use_title_as_class_name)
        self.constant_names = ConstantNameGenerator()
        self.history: list[SynthesisState] = []

    def synthesize(
        self, node_name: str, definition: EnumDefinition, namespace: TypeNamespace
    ) -> type:
        """
        Generate the open enumeration described by ``definition``.

        Args:
            node_name: Schema node name, used to derive the class name
            definition: The enum definition
            namespace: Module the new type is declared in

        Returns:
            The generated class, or the existing class when the definition's
            explicit ``pythonType`` already resolves

        Raises:
            GenerationError: synthesis failed; nothing was declared
        """
        self.history = []
        self._enter(SynthesisState.NAME_RESOLUTION)
        try:
            slot = self.class_names.allocate(node_name, definition, namespace)
        except ClassAlreadyExists as signal:
            self._enter(SynthesisState.EXISTING_TYPE_FOUND)
            return signal.existing_type
        self._enter(SynthesisState.TYPE_ALLOCATED)

        interfaces = self._resolve_interfaces(node_name, definition, namespace)
        backing = self.type_resolver.resolve(definition)
        self._enter(SynthesisState.BACKING_TYPE_RESOLVED)

        cls: Any = self._create_class(node_name, slot, definition, backing, interfaces)
        self.annotator.enum_creator_method(cls, cls.from_string)
        self._enter(SynthesisState.FACTORY_INSTALLED)

        literals = list(definition.literals())
        for name, literal in zip(self.constant_names.allocate(literals), literals):
            try:
                cls._declare(name, literal.value)
            except (TypeError, AttributeError) as e:
                raise make_generation_error(
                    f"Cannot intern literal as {slot.name}.{name}: {e}",
                    node=node_name,
                    detail=literal.value,
                ) from e
        self._enter(SynthesisState.CONSTANTS_POPULATED)

        install_rendering(cls)
        self.annotator.enum_value_method(cls, cls.__str__)
        cls._seal()
        self._enter(SynthesisState.RENDERING_INSTALLED)

        for interface in interfaces:
            if isinstance(interface, ABCMeta):
                interface.register(cls)
        namespace.declare(cls)
        logger.debug(
            "Generated %s backed by %s with %d constants",
            slot.qualified_name,
            backing.__name__,
            len(cls),
        )
        return cls

    def _enter(self, state: SynthesisState) -> None:
        current = self.history[-1] if self.history else None
        if state not in _TRANSITIONS[current]:
            raise AssertionError(f"Illegal synthesis transition {current} -> {state}")
        self.history.append(state)
        logger.debug("Synthesis state: %s", state.value)

    def _resolve_interfaces(
        self, node_name: str, definition: EnumDefinition, namespace: TypeNamespace
    ) -> list[type]:
        interfaces = []
        for fqn in definition.interfaces:
            interface = self.catalog.resolve(fqn, namespace)
            if interface is None:
                raise make_generation_error(
                    f"Cannot resolve interface '{fqn}'",
                    node=node_name,
                    error_class=UnresolvableInterfaceError,
                )
            interfaces.append(interface)
        return interfaces

    def _create_class(
        self,
        node_name: str,
        slot: TypeSlot,
        definition: EnumDefinition,
        backing: type,
        interfaces: list[type],
    ) -> type:
        # Abstract base classes are declared by registration once the type is
        # complete; anything else becomes a mixin base.
        mixins = tuple(i for i in interfaces if not isinstance(i, ABCMeta))
        body = {
            "__module__": slot.module,
            "__qualname__": slot.name,
            "__doc__": definition.description or definition.title,
            "__slots__": (),
            "__interfaces__": tuple(interfaces),
        }
        try:
            return OpenEnumMeta(slot.name, (OpenEnum, *mixins), body, backing=backing)
        except TypeError as e:
            raise make_generation_error(
                f"Cannot create class {slot.qualified_name}: {e}", node=node_name
            ) from e


def synthesize(
    node_name: str,
    definition: EnumDefinition,
    namespace: TypeNamespace | None = None,
    **options: Any,
) -> type:
    """Generate one open enumeration with default collaborators."""
    return EnumTypeSynthesizer(**options).synthesize(
        node_name, definition, namespace if namespace is not None else TypeNamespace()
    )
