"""
Python source emission for generated open enumerations.

Renders generated types as a standalone module in the class-body form, so a
schema can be compiled once and the result checked in:

    class Status(OpenEnum):
        OPEN = declare("open")
        CLOSED = declare("closed")
"""

from __future__ import annotations

import json
import keyword
import math
from abc import ABCMeta
from collections.abc import Iterable
from typing import Any

from openenum.core.errors import GenerationError
from openenum.runtime import OpenEnum

HEADER = '"""\nOpen enumerations generated by openenum - DO NOT EDIT.\n"""'

_BUILTIN_BACKING = {str: "str", int: "int", float: "float", bool: "bool", object: "object"}

# Names every emitted module imports
MODULE_NAMES = frozenset({"OpenEnum", "declare", "annotate_pydantic"})


class _Imports:
    """Collects ``from module import name`` lines."""

    def __init__(self) -> None:
        self._names: dict[str, set[str]] = {}

    def add(self, module: str, name: str) -> None:
        self._names.setdefault(module, set()).add(name)

    def reference(self, cls: type) -> str:
        """Import ``cls`` and return the expression naming it."""
        if cls is type(None):
            return "type(None)"
        if cls.__module__ == "builtins":
            return cls.__qualname__
        top = cls.__qualname__.split(".")[0]
        self.add(cls.__module__, top)
        return cls.__qualname__

    def names(self) -> set[str]:
        return {name for names in self._names.values() for name in names}

    def render(self) -> list[str]:
        return [
            f"from {module} import {', '.join(sorted(names))}"
            for module, names in sorted(self._names.items())
        ]


def render_module(types: Iterable[type], annotate: bool = True) -> str:
    """
    Render Python source declaring ``types``.

    Args:
        types: Generated OpenEnum subclasses, in output order
        annotate: Attach pydantic hooks to each class after declaring it

    Returns:
        Module source ending in a newline

    Raises:
        GenerationError: a type or constant cannot be expressed as source
    """
    imports = _Imports()
    imports.add("openenum.runtime", "OpenEnum")
    imports.add("openenum.runtime", "declare")
    if annotate:
        imports.add("openenum.annotate", "annotate_pydantic")

    types = list(types)
    blocks: list[str] = []
    trailer: list[str] = []
    for cls in types:
        blocks.append(render_class(cls, imports))
        if annotate:
            trailer.append(f"annotate_pydantic({cls.__name__})")
        for interface in getattr(cls, "__interfaces__", ()):
            if isinstance(interface, ABCMeta):
                trailer.append(f"{imports.reference(interface)}.register({cls.__name__})")

    shadowed = sorted({cls.__name__ for cls in types} & imports.names())
    if shadowed:
        raise GenerationError(f"Class names {shadowed} would shadow names imported by the module")

    parts = ["\n".join(imports.render()), *blocks]
    if trailer:
        parts.append("\n".join(trailer))
    return HEADER + "\n\n" + "\n\n\n".join(parts) + "\n"


def render_class(cls: Any, imports: _Imports) -> str:
    """Render one class statement, recording the imports it needs."""
    if not (isinstance(cls, type) and issubclass(cls, OpenEnum)) or cls is OpenEnum:
        raise GenerationError(f"{cls!r} is not a generated open enumeration")

    name = cls.__name__
    if not name.isidentifier() or keyword.iskeyword(name):
        raise GenerationError(f"Class name {name!r} cannot be written as source")

    bases = ["OpenEnum"]
    for interface in getattr(cls, "__interfaces__", ()):
        if not isinstance(interface, ABCMeta):
            bases.append(imports.reference(interface))
    if cls.__backing__ is not str:
        bases.append(f"backing={_backing_expression(cls.__backing__, imports)}")

    lines = [f"class {name}({', '.join(bases)}):"]
    if cls.__doc__:
        lines.append(f'    """{_escape_docstring(cls.__doc__)}"""')
        lines.append("")
    members = cls.__members__
    for constant, instance in members.items():
        lines.append(f"    {_constant_target(cls, constant)} = declare({_literal(instance.value)})")
    if not members:
        lines.append("    pass")
    return "\n".join(lines)


def _backing_expression(backing: type, imports: _Imports) -> str:
    if backing in _BUILTIN_BACKING:
        return _BUILTIN_BACKING[backing]
    return imports.reference(backing)


def _constant_target(cls: type, name: str) -> str:
    mangled = name.startswith("__") and not name.endswith("__")
    if not name.isidentifier() or keyword.iskeyword(name) or mangled:
        raise GenerationError(f"Constant {cls.__name__}.{name} cannot be written as source")
    return name


def _literal(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, float) and not math.isfinite(value):
        raise GenerationError(f"Literal {value!r} cannot be written as source")
    return repr(value)


def _escape_docstring(doc: str) -> str:
    doc = doc.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if doc.endswith('"'):
        doc = doc[:-1] + '\\"'
    return doc
