"""
Runtime support for open enumeration types.

An open enumeration behaves like a closed set of named singleton constants,
yet accepts previously unseen values instead of rejecting them:

    class Status(OpenEnum, backing=str):
        OPEN = declare("open")
        CLOSED = declare("closed")

    Status.from_string("open") is Status.OPEN      # True
    Status("open") is Status.OPEN                  # calling the class canonicalizes
    Status("archived") is Status("archived")       # unseen values are interned too
    str(Status("archived"))                        # 'archived'

Every class owns one lookup table mapping backing value to instance. The
table only grows and guarantees at most one instance per distinct value for
the life of the process, so instances can be compared with ``is``.
"""

from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType
from typing import Any, ClassVar


class _Declaration:
    """Class-body marker for a constant; replaced by an instance at class creation."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"declare({self.value!r})"


def declare(value: Any) -> Any:
    """Declare a named constant of an open enumeration inside its class body."""
    return _Declaration(value)


class OpenEnumMeta(type):
    """
    Metaclass of open enumerations.

    Turns ``declare()`` markers into constants in declaration order, routes
    ``Cls(value)`` to ``Cls.from_string(value)`` and keeps declared
    constants from being rebound.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any):
        declarations = [
            (key, value.value) for key, value in namespace.items() if isinstance(value, _Declaration)
        ]
        body = {key: value for key, value in namespace.items() if not isinstance(value, _Declaration)}
        cls = super().__new__(mcs, name, bases, body, **kwargs)

        if declarations:
            for key, value in declarations:
                cls._declare(key, value)
            install_rendering(cls)
            cls._seal()
        return cls

    def __call__(cls, value: Any) -> Any:
        return cls.from_string(value)

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in cls.__dict__.get("_members", ()):
            raise AttributeError(f"cannot reassign constant {cls.__name__}.{name}")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in cls.__dict__.get("_members", ()):
            raise AttributeError(f"cannot delete constant {cls.__name__}.{name}")
        super().__delattr__(name)

    @property
    def __members__(cls) -> MappingProxyType:
        """Declared constants by name, in declaration order."""
        return MappingProxyType(cls.__dict__.get("_members", {}))

    def __iter__(cls) -> Iterator[Any]:
        return iter(list(cls.__dict__.get("_members", {}).values()))

    def __len__(cls) -> int:
        return len(cls.__dict__.get("_members", {}))

    def __bool__(cls) -> bool:
        # A class without constants is still truthy
        return True


class OpenEnum(metaclass=OpenEnumMeta):
    """
    Base class of open enumerations.

    Subclass keyword ``backing`` sets the type of the wrapped value; it
    defaults to ``str``. A subclass that declares constants cannot itself be
    subclassed.
    """

    __slots__ = ("_value", "_name")

    __backing__: ClassVar[type] = str
    _values: ClassVar[dict[Any, OpenEnum]]
    _members: ClassVar[dict[str, OpenEnum]]
    _sealed: ClassVar[bool]

    _value: Any
    _name: str | None

    def __init_subclass__(cls, backing: type | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if isinstance(base, OpenEnumMeta) and base.__dict__.get("_members"):
                raise TypeError(
                    f"{cls.__name__}: cannot extend {base.__name__}, it declares constants"
                )
        if backing is not None:
            cls.__backing__ = backing
        cls._values = {}
        cls._members = {}
        cls._sealed = False

    @classmethod
    def _construct(cls, value: Any) -> OpenEnum:
        instance = object.__new__(cls)
        instance._value = value
        instance._name = None
        return instance

    @classmethod
    def from_string(cls, value: Any) -> OpenEnum:
        """
        Return the canonical instance for ``value``, creating it on first use.

        Safe to call from many threads at once: all callers asking for the
        same value get the same instance back.
        """
        if cls is OpenEnum:
            raise TypeError("OpenEnum cannot be instantiated directly")
        values = cls._values
        existing = values.get(value)
        if existing is not None:
            return existing
        # Racing first calls may each build a candidate; setdefault keeps
        # exactly one and every caller returns the entry re-read from the
        # table, so the losing candidates are simply dropped.
        values.setdefault(value, cls._construct(value))
        return values[value]

    @classmethod
    def _declare(cls, name: str, value: Any) -> OpenEnum:
        """Bind constant ``name`` to the canonical instance for ``value``."""
        if cls._sealed:
            raise TypeError(f"{cls.__name__} is sealed, cannot declare {name}")
        instance = cls.from_string(value)
        if instance._name is None:
            instance._name = name
        setattr(cls, name, instance)
        cls._members[name] = instance
        return instance

    @classmethod
    def _seal(cls) -> None:
        cls._sealed = True

    @property
    def value(self) -> Any:
        """The wrapped backing value."""
        return self._value

    @property
    def name(self) -> str | None:
        """Name of the declared constant, or None for values seen only at runtime."""
        return self._name

    def __str__(self) -> str:
        return _render_value(self)

    def __repr__(self) -> str:
        if self._name is not None:
            return f"<{type(self).__name__}.{self._name}: {self._value!r}>"
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self):
        return type(self), (self._value,)

    def __copy__(self) -> OpenEnum:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> OpenEnum:
        return self


def _render_text(self: OpenEnum) -> str:
    return self._value


def _render_value(self: OpenEnum) -> str:
    return str(self._value)


def install_rendering(cls: type[OpenEnum]) -> None:
    """
    Install ``__str__`` on an open enumeration.

    Text-backed classes return the wrapped value unchanged; other backing
    types use the value's own ``str()``.
    """
    if issubclass(cls.__backing__, str):
        cls.__str__ = _render_text
    else:
        cls.__str__ = _render_value


# Attributes set on generated classes by synthesis and annotation
HOOK_NAMES = frozenset(
    {
        "__interfaces__",
        "__openenum_creator__",
        "__openenum_serializer__",
        "__get_pydantic_core_schema__",
    }
)

# Attribute names a declared constant must not shadow
RUNTIME_NAMES = (
    frozenset(dir(OpenEnum))
    | frozenset(dir(OpenEnumMeta))
    | {"_values", "_members", "_sealed"}
    | HOOK_NAMES
)
