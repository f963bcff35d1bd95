"""Tests for class name allocation."""

import collections

import pytest

from openenum.core.errors import ClassAlreadyExists, GenerationError, InvalidBackingTypeError
from openenum.core.ir import EnumDefinition
from openenum.core.types import TypeCatalog, TypeNamespace
from openenum.synth.class_names import ClassNameAllocator, TypeSlot


@pytest.fixture
def allocator() -> ClassNameAllocator:
    return ClassNameAllocator(TypeCatalog(allow_import=False))


def _declare(namespace: TypeNamespace, name: str) -> None:
    namespace.declare(type(name, (), {"__module__": namespace.module}))


class TestDeriveName:
    """Tests for names derived from the schema node name."""

    def test_simple_name(self, allocator, namespace):
        slot = allocator.allocate("status", EnumDefinition(values=[]), namespace)
        assert slot == TypeSlot(name="Status", module="generated")
        assert slot.qualified_name == "generated.Status"

    def test_delimited_name(self, allocator, namespace):
        slot = allocator.allocate("order-line status", EnumDefinition(values=[]), namespace)
        assert slot.name == "OrderLineStatus"

    def test_camel_case_kept(self, allocator, namespace):
        slot = allocator.allocate("orderStatus", EnumDefinition(values=[]), namespace)
        assert slot.name == "OrderStatus"

    def test_leading_digit(self, allocator, namespace):
        slot = allocator.allocate("2fa_method", EnumDefinition(values=[]), namespace)
        assert slot.name == "_2faMethod"

    def test_unique_case_insensitive(self, allocator, namespace):
        _declare(namespace, "STATUS")
        _declare(namespace, "Status_")
        slot = allocator.allocate("status", EnumDefinition(values=[]), namespace)
        assert slot.name == "Status__"

    def test_python_name_override(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_name="TicketState")
        assert allocator.allocate("status", definition, namespace).name == "TicketState"

    def test_title_as_class_name(self, namespace):
        allocator = ClassNameAllocator(TypeCatalog(allow_import=False), use_title_as_class_name=True)
        definition = EnumDefinition(values=[], title="ticket state")
        assert allocator.allocate("status", definition, namespace).name == "TicketState"

    def test_title_ignored_by_default(self, allocator, namespace):
        definition = EnumDefinition(values=[], title="ticket state")
        assert allocator.allocate("status", definition, namespace).name == "Status"

    @pytest.mark.parametrize(
        ("node_name", "expected"), [("none", "None_"), ("true", "True_"), ("false", "False_")]
    )
    def test_keyword_names_suffixed(self, allocator, namespace, node_name, expected):
        assert allocator.allocate(node_name, EnumDefinition(values=[]), namespace).name == expected

    @pytest.mark.parametrize(
        ("node_name", "expected"),
        [("open_enum", "OpenEnum_"), ("openEnum", "OpenEnum_"), ("declare", "Declare")],
    )
    def test_module_imports_not_shadowed(self, allocator, namespace, node_name, expected):
        assert allocator.allocate(node_name, EnumDefinition(values=[]), namespace).name == expected

    def test_python_name_module_import_suffixed(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_name="OpenEnum")
        assert allocator.allocate("status", definition, namespace).name == "OpenEnum_"

    def test_leading_combining_mark_prefixed(self, allocator, namespace):
        name = allocator.allocate("\u0301status", EnumDefinition(values=[]), namespace).name
        assert name.isidentifier()
        assert name.startswith("_")

    def test_underivable_name(self, allocator, namespace):
        with pytest.raises(GenerationError):
            allocator.allocate("---", EnumDefinition(values=[]), namespace)


class TestExplicitTypeName:
    """Tests for definitions with an explicit pythonType."""

    def test_new_type(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_type="myapp.enums.Status")
        assert allocator.allocate("x", definition, namespace) == TypeSlot("Status", "myapp.enums")

    def test_unqualified_type_uses_namespace_module(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_type="Status")
        assert allocator.allocate("x", definition, namespace) == TypeSlot("Status", "generated")

    def test_primitive_rejected(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_type="builtins.bool")
        with pytest.raises(InvalidBackingTypeError, match="cannot be used as an enum"):
            allocator.allocate("x", definition, namespace)

    def test_existing_type_signalled(self, namespace):
        allocator = ClassNameAllocator(TypeCatalog())
        definition = EnumDefinition(values=[], python_type="collections.Counter")
        with pytest.raises(ClassAlreadyExists) as exc_info:
            allocator.allocate("x", definition, namespace)
        assert exc_info.value.existing_type is collections.Counter

    def test_invalid_type_name(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_type="myapp.bad-name")
        with pytest.raises(GenerationError):
            allocator.allocate("x", definition, namespace)

    def test_keyword_type_name(self, allocator, namespace):
        definition = EnumDefinition(values=[], python_type="myapp.None")
        with pytest.raises(GenerationError):
            allocator.allocate("x", definition, namespace)
