"""
Property-based tests using Hypothesis.

These tests check naming and interning invariants across arbitrary input,
including text that mixes scripts, punctuation and combining marks.
"""

import keyword
import pickle

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from openenum.annotate import NoopAnnotator
from openenum.core.ir import EnumDefinition, EnumLiteral
from openenum.core.types import TypeCatalog, TypeNamespace
from openenum.emit import MODULE_NAMES
from openenum.runtime import RUNTIME_NAMES, OpenEnum
from openenum.synth import EnumTypeSynthesizer
from openenum.synth.class_names import ClassNameAllocator
from openenum.synth.constant_names import ConstantNameGenerator, constant_name


class Token(OpenEnum):
    """Text-backed open enumeration without declared constants."""


class Code(OpenEnum, backing=int):
    """Integer-backed open enumeration without declared constants."""


# =============================================================================
# Interning Property Tests
# =============================================================================


class TestInterningProperties:
    """Property-based tests for the per-class lookup table."""

    @given(st.text(max_size=50))
    @settings(max_examples=200)
    def test_from_string_idempotent(self, value: str) -> None:
        """Invariant: from_string returns the same instance for a value every time."""
        instance = Token.from_string(value)
        assert Token.from_string(value) is instance
        assert Token(value) is instance
        assert instance.value == value
        assert str(instance) == value

    @given(st.text(max_size=30), st.text(max_size=30))
    @settings(max_examples=200)
    def test_distinct_values_distinct_instances(self, first: str, second: str) -> None:
        """Invariant: different backing values never share an instance."""
        assume(first != second)
        assert Token(first) is not Token(second)

    @given(st.integers())
    @settings(max_examples=100)
    def test_integer_values_interned(self, value: int) -> None:
        """Invariant: integer-backed tables intern by value."""
        assert Code(value) is Code.from_string(value)
        assert str(Code(value)) == str(value)

    @given(st.text(max_size=30))
    @settings(max_examples=50)
    def test_pickle_preserves_identity(self, value: str) -> None:
        """Invariant: unpickling yields the canonical instance."""
        instance = Token(value)
        assert pickle.loads(pickle.dumps(instance)) is instance


# =============================================================================
# Naming Property Tests
# =============================================================================


class TestConstantNameProperties:
    """Property-based tests for constant name derivation."""

    @given(st.text(max_size=40))
    @settings(max_examples=300)
    def test_derived_name_is_identifier(self, text: str) -> None:
        """Invariant: derived constant names are legal, non-keyword identifiers."""
        name = constant_name(text)
        assert name.isidentifier()
        assert not keyword.iskeyword(name)

    @given(st.lists(st.text(max_size=20), max_size=15))
    @settings(max_examples=200)
    def test_allocated_names_unique(self, texts: list[str]) -> None:
        """Invariant: allocate yields one legal name per literal, unique ignoring case."""
        literals = [EnumLiteral(value=text) for text in texts]
        names = ConstantNameGenerator().allocate(literals)

        assert len(names) == len(texts)
        assert len({name.casefold() for name in names}) == len(names)
        for name in names:
            assert name.isidentifier()
            assert not keyword.iskeyword(name)
            assert name not in RUNTIME_NAMES

    @given(st.lists(st.text(min_size=1, max_size=15), max_size=10))
    @settings(max_examples=100)
    def test_custom_names_never_shadow_runtime(self, custom_names: list[str]) -> None:
        """Invariant: custom names are kept apart from the runtime API and keywords."""
        assume(all(name.strip() for name in custom_names))
        literals = [EnumLiteral(value=i, custom_name=name) for i, name in enumerate(custom_names)]
        names = ConstantNameGenerator().allocate(literals)

        assert len({name.casefold() for name in names}) == len(names)
        for name in names:
            assert name not in RUNTIME_NAMES
            assert not keyword.iskeyword(name)


class TestClassNameProperties:
    """Property-based tests for class name derivation."""

    @given(st.lists(st.text(max_size=30), max_size=10))
    @settings(max_examples=200)
    def test_derived_class_names(self, sources: list[str]) -> None:
        """Invariant: derived class names are legal, unique and never shadow module imports."""
        allocator = ClassNameAllocator(TypeCatalog(allow_import=False))
        existing: list[str] = []
        for source in sources:
            name = allocator.derive_name(source, existing)
            if not name:
                continue
            assert name.isidentifier()
            assert not keyword.iskeyword(name)
            assert name not in MODULE_NAMES
            assert name.casefold() not in {n.casefold() for n in existing}
            existing.append(name)


# =============================================================================
# Synthesis Property Tests
# =============================================================================


class TestSynthesisProperties:
    """Property-based tests for generated types."""

    @given(st.lists(st.text(max_size=20), unique=True, max_size=15))
    @settings(max_examples=100)
    def test_constants_match_factory(self, values: list[str]) -> None:
        """Invariant: every declared constant is the factory result for its literal."""
        synthesizer = EnumTypeSynthesizer(
            catalog=TypeCatalog(allow_import=False), annotator=NoopAnnotator()
        )
        cls = synthesizer.synthesize(
            "prop", EnumDefinition(values=values), TypeNamespace("generated")
        )

        assert len(cls) == len(values)
        for (name, constant), value in zip(cls.__members__.items(), values):
            assert getattr(cls, name) is constant
            assert cls.from_string(value) is constant
            assert str(constant) == value
