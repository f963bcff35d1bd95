"""Shared pytest fixtures for openenum tests."""

import pytest

from openenum.core.ir import EnumDefinition
from openenum.core.types import TypeCatalog, TypeNamespace
from openenum.synth import EnumTypeSynthesizer


@pytest.fixture
def namespace() -> TypeNamespace:
    """Return an empty namespace for generated types."""
    return TypeNamespace("generated")


@pytest.fixture
def synthesizer() -> EnumTypeSynthesizer:
    """Return a synthesizer that does not import modules to find existing types."""
    return EnumTypeSynthesizer(catalog=TypeCatalog(allow_import=False))


@pytest.fixture
def status_definition() -> EnumDefinition:
    """Return the two-value status enum."""
    return EnumDefinition(values=["open", "closed"], type="string")


@pytest.fixture
def status_type(synthesizer, namespace, status_definition):
    """Return the open enumeration generated from the status enum."""
    return synthesizer.synthesize("status", status_definition, namespace)
