"""
Constant name generation.

Derives a unique, legal constant identifier for every literal of an enum
definition, e.g. ``in-progress`` -> ``IN_PROGRESS`` and ``42`` -> ``_42``.
"""

from __future__ import annotations

import keyword
import logging
import unicodedata
from collections.abc import Iterable

from openenum.core.ir import EnumLiteral
from openenum.core.naming import (
    SEPARATOR,
    make_unique,
    replace_illegal_characters,
    split_by_character_type_camel_case,
)
from openenum.runtime import RUNTIME_NAMES

logger = logging.getLogger(__name__)

# Used when a literal has no characters that can appear in an identifier
EMPTY_CONSTANT_NAME = "__EMPTY__"


def constant_name(raw_text: str, custom_name: str | None = None) -> str:
    """
    Derive the constant name for one literal, before uniqueness.

    Args:
        raw_text: Textual form of the literal
        custom_name: Override used verbatim when not blank

    Returns:
        Constant name such as ``OPEN``, ``FOO_BAR`` or ``_200``
    """
    if custom_name and custom_name.strip():
        return custom_name

    # Identifiers are compared in NFKC form once compiled
    text = unicodedata.normalize("NFKC", raw_text)
    groups = [
        replace_illegal_characters(group).strip(SEPARATOR)
        for group in split_by_character_type_camel_case(text)
    ]
    name = replace_illegal_characters(SEPARATOR.join(group for group in groups if group).upper())

    if not name:
        return EMPTY_CONSTANT_NAME
    # Digits and combining marks cannot start an identifier
    if not name[0].isidentifier():
        return SEPARATOR + name
    return name


class ConstantNameGenerator:
    """
    Allocates constant names for the literals of one generated type.

    Names are unique case-insensitively within the type; later literals
    whose names collide get ``_`` appended until unique. Names that would
    shadow the open enumeration API, or that are keywords, are
    disambiguated the same way.
    """

    def __init__(self, reserved: Iterable[str] = RUNTIME_NAMES):
        self.reserved = frozenset(reserved) | frozenset(keyword.kwlist)

    def allocate(self, literals: Iterable[EnumLiteral]) -> list[str]:
        """Return one constant name per literal, in declaration order."""
        used: list[str] = []
        for literal in literals:
            candidate = constant_name(literal.text, literal.custom_name)
            name = make_unique(candidate, used, self.reserved)
            if name != candidate:
                logger.debug("Constant %r renamed to %r", candidate, name)
            used.append(name)
        return used
