"""
Identifier utilities for openenum.

Legalization, casing and uniqueness helpers shared by the class name and
constant name allocators.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Separator appended when disambiguating and used to join name segments
SEPARATOR = "_"

# Delimiters between words of a property name (my-status, my status, my_status)
WORD_DELIMITERS = ("-", " ", "_")


def is_identifier_char(char: str) -> bool:
    """Check whether ``char`` may appear after the first character of an identifier."""
    return ("a" + char).isidentifier()


def replace_illegal_characters(name: str) -> str:
    """
    Replace every character that cannot appear in an identifier with ``_``.

    Examples:
        >>> replace_illegal_characters("my-status")
        'my_status'
        >>> replace_illegal_characters("a.b c")
        'a_b_c'
    """
    return "".join(c if is_identifier_char(c) else SEPARATOR for c in name)


def capitalize(text: str) -> str:
    """
    Uppercase the first character of each whitespace-delimited word.

    The rest of each word is left untouched, so ``myStatus`` stays
    ``MyStatus`` rather than becoming ``Mystatus``.
    """
    return _capitalize_words(text, lambda c: c.isspace())


def normalize_name(name: str) -> str:
    """
    Normalize a legalized name into a PascalCase-friendly form.

    Words after a delimiter are capitalized and the delimiters removed; the
    first character keeps its case. A leading character that cannot start
    an identifier, such as a digit, gets a ``_`` prefix.

    Examples:
        >>> normalize_name("My_status")
        'MyStatus'
        >>> normalize_name("3d_model")
        '_3dModel'
    """
    if any(d in name for d in WORD_DELIMITERS):
        capitalized = _capitalize_words(name, lambda c: c in WORD_DELIMITERS)
        name = name[0] + capitalized[1:]
        for delimiter in WORD_DELIMITERS:
            name = name.replace(delimiter, "")
    if name and not name[0].isidentifier():
        name = SEPARATOR + name
    return name


def split_by_character_type_camel_case(text: str) -> list[str]:
    """
    Split text into runs of characters sharing a Unicode category.

    An uppercase letter directly followed by lowercase letters starts a new
    group, so camel case words stay together.

    Examples:
        >>> split_by_character_type_camel_case("fooBar")
        ['foo', 'Bar']
        >>> split_by_character_type_camel_case("ASFRules")
        ['ASF', 'Rules']
        >>> split_by_character_type_camel_case("foo200-bar")
        ['foo', '200', '-', 'bar']
    """
    if not text:
        return []

    groups: list[str] = []
    token_start = 0
    current = unicodedata.category(text[0])
    for pos in range(1, len(text)):
        category = unicodedata.category(text[pos])
        if category == current:
            continue
        if category == "Ll" and current == "Lu":
            new_start = pos - 1
            if new_start != token_start:
                groups.append(text[token_start:new_start])
                token_start = new_start
        else:
            groups.append(text[token_start:pos])
            token_start = pos
        current = category
    groups.append(text[token_start:])
    return groups


def make_unique(
    name: str,
    existing: Iterable[str],
    reserved: Iterable[str] = (),
) -> str:
    """
    Append ``_`` to ``name`` until it differs from every existing name.

    Existing names are compared case-insensitively; reserved names must
    match exactly to count as a clash.

    Args:
        name: Candidate name
        existing: Names already taken in the enclosing scope
        reserved: Names that must never be produced verbatim

    Returns:
        ``name`` itself, or ``name`` followed by one or more ``_``
    """
    taken = {n.casefold() for n in existing}
    blocked = set(reserved)
    # Each attempt is longer than the last, so at most one attempt per
    # taken or blocked name can fail.
    for _ in range(len(taken) + len(blocked) + 1):
        if name.casefold() not in taken and name not in blocked:
            return name
        logger.debug("Name %r already taken, appending %r", name, SEPARATOR)
        name += SEPARATOR
    raise AssertionError(f"make_unique did not converge for {name!r}")


def _capitalize_words(text: str, is_delimiter) -> str:
    chars = list(text)
    capitalize_next = True
    for i, char in enumerate(chars):
        if is_delimiter(char):
            capitalize_next = True
        elif capitalize_next:
            chars[i] = char.upper()
            capitalize_next = False
    return "".join(chars)
