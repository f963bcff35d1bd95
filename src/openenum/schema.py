"""
JSON Schema loading.

Reads enum nodes from JSON Schema documents into EnumDefinitions. A document
is either a single enum node, or an object whose ``definitions`` / ``$defs``
map node names to nodes; entries without an ``enum`` keyword are skipped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from openenum.core.errors import ErrorContext, SchemaError
from openenum.core.ir import EnumDefinition

logger = logging.getLogger(__name__)

DEFINITION_KEYS = ("definitions", "$defs")


def load_definition(node: Any, node_name: str = "enum", file: Path | None = None) -> EnumDefinition:
    """
    Build an EnumDefinition from one JSON Schema enum node.

    Raises:
        SchemaError: the node is not an object with an ``enum`` list
    """
    context = ErrorContext(node=node_name, file=file)
    if not isinstance(node, dict):
        raise SchemaError("Enum node must be an object", context)
    if not isinstance(node.get("enum"), list):
        raise SchemaError('Enum node requires an "enum" list', context)
    try:
        return EnumDefinition.model_validate(node)
    except ValidationError as e:
        raise SchemaError(f"Invalid enum node: {e}", context) from e


def load_definitions(path: Path) -> dict[str, EnumDefinition]:
    """
    Load every enum definition from a JSON Schema file.

    Returns:
        Definitions keyed by node name, in document order. A document that is
        itself an enum node is keyed by its title, or the file stem.
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SchemaError(f"Cannot read schema: {e}", ErrorContext(node=path.name)) from e
    except UnicodeDecodeError as e:
        raise SchemaError(f"Schema is not valid UTF-8: {e}", ErrorContext(node=path.name)) from e
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON: {e}", ErrorContext(node=path.name)) from e

    if isinstance(document, dict) and "enum" in document:
        node_name = document.get("title") or path.stem
        return {node_name: load_definition(document, node_name, path)}

    definitions: dict[str, EnumDefinition] = {}
    if isinstance(document, dict):
        for key in DEFINITION_KEYS:
            container = document.get(key) or {}
            if not isinstance(container, dict):
                raise SchemaError(f'"{key}" must be an object', ErrorContext(node=key, file=path))
            for node_name, node in container.items():
                if isinstance(node, dict) and "enum" in node:
                    definitions[node_name] = load_definition(node, node_name, path)
    if not definitions:
        logger.warning("No enum definitions found in %s", path)
    return definitions
