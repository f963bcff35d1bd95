"""
openenum configuration.

Read from ``openenum.toml`` (top-level keys) or from the ``[tool.openenum]``
table of ``pyproject.toml``, whichever is found first in the project root.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError, ErrorContext

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found,no-redef]

CONFIG_FILENAME = "openenum.toml"


class AnnotatorKind(str, Enum):
    """Serialization hooks attached to generated types."""

    PYDANTIC = "pydantic"
    NONE = "none"


class OpenEnumConfig(BaseModel):
    """Complete openenum configuration."""

    model_config = ConfigDict(extra="forbid")

    module: str = "generated"
    annotator: AnnotatorKind = AnnotatorKind.PYDANTIC
    use_title_as_class_name: bool = False
    output: str | None = None

    def get_output_path(self, project_root: Path) -> Path | None:
        """Get absolute output file path, if one is configured."""
        if self.output is None:
            return None
        output = Path(self.output)
        if output.is_absolute():
            return output
        return project_root / output


def load_config(project_root: Path) -> OpenEnumConfig:
    """
    Load configuration for a project.

    Args:
        project_root: Directory holding openenum.toml or pyproject.toml

    Returns:
        OpenEnumConfig with parsed values or defaults
    """
    config_path = project_root / CONFIG_FILENAME
    if config_path.exists():
        return _parse(_read_toml(config_path), config_path)

    pyproject_path = project_root / "pyproject.toml"
    if pyproject_path.exists():
        data = _read_toml(pyproject_path).get("tool", {}).get("openenum", {})
        return _parse(data, pyproject_path)

    return OpenEnumConfig()


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(str(e), ErrorContext(node="config", file=path)) from e


def _parse(data: dict[str, Any], path: Path) -> OpenEnumConfig:
    try:
        return OpenEnumConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", ErrorContext(node="openenum", file=path)) from e
