"""
openenum command line interface.

Commands:
- generate: Compile JSON Schema enum definitions into a Python module
- inspect: Show the types, constants and values a schema would produce
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from openenum._version import get_version
from openenum.annotate import NoopAnnotator, PydanticAnnotator
from openenum.core.config import AnnotatorKind, OpenEnumConfig, load_config
from openenum.core.errors import OpenEnumError
from openenum.core.types import TypeNamespace
from openenum.emit import render_module
from openenum.schema import load_definitions
from openenum.synth import EnumTypeSynthesizer

app = typer.Typer(
    help="Generate open enumeration types from JSON Schema enum definitions",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"openenum {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """openenum - open enumerations that accept values they have not seen yet."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _synthesize_all(
    schema: Path, config: OpenEnumConfig, annotate: bool
) -> tuple[TypeNamespace, list[type]]:
    """Synthesize every definition in ``schema``; return new and reused types."""
    definitions = load_definitions(schema)
    namespace = TypeNamespace(config.module)
    synthesizer = EnumTypeSynthesizer(
        annotator=PydanticAnnotator() if annotate else NoopAnnotator(),
        use_title_as_class_name=config.use_title_as_class_name,
    )
    reused = []
    for node_name, definition in definitions.items():
        cls = synthesizer.synthesize(node_name, definition, namespace)
        if cls not in namespace:
            reused.append(cls)
    return namespace, reused


def _load_config(project_dir: Path) -> OpenEnumConfig:
    try:
        return load_config(project_dir)
    except OpenEnumError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def generate(
    schema: Path = typer.Argument(..., help="JSON Schema file with enum definitions"),  # noqa: B008
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Output file (overrides config; default: print to stdout)",
    ),
    module: str | None = typer.Option(
        None,
        "--module",
        "-m",
        help="Module name generated types are declared in",
    ),
    annotate: bool | None = typer.Option(
        None,
        "--annotate/--no-annotate",
        help="Attach pydantic serialization hooks",
    ),
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory holding openenum.toml or pyproject.toml",
    ),
) -> None:
    """
    Compile enum definitions into a Python module.

    Examples:
        openenum generate schema.json                  # Print module
        openenum generate schema.json -o enums.py      # Write module
        openenum generate schema.json --no-annotate    # Without pydantic hooks
    """
    project_path = project_dir.resolve()
    config = _load_config(project_path)
    if module:
        config = config.model_copy(update={"module": module})
    if annotate is None:
        annotate = config.annotator == AnnotatorKind.PYDANTIC

    try:
        namespace, reused = _synthesize_all(schema, config, annotate)
        source = render_module(namespace, annotate=annotate)
    except OpenEnumError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for cls in reused:
        typer.echo(f"Reusing existing type {cls.__module__}.{cls.__qualname__}", err=True)

    output_path = output or config.get_output_path(project_path)
    if output_path is None:
        typer.echo(source, nl=False)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(source, encoding="utf-8")
    typer.echo(f"Wrote {len(namespace)} types to {output_path}", err=True)


@app.command()
def inspect(
    schema: Path = typer.Argument(..., help="JSON Schema file with enum definitions"),  # noqa: B008
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory holding openenum.toml or pyproject.toml",
    ),
) -> None:
    """Show the types and constants a schema produces."""
    config = _load_config(project_dir.resolve())
    try:
        namespace, reused = _synthesize_all(schema, config, annotate=False)
    except OpenEnumError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    table = Table(title=f"Open enumerations in {schema.name}")
    table.add_column("Type", style="bold cyan")
    table.add_column("Backing")
    table.add_column("Constant", style="green")
    table.add_column("Value")
    for cls in namespace:
        members = cls.__members__
        if not members:
            table.add_row(cls.__name__, cls.__backing__.__name__, "", "")
        for index, (name, instance) in enumerate(members.items()):
            table.add_row(
                cls.__name__ if index == 0 else "",
                cls.__backing__.__name__ if index == 0 else "",
                name,
                repr(instance.value),
            )
    for cls in reused:
        table.add_row(f"{cls.__module__}.{cls.__qualname__}", "", "(existing)", "")
    console.print(table)


def main() -> None:
    """Entry point for the openenum command."""
    app()
