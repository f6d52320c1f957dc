"""
blokgen command line interface.

    blokgen generate schema.graphql -o components.tf.json
    blokgen inspect schema.graphql
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blokgen.core.assembler import build_components
from blokgen.core.errors import BlokgenError
from blokgen.core.ir import Component, SchemaField
from blokgen.core.manifest import DEFAULT_MANIFEST, Manifest, load_manifest
from blokgen.loaders import load_type_graph_file
from blokgen.stacks import TerraformStack

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Generate Storyblok component configuration for Terraform from a GraphQL schema",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Get blokgen version from package metadata."""
    try:
        from importlib.metadata import version

        return version("blokgen")
    except Exception:
        return "0.0.0"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"blokgen version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """blokgen CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


SchemaArg = Annotated[
    Path,
    typer.Argument(help="GraphQL schema file", exists=True, dir_okay=False, readable=True),
]
ManifestOption = Annotated[
    Path,
    typer.Option("--manifest", "-m", help="Path to blokgen.toml", dir_okay=False),
]
SpaceIdOption = Annotated[
    int | None,
    typer.Option("--space-id", "-s", help="Storyblok space id (overrides the manifest)"),
]


def _build(
    schema: Path,
    manifest: Manifest,
    space_id: int | None,
    require_space: bool = True,
) -> list[Component]:
    """Load the schema and build all components, exiting on errors."""
    space = space_id if space_id is not None else manifest.storyblok.space_id
    if space is None and not require_space:
        space = 0
    if space is None:
        err_console.print(
            "[red]No Storyblok space id: pass --space-id or set storyblok.space_id in blokgen.toml[/red]"
        )
        raise typer.Exit(1)

    logger.debug("Loading schema %s for space %s", schema, space)
    try:
        graph = load_type_graph_file(schema)
        return build_components(
            graph,
            space,
            integration=manifest.commercetools,
            component_group_uuid=manifest.storyblok.component_group_uuid,
        )
    except BlokgenError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _load_manifest(path: Path) -> Manifest:
    try:
        return load_manifest(path)
    except BlokgenError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def generate(
    schema: SchemaArg,
    manifest_path: ManifestOption = Path(DEFAULT_MANIFEST),
    space_id: SpaceIdOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Terraform JSON file to write (stdout when omitted)"),
    ] = None,
) -> None:
    """
    Generate storyblok_component resources as Terraform JSON.

    Example:
        blokgen generate schema.graphql -o infra/components.tf.json
    """
    manifest = _load_manifest(manifest_path)
    components = _build(schema, manifest, space_id)
    stack = TerraformStack()

    if output is None:
        typer.echo(stack.dumps(components), nl=False)
        return

    try:
        stack.generate(components, output)
    except BlokgenError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    console.print(f"[green]✓[/green] Wrote {len(components)} components to {output}")


@app.command()
def inspect(
    schema: SchemaArg,
    manifest_path: ManifestOption = Path(DEFAULT_MANIFEST),
    space_id: SpaceIdOption = None,
) -> None:
    """Show the components and field kinds a schema maps to."""
    manifest = _load_manifest(manifest_path)
    components = _build(schema, manifest, space_id, require_space=False)

    for component in components:
        table = Table(title=f"{component.name} (root={component.is_root}, nestable={component.is_nestable})")
        table.add_column("Pos", justify="right")
        table.add_column("Key", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Required")
        for key, entry in component.schema_.items():
            required = "yes" if isinstance(entry, SchemaField) and entry.required else ""
            table.add_row(str(entry.position), key, entry.field.type, required)
        console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
