"""
Main CLI entry point using Typer.

This module defines the command-line interface for SchemaSmith using Typer.
It provides two commands: render and check.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from schemasmith.utils import setup_logging

from .commands import DEFAULT_INDENT, check_command, render_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="schemasmith",
    help="SchemaSmith - Build JSON Schema documents from Python",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("render")
def render(
    target: Annotated[
        str,
        typer.Argument(help="Builder location as 'package.module:attribute'")
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the schema JSON")
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", "-i", help="JSON indentation", min=0)
    ] = DEFAULT_INDENT,
    check: Annotated[
        bool,
        typer.Option("--check", help="Check the document against the Draft 7 meta-schema")
    ] = False,
    show_properties: Annotated[
        bool,
        typer.Option("--show-properties", help="Display a table of top-level properties")
    ] = False,
    app_dir: Annotated[
        Path,
        typer.Option("--app-dir", help="Directory to import the target module from", file_okay=False)
    ] = Path("."),
) -> None:
    """
    Materialize a schema builder and print or save the JSON document.

    Example:
        schemasmith render models.user:user_schema \\
            --output user.schema.json \\
            --check
    """
    try:
        ok = render_command(
            target=target,
            output_path=output,
            indent=indent,
            check=check,
            show_properties=show_properties,
            app_dir=app_dir
        )
    except (ValueError, OSError) as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)

    if not ok:
        raise typer.Exit(code=1)


@app.command("check")
def check(
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the schema")
    ] = False,
) -> None:
    """
    Check an existing JSON schema file against the Draft 7 meta-schema.

    Example:
        schemasmith check --schema user.schema.json --show-schema
    """
    try:
        ok = check_command(schema_path=schema, show_schema=show_schema)
    except ValueError as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)

    if not ok:
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    SchemaSmith - Build JSON Schema documents from Python.

    Materializes builder trees and checks documents against the Draft 7 meta-schema.
    """
    if version:
        from schemasmith import __version__
        typer.echo(f"SchemaSmith version {__version__}")
        raise typer.Exit()

    setup_logging(level="DEBUG" if verbose else "WARNING")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
