"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted schema documents
- Property summary tables
- Meta-schema violations
- Success/failure indicators
"""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from schemasmith.validation import ValidationError


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None, indent: int = 2) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
        indent: Indentation used when data is not already a string
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=indent)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False, word_wrap=True)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_schema(document: Dict, title: str = "Schema", indent: int = 2) -> None:
    """Print a schema document with syntax highlighting."""
    print_json(document, title, indent=indent)


def print_validation_errors(errors: List[ValidationError]) -> None:
    """
    Print meta-schema violations in a formatted list.

    Args:
        errors: Violations reported by check_schema()
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Schema Errors:[/bold red]")
    for error in errors:
        console.print(f"  [red]•[/red] At [cyan]{escape(error.path or 'root')}[/cyan]: {escape(error.message)}")
    console.print()


def print_property_table(document: Dict[str, Any], title: str = "Properties") -> None:
    """
    Print the top-level properties of an object schema in a table.

    Args:
        document: Materialized schema document
        title: Table title
    """
    properties = document.get("properties") or {}
    if not properties:
        print_info("Schema has no top-level properties")
        return

    required = set(document.get("required", []))

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Property", style="cyan", width=20)
    table.add_column("Type", style="white", width=12)
    table.add_column("Required", justify="center", width=10)
    table.add_column("Constraints", style="dim", width=40)

    for name, prop in properties.items():
        if not isinstance(prop, dict):
            table.add_row(escape(name), "?", "", escape(repr(prop)))
            continue

        prop_type = prop.get("type") or next(
            (key for key in ("anyOf", "oneOf", "allOf") if key in prop), "-"
        )
        constraints = ", ".join(
            f"{key}={value}" for key, value in prop.items()
            if key not in ("type", "title", "description", "properties", "items", "anyOf", "oneOf", "allOf")
        )
        required_icon = "[green]✓[/green]" if name in required else ""

        table.add_row(escape(name), str(prop_type), required_icon, escape(constraints))

    console.print()
    console.print(table)
    console.print()
