"""CLI props command: list the props a JSX selection depends on."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from react_extractor.cli.selection import read_selection
from react_extractor.dependencies import extract_props

console = Console()


def props_cmd(
    file: Annotated[
        str | None, typer.Argument(help="Source file to read ('-' or omitted for stdin).")
    ] = None,
    lines: Annotated[
        str | None, typer.Option(help="Line range to analyze, e.g. 10-25.")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Infer props, complex expressions and conditional names."""
    code = read_selection(file, lines)
    analysis = extract_props(code)

    if as_json:
        typer.echo(json.dumps(asdict(analysis), indent=2))
        return

    if analysis.parse_error:
        console.print(f"[dim]Lexical fallback used ({escape(analysis.parse_error)})[/dim]")

    if not analysis.props:
        console.print("[dim]No props detected.[/dim]")
    else:
        table = Table(title="Props")
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        table.add_column("Inferred")
        table.add_column("Usages", max_width=60)
        for prop in analysis.props:
            usages = ", ".join(f"{u.expression} ({u.kind})" for u in prop.usages)
            table.add_row(prop.name, str(prop.type), escape(prop.inferred_type), escape(usages))
        console.print(table)

    if analysis.complex_expressions:
        console.print("\n[bold]Complex expressions[/bold]")
        for expr in analysis.complex_expressions:
            console.print(f"  {escape(expr.expression)} -> {expr.suggested_prop_name}")

    if analysis.conditional_props:
        console.print(f"\nConditional: {', '.join(analysis.conditional_props)}")

    console.print(f"Complexity: {analysis.total_complexity}")
