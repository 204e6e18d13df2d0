"""CLI extract command: write a selection out as a component or hook module."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from react_extractor.cli.selection import read_selection, resolve_typed
from react_extractor.detection.naming import suggest_component_name, suggest_hook_name
from react_extractor.generator.writer import (
    InvalidNameError,
    build_generated_file,
    format_file,
    write_generated,
)
from react_extractor.models import Category
from react_extractor.pipeline import plan_extraction

console = Console()


class ExtractKind(StrEnum):
    AUTO = "auto"
    COMPONENT = "component"
    HOOK = "hook"


def extract_cmd(
    file: Annotated[
        str | None, typer.Argument(help="Source file to read ('-' or omitted for stdin).")
    ] = None,
    lines: Annotated[
        str | None, typer.Option(help="Line range to extract, e.g. 10-25.")
    ] = None,
    kind: Annotated[
        ExtractKind, typer.Option(help="What to extract; auto classifies the selection.")
    ] = ExtractKind.AUTO,
    name: Annotated[
        str | None, typer.Option(help="Component (PascalCase) or hook (useXxx) name.")
    ] = None,
    root: Annotated[
        Path, typer.Option(help="Project root holding components/ and hooks/.")
    ] = Path(),
    typescript: Annotated[
        bool | None,
        typer.Option(
            "--typescript/--javascript",
            help="Emit TypeScript or JavaScript (default: from the file extension).",
        ),
    ] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing files.")] = False,
    fmt: Annotated[
        bool, typer.Option("--format", help="Run prettier and eslint on the new file.")
    ] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print the module instead of writing it.")
    ] = False,
) -> None:
    """Extract a selection into its own component or hook file."""
    from react_extractor.config import Config
    from react_extractor.logging.logger import EventLogger

    config = Config()
    code = read_selection(file, lines)
    typed = resolve_typed(file, typescript)
    forced = None if kind == ExtractKind.AUTO else Category(kind.value)

    plan = plan_extraction(code, typed=typed, config=config, category=forced)
    category = forced or plan.category
    if category == Category.UNKNOWN:
        console.print(
            "[red]Unable to detect if selection contains a JSX component or hook logic.[/red] "
            "Use --kind component or --kind hook."
        )
        raise typer.Exit(code=1)

    if name is None:
        name = (
            suggest_component_name(code, plan.result)
            if category == Category.COMPONENT
            else suggest_hook_name(code)
        )

    try:
        generated = build_generated_file(plan, name, root, category=category, config=config)
    except InvalidNameError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if dry_run:
        typer.echo(generated.content)
        typer.echo(generated.usage)
        return

    target = Path(generated.path)
    if target.exists() and not force:
        overwrite = typer.confirm(f"{target.name} already exists. Overwrite?", default=False)
        if not overwrite:
            console.print("[dim]Aborted.[/dim]")
            raise typer.Exit(code=1)

    event_logger = EventLogger(config.log_dir)
    with event_logger.timed(
        f"extract.{category}", name=name, path=generated.path, typed=typed
    ) as event:
        path = write_generated(generated, overwrite=True)
        event["props"] = len(plan.props.props) if plan.props is not None else 0
        event["returns"] = len(plan.hook_returns)
        if fmt or config.format_generated:
            event["formatted"] = format_file(path)

    label = "Component" if category == Category.COMPONENT else "Hook"
    console.print(f"[green]{label} {name} extracted to {path}[/green]")
    console.print("Replace the selection with:")
    console.print(generated.usage, markup=False, highlight=False)
