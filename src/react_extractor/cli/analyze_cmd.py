"""CLI analyze command: classify a selection as component or hook."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from react_extractor.cli.selection import read_selection
from react_extractor.detection.engine import DetectionEngine, detect_export_type
from react_extractor.detection.types import ClassificationResult
from react_extractor.models import ExtractionRecommendation

console = Console()

_CATEGORY_STYLES: dict[str, str] = {
    "component": "green",
    "hook": "cyan",
    "unknown": "red",
}


def _render(result: ClassificationResult, recommendation: ExtractionRecommendation) -> None:
    style = _CATEGORY_STYLES.get(result.category, "white")
    console.print(
        f"Category:   [{style}]{result.category}[/{style}]  "
        f"(confidence {result.confidence:.2f})"
    )
    console.print(f"Complexity: {result.complexity}")
    if result.mixed_content:
        console.print("[yellow]Mixed content: JSX and hooks[/yellow]")

    if result.patterns:
        table = Table(title="Patterns")
        table.add_column("Kind", style="cyan")
        table.add_column("Conf", justify="right")
        table.add_column("Weight", justify="right")
        table.add_column("Span", justify="right")
        table.add_column("Text", max_width=60)
        for p in result.patterns:
            first_line = p.text.splitlines()[0] if p.text else ""
            table.add_row(
                str(p.kind),
                f"{p.confidence:.1f}",
                str(p.weight) if p.weight else "-",
                f"{p.start}-{p.end}",
                escape(first_line),
            )
        console.print(table)

    for suggestion in result.suggestions:
        console.print(f"  [yellow]*[/yellow] {escape(suggestion)}", highlight=False)

    verdict = "[green]extract[/green]" if recommendation.should_extract else "[dim]skip[/dim]"
    console.print(f"\nRecommendation: {verdict} - {recommendation.reason}")
    if recommendation.suggested_name:
        console.print(f"Suggested name: [bold]{recommendation.suggested_name}[/bold]")


def analyze_cmd(
    file: Annotated[
        str | None, typer.Argument(help="Source file to read ('-' or omitted for stdin).")
    ] = None,
    lines: Annotated[
        str | None, typer.Option(help="Line range to analyze, e.g. 10-25.")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    legacy: Annotated[
        bool, typer.Option("--legacy", help="Unscored single-shot detection only.")
    ] = False,
) -> None:
    """Classify a selection and explain the verdict."""
    code = read_selection(file, lines)

    if legacy:
        category = detect_export_type(code)
        if as_json:
            typer.echo(json.dumps({"category": str(category)}))
        else:
            console.print(f"Category: {category}")
        return

    engine = DetectionEngine()
    result = engine.analyze(code)
    recommendation = engine.recommend(code, result)

    if as_json:
        payload = {
            "result": asdict(result),
            "recommendation": recommendation.model_dump(mode="json"),
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    _render(result, recommendation)
