"""Read the code selection a command operates on."""

from __future__ import annotations

import re
import sys
from pathlib import Path

import typer
from rich.console import Console

console = Console()

_LINE_RANGE_RE = re.compile(r"^\s*(\d+)\s*[-:]\s*(\d+)\s*$")
_TYPED_SUFFIXES: frozenset[str] = frozenset({".ts", ".tsx", ".mts", ".cts"})


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def parse_line_range(lines: str) -> tuple[int, int]:
    """Parse ``"A-B"`` (1-indexed, inclusive)."""
    match = _LINE_RANGE_RE.match(lines)
    if not match:
        _fail(f"Invalid line range {lines!r}; expected START-END, e.g. 10-25.")
    start, end = int(match.group(1)), int(match.group(2))
    if start < 1 or end < start:
        _fail(f"Invalid line range {lines!r}; START must be >= 1 and <= END.")
    return start, end


def read_selection(file: str | None, lines: str | None = None) -> str:
    """Read ``file`` (or stdin for None / ``-``), optionally narrowed to a line range."""
    if file is None or file == "-":
        text = sys.stdin.read()
    else:
        path = Path(file)
        if not path.is_file():
            _fail(f"File not found: {file}")
        text = path.read_text(encoding="utf-8", errors="replace")

    if lines:
        start, end = parse_line_range(lines)
        text = "".join(text.splitlines(keepends=True)[start - 1 : end])

    if not text.strip():
        _fail("Selection is empty. Select code to analyze.")
    return text


def resolve_typed(file: str | None, typescript: bool | None) -> bool:
    """Explicit flag wins; otherwise a .ts/.tsx host file means typed output."""
    if typescript is not None:
        return typescript
    if file is None or file == "-":
        return False
    return Path(file).suffix.lower() in _TYPED_SUFFIXES
