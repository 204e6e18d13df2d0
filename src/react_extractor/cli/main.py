"""Root Typer app for react-extractor CLI."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="react-extractor",
    help="react-extractor: Classify React selections and extract components or hooks.",
    no_args_is_help=True,
)


def _register_commands() -> None:
    """Register all CLI commands."""
    from react_extractor.cli.analyze_cmd import analyze_cmd
    from react_extractor.cli.extract_cmd import extract_cmd
    from react_extractor.cli.props_cmd import props_cmd

    app.command(name="analyze")(analyze_cmd)
    app.command(name="props")(props_cmd)
    app.command(name="extract")(extract_cmd)


_register_commands()
