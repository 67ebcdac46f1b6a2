#!/usr/bin/env python
"""Command line interface for quillhtml."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from quillhtml.cli.commands import inspect, render

app = typer.Typer(help="Render Quill deltas to HTML")

# Add commands
app.command("render", help="Render a delta to HTML")(render.main)
app.command("inspect", help="Show the intermediate content items")(inspect.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr"
    ),
):
    """Render Quill rich-text deltas to HTML."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
