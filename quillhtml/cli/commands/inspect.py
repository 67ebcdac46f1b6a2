"""Inspect command: show the content items a delta produces."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from quillhtml.cli.utils import inputs
from quillhtml.exceptions import QuillHtmlError
from quillhtml.rendering.debug_tools import describe_content
from quillhtml.rendering.renderer import HtmlRenderer
console = Console()
err_console = Console(stderr=True)


def main(
    source: str = typer.Argument("-", help="Delta JSON file, or - for stdin"),
    block: Optional[str] = typer.Option(None, "--block", help="Block tag name"),
    newline: Optional[str] = typer.Option(
        None, "--newline", help="Line-break tag name"
    ),
    tag: Optional[List[str]] = typer.Option(
        None, "--tag", help="Attribute tag override as NAME=TAG (repeatable)"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on an invalid delta instead of showing nothing"
    ),
):
    """Print each content item's markers and text."""
    try:
        options = inputs.build_options(block, newline, tag)
        delta = inputs.load_delta(source, strict)
        items = HtmlRenderer(options).content(delta)
    except QuillHtmlError as e:
        err_console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False
        )
        raise typer.Exit(1)

    if not items:
        console.print("No content items")
        return

    table = Table("#", "Opens", "Content", "Closes", "Markers")
    for row in describe_content(items):
        table.add_row(
            str(row["index"]),
            Text("".join(row["opens"])),
            Text(repr(row["content"])),
            Text("".join(row["closes"])),
            ", ".join(row["kinds"]),
        )
    console.print(table)
