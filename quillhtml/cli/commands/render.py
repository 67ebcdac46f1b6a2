"""Render command for the quillhtml CLI."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from quillhtml.cli.utils import inputs
from quillhtml.exceptions import QuillHtmlError
from quillhtml.rendering.renderer import HtmlRenderer
console = Console(stderr=True)


def main(
    source: str = typer.Argument("-", help="Delta JSON file, or - for stdin"),
    block: Optional[str] = typer.Option(None, "--block", help="Block tag name"),
    newline: Optional[str] = typer.Option(
        None, "--newline", help="Line-break tag name"
    ),
    tag: Optional[List[str]] = typer.Option(
        None, "--tag", help="Attribute tag override as NAME=TAG (repeatable)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write HTML to this file instead of stdout"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on an invalid delta instead of printing nothing"
    ),
):
    """Render a Quill delta to HTML."""
    try:
        options = inputs.build_options(block, newline, tag)
        delta = inputs.load_delta(source, strict)
        html = HtmlRenderer(options).render(delta)
    except QuillHtmlError as e:
        console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False
        )
        raise typer.Exit(1)

    if output is None:
        typer.echo(html)
        return
    try:
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] cannot write {output}: {e}")
        raise typer.Exit(1)
    console.print(f"Wrote [bold]{len(html)}[/bold] characters to {output}")
