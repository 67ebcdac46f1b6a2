"""Command modules for the quillhtml CLI."""

from quillhtml.cli.commands import inspect, render

__all__ = ["inspect", "render"]
