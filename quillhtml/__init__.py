"""Render Quill rich-text deltas to HTML."""

from .domain import ContentItem, TagMarker
from .exceptions import QuillHtmlDeltaError, QuillHtmlError, QuillHtmlOptionError
from .models import Delta, InsertOp, parse_delta
from .rendering.options import RenderOptions, TagDefinition
from .rendering.renderer import HtmlRenderer, render_delta

__all__ = [
    "HtmlRenderer",
    "render_delta",
    "RenderOptions",
    "TagDefinition",
    "Delta",
    "InsertOp",
    "parse_delta",
    "ContentItem",
    "TagMarker",
    "QuillHtmlError",
    "QuillHtmlOptionError",
    "QuillHtmlDeltaError",
]
