"""Guarantee the rendered document starts and ends inside a block element."""

from __future__ import annotations

from typing import List

from ..domain import ContentItem, TagMarker
from .options import RenderOptions


def normalize_blocks(items: List[ContentItem], options: RenderOptions) -> None:
    """Open the default block before the first item and close it after the last.

    Always wraps, even when an item already carries a block marker.
    """
    if not items:
        return
    first = items[0]
    first.tags.insert(0, TagMarker(open=options.block_open, close=None))
    # Closes are emitted in reverse list order, so the block close goes first
    last = items[-1]
    last.tags.insert(0, TagMarker(open=None, close=options.block_close))
