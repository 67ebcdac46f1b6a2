"""Concatenate content items into markup."""

from __future__ import annotations

from typing import Iterable, List

from ..domain import ContentItem


def emit(items: Iterable[ContentItem]) -> str:
    """Open tags in list order, then content, then close tags in reverse order."""
    fragments: List[str] = []
    for item in items:
        fragments.extend(tag.open for tag in item.tags if tag.open is not None)
        if item.content:
            fragments.append(item.content)
        fragments.extend(
            tag.close for tag in reversed(item.tags) if tag.close is not None
        )
    return "".join(fragments)
