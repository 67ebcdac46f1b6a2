"""
Debug helpers for looking at the content items a delta produces.

These utilities are intended for troubleshooting renderer output. They do
not perform any I/O and can be safely used in tests.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..domain import ContentItem, TagMarker


def _marker_kind(marker: TagMarker) -> str:
    if marker.open is not None and marker.close is not None:
        return "pair"
    if marker.open is not None:
        return "open-only"
    if marker.close is not None:
        return "close-only"
    return "empty"


def describe_content(items: Sequence[ContentItem]) -> List[Dict[str, object]]:
    """Return one dictionary per content item.

    Each dict contains:
      - index: item index
      - content: the item's rewritten text (or None)
      - opens: open markup in emission order
      - closes: close markup in emission order (reversed list order)
      - kinds: marker kinds in list order (pair/open-only/close-only)
    """
    out: List[Dict[str, object]] = []
    for idx, item in enumerate(items):
        out.append(
            {
                "index": idx,
                "content": item.content,
                "opens": [t.open for t in item.tags if t.open is not None],
                "closes": [t.close for t in reversed(item.tags) if t.close is not None],
                "kinds": [_marker_kind(t) for t in item.tags],
            }
        )
    return out
