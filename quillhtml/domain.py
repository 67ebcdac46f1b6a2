# quillhtml/domain.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TagMarker:
    """One side, both sides or neither side of an element around a content item.

    ``open=None`` closes an element opened by an earlier item; ``close=None``
    opens an element that a later item closes.
    """

    open: Optional[str] = None
    close: Optional[str] = None


@dataclass
class ContentItem:
    content: Optional[str] = None
    tags: List[TagMarker] = field(default_factory=list)
