"""
Delta → content item transform.

Each insert op becomes exactly one ContentItem: one TagMarker per resolved
attribute plus the op's text with newlines rewritten into markup. The first
and last items are then wrapped in the default block element.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from ..domain import ContentItem, TagMarker
from ..models.delta import Delta, InsertOp
from .attributes import close_tag, open_tag, resolve_attribute
from .blocks import normalize_blocks
from .newlines import convert_newlines
from .options import RenderOptions
from .validator import AttributeValidator, validator_for

LOGGER = logging.getLogger(__name__)


def _strip_trailing_breaks(
    content: Optional[str], options: RenderOptions
) -> Optional[str]:
    # Drop dangling line breaks and empty trailing blocks at the end of the document
    if content is None:
        return None
    artifacts = (options.line_break, options.block_close + options.block_open)
    stripped = content.rstrip()
    while True:
        for artifact in artifacts:
            if stripped.endswith(artifact):
                stripped = stripped[: -len(artifact)].rstrip()
                break
        else:
            return stripped


def _build_item(
    index: int,
    op: InsertOp,
    options: RenderOptions,
    validate: AttributeValidator,
) -> ContentItem:
    item = ContentItem()
    for name, value in (op.attributes or {}).items():
        if not validate(name, value):
            LOGGER.debug(
                "quillhtml.transform.attribute_skipped index=%d name=%s", index, name
            )
            continue
        definition = resolve_attribute(name, value, options)
        if definition is False:
            continue
        item.tags.append(
            TagMarker(open=open_tag(definition), close=close_tag(definition))
        )

    text = op.text
    if text is None and op.insert is not None:
        LOGGER.debug("quillhtml.transform.embed_skipped index=%d", index)
    if text is not None and text.strip():
        segment = convert_newlines(html.escape(text, quote=False), options)
        if segment.markers:
            # The split markup is already part of segment.text
            LOGGER.debug("quillhtml.transform.block_split index=%d", index)
        item.content = segment.text
    return item


def build_content(
    delta: Optional[Delta],
    options: RenderOptions,
    validator: Optional[AttributeValidator] = None,
) -> List[ContentItem]:
    """Build the content items for ``delta``; ``None`` yields an empty list."""
    if delta is None:
        return []
    validate = validator or validator_for(options)

    items: List[ContentItem] = []
    last = len(delta.ops) - 1
    for index, op in enumerate(delta.ops):
        item = _build_item(index, op, options, validate)
        if index == last:
            item.content = _strip_trailing_breaks(item.content, options)
        items.append(item)

    if items:
        normalize_blocks(items, options)
    LOGGER.debug("quillhtml.transform.items count=%d", len(items))
    return items
