"""Turn raw insert text into block splits and inline line breaks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from ..domain import TagMarker
from .options import RenderOptions

# Two or more newlines, swallowing the indentation of the next block
_BLOCK_SPLIT = re.compile(r"\n{2,} *")


@dataclass(frozen=True)
class Segment:
    text: str
    markers: List[TagMarker] = field(default_factory=list)


def convert_newlines(text: str, options: RenderOptions) -> Segment:
    """Rewrite ``text`` so blank lines split blocks and single newlines break lines.

    When at least one split occurs the segment also reports the boundary as a
    close-only/open-only block marker pair. The split markup itself is
    substituted into the text at every occurrence.
    """
    if "\n" not in text:
        return Segment(text)

    markers: List[TagMarker] = []
    if _BLOCK_SPLIT.search(text):
        markers.append(TagMarker(open=None, close=options.block_close))
        markers.append(TagMarker(open=options.block_open, close=None))

    text = _BLOCK_SPLIT.sub(lambda _: options.block_close + options.block_open, text)
    text = text.replace("\n", options.line_break + "\n")
    return Segment(text, markers)
