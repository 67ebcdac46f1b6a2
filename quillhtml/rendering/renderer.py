"""
Pure renderer for Quill deltas.

Converts a delta into HTML. No I/O, and no state survives between calls:
each ``render`` builds its own content items and output buffer.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from ..domain import ContentItem
from ..models.delta import parse_delta
from .emitter import emit
from .options import RenderOptions
from .transform import build_content
from .validator import AttributeValidator

LOGGER = logging.getLogger(__name__)

OptionsLike = Union[RenderOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> RenderOptions:
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.from_mapping(options)


def build_delta_content(
    delta: Any,
    options: Optional[RenderOptions] = None,
    validator: Optional[AttributeValidator] = None,
) -> List[ContentItem]:
    parsed = parse_delta(delta)
    if parsed is None:
        LOGGER.debug("quillhtml.render.no_delta")
        return []
    return build_content(parsed, options or RenderOptions(), validator)


def render_delta(
    delta: Any,
    options: OptionsLike = None,
    validator: Optional[AttributeValidator] = None,
) -> str:
    """Render ``delta`` (JSON text, mapping or Delta) to an HTML string.

    Returns ``""`` when the delta is not valid JSON or has no ops.
    """
    return emit(build_delta_content(delta, _coerce_options(options), validator))


class HtmlRenderer:
    """Class-based interface for delta rendering.

    Holds only immutable options, so one instance can be reused and shared.
    """

    def __init__(
        self,
        options: OptionsLike = None,
        validator: Optional[AttributeValidator] = None,
    ):
        self.options = _coerce_options(options)
        self.validator = validator

    def content(self, delta: Any) -> List[ContentItem]:
        """Return the intermediate content items for ``delta``."""
        return build_delta_content(delta, self.options, self.validator)

    def render(self, delta: Any) -> str:
        """Render the delta to an HTML string."""
        return emit(self.content(delta))
