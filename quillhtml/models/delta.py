"""Pydantic models for Quill deltas and the top-level shape check."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, ValidationError, field_validator

from ..exceptions import QuillHtmlDeltaError
from ._base import DeltaModel

LOGGER = logging.getLogger(__name__)


class InsertOp(DeltaModel):
    """A single insert operation."""

    insert: Optional[Union[str, Dict[str, Any]]] = None
    """Text to insert; embeds (images, video) arrive as a mapping."""

    attributes: Optional[Dict[str, Any]] = None
    """Formatting attributes, in the order the editor produced them."""

    @field_validator("attributes", mode="before")
    @classmethod
    def _drop_non_mapping_attributes(cls, value: Any) -> Any:
        # PHP encoders write empty attribute sets as []; only that op loses them
        if value is not None and not isinstance(value, dict):
            LOGGER.debug(
                "quillhtml.delta.attributes_dropped type=%s", type(value).__name__
            )
            return None
        return value

    @property
    def text(self) -> Optional[str]:
        """The insert as text, or ``None`` for embeds and missing inserts."""
        return self.insert if isinstance(self.insert, str) else None


class Delta(DeltaModel):
    """A rich-text document: insert operations in document order."""

    ops: List[InsertOp] = Field(...)


def parse_delta(raw: Any, *, strict: bool = False) -> Optional[Delta]:
    """Parse ``raw`` (JSON text/bytes, a mapping or a ``Delta``) into a ``Delta``.

    Returns ``None`` when the input is not valid JSON or has no ``ops`` list.
    With ``strict=True`` a ``QuillHtmlDeltaError`` is raised instead.
    """
    if isinstance(raw, Delta):
        return raw

    def _fail(reason: str) -> Optional[Delta]:
        LOGGER.debug("quillhtml.delta.invalid %s", reason)
        if strict:
            raise QuillHtmlDeltaError(reason)
        return None

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            return _fail(f"delta is not UTF-8: {e}")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            return _fail(f"delta is not valid JSON: {e}")
    if not isinstance(raw, dict):
        return _fail(f"delta must be an object, got {type(raw).__name__}")
    if "ops" not in raw:
        return _fail("delta has no 'ops' collection")
    try:
        return Delta.model_validate(raw)
    except ValidationError as e:
        return _fail(f"delta failed validation: {e.error_count()} error(s)")
