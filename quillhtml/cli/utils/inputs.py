"""Input and option helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from quillhtml.exceptions import QuillHtmlError, QuillHtmlOptionError
from quillhtml.models import parse_delta
from quillhtml.rendering.options import RenderOptions

LOGGER = logging.getLogger(__name__)


def read_source(source: str) -> str:
    """Read delta JSON from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        LOGGER.debug("quillhtml.cli.read stdin")
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise QuillHtmlError(f"cannot read {source}: {e.strerror or e}") from e


def parse_tag_overrides(values: Optional[List[str]]) -> Dict[str, Dict[str, str]]:
    """Turn ``NAME=TAG`` pairs into an ``attributes`` option mapping."""
    overrides: Dict[str, Dict[str, str]] = {}
    for value in values or []:
        name, sep, tag = value.partition("=")
        if not sep or not name.strip() or not tag.strip():
            raise QuillHtmlOptionError(f"expected NAME=TAG, got {value!r}")
        overrides[name.strip()] = {"tag": tag.strip()}
    return overrides


def build_options(
    block: Optional[str], newline: Optional[str], tags: Optional[List[str]]
) -> RenderOptions:
    raw: Dict[str, Any] = {}
    if block:
        raw["block"] = block
    if newline:
        raw["newline"] = newline
    overrides = parse_tag_overrides(tags)
    if overrides:
        raw["attributes"] = overrides
    return RenderOptions.from_mapping(raw)


def load_delta(source: str, strict: bool) -> Any:
    """Read ``source``; in strict mode the delta is shape-checked and errors raise."""
    raw = read_source(source)
    if strict:
        return parse_delta(raw, strict=True)
    return raw
