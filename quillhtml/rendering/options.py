"""
Render configuration for Quill delta → HTML output.

Centralizes the attribute → tag map and the block/line-break tag names so
callers can tune output without touching core logic. Options are immutable;
``with_option`` and ``with_attribute_option`` return modified copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..exceptions import QuillHtmlOptionError

OPTION_NAMES = ("attributes", "block", "newline")


@dataclass(frozen=True)
class TagDefinition:
    """The element an attribute maps to.

    Static attributes whose value is ``None`` are placeholders filled with
    the delta attribute's value at resolution time. ``value_attribute``
    names an attribute that always takes that value, even when a static
    value is configured for it (``href`` for links).
    """

    tag: str
    attributes: Mapping[str, Optional[str]] = field(default_factory=dict, hash=False)
    value_attribute: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def is_parameterised(self) -> bool:
        return self.value_attribute is not None or any(
            v is None for v in self.attributes.values()
        )

    def fill(self, value: Any) -> "TagDefinition":
        filled = {
            k: (str(value) if v is None else v) for k, v in self.attributes.items()
        }
        if self.value_attribute is not None:
            filled[self.value_attribute] = str(value)
        return replace(self, attributes=filled)


def _default_attributes() -> Dict[str, TagDefinition]:
    return {
        "bold": TagDefinition("strong"),
        "italic": TagDefinition("em"),
        "underline": TagDefinition("u"),
        "strike": TagDefinition("s"),
        "link": TagDefinition("a", {"href": None}, value_attribute="href"),
    }


def _check_tag(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise QuillHtmlOptionError(
            f"{name} must be a non-empty tag name, got {value!r}"
        )
    return value.strip()


def _merge_definition(
    attribute: str, current: Optional[TagDefinition], value: Any
) -> TagDefinition:
    if isinstance(value, TagDefinition):
        _check_tag(f"attributes.{attribute}.tag", value.tag)
        return value
    if isinstance(value, str):
        value = {"tag": value}
    if not isinstance(value, Mapping):
        raise QuillHtmlOptionError(
            f"attributes.{attribute} must be a mapping or TagDefinition, got {value!r}"
        )
    unknown = set(value) - {"tag", "attributes"}
    if unknown:
        raise QuillHtmlOptionError(
            f"attributes.{attribute} has unknown keys: {', '.join(sorted(unknown))}"
        )
    tag = value.get("tag", current.tag if current else None)
    tag = _check_tag(f"attributes.{attribute}.tag", tag)
    static: Dict[str, Optional[str]] = dict(current.attributes) if current else {}
    extra = value.get("attributes") or {}
    if not isinstance(extra, Mapping):
        raise QuillHtmlOptionError(
            f"attributes.{attribute}.attributes must be a mapping, got {extra!r}"
        )
    static.update({str(k): (None if v is None else str(v)) for k, v in extra.items()})
    return TagDefinition(tag, static, current.value_attribute if current else None)


@dataclass(frozen=True)
class RenderOptions:
    attributes: Mapping[str, TagDefinition] = field(
        default_factory=_default_attributes, hash=False
    )

    # Block container wrapping paragraphs
    block: str = "p"

    # Inline line-break element, emitted self-closing
    newline: str = "br"

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def block_open(self) -> str:
        return f"<{self.block}>"

    @property
    def block_close(self) -> str:
        return f"</{self.block}>"

    @property
    def line_break(self) -> str:
        return f"<{self.newline} />"

    @classmethod
    def from_mapping(
        cls, options: Optional[Mapping[str, Any]] = None
    ) -> "RenderOptions":
        """Build options from a plain mapping, merged over the defaults.

        Recognized keys are ``attributes``, ``block`` and ``newline``. Each
        ``attributes`` entry is merged field by field over the default
        definition of the same name; ``None`` removes the mapping.
        """
        result = cls()
        for name, value in (options or {}).items():
            result = result.with_option(name, value)
        return result

    def with_option(self, name: str, value: Any) -> "RenderOptions":
        if name not in OPTION_NAMES:
            raise QuillHtmlOptionError(
                f"unknown option {name!r}; expected one of {', '.join(OPTION_NAMES)}"
            )
        if name == "attributes":
            if not isinstance(value, Mapping):
                raise QuillHtmlOptionError(
                    f"attributes must be a mapping, got {value!r}"
                )
            merged = dict(self.attributes)
            for attribute, definition in value.items():
                if definition is None:
                    merged.pop(attribute, None)
                else:
                    merged[attribute] = _merge_definition(
                        attribute, merged.get(attribute), definition
                    )
            return replace(self, attributes=merged)
        return replace(self, **{name: _check_tag(name, value)})

    def with_attribute_option(
        self,
        attribute: str,
        tag: Optional[str] = None,
        attributes: Optional[Mapping[str, Optional[str]]] = None,
    ) -> "RenderOptions":
        """Return options with one attribute definition overridden or added."""
        override: Dict[str, Any] = {}
        if tag is not None:
            override["tag"] = tag
        if attributes is not None:
            override["attributes"] = attributes
        return self.with_option("attributes", {attribute: override})
