"""Map a delta attribute to the element that renders it."""

from __future__ import annotations

import html
from typing import Any, Literal, Union

from .options import RenderOptions, TagDefinition


def resolve_attribute(
    name: str, value: Any, options: RenderOptions
) -> Union[TagDefinition, Literal[False]]:
    """Return the tag definition for ``name``, or ``False`` if it is not mapped.

    Toggles (bold, italic, ...) return their definition as configured;
    parameterised attributes such as ``link`` get their placeholder filled
    with ``value``.
    """
    definition = options.attributes.get(name)
    if definition is None:
        return False
    if definition.is_parameterised:
        return definition.fill(value)
    return definition


def open_tag(definition: TagDefinition) -> str:
    parts = [definition.tag]
    for attr, value in definition.attributes.items():
        if value is None:
            continue
        parts.append(f'{attr}="{html.escape(value)}"')
    return "<" + " ".join(parts) + ">"


def close_tag(definition: TagDefinition) -> str:
    return f"</{definition.tag}>"
