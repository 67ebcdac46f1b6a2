"""
Attribute whitelist consulted before any attribute is resolved to a tag.

The whitelist is derived from the render options: attributes whose
definition has a placeholder (``link``) take a non-empty string value,
every other configured attribute is a toggle and must be exactly ``True``.
Names with no definition are never valid.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .options import RenderOptions

AttributeValidator = Callable[[str, Any], bool]

_DEFAULT_OPTIONS = RenderOptions()


def is_attribute_valid(
    name: str, value: Any, options: Optional[RenderOptions] = None
) -> bool:
    definition = (options or _DEFAULT_OPTIONS).attributes.get(name)
    if definition is None:
        return False
    if definition.is_parameterised:
        return isinstance(value, str) and len(value) > 0
    return value is True


def validator_for(options: RenderOptions) -> AttributeValidator:
    """Bind ``is_attribute_valid`` to one set of options."""

    def _validate(name: str, value: Any) -> bool:
        return is_attribute_valid(name, value, options)

    return _validate
