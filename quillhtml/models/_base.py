from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode for delta models from the environment.

    QUILLHTML_DELTA_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore
    """
    raw = (os.getenv("QUILLHTML_DELTA_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


_EXTRA = _env_extra_mode()


class DeltaModel(BaseModel):
    """
    Project-wide base model.

    Unknown keys (retain/delete ops, editor metadata) are ignored by default;
    switch at runtime by setting an env var before import:
      export QUILLHTML_DELTA_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(extra=_EXTRA)


__all__ = ["DeltaModel", "_env_extra_mode"]
