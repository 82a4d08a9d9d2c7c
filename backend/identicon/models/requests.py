"""API request models."""

from __future__ import annotations

import re
from collections.abc import Mapping

from pydantic import BaseModel, Field
from starlette.datastructures import QueryParams

# Optional whitespace, optional sign, then digits; the rest is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(value: str | None) -> int:
    """Integer prefix of ``value``, 0 when there is none (``"80px"`` -> 80, ``"x"`` -> 0)."""
    if not value:
        return 0
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else 0


def _joined(params: QueryParams | Mapping[str, str], name: str) -> str | None:
    """All values of ``name`` (any case) joined with ", ", or None when absent."""
    items = params.multi_items() if isinstance(params, QueryParams) else params.items()
    values = [v for k, v in items if k.lower() == name]
    return ", ".join(values) if values else None


class IdenticonRequest(BaseModel):
    hash: str | None = Field(default=None, description="Hash string (u); short or missing uses the default")
    size: int = Field(default=0, description="Output edge in pixels (s); 0 means the default")
    transparent: bool = Field(default=False, description="Key out the background (t present)")

    @classmethod
    def from_query(cls, params: QueryParams | Mapping[str, str]) -> IdenticonRequest:
        return cls(
            hash=_joined(params, "u"),
            size=parse_leading_int(_joined(params, "s")),
            transparent=_joined(params, "t") is not None,
        )
