"""Reusable Pydantic Annotated types for extension-wide validation.

Constrained types used across the models are defined here once,
so models can simply annotate their fields::

    from iheart_radio_extension.domain.shared.types import NonEmptyStr, StationLimit

    class MyModel(BaseModel):
        name: NonEmptyStr
        limit: StationLimit
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveFloat = Annotated[float, Field(gt=0.0)]
"""Float > 0.0."""

StationLimit = Annotated[int, Field(ge=1, le=5000)]
"""Station list page size accepted by the directory API: 1 … 5 000."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""
