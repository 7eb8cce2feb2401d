"""Base models for fleetdash.

Internal state records inherit from :class:`FleetModel`: frozen, and
strict about unknown fields so typos in seeds fail loudly.

Documents received from external providers inherit from
:class:`ProviderModel` which provides:

* ``extra="ignore"`` so only the fields we read are modelled.
* A ``model_validator(mode="before")`` that strips provider sentinel
  values (``None``, ``""``, ``"--"``, NaN) so the field default is used,
  or validation fails for required fields.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

# Sentinel strings providers use for "not available".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


class FleetModel(BaseModel):
    """Base for immutable internal records."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ProviderModel(BaseModel):
    """Base for external provider documents."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_provider_values(cls, values: Any) -> Any:
        """Strip sentinel values before field validation."""
        if not isinstance(values, dict):
            return values
        return ProviderModel._clean_dict(values)
