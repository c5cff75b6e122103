"""Agronomic knowledge table used by the income prediction engine.

The table is keyed by crop, then by soil type.  Each leaf is an
``AgronomicProfile``::

    {
        "Rice": {
            "Loamy": {
                "yield": {"min": 3.2, "max": 4.5, "avg": 3.8},
                "price": {"min": 8500, "max": 12000, "avg": 10000},
                "expenses": {"Low": 25000, "Medium": 35000, "High": 45000, "Premium": 60000},
                "risks": ["Weather dependency", "Market price fluctuation"],
                "recommendations": ["Use certified seeds", ...]
            }
        }
    }

Only populated (crop, soil) pairs exist; a missing pair is absent, not zero.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from agrismart.models.enums import InvestmentTierEnum


class ValueRange(BaseModel):
    """min / max / avg triple (tons per acre, or currency per ton)."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0)
    max: float = Field(ge=0)
    avg: float = Field(ge=0)

    @model_validator(mode="after")
    def _validate_order(self) -> "ValueRange":
        if not self.min <= self.avg <= self.max:
            raise ValueError("expected min <= avg <= max")
        return self


class AgronomicProfile(BaseModel):
    """Static (crop, soil type) row of yield, price, expense and advice data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    yield_range: ValueRange = Field(alias="yield")
    price: ValueRange
    expenses: Mapping[InvestmentTierEnum, float]
    risks: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _validate_expenses(self) -> "AgronomicProfile":
        missing = [tier.value for tier in InvestmentTierEnum if tier not in self.expenses]
        if missing:
            raise ValueError(f"expenses missing investment tiers: {', '.join(missing)}")
        if any(amount < 0 for amount in self.expenses.values()):
            raise ValueError("expenses must be non-negative")
        return self


_TABLE_ADAPTER = TypeAdapter(dict[str, dict[str, AgronomicProfile]])


class AgronomicProfileTable:
    """Read-only crop -> soil type -> profile lookup."""

    def __init__(self, profiles: Mapping[str, Mapping[str, AgronomicProfile]]):
        self._profiles: Mapping[str, Mapping[str, AgronomicProfile]] = MappingProxyType(
            {crop: MappingProxyType(dict(soils)) for crop, soils in profiles.items()}
        )

    @classmethod
    def from_payload(cls, payload: Any) -> "AgronomicProfileTable":
        """Validate a raw nested mapping (e.g. decoded JSON) into a table."""
        return cls(_TABLE_ADAPTER.validate_python(payload))

    def has_crop(self, crop: str) -> bool:
        return crop in self._profiles

    def crops(self) -> list[str]:
        return list(self._profiles)

    def soils_for(self, crop: str) -> list[str]:
        return list(self._profiles.get(crop, {}))

    def lookup(self, crop: str, soil_type: str) -> AgronomicProfile | None:
        soils = self._profiles.get(crop)
        if soils is None:
            return None
        return soils.get(soil_type)

    def coverage(self) -> dict[str, list[str]]:
        return {crop: list(soils) for crop, soils in self._profiles.items()}

    def __len__(self) -> int:
        return sum(len(soils) for soils in self._profiles.values())

    def __repr__(self) -> str:
        return f"<AgronomicProfileTable crops={len(self._profiles)} profiles={len(self)}>"
