"""Income prediction engine: pure projection over the agronomic knowledge table."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from agrismart.models.enums import ConfidenceLabelEnum, InvestmentTierEnum
from agrismart.models.profiles import AgronomicProfileTable

DEFAULT_VARIETY = "Standard"
DEFAULT_SEASON = "Current"

YIELD_MULTIPLIERS: Mapping[InvestmentTierEnum, float] = MappingProxyType(
	{
		InvestmentTierEnum.low: 0.8,
		InvestmentTierEnum.medium: 0.95,
		InvestmentTierEnum.high: 1.1,
		InvestmentTierEnum.premium: 1.25,
	}
)

CONFIDENCE_LABELS: Mapping[InvestmentTierEnum, ConfidenceLabelEnum] = MappingProxyType(
	{
		InvestmentTierEnum.low: ConfidenceLabelEnum.low_medium,
		InvestmentTierEnum.medium: ConfidenceLabelEnum.medium,
		InvestmentTierEnum.high: ConfidenceLabelEnum.medium_high,
		InvestmentTierEnum.premium: ConfidenceLabelEnum.high,
	}
)


class PredictionError(ValueError):
	"""User-correctable prediction input error with a stable machine code."""

	code = "prediction_error"
	default_detail = "Invalid prediction request"

	def __init__(self, detail: str | None = None) -> None:
		self.detail = detail or self.default_detail
		super().__init__(self.detail)


class MissingFieldsError(PredictionError):
	code = "missing_fields"
	default_detail = "Please fill in all required fields"

	def __init__(self, fields: Sequence[str]) -> None:
		self.fields = tuple(fields)
		super().__init__()


class InvalidAreaError(PredictionError):
	code = "invalid_area"
	default_detail = "Area must be a positive number of acres"


class InvalidInvestmentTierError(PredictionError):
	code = "invalid_investment_tier"
	default_detail = "Investment level must be one of Low, Medium, High, Premium"


class UnknownCropError(PredictionError):
	code = "unknown_crop"
	default_detail = "Prediction data not available for selected crop"


class UnknownSoilProfileError(PredictionError):
	code = "unknown_soil_profile"
	default_detail = "Prediction data not available for selected soil type"


@dataclass(frozen=True, slots=True)
class PredictionRequest:
	"""Raw form values; blank strings mean "not provided"."""

	crop: str = ""
	area: Any = ""
	soil_type: str = ""
	investment_level: str = ""
	variety: str = ""
	season: str = ""


@dataclass(frozen=True, slots=True)
class PredictionResult:
	crop: str
	variety: str
	area: float
	soil_type: str
	season: str
	investment_level: InvestmentTierEnum
	expected_yield: float
	yield_per_acre: float
	total_income: float
	total_expenses: float
	net_profit: float
	profit_margin: float | None
	cost_per_acre: float
	roi: float | None
	confidence: ConfidenceLabelEnum
	risks: tuple[str, ...]
	recommendations: tuple[str, ...]


def _is_blank(value: Any) -> bool:
	if value is None:
		return True
	return isinstance(value, str) and not value.strip()


def _parse_area(raw: Any) -> float:
	if isinstance(raw, bool):
		raise InvalidAreaError()
	try:
		area = float(raw.strip() if isinstance(raw, str) else raw)
	except (TypeError, ValueError) as exc:
		raise InvalidAreaError() from exc
	if not math.isfinite(area) or area <= 0:
		raise InvalidAreaError()
	return area


def _parse_tier(raw: str) -> InvestmentTierEnum:
	try:
		return InvestmentTierEnum(raw.strip())
	except ValueError as exc:
		raise InvalidInvestmentTierError() from exc


def profit_margin(net_profit: float, total_income: float) -> float | None:
	"""Net profit as a percentage of income; ``None`` when there is no income."""
	if total_income == 0:
		return None
	return net_profit / total_income * 100


def return_on_investment(net_profit: float, total_expenses: float) -> float | None:
	"""Net profit as a percentage of what was spent; ``None`` when nothing was spent."""
	if total_expenses == 0:
		return None
	return net_profit / total_expenses * 100


def compute_prediction(
	request: PredictionRequest,
	profiles: AgronomicProfileTable,
) -> PredictionResult:
	"""Project yield, income, expenses and profit for one crop/soil/area/tier.

	Raises a ``PredictionError`` subclass for the first failing check, in order:
	missing required fields, malformed area or tier, unknown crop, unknown soil
	profile for that crop.
	"""
	required = {
		"crop": request.crop,
		"area": request.area,
		"soil_type": request.soil_type,
		"investment_level": request.investment_level,
	}
	missing = [name for name, value in required.items() if _is_blank(value)]
	if missing:
		raise MissingFieldsError(missing)

	area = _parse_area(request.area)
	tier = _parse_tier(request.investment_level)
	crop = request.crop.strip()
	soil_type = request.soil_type.strip()

	if not profiles.has_crop(crop):
		raise UnknownCropError()
	profile = profiles.lookup(crop, soil_type)
	if profile is None:
		raise UnknownSoilProfileError()

	total_expenses = profile.expenses[tier] * area
	expected_yield = profile.yield_range.avg * YIELD_MULTIPLIERS[tier] * area
	total_income = expected_yield * profile.price.avg
	net_profit = total_income - total_expenses

	return PredictionResult(
		crop=crop,
		variety=(request.variety or "").strip() or DEFAULT_VARIETY,
		area=area,
		soil_type=soil_type,
		season=(request.season or "").strip() or DEFAULT_SEASON,
		investment_level=tier,
		expected_yield=expected_yield,
		yield_per_acre=expected_yield / area,
		total_income=total_income,
		total_expenses=total_expenses,
		net_profit=net_profit,
		profit_margin=profit_margin(net_profit, total_income),
		cost_per_acre=total_expenses / area,
		roi=return_on_investment(net_profit, total_expenses),
		confidence=CONFIDENCE_LABELS[tier],
		risks=profile.risks,
		recommendations=profile.recommendations,
	)
