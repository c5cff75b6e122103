"""Pydantic schemas for the income prediction endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from agrismart.models.enums import ConfidenceLabelEnum, InvestmentTierEnum
from agrismart.services.prediction_engine import PredictionRequest, PredictionResult


class PredictionRequestIn(BaseModel):
	"""Form values as submitted; emptiness is judged by the engine, not here."""

	crop: str = Field(default="", max_length=100)
	variety: str = Field(default="", max_length=100)
	# Parsed by the engine so bools and junk text report invalid_area.
	area: Any = None
	soil_type: str = Field(default="", max_length=100)
	season: str = Field(default="", max_length=100)
	investment_level: str = Field(default="", max_length=20)

	def to_request(self) -> PredictionRequest:
		return PredictionRequest(
			crop=self.crop,
			area="" if self.area is None else self.area,
			soil_type=self.soil_type,
			investment_level=self.investment_level,
			variety=self.variety,
			season=self.season,
		)


class PredictionDisplay(BaseModel):
	"""Figures rounded for presentation only."""

	expected_yield: str
	yield_per_acre: str
	total_income: str
	total_expenses: str
	net_profit: str
	profit_margin: str
	cost_per_acre: str
	roi: str


class PredictionResponse(BaseModel):
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
	risks: list[str] = Field(default_factory=list)
	recommendations: list[str] = Field(default_factory=list)
	display: PredictionDisplay

	@classmethod
	def from_result(cls, result: PredictionResult) -> "PredictionResponse":
		return cls(
			crop=result.crop,
			variety=result.variety,
			area=result.area,
			soil_type=result.soil_type,
			season=result.season,
			investment_level=result.investment_level,
			expected_yield=result.expected_yield,
			yield_per_acre=result.yield_per_acre,
			total_income=result.total_income,
			total_expenses=result.total_expenses,
			net_profit=result.net_profit,
			profit_margin=result.profit_margin,
			cost_per_acre=result.cost_per_acre,
			roi=result.roi,
			confidence=result.confidence,
			risks=list(result.risks),
			recommendations=list(result.recommendations),
			display=format_prediction(result),
		)


class PredictionOptions(BaseModel):
	crops: list[str]
	soil_types: list[str]
	seasons: list[str]
	investment_levels: list[InvestmentTierEnum]
	coverage: dict[str, list[str]] = Field(default_factory=dict)


def format_prediction(result: PredictionResult) -> PredictionDisplay:
	margin = "n/a" if result.profit_margin is None else f"{result.profit_margin:.1f}"
	roi = "n/a" if result.roi is None else f"{result.roi:.1f}"
	return PredictionDisplay(
		expected_yield=f"{result.expected_yield:.1f}",
		yield_per_acre=f"{result.yield_per_acre:.1f}",
		total_income=f"{result.total_income:.0f}",
		total_expenses=f"{result.total_expenses:.0f}",
		net_profit=f"{result.net_profit:.0f}",
		profit_margin=margin,
		cost_per_acre=f"{result.cost_per_acre:.0f}",
		roi=roi,
	)
