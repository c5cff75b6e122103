"""Pydantic schemas for season history and yearly financial summaries."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from agrismart.models.enums import SeasonStatusEnum


class SeasonRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	season: str
	crop: str
	variety: str
	area: float
	planting_date: date
	harvest_date: date
	yield_per_acre: float
	total_yield: float
	income: float
	expenses: float
	profit: float
	status: SeasonStatusEnum
	weather: str
	issues: tuple[str, ...] = ()
	notes: str = ""


class YearlyStats(BaseModel):
	model_config = ConfigDict(frozen=True)

	total_income: float
	total_expenses: float
	total_profit: float
	total_area: float
	total_yield: float
	avg_yield: float
	profit_margin: float


class YearlySummary(YearlyStats):
	year: str


class SeasonHistoryRead(BaseModel):
	crop: str
	items: list[SeasonRecord]


class HistoryFilters(BaseModel):
	years: list[str]
	crops: list[str]


class HistoryReference(BaseModel):
	years: list[str] = Field(default_factory=list)
	crops: list[str] = Field(default_factory=list)
	seasons: list[SeasonRecord] = Field(default_factory=list)
	yearly_stats: dict[str, YearlyStats] = Field(default_factory=dict)
