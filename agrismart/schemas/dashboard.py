"""Pydantic schemas for the landing dashboard."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from agrismart.models.enums import AlertPriorityEnum, CropHealthEnum


class WeatherSnapshot(BaseModel):
	temperature: float
	humidity: float
	condition: str
	rainfall: float


class CropSummary(BaseModel):
	id: int
	name: str
	area: float
	health: CropHealthEnum
	progress: int


class FarmAlert(BaseModel):
	model_config = ConfigDict(frozen=True)

	type: str
	message: str
	priority: AlertPriorityEnum


class DashboardResponse(BaseModel):
	generated_at: datetime
	location: str
	weather: WeatherSnapshot
	crops: list[CropSummary] = Field(default_factory=list)
	alerts: list[FarmAlert] = Field(default_factory=list)
	total_area: float


class DashboardReference(BaseModel):
	alerts: list[FarmAlert] = Field(default_factory=list)
