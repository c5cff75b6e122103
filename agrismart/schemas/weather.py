"""Pydantic schemas for weather conditions, forecasts and crop suggestions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrismart.models.enums import AlertPriorityEnum, SuitabilityEnum


class CurrentWeather(BaseModel):
	model_config = ConfigDict(frozen=True)

	temperature: float
	feels_like: float
	humidity: float = Field(ge=0, le=100)
	wind_speed: float
	visibility: float
	uv_index: float
	rainfall: float = 0.0
	condition: str
	sunrise: str
	sunset: str


class ForecastDay(BaseModel):
	model_config = ConfigDict(frozen=True)

	day: str
	high: float
	low: float
	condition: str
	rain_chance: int = Field(ge=0, le=100)


class CropSuggestion(BaseModel):
	model_config = ConfigDict(frozen=True)

	crop: str
	suitability: SuitabilityEnum
	reason: str
	action: str


class WeatherAlert(BaseModel):
	model_config = ConfigDict(frozen=True)

	type: str
	message: str
	priority: AlertPriorityEnum
	action: str


class WeatherReport(BaseModel):
	location: str
	current: CurrentWeather
	forecast: list[ForecastDay]
	crop_suggestions: list[CropSuggestion]
	alerts: list[WeatherAlert]


class WeatherLocations(BaseModel):
	items: list[str]
	default: str | None = None


class WeatherReference(BaseModel):
	locations: list[str] = Field(min_length=1)
	current: CurrentWeather
	forecast: list[ForecastDay] = Field(default_factory=list)
	crop_suggestions: list[CropSuggestion] = Field(default_factory=list)
	alerts: list[WeatherAlert] = Field(default_factory=list)
