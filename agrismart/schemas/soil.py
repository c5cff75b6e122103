"""Pydantic schemas for the soil monitor."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from agrismart.models.enums import FieldStatusEnum, ReadingLevelEnum, SoilTypeEnum


class SoilReadings(BaseModel):
	ph: float | None = Field(default=None, ge=0, le=14)
	nitrogen: float | None = Field(default=None, ge=0)
	phosphorus: float | None = Field(default=None, ge=0)
	potassium: float | None = Field(default=None, ge=0)
	organic_matter: float | None = Field(default=None, ge=0, le=100)
	moisture: float | None = Field(default=None, ge=0, le=100)


class SoilField(SoilReadings):
	model_config = ConfigDict(frozen=True)

	name: str
	soil_type: SoilTypeEnum
	last_tested: date
	status: FieldStatusEnum


class SoilFieldCreate(SoilReadings):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=100)
	soil_type: SoilTypeEnum


class SoilAssessment(BaseModel):
	ph: ReadingLevelEnum | None = None
	nitrogen: ReadingLevelEnum | None = None
	phosphorus: ReadingLevelEnum | None = None
	potassium: ReadingLevelEnum | None = None
	organic_matter: ReadingLevelEnum | None = None
	moisture: ReadingLevelEnum | None = None


class CropRecommendation(BaseModel):
	suitable: list[str] = Field(default_factory=list)
	moderately: list[str] = Field(default_factory=list)
	unsuitable: list[str] = Field(default_factory=list)


class SoilFieldRead(SoilField):
	assessment: SoilAssessment


class SoilFieldDetail(SoilFieldRead):
	recommendations: CropRecommendation | None = None


class SoilFieldListRead(BaseModel):
	items: list[SoilFieldRead]


class SoilReference(BaseModel):
	"""Seed fields and per-soil crop suitability as shipped in soil.json."""

	fields: list[SoilField] = Field(default_factory=list)
	crop_recommendations: dict[SoilTypeEnum, CropRecommendation] = Field(default_factory=dict)
