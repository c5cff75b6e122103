"""Pydantic schemas for crop health monitoring."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from agrismart.models.enums import CropHealthEnum, GrowthStageEnum


class CropRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: int = Field(ge=1)
	name: str
	variety: str
	planting_date: date
	area: float = Field(gt=0)
	location: str
	growth_stage: GrowthStageEnum
	health: CropHealthEnum
	progress: int = Field(ge=0, le=100)
	issues: tuple[str, ...] = ()
	last_inspection: date


class CropCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=100)
	variety: str = Field(min_length=1, max_length=100)
	planting_date: date
	area: float | None = Field(default=None, gt=0)
	location: str | None = Field(default=None, max_length=100)


class CropRead(CropRecord):
	recommendations: list[str] = Field(default_factory=list)


class CropListRead(BaseModel):
	items: list[CropRead]


class InspectionScheduled(BaseModel):
	crop_id: int
	crop_name: str
	scheduled_for: date
	message: str


class CropCatalog(BaseModel):
	crop_types: list[str]
	growth_stages: list[GrowthStageEnum]
	health_levels: list[CropHealthEnum]


class CropReference(BaseModel):
	crop_types: list[str] = Field(default_factory=list)
	crops: list[CropRecord] = Field(default_factory=list)
