"""Pydantic schemas for the disease reference."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agrismart.models.enums import DiseaseTypeEnum, SeverityEnum


class Disease(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: int
	name: str
	crop: str
	type: DiseaseTypeEnum
	severity: SeverityEnum
	symptoms: tuple[str, ...] = ()
	causes: tuple[str, ...] = ()
	treatment: tuple[str, ...] = ()
	prevention: tuple[str, ...] = ()
	organic_treatment: tuple[str, ...] = ()
	affected_stage: str
	economic_impact: str


class DiseaseQuery(BaseModel):
	search: str = Field(default="", max_length=200)
	crop: str | None = None
	severity: SeverityEnum | None = None

	@field_validator("severity", mode="before")
	@classmethod
	def _any_severity(cls, value: object) -> object:
		if value in ("", "All"):
			return None
		return value


class DiseaseListRead(BaseModel):
	total: int
	items: list[Disease]


class DiseaseFilters(BaseModel):
	crops: list[str]
	severities: list[str]


class DiseaseReference(BaseModel):
	crops: list[str] = Field(default_factory=list)
	diseases: list[Disease] = Field(default_factory=list)
