"""Soil monitor: field registry, reading assessment and crop suitability lookups."""

from __future__ import annotations

from datetime import UTC, date, datetime

import structlog

from agrismart.models.enums import FieldStatusEnum, ReadingLevelEnum, SoilTypeEnum
from agrismart.schemas.soil import (
	CropRecommendation,
	SoilAssessment,
	SoilField,
	SoilFieldCreate,
	SoilFieldDetail,
	SoilFieldRead,
	SoilReadings,
	SoilReference,
)
from agrismart.services.reference_data import load_soil_reference
from agrismart.store import FarmStore, field_key

PH_OPTIMAL_RANGE = (6.0, 7.5)
ORGANIC_MATTER_GOOD_MIN = 2.5
MOISTURE_OPTIMAL_RANGE = (40.0, 70.0)

# mg/kg
NUTRIENT_RANGES: dict[str, tuple[float, float]] = {
	"nitrogen": (30.0, 50.0),
	"phosphorus": (25.0, 40.0),
	"potassium": (150.0, 200.0),
}

_IN_RANGE = {ReadingLevelEnum.optimal, ReadingLevelEnum.good}

logger = structlog.get_logger("agrismart.soil")


def _today() -> date:
	return datetime.now(UTC).date()


def nutrient_level(value: float, nutrient: str) -> ReadingLevelEnum:
	low, high = NUTRIENT_RANGES[nutrient]
	if value < low:
		return ReadingLevelEnum.low
	if value > high:
		return ReadingLevelEnum.high
	return ReadingLevelEnum.optimal


def assess_readings(readings: SoilReadings) -> SoilAssessment:
	"""Grade each provided reading against its target band; absent readings stay None."""
	assessment = SoilAssessment()
	if readings.ph is not None:
		ph_low, ph_high = PH_OPTIMAL_RANGE
		assessment.ph = ReadingLevelEnum.optimal if ph_low <= readings.ph <= ph_high else ReadingLevelEnum.adjust
	for nutrient in NUTRIENT_RANGES:
		value = getattr(readings, nutrient)
		if value is not None:
			setattr(assessment, nutrient, nutrient_level(value, nutrient))
	if readings.organic_matter is not None:
		assessment.organic_matter = (
			ReadingLevelEnum.good
			if readings.organic_matter >= ORGANIC_MATTER_GOOD_MIN
			else ReadingLevelEnum.low
		)
	if readings.moisture is not None:
		low, high = MOISTURE_OPTIMAL_RANGE
		assessment.moisture = (
			ReadingLevelEnum.optimal if low <= readings.moisture <= high else ReadingLevelEnum.monitor
		)
	return assessment


def status_for(assessment: SoilAssessment) -> FieldStatusEnum:
	levels = [level for level in assessment.model_dump().values() if level is not None]
	if all(level in _IN_RANGE for level in levels):
		return FieldStatusEnum.good
	return FieldStatusEnum.needs_attention


class SoilService:
	"""Field registry operations over the per-process store."""

	def __init__(self, store: FarmStore, reference: SoilReference | None = None):
		self.store = store
		self.reference = reference or load_soil_reference()

	def list_fields(self) -> list[SoilFieldRead]:
		return [self._to_read(item) for item in self.store.soil_fields]

	def get_field(self, name: str) -> SoilFieldDetail:
		item = self._require_field(name)
		return SoilFieldDetail(
			**self._to_read(item).model_dump(),
			recommendations=self.reference.crop_recommendations.get(item.soil_type),
		)

	def add_field(self, payload: SoilFieldCreate) -> SoilFieldRead:
		readings = SoilReadings(**payload.model_dump(include=set(SoilReadings.model_fields)))
		item = SoilField(
			**readings.model_dump(),
			name=payload.name,
			soil_type=payload.soil_type,
			last_tested=_today(),
			status=status_for(assess_readings(readings)),
		)
		try:
			self.store.soil_fields.add(item)
		except ValueError as exc:
			raise ValueError(f"Field {payload.name} already exists") from exc
		logger.info("soil_field_added", field=item.name, soil_type=item.soil_type.value, status=item.status.value)
		return self._to_read(item)

	def delete_field(self, name: str) -> SoilField:
		try:
			removed = self.store.soil_fields.remove(field_key(name))
		except LookupError as exc:
			raise LookupError(f"Field {name} not found") from exc
		logger.info("soil_field_removed", field=removed.name)
		return removed

	def recommendations_for(self, soil_type: SoilTypeEnum) -> CropRecommendation:
		recommendation = self.reference.crop_recommendations.get(soil_type)
		if recommendation is None:
			raise LookupError(f"No crop recommendations for {soil_type.value} soil")
		return recommendation

	@staticmethod
	def soil_types() -> list[SoilTypeEnum]:
		return list(SoilTypeEnum)

	def _require_field(self, name: str) -> SoilField:
		try:
			return self.store.soil_fields.get(field_key(name))
		except LookupError as exc:
			raise LookupError(f"Field {name} not found") from exc

	@staticmethod
	def _to_read(item: SoilField) -> SoilFieldRead:
		return SoilFieldRead(**item.model_dump(), assessment=assess_readings(item))
