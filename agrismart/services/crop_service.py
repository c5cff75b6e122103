"""Crop health monitoring: crop registry, inspections and rule-based care advice."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import structlog

from agrismart.config import Settings, get_settings
from agrismart.models.enums import CropHealthEnum, GrowthStageEnum
from agrismart.schemas.crops import (
	CropCatalog,
	CropCreate,
	CropRead,
	CropRecord,
	CropReference,
	InspectionScheduled,
)
from agrismart.services.reference_data import load_crop_reference
from agrismart.store import FarmStore

DEFAULT_AREA_ACRES = 1.0
DEFAULT_LOCATION = "Field A"
INITIAL_PROGRESS = 10
SLOW_PROGRESS_THRESHOLD = 50

# issue keyword -> advice, matched case-insensitively against each issue
_ISSUE_ADVICE: tuple[tuple[str, str], ...] = (
	("pest", "Apply organic pesticide treatment"),
	("nutrient", "Soil nutrient analysis recommended"),
	("water", "Adjust irrigation schedule"),
)

logger = structlog.get_logger("agrismart.crops")


def _today() -> date:
	return datetime.now(UTC).date()


def health_recommendations(crop: CropRecord) -> list[str]:
	recommendations: list[str] = []
	if crop.health in (CropHealthEnum.needs_attention, CropHealthEnum.poor):
		recommendations.append("Increase monitoring frequency")
		recommendations.append("Check soil moisture levels")

	issues = [issue.casefold() for issue in crop.issues]
	for keyword, advice in _ISSUE_ADVICE:
		if any(keyword in issue for issue in issues):
			recommendations.append(advice)

	if crop.progress < SLOW_PROGRESS_THRESHOLD:
		recommendations.append("Monitor weather conditions closely")
	return recommendations


class CropService:
	def __init__(
		self,
		store: FarmStore,
		reference: CropReference | None = None,
		settings: Settings | None = None,
	):
		self.store = store
		self.reference = reference or load_crop_reference()
		self.settings = settings or get_settings()

	def list_crops(
		self,
		health: CropHealthEnum | None = None,
		search: str = "",
	) -> list[CropRead]:
		term = search.strip().casefold()
		items = self.store.crops.filter(
			lambda crop: health is None or crop.health == health,
			lambda crop: not term or term in crop.name.casefold() or term in crop.variety.casefold(),
		)
		return [self._to_read(crop) for crop in items]

	def get_crop(self, crop_id: int) -> CropRead:
		return self._to_read(self._require_crop(crop_id))

	def add_crop(self, payload: CropCreate) -> CropRead:
		crop = CropRecord(
			id=self.store.next_crop_id(),
			name=payload.name,
			variety=payload.variety,
			planting_date=payload.planting_date,
			area=payload.area or DEFAULT_AREA_ACRES,
			location=payload.location or DEFAULT_LOCATION,
			growth_stage=GrowthStageEnum.germination,
			health=CropHealthEnum.good,
			progress=INITIAL_PROGRESS,
			issues=(),
			last_inspection=_today(),
		)
		self.store.crops.add(crop)
		logger.info("crop_added", crop_id=crop.id, crop=crop.name, variety=crop.variety)
		return self._to_read(crop)

	def delete_crop(self, crop_id: int) -> CropRecord:
		try:
			removed = self.store.crops.remove(crop_id)
		except LookupError as exc:
			raise LookupError(f"Crop {crop_id} not found") from exc
		logger.info("crop_removed", crop_id=removed.id, crop=removed.name)
		return removed

	def schedule_inspection(self, crop_id: int) -> InspectionScheduled:
		crop = self._require_crop(crop_id)
		lead_days = max(self.settings.inspection_lead_days, 0)
		scheduled_for = _today() + timedelta(days=lead_days)
		when = {0: "today", 1: "tomorrow"}.get(lead_days, scheduled_for.isoformat())
		logger.info("inspection_scheduled", crop_id=crop.id, scheduled_for=scheduled_for.isoformat())
		return InspectionScheduled(
			crop_id=crop.id,
			crop_name=crop.name,
			scheduled_for=scheduled_for,
			message=f"Field inspection has been scheduled for {when}",
		)

	def catalog(self) -> CropCatalog:
		return CropCatalog(
			crop_types=list(self.reference.crop_types),
			growth_stages=list(GrowthStageEnum),
			health_levels=list(CropHealthEnum),
		)

	def _require_crop(self, crop_id: int) -> CropRecord:
		try:
			return self.store.crops.get(crop_id)
		except LookupError as exc:
			raise LookupError(f"Crop {crop_id} not found") from exc

	@staticmethod
	def _to_read(crop: CropRecord) -> CropRead:
		return CropRead(**crop.model_dump(), recommendations=health_recommendations(crop))
