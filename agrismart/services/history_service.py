"""Season history and yearly financial summaries."""

from __future__ import annotations

from functools import lru_cache

from agrismart.schemas.history import (
	HistoryFilters,
	HistoryReference,
	SeasonHistoryRead,
	SeasonRecord,
	YearlySummary,
)
from agrismart.services.collection import ManagedCollection
from agrismart.services.reference_data import load_history_reference

ALL_CROPS = "All"


class HistoryService:
	def __init__(self, reference: HistoryReference | None = None):
		self.reference = reference or load_history_reference()
		self.seasons: ManagedCollection[tuple[str, str], SeasonRecord] = ManagedCollection(
			key=lambda item: (item.season, item.crop),
			items=self.reference.seasons,
		)

	def list_seasons(self, crop: str = ALL_CROPS) -> SeasonHistoryRead:
		if crop in ("", ALL_CROPS):
			return SeasonHistoryRead(crop=ALL_CROPS, items=self.seasons.items())
		return SeasonHistoryRead(
			crop=crop,
			items=self.seasons.filter(lambda season: season.crop == crop),
		)

	def yearly_summary(self, year: str) -> YearlySummary:
		stats = self.reference.yearly_stats.get(year)
		if stats is None:
			raise LookupError(f"No summary recorded for {year}")
		return YearlySummary(year=year, **stats.model_dump())

	def filters(self) -> HistoryFilters:
		return HistoryFilters(years=list(self.reference.years), crops=list(self.reference.crops))


@lru_cache
def get_history_service() -> HistoryService:
	"""Shared service over the cached history reference; the season list is built once."""
	return HistoryService()
