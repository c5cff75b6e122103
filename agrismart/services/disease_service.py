"""Disease reference search."""

from __future__ import annotations

from functools import lru_cache

from agrismart.models.enums import SeverityEnum
from agrismart.schemas.diseases import (
	Disease,
	DiseaseFilters,
	DiseaseListRead,
	DiseaseQuery,
	DiseaseReference,
)
from agrismart.services.collection import ManagedCollection
from agrismart.services.reference_data import load_disease_reference

ANY = "All"


def matches_search(disease: Disease, term: str) -> bool:
	"""Case-insensitive substring match on name, crop or any symptom."""
	needle = term.strip().casefold()
	if not needle:
		return True
	if needle in disease.name.casefold() or needle in disease.crop.casefold():
		return True
	return any(needle in symptom.casefold() for symptom in disease.symptoms)


class DiseaseService:
	def __init__(self, reference: DiseaseReference | None = None):
		self.reference = reference or load_disease_reference()
		self.catalog: ManagedCollection[int, Disease] = ManagedCollection(
			key=lambda item: item.id,
			items=self.reference.diseases,
		)

	def search(self, query: DiseaseQuery) -> DiseaseListRead:
		crop = None if query.crop in (None, "", ANY) else query.crop
		items = self.catalog.filter(
			lambda disease: matches_search(disease, query.search),
			lambda disease: crop is None or disease.crop == crop,
			lambda disease: query.severity is None or disease.severity == query.severity,
		)
		return DiseaseListRead(total=len(items), items=items)

	def get(self, disease_id: int) -> Disease:
		try:
			return self.catalog.get(disease_id)
		except LookupError as exc:
			raise LookupError(f"Disease {disease_id} not found") from exc

	def filters(self) -> DiseaseFilters:
		return DiseaseFilters(
			crops=list(self.reference.crops),
			severities=[ANY, *(level.value for level in SeverityEnum)],
		)


@lru_cache
def get_disease_service() -> DiseaseService:
	"""Shared service over the cached disease reference; the catalog is built once."""
	return DiseaseService()
