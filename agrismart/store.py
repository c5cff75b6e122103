"""Per-process farm state: the mutable page collections, seeded from reference data.

Nothing here is persisted; a restart returns every page to its seed data.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

from fastapi import Request

from agrismart.schemas.crops import CropRecord
from agrismart.schemas.soil import SoilField
from agrismart.services.collection import ManagedCollection
from agrismart.services.reference_data import load_crop_reference, load_soil_reference


def field_key(name: str) -> str:
	return name.strip().casefold()


@dataclass(slots=True)
class FarmStore:
	soil_fields: ManagedCollection[str, SoilField]
	crops: ManagedCollection[int, CropRecord]
	crop_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))

	def next_crop_id(self) -> int:
		"""Allocate a crop id; ids are never reused within a process."""
		return next(self.crop_ids)


def build_store() -> FarmStore:
	seed_crops = load_crop_reference().crops
	first_free_id = max((crop.id for crop in seed_crops), default=0) + 1
	return FarmStore(
		soil_fields=ManagedCollection(
			key=lambda item: field_key(item.name),
			items=load_soil_reference().fields,
		),
		crops=ManagedCollection(key=lambda item: item.id, items=seed_crops),
		crop_ids=itertools.count(first_free_id),
	)


def get_store(request: Request) -> FarmStore:
	"""FastAPI dependency returning the application's store, creating it on first use."""
	store = getattr(request.app.state, "store", None)
	if store is None:
		store = build_store()
		request.app.state.store = store
	return store
