"""Loaders for the constant reference tables shipped as JSON under ``agrismart/data``."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from agrismart.config import get_settings
from agrismart.models.profiles import AgronomicProfileTable
from agrismart.schemas.crops import CropReference
from agrismart.schemas.dashboard import DashboardReference
from agrismart.schemas.diseases import DiseaseReference
from agrismart.schemas.history import HistoryReference
from agrismart.schemas.soil import SoilReference
from agrismart.schemas.weather import WeatherReference

PACKAGED_DATA_DIR = Path(__file__).resolve().parents[1] / "data"
PROFILES_FILE = "prediction_profiles.json"

_logger = logging.getLogger("agrismart.reference_data")

ModelT = TypeVar("ModelT", bound=BaseModel)


class ReferenceDataError(RuntimeError):
	"""Raised when a reference table is missing or malformed."""


def data_dir() -> Path:
	settings = get_settings()
	if settings.reference_data_dir:
		return Path(settings.reference_data_dir).expanduser().resolve()
	return PACKAGED_DATA_DIR


def read_json(path: Path) -> Any:
	try:
		with path.open(encoding="utf-8") as handle:
			return json.load(handle)
	except (OSError, json.JSONDecodeError) as exc:
		raise ReferenceDataError(f"Failed to read reference data {path}: {exc}") from exc


def _load_model(filename: str, model: type[ModelT]) -> ModelT:
	path = data_dir() / filename
	try:
		parsed = model.model_validate(read_json(path))
	except ValidationError as exc:
		raise ReferenceDataError(f"Invalid reference data in {path}: {exc}") from exc
	_logger.info("reference_data_loaded", extra={"path": str(path), "model": model.__name__})
	return parsed


@lru_cache
def load_profile_table() -> AgronomicProfileTable:
	"""Knowledge table for the prediction engine (settings may point elsewhere)."""
	settings = get_settings()
	if settings.prediction_profiles_path:
		path = Path(settings.prediction_profiles_path).expanduser().resolve()
	else:
		path = data_dir() / PROFILES_FILE

	try:
		table = AgronomicProfileTable.from_payload(read_json(path))
	except ValidationError as exc:
		raise ReferenceDataError(f"Invalid agronomic profiles in {path}: {exc}") from exc
	_logger.info(
		"reference_data_loaded",
		extra={"path": str(path), "model": "AgronomicProfileTable", "profiles": len(table)},
	)
	return table


@lru_cache
def load_prediction_options() -> dict[str, list[str]]:
	payload = read_json(data_dir() / "prediction_options.json")
	if not isinstance(payload, dict):
		raise ReferenceDataError("prediction_options.json must contain an object")
	return {key: [str(item) for item in payload.get(key, [])] for key in ("crops", "soil_types", "seasons")}


@lru_cache
def load_weather_reference() -> WeatherReference:
	return _load_model("weather.json", WeatherReference)


@lru_cache
def load_soil_reference() -> SoilReference:
	return _load_model("soil.json", SoilReference)


@lru_cache
def load_crop_reference() -> CropReference:
	return _load_model("crops.json", CropReference)


@lru_cache
def load_disease_reference() -> DiseaseReference:
	return _load_model("diseases.json", DiseaseReference)


@lru_cache
def load_history_reference() -> HistoryReference:
	return _load_model("history.json", HistoryReference)


@lru_cache
def load_dashboard_reference() -> DashboardReference:
	return _load_model("dashboard.json", DashboardReference)


_LOADERS = (
	load_profile_table,
	load_prediction_options,
	load_weather_reference,
	load_soil_reference,
	load_crop_reference,
	load_disease_reference,
	load_history_reference,
	load_dashboard_reference,
)


def load_all() -> dict[str, int]:
	"""Eagerly load every table; returns a per-table size summary for readiness checks."""
	return {
		"prediction_profiles": len(load_profile_table()),
		"weather_locations": len(load_weather_reference().locations),
		"soil_fields": len(load_soil_reference().fields),
		"crops": len(load_crop_reference().crops),
		"diseases": len(load_disease_reference().diseases),
		"history_seasons": len(load_history_reference().seasons),
		"prediction_crops": len(load_prediction_options()["crops"]),
		"dashboard_alerts": len(load_dashboard_reference().alerts),
	}


def clear_caches() -> None:
	for loader in _LOADERS:
		loader.cache_clear()
