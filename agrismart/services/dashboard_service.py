"""Landing dashboard aggregation across weather, crop health and farm alerts."""

from __future__ import annotations

from datetime import UTC, datetime

from agrismart.schemas.dashboard import (
	CropSummary,
	DashboardReference,
	DashboardResponse,
	WeatherSnapshot,
)
from agrismart.services.reference_data import load_dashboard_reference
from agrismart.services.weather_service import WeatherService
from agrismart.store import FarmStore


class DashboardService:
	def __init__(
		self,
		store: FarmStore,
		weather: WeatherService | None = None,
		reference: DashboardReference | None = None,
	):
		self.store = store
		self.weather = weather or WeatherService()
		self.reference = reference or load_dashboard_reference()

	def summary(self, location: str | None = None) -> DashboardResponse:
		report = self.weather.report(location)
		crops = [
			CropSummary(
				id=crop.id,
				name=crop.name,
				area=crop.area,
				health=crop.health,
				progress=crop.progress,
			)
			for crop in self.store.crops
		]
		return DashboardResponse(
			generated_at=datetime.now(UTC),
			location=report.location,
			weather=WeatherSnapshot(
				temperature=report.current.temperature,
				humidity=report.current.humidity,
				condition=report.current.condition,
				rainfall=report.current.rainfall,
			),
			crops=crops,
			alerts=list(self.reference.alerts),
			total_area=round(sum(crop.area for crop in crops), 2),
		)
