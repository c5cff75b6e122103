"""Weather conditions, forecast and weather-driven crop suggestions per farm location."""

from __future__ import annotations

from agrismart.schemas.weather import WeatherLocations, WeatherReference, WeatherReport
from agrismart.services.reference_data import load_weather_reference


class WeatherService:
	def __init__(self, reference: WeatherReference | None = None):
		self.reference = reference or load_weather_reference()

	@property
	def default_location(self) -> str:
		return self.reference.locations[0]

	def locations(self) -> WeatherLocations:
		return WeatherLocations(items=list(self.reference.locations), default=self.default_location)

	def resolve_location(self, location: str | None) -> str:
		if location is None or not location.strip():
			return self.default_location
		wanted = location.strip().casefold()
		for known in self.reference.locations:
			if known.casefold() == wanted:
				return known
		raise LookupError(f"Unknown location {location}")

	def report(self, location: str | None = None) -> WeatherReport:
		# Every location shares one sample feed.
		resolved = self.resolve_location(location)
		return WeatherReport(
			location=resolved,
			current=self.reference.current,
			forecast=list(self.reference.forecast),
			crop_suggestions=list(self.reference.crop_suggestions),
			alerts=list(self.reference.alerts),
		)
