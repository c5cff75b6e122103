"""Weather page routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from agrismart.schemas.weather import WeatherLocations, WeatherReport
from agrismart.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="weather failure")


@router.get("/locations", response_model=WeatherLocations)
async def list_locations() -> WeatherLocations:
	return WeatherService().locations()


@router.get("", response_model=WeatherReport)
async def get_weather(location: str | None = Query(default=None)) -> WeatherReport:
	service = WeatherService()
	try:
		return service.report(location)
	except Exception as exc:
		raise _map_error(exc) from exc
