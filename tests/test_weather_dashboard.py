from __future__ import annotations

import pytest
from httpx import AsyncClient

from agrismart.services.weather_service import WeatherService


def test_resolve_location() -> None:
    service = WeatherService()

    assert service.resolve_location(None) == "Farm Location 1"
    assert service.resolve_location(" farm location 3 ") == "Farm Location 3"
    with pytest.raises(LookupError, match="Unknown location Mars"):
        service.resolve_location("Mars")


@pytest.mark.asyncio
async def test_weather_report(client: AsyncClient) -> None:
    response = await client.get("/api/v1/weather", params={"location": "Farm Location 2"})

    assert response.status_code == 200
    body = response.json()
    assert body["location"] == "Farm Location 2"
    assert body["current"]["condition"] == "Partly Cloudy"
    assert len(body["forecast"]) == 5
    assert body["crop_suggestions"][0]["suitability"] == "Excellent"

    missing = await client.get("/api/v1/weather", params={"location": "Mars"})
    assert missing.status_code == 404

    locations = await client.get("/api/v1/weather/locations")
    assert locations.json()["default"] == "Farm Location 1"


@pytest.mark.asyncio
async def test_dashboard_reflects_crop_store(client: AsyncClient) -> None:
    response = await client.get("/api/v1/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["location"] == "Farm Location 1"
    assert body["weather"]["rainfall"] == 12.5
    assert [crop["name"] for crop in body["crops"]] == ["Rice", "Wheat", "Corn"]
    assert body["total_area"] == 7.5
    assert [alert["priority"] for alert in body["alerts"]] == ["medium", "high", "low"]

    await client.delete("/api/v1/crops/3")
    after = (await client.get("/api/v1/dashboard")).json()
    assert after["total_area"] == 4.3
    assert len(after["crops"]) == 2
