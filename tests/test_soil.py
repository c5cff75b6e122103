from __future__ import annotations

from datetime import date

import pytest
from httpx import AsyncClient

from agrismart.models.enums import FieldStatusEnum, ReadingLevelEnum, SoilTypeEnum
from agrismart.schemas.soil import SoilFieldCreate, SoilReadings
from agrismart.services import soil_service
from agrismart.services.soil_service import SoilService, assess_readings, nutrient_level, status_for
from agrismart.store import FarmStore


def test_nutrient_level_bands() -> None:
    assert nutrient_level(29.9, "nitrogen") == ReadingLevelEnum.low
    assert nutrient_level(30, "nitrogen") == ReadingLevelEnum.optimal
    assert nutrient_level(50, "nitrogen") == ReadingLevelEnum.optimal
    assert nutrient_level(50.1, "nitrogen") == ReadingLevelEnum.high
    assert nutrient_level(20, "phosphorus") == ReadingLevelEnum.low
    assert nutrient_level(201, "potassium") == ReadingLevelEnum.high


def test_assess_readings() -> None:
    assessment = assess_readings(
        SoilReadings(ph=5.5, nitrogen=40, phosphorus=18, potassium=180, organic_matter=1.8, moisture=75)
    )

    assert assessment.ph == ReadingLevelEnum.adjust
    assert assessment.nitrogen == ReadingLevelEnum.optimal
    assert assessment.phosphorus == ReadingLevelEnum.low
    assert assessment.potassium == ReadingLevelEnum.optimal
    assert assessment.organic_matter == ReadingLevelEnum.low
    assert assessment.moisture == ReadingLevelEnum.monitor
    assert status_for(assessment) == FieldStatusEnum.needs_attention


def test_missing_readings_assess_to_none() -> None:
    assessment = assess_readings(SoilReadings(ph=6.5))

    assert assessment.ph == ReadingLevelEnum.optimal
    assert assessment.nitrogen is None
    assert assessment.moisture is None
    assert status_for(assessment) == FieldStatusEnum.good


def test_add_field_sets_today_and_status(store: FarmStore, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(soil_service, "_today", lambda: date(2024, 2, 1))
    service = SoilService(store)

    created = service.add_field(
        SoilFieldCreate(name=" Field D ", soil_type=SoilTypeEnum.silty, ph=6.9, nitrogen=35, moisture=55)
    )

    assert created.name == "Field D"
    assert created.last_tested == date(2024, 2, 1)
    assert created.status == FieldStatusEnum.good
    assert len(store.soil_fields) == 4


def test_add_field_rejects_duplicate_name_case_insensitively(store: FarmStore) -> None:
    service = SoilService(store)
    with pytest.raises(ValueError, match="already exists"):
        service.add_field(SoilFieldCreate(name="field a", soil_type=SoilTypeEnum.clay))


def test_delete_field(store: FarmStore) -> None:
    service = SoilService(store)
    removed = service.delete_field("Field B")

    assert removed.soil_type == SoilTypeEnum.clay
    assert [item.name for item in service.list_fields()] == ["Field A", "Field C"]
    with pytest.raises(LookupError, match="Field B not found"):
        service.delete_field("Field B")


@pytest.mark.asyncio
async def test_list_and_get_fields(client: AsyncClient) -> None:
    response = await client.get("/api/v1/soil/fields")
    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["name"] for item in items] == ["Field A", "Field B", "Field C"]
    assert items[2]["assessment"]["nitrogen"] == "Low"
    assert items[2]["assessment"]["ph"] == "Optimal"

    detail = await client.get("/api/v1/soil/fields/field c")
    assert detail.status_code == 200
    body = detail.json()
    assert body["status"] == "Needs Attention"
    assert body["recommendations"]["suitable"] == ["Potato", "Carrot", "Radish", "Watermelon"]


@pytest.mark.asyncio
async def test_add_and_delete_field_via_api(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/soil/fields",
        json={"name": "North Plot", "soil_type": "Peaty", "ph": 8.1, "organic_matter": 4.0},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "Needs Attention"
    assert body["assessment"]["ph"] == "Adjust"
    assert body["assessment"]["organic_matter"] == "Good"

    duplicate = await client.post("/api/v1/soil/fields", json={"name": "north plot", "soil_type": "Clay"})
    assert duplicate.status_code == 400

    deleted = await client.delete("/api/v1/soil/fields/North Plot")
    assert deleted.status_code == 200
    missing = await client.get("/api/v1/soil/fields/North Plot")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_add_field_requires_name_and_soil_type(client: AsyncClient) -> None:
    response = await client.post("/api/v1/soil/fields", json={"name": "", "soil_type": "Clay"})
    assert response.status_code == 422

    response = await client.post("/api/v1/soil/fields", json={"name": "East"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_recommendations_and_soil_types(client: AsyncClient) -> None:
    response = await client.get("/api/v1/soil/recommendations/Saline")
    assert response.status_code == 200
    assert response.json()["moderately"] == ["Sugar beet"]

    unknown = await client.get("/api/v1/soil/recommendations/Volcanic")
    assert unknown.status_code == 422

    types = await client.get("/api/v1/soil/types")
    assert types.json() == ["Clay", "Sandy", "Loamy", "Silty", "Peaty", "Chalky", "Saline"]
