from __future__ import annotations

import pytest
from httpx import AsyncClient

from agrismart.main import app
from agrismart.models.profiles import AgronomicProfileTable
from agrismart.routes.predictions import get_profile_table


@pytest.mark.asyncio
async def test_create_prediction(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/predictions",
        json={
            "crop": "Rice",
            "variety": "Basmati",
            "area": 2.5,
            "soil_type": "Loamy",
            "season": "Monsoon",
            "investment_level": "Medium",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["crop"] == "Rice"
    assert body["variety"] == "Basmati"
    assert body["investment_level"] == "Medium"
    assert body["confidence"] == "Medium"
    assert body["total_expenses"] == 87500
    assert body["total_income"] == pytest.approx(90250)
    assert body["display"]["net_profit"] == "2750"
    assert body["display"]["profit_margin"] == "3.0"
    assert body["cost_per_acre"] == 35000
    assert body["roi"] == pytest.approx(3.1429, abs=1e-4)
    assert body["display"]["cost_per_acre"] == "35000"
    assert body["display"]["roi"] == "3.1"


@pytest.mark.asyncio
async def test_create_prediction_accepts_area_as_text(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/predictions",
        json={"crop": "Wheat", "area": " 2 ", "soil_type": "Loamy", "investment_level": "High"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["area"] == 2.0
    assert body["variety"] == "Standard"
    assert body["season"] == "Current"
    assert body["total_expenses"] == 76000


@pytest.mark.asyncio
async def test_boolean_area_is_invalid(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/predictions",
        json={"crop": "Rice", "area": True, "soil_type": "Loamy", "investment_level": "Low"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "invalid_area"


@pytest.mark.asyncio
async def test_missing_fields_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/v1/predictions", json={"crop": "", "area": 1})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"] == "missing_fields"
    assert detail["message"] == "Please fill in all required fields"
    assert detail["fields"] == ["crop", "soil_type", "investment_level"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "code"),
    [
        ({"crop": "Banana", "area": 1, "soil_type": "Loamy", "investment_level": "Low"}, "unknown_crop"),
        ({"crop": "Wheat", "area": 1, "soil_type": "Sandy", "investment_level": "Low"}, "unknown_soil_profile"),
        ({"crop": "Rice", "area": "abc", "soil_type": "Loamy", "investment_level": "Low"}, "invalid_area"),
        ({"crop": "Rice", "area": 1, "soil_type": "Loamy", "investment_level": "Gold"}, "invalid_investment_tier"),
    ],
)
async def test_prediction_errors_map_to_400(client: AsyncClient, payload: dict[str, object], code: str) -> None:
    response = await client.post("/api/v1/predictions", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == code


@pytest.mark.asyncio
async def test_injected_profile_table(client: AsyncClient, zero_price_profiles: AgronomicProfileTable) -> None:
    app.dependency_overrides[get_profile_table] = lambda: zero_price_profiles

    response = await client.post(
        "/api/v1/predictions",
        json={"crop": "Fodder", "area": 2, "soil_type": "Loamy", "investment_level": "Low"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_income"] == 0
    assert body["profit_margin"] is None
    assert body["display"]["profit_margin"] == "n/a"

    rice = await client.post(
        "/api/v1/predictions",
        json={"crop": "Rice", "area": 2, "soil_type": "Loamy", "investment_level": "Low"},
    )
    assert rice.status_code == 400
    assert rice.json()["detail"]["error"] == "unknown_crop"


@pytest.mark.asyncio
async def test_prediction_options(client: AsyncClient) -> None:
    response = await client.get("/api/v1/predictions/options")

    assert response.status_code == 200
    body = response.json()
    assert "Rice" in body["crops"]
    assert len(body["crops"]) == 12
    assert body["soil_types"] == ["Clay", "Sandy", "Loamy", "Silty", "Peaty", "Chalky"]
    assert body["seasons"] == ["Winter", "Summer", "Monsoon", "Post-Monsoon"]
    assert body["investment_levels"] == ["Low", "Medium", "High", "Premium"]
    assert body["coverage"] == {"Rice": ["Loamy", "Clay"], "Wheat": ["Loamy"], "Corn": ["Sandy"]}


@pytest.mark.asyncio
async def test_zero_expense_profile_has_no_roi(
    client: AsyncClient, zero_expense_profiles: AgronomicProfileTable
) -> None:
    app.dependency_overrides[get_profile_table] = lambda: zero_expense_profiles

    response = await client.post(
        "/api/v1/predictions",
        json={"crop": "Clover", "area": 3, "soil_type": "Silty", "investment_level": "Premium"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["roi"] is None
    assert body["display"]["roi"] == "n/a"
