"""Shared pytest fixtures: async test client, fresh farm store, knowledge table."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from agrismart.main import app
from agrismart.models.profiles import AgronomicProfileTable
from agrismart.services.reference_data import load_profile_table
from agrismart.store import FarmStore, build_store, get_store


@pytest.fixture
def store() -> FarmStore:
	"""A store seeded from the packaged reference data, private to one test."""
	return build_store()


@pytest.fixture
def profiles() -> AgronomicProfileTable:
	return load_profile_table()


@pytest.fixture
def zero_price_profiles() -> AgronomicProfileTable:
	"""Table whose only profile sells at price 0, so income is always zero."""
	return AgronomicProfileTable.from_payload(
		{
			"Fodder": {
				"Loamy": {
					"yield": {"min": 1.0, "max": 3.0, "avg": 2.0},
					"price": {"min": 0, "max": 0, "avg": 0},
					"expenses": {"Low": 1000, "Medium": 2000, "High": 3000, "Premium": 4000},
					"risks": ["No market"],
					"recommendations": ["Use on farm"],
				}
			}
		}
	)


@pytest.fixture
async def client(store: FarmStore) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the farm store isolated."""

	def override_get_store() -> FarmStore:
		return store

	app.dependency_overrides[get_store] = override_get_store
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()


@pytest.fixture
def zero_expense_profiles() -> AgronomicProfileTable:
	"""Table whose only profile costs nothing at every tier."""
	return AgronomicProfileTable.from_payload(
		{
			"Clover": {
				"Silty": {
					"yield": {"min": 1.0, "max": 2.0, "avg": 1.5},
					"price": {"min": 400, "max": 600, "avg": 500},
					"expenses": {"Low": 0, "Medium": 0, "High": 0, "Premium": 0},
				}
			}
		}
	)
