"""Soil monitor routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from agrismart.models.enums import SoilTypeEnum
from agrismart.schemas.soil import (
	CropRecommendation,
	SoilField,
	SoilFieldCreate,
	SoilFieldDetail,
	SoilFieldListRead,
	SoilFieldRead,
)
from agrismart.services.soil_service import SoilService
from agrismart.store import FarmStore, get_store

router = APIRouter(prefix="/soil", tags=["soil"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="soil monitor failure")


@router.get("/types", response_model=list[SoilTypeEnum])
async def list_soil_types() -> list[SoilTypeEnum]:
	return SoilService.soil_types()


@router.get("/fields", response_model=SoilFieldListRead)
async def list_fields(store: FarmStore = Depends(get_store)) -> SoilFieldListRead:
	service = SoilService(store)
	try:
		return SoilFieldListRead(items=service.list_fields())
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/fields", response_model=SoilFieldRead, status_code=status.HTTP_201_CREATED)
async def add_field(
	payload: SoilFieldCreate,
	store: FarmStore = Depends(get_store),
) -> SoilFieldRead:
	service = SoilService(store)
	try:
		return service.add_field(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/fields/{name}", response_model=SoilFieldDetail)
async def get_field(name: str, store: FarmStore = Depends(get_store)) -> SoilFieldDetail:
	service = SoilService(store)
	try:
		return service.get_field(name)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/fields/{name}", response_model=SoilField)
async def delete_field(name: str, store: FarmStore = Depends(get_store)) -> SoilField:
	service = SoilService(store)
	try:
		return service.delete_field(name)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/recommendations/{soil_type}", response_model=CropRecommendation)
async def get_crop_recommendations(
	soil_type: SoilTypeEnum,
	store: FarmStore = Depends(get_store),
) -> CropRecommendation:
	service = SoilService(store)
	try:
		return service.recommendations_for(soil_type)
	except Exception as exc:
		raise _map_error(exc) from exc
