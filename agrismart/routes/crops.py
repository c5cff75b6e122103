"""Crop health monitoring routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agrismart.models.enums import CropHealthEnum
from agrismart.schemas.crops import (
	CropCatalog,
	CropCreate,
	CropListRead,
	CropRead,
	CropRecord,
	InspectionScheduled,
)
from agrismart.services.crop_service import CropService
from agrismart.store import FarmStore, get_store

router = APIRouter(prefix="/crops", tags=["crops"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="crop health failure")


@router.get("/catalog", response_model=CropCatalog)
async def get_catalog(store: FarmStore = Depends(get_store)) -> CropCatalog:
	return CropService(store).catalog()


@router.get("", response_model=CropListRead)
async def list_crops(
	health: CropHealthEnum | None = Query(default=None),
	search: str = Query(default="", max_length=100),
	store: FarmStore = Depends(get_store),
) -> CropListRead:
	service = CropService(store)
	try:
		return CropListRead(items=service.list_crops(health=health, search=search))
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("", response_model=CropRead, status_code=status.HTTP_201_CREATED)
async def add_crop(payload: CropCreate, store: FarmStore = Depends(get_store)) -> CropRead:
	service = CropService(store)
	try:
		return service.add_crop(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{crop_id}", response_model=CropRead)
async def get_crop(crop_id: int, store: FarmStore = Depends(get_store)) -> CropRead:
	service = CropService(store)
	try:
		return service.get_crop(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/{crop_id}", response_model=CropRecord)
async def delete_crop(crop_id: int, store: FarmStore = Depends(get_store)) -> CropRecord:
	service = CropService(store)
	try:
		return service.delete_crop(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post(
	"/{crop_id}/inspections",
	response_model=InspectionScheduled,
	status_code=status.HTTP_201_CREATED,
)
async def schedule_inspection(crop_id: int, store: FarmStore = Depends(get_store)) -> InspectionScheduled:
	service = CropService(store)
	try:
		return service.schedule_inspection(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc
