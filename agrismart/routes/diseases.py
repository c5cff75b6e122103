"""Disease reference routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agrismart.schemas.diseases import Disease, DiseaseFilters, DiseaseListRead, DiseaseQuery
from agrismart.services.disease_service import DiseaseService, get_disease_service

router = APIRouter(prefix="/diseases", tags=["diseases"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="disease reference failure")


@router.get("/filters", response_model=DiseaseFilters)
async def get_filters(service: DiseaseService = Depends(get_disease_service)) -> DiseaseFilters:
	return service.filters()


@router.get("", response_model=DiseaseListRead)
async def search_diseases(
	search: str = Query(default=""),
	crop: str | None = Query(default=None),
	severity: str | None = Query(default=None),
	service: DiseaseService = Depends(get_disease_service),
) -> DiseaseListRead:
	try:
		query = DiseaseQuery(search=search, crop=crop, severity=severity)
		return service.search(query)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/{disease_id}", response_model=Disease)
async def get_disease(
	disease_id: int,
	service: DiseaseService = Depends(get_disease_service),
) -> Disease:
	try:
		return service.get(disease_id)
	except Exception as exc:
		raise _map_error(exc) from exc
