"""Season history routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agrismart.schemas.history import HistoryFilters, SeasonHistoryRead, YearlySummary
from agrismart.services.history_service import ALL_CROPS, HistoryService, get_history_service

router = APIRouter(prefix="/history", tags=["history"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="history failure")


@router.get("/filters", response_model=HistoryFilters)
async def get_filters(service: HistoryService = Depends(get_history_service)) -> HistoryFilters:
	return service.filters()


@router.get("/seasons", response_model=SeasonHistoryRead)
async def list_seasons(
	crop: str = Query(default=ALL_CROPS),
	service: HistoryService = Depends(get_history_service),
) -> SeasonHistoryRead:
	try:
		return service.list_seasons(crop)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/summary/{year}", response_model=YearlySummary)
async def get_yearly_summary(
	year: str,
	service: HistoryService = Depends(get_history_service),
) -> YearlySummary:
	try:
		return service.yearly_summary(year)
	except Exception as exc:
		raise _map_error(exc) from exc
