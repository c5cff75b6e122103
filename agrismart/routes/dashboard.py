"""Landing dashboard route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agrismart.schemas.dashboard import DashboardResponse
from agrismart.services.dashboard_service import DashboardService
from agrismart.store import FarmStore, get_store

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="dashboard failure")


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
	location: str | None = Query(default=None),
	store: FarmStore = Depends(get_store),
) -> DashboardResponse:
	service = DashboardService(store)
	try:
		return service.summary(location)
	except Exception as exc:
		raise _map_error(exc) from exc
