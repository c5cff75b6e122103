"""Income prediction routes."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from agrismart.models.enums import InvestmentTierEnum
from agrismart.models.profiles import AgronomicProfileTable
from agrismart.schemas.prediction import PredictionOptions, PredictionRequestIn, PredictionResponse
from agrismart.services.prediction_engine import MissingFieldsError, PredictionError, compute_prediction
from agrismart.services.reference_data import load_prediction_options, load_profile_table

router = APIRouter(prefix="/predictions", tags=["predictions"])
logger = structlog.get_logger("agrismart.predictions")


def get_profile_table() -> AgronomicProfileTable:
	"""Knowledge-table dependency; tests override it to inject alternative tables."""
	return load_profile_table()


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, PredictionError):
		detail: dict[str, object] = {"error": exc.code, "message": exc.detail}
		if isinstance(exc, MissingFieldsError):
			detail["fields"] = list(exc.fields)
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="prediction failure")


@router.post("", response_model=PredictionResponse)
async def create_prediction(
	payload: PredictionRequestIn,
	profiles: AgronomicProfileTable = Depends(get_profile_table),
) -> PredictionResponse:
	try:
		result = compute_prediction(payload.to_request(), profiles)
	except Exception as exc:
		if isinstance(exc, PredictionError):
			logger.info("prediction_rejected", error=exc.code, crop=payload.crop, soil_type=payload.soil_type)
		raise _map_error(exc) from exc

	logger.info(
		"prediction_computed",
		crop=result.crop,
		soil_type=result.soil_type,
		investment_level=result.investment_level.value,
		area=result.area,
	)
	return PredictionResponse.from_result(result)


@router.get("/options", response_model=PredictionOptions)
async def get_prediction_options(
	profiles: AgronomicProfileTable = Depends(get_profile_table),
) -> PredictionOptions:
	try:
		options = load_prediction_options()
	except Exception as exc:
		raise _map_error(exc) from exc
	return PredictionOptions(
		crops=options["crops"],
		soil_types=options["soil_types"],
		seasons=options["seasons"],
		investment_levels=list(InvestmentTierEnum),
		coverage=profiles.coverage(),
	)
