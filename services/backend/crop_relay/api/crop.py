"""Crop prediction endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from crop_relay.api.deps import get_prediction_service
from crop_relay.models.schemas import (
    CropResponse,
    HealthResponse,
    PredictionInput,
    ValidationErrorResponse,
)
from crop_relay.services.prediction import (
    CropPredictionService,
    FailureCategory,
    PredictionFailure,
)

router = APIRouter(prefix="/api/crop", tags=["crop"])

logger = logging.getLogger(__name__)


def _failure_status(result: PredictionFailure) -> int:
    if result.category is FailureCategory.UNEXPECTED:
        return 500
    return 503


@router.post(
    "/predict",
    response_model=CropResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": CropResponse},
        503: {"model": CropResponse},
    },
)
def predict_crop(
    request: PredictionInput,
    service: CropPredictionService = Depends(get_prediction_service),
):
    """
    Recommend a crop for the given soil nutrients and weather conditions.
    """
    logger.info("Received crop prediction request: %s", request)
    result = service.predict(request)
    body = result.to_response()
    if isinstance(result, PredictionFailure):
        logger.warning("Prediction failed (%s): %s", result.category.value, result.message)
        return JSONResponse(status_code=_failure_status(result), content=body.model_dump())
    logger.info("Returning successful prediction: %s", result.crop)
    return body


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
