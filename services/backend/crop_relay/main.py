from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crop_relay.api.crop import router as crop_router
from crop_relay.config import Settings, get_settings
from crop_relay.models.schemas import CropResponse, ValidationErrorResponse
from crop_relay.services.validation import field_errors_from
from crop_relay.utils.logging_colors import install_color_handler

logger = logging.getLogger(__name__)

SERVICE_NAME = "crop-prediction-relay"
VERSION = "1.0.0"


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ValidationErrorResponse(field_errors=field_errors_from(exc.errors()))
    logger.warning("Validation errors on %s: %s", request.url.path, body.field_errors)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Error processing %s: %s", request.url.path, exc, exc_info=exc)
    body = CropResponse(crop=None, message="An unexpected error occurred")
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    install_color_handler(logging.getLogger("crop_relay"), settings.log_level)

    app = FastAPI(title="Crop Prediction Relay", version=VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(crop_router)

    @app.get("/")
    def root() -> dict[str, object]:
        return {"service": SERVICE_NAME, "version": VERSION}

    logger.info("Forwarding predictions to %s", settings.prediction_api_url)
    return app


app = create_app()
