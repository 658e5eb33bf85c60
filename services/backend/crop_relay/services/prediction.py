"""Crop prediction forwarding: call the upstream model and normalise its answer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests

from crop_relay.models.schemas import CropResponse, PredictionInput

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_S = 5.0
READ_TIMEOUT_S = 10.0

SUCCESS_MESSAGE = "Prediction successful"
INVALID_RESPONSE_MESSAGE = "Invalid response from ML model"
UNAVAILABLE_MESSAGE = "ML Service is currently unavailable. Please try again later."
CLIENT_ERROR_MESSAGE = "Invalid request to ML Service: {status}"
SERVER_ERROR_MESSAGE = "ML Service encountered an error. Please try again later."
UNEXPECTED_MESSAGE = "An unexpected error occurred: {error}"


class FailureCategory(str, Enum):
    INVALID_RESPONSE = "invalid_response"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UPSTREAM_CLIENT_ERROR = "upstream_client_error"
    UPSTREAM_SERVER_ERROR = "upstream_server_error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class PredictionSuccess:
    crop: str
    message: str = SUCCESS_MESSAGE

    def to_response(self) -> CropResponse:
        return CropResponse(crop=self.crop, message=self.message)


@dataclass(frozen=True)
class PredictionFailure:
    category: FailureCategory
    message: str
    crop: str | None = None

    def to_response(self) -> CropResponse:
        return CropResponse(crop=None, message=self.message)


PredictionResult = PredictionSuccess | PredictionFailure


class UpstreamStatusError(RuntimeError):
    """Raised internally when the upstream answers with a 4xx/5xx status."""

    def __init__(self, status_code: int, reason: str | None = None):
        self.status_code = status_code
        self.reason = (reason or "").strip()
        super().__init__(f"Upstream responded with HTTP {self.status_label}")

    @property
    def status_label(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class InvalidUpstreamResponse(ValueError):
    """Raised internally when the upstream body lacks a usable crop."""


def _extract_crop(payload: Any) -> str:
    if not isinstance(payload, dict) or payload.get("crop") is None:
        raise InvalidUpstreamResponse(f"no crop in upstream payload: {payload!r}")
    crop = payload["crop"]
    # numeric class labels are accepted; bool and containers are not
    if isinstance(crop, bool) or not isinstance(crop, (str, int, float)):
        raise InvalidUpstreamResponse(f"crop is not a label: {crop!r}")
    return str(crop)


class CropPredictionService:
    """Forward prediction requests to the upstream model over HTTP.

    ``predict`` never raises: every outcome is returned as a
    :data:`PredictionResult`. Exactly one request is issued per call and
    failures are not retried, leaving the retry decision to the caller.
    """

    def __init__(
        self,
        session: requests.Session,
        url: str,
        *,
        connect_timeout: float = CONNECT_TIMEOUT_S,
        read_timeout: float = READ_TIMEOUT_S,
    ) -> None:
        self.session = session
        self.url = url
        self.timeout = (connect_timeout, read_timeout)

    def _post(self, payload: PredictionInput) -> Any:
        logger.debug("Calling prediction API at %s", self.url)
        response = self.session.post(self.url, json=payload.to_wire(), timeout=self.timeout)
        logger.info("Prediction API response status: %s", response.status_code)
        if response.status_code >= 400:
            raise UpstreamStatusError(response.status_code, response.reason)
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidUpstreamResponse(f"unparseable upstream body: {exc}") from exc

    def predict(self, payload: PredictionInput) -> PredictionResult:
        logger.info("Processing crop prediction request: %s", payload)
        try:
            crop = _extract_crop(self._post(payload))
        except InvalidUpstreamResponse as exc:
            logger.warning("Invalid response from prediction API: %s", exc)
            return PredictionFailure(FailureCategory.INVALID_RESPONSE, INVALID_RESPONSE_MESSAGE)
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error("Failed to connect to prediction API: %s", exc)
            return PredictionFailure(FailureCategory.SERVICE_UNAVAILABLE, UNAVAILABLE_MESSAGE)
        except UpstreamStatusError as exc:
            if exc.status_code >= 500:
                logger.error("Server error from prediction API: %s", exc.status_label)
                return PredictionFailure(
                    FailureCategory.UPSTREAM_SERVER_ERROR, SERVER_ERROR_MESSAGE
                )
            logger.error("Client error from prediction API: %s", exc.status_label)
            return PredictionFailure(
                FailureCategory.UPSTREAM_CLIENT_ERROR,
                CLIENT_ERROR_MESSAGE.format(status=exc.status_label),
            )
        except Exception as exc:
            logger.exception("Unexpected error during crop prediction: %s", exc)
            return PredictionFailure(
                FailureCategory.UNEXPECTED, UNEXPECTED_MESSAGE.format(error=exc)
            )
        logger.info("Predicted crop: %s", crop)
        return PredictionSuccess(crop)
