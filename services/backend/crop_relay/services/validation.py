"""Validation of inbound prediction parameters.

All violations are collected in a single pass so clients can fix every field
at once. The constraints themselves live on :class:`PredictionInput`; this
module turns pydantic's error list into the ``field -> message`` mapping that
the API reports.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from pydantic import ValidationError

from crop_relay.models.schemas import PredictionInput

BODY_KEY = "body"
DEFAULT_MESSAGE = "Invalid value"

FIELD_LABELS: dict[str, str] = {
    "nitrogen": "Nitrogen content",
    "phosphorus": "Phosphorus content",
    "potassium": "Potassium content",
    "temperature": "Temperature",
    "humidity": "Humidity",
    "rainfall": "Rainfall",
}

_BODY_MESSAGES: dict[str, str] = {
    "missing": "Request body is required",
    "json_invalid": "Request body is not valid JSON",
}


class InputValidationError(ValueError):
    """Raised when a parameter set fails validation."""

    def __init__(self, field_errors: Mapping[str, str]):
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Validation failed for: {fields}")


def _field_message(field: str, error: Mapping[str, Any]) -> str:
    label = FIELD_LABELS[field]
    error_type = str(error.get("type", ""))
    # an explicit null counts as absent
    if error_type == "missing" or ("input" in error and error["input"] is None):
        return f"{label} is required"
    if error_type == "greater_than_equal":
        return f"{label} must be zero or positive"
    if error_type == "finite_number":
        return f"{label} must be a finite number"
    if error_type in {"float_parsing", "float_type"}:
        return f"{label} must be a number"
    return DEFAULT_MESSAGE


def _error_field(loc: Iterable[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] == BODY_KEY:
        parts = parts[1:]
    if parts and parts[0] in FIELD_LABELS:
        return parts[0]
    return BODY_KEY


def field_errors_from(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """Map pydantic/FastAPI error dicts to ``{field: message}``.

    Accepts both ``ValidationError.errors()`` and
    ``RequestValidationError.errors()`` (whose locations start with
    ``"body"``). The first message reported for a field wins.
    """
    field_errors: Dict[str, str] = {}
    for error in errors:
        field = _error_field(error.get("loc", ()))
        if field in field_errors:
            continue
        if field == BODY_KEY:
            field_errors[field] = _BODY_MESSAGES.get(
                str(error.get("type", "")), "Request body must be a JSON object"
            )
        else:
            field_errors[field] = _field_message(field, error)
    return field_errors


def validate_prediction_input(raw: Any) -> PredictionInput:
    try:
        return PredictionInput.model_validate(raw)
    except ValidationError as exc:
        raise InputValidationError(field_errors_from(exc.errors())) from exc


def collect_field_errors(raw: Any) -> Dict[str, str]:
    """Return every violation in ``raw``; an empty mapping means it is valid."""
    try:
        validate_prediction_input(raw)
    except InputValidationError as exc:
        return exc.field_errors
    return {}
