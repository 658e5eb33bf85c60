"""Pydantic schemas for the crop prediction API payloads."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=_to_camel)


class PredictionInput(BaseModel):
    """Soil nutrient and weather readings sent to the prediction model."""

    model_config = ConfigDict(
        allow_inf_nan=False,
        extra="ignore",
        json_schema_extra={
            "example": {
                "nitrogen": 90,
                "phosphorus": 42,
                "potassium": 43,
                "temperature": 20.87,
                "humidity": 82.0,
                "rainfall": 202.93,
            }
        },
    )

    nitrogen: float = Field(..., ge=0, strict=True, description="Nitrogen content in the soil (mg/kg).")
    phosphorus: float = Field(..., ge=0, strict=True, description="Phosphorus content in the soil (mg/kg).")
    potassium: float = Field(..., ge=0, strict=True, description="Potassium content in the soil (mg/kg).")
    temperature: float = Field(..., strict=True, description="Temperature in degrees Celsius.")
    humidity: float = Field(..., ge=0, strict=True, description="Relative humidity percentage.")
    rainfall: float = Field(..., ge=0, strict=True, description="Rainfall in millimeters.")

    def to_wire(self) -> Dict[str, float]:
        """Flat key/value body expected by the upstream model."""
        return self.model_dump(mode="json")


class CropResponse(BaseModel):
    crop: Optional[str] = None
    message: str


class ValidationErrorResponse(CamelModel):
    error: str = "Validation failed"
    field_errors: Dict[str, str] = Field(default_factory=dict, alias="fieldErrors")


class HealthResponse(BaseModel):
    status: str = "UP"
    message: str = "Crop Prediction Service is running"
