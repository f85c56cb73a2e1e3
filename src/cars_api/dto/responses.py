"""Response DTOs for API endpoints."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from cars_api.entities import CarEntity


class CarResponse(BaseModel):
    """Car as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(..., description="Server-assigned identifier")
    manufacture: str = Field(..., description="Manufacturer name")
    year: str = Field(..., description="Model year as text")
    model: str = Field(..., description="Model name")
    color: str = Field(..., description="Paint color")
    is_classic: bool = Field(..., alias="isClassic", description="Classic flag")

    @classmethod
    def from_entity(cls, car: CarEntity) -> "CarResponse":
        return cls(
            id=car.id,
            manufacture=car.manufacture,
            year=car.year,
            model=car.model,
            color=car.color,
            is_classic=car.is_classic,
        )


class ClassicValidationResponse(BaseModel):
    """Response DTO for the bulk classic reclassification."""

    model_config = ConfigDict(populate_by_name=True)

    updated_count: int = Field(
        ...,
        alias="updatedCount",
        description="Rows newly marked as classic",
        ge=0,
    )
    timestamp: str = Field(..., description="Completion time (UTC, ISO 8601)")


class DeleteResponse(BaseModel):
    """Response DTO for a successful delete."""

    message: str = Field("Deleted", description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """Error body for 400 and 404 responses."""

    error: str = Field(..., description="Reason the request was rejected")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
