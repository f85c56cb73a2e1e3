"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CarPayload, parse_car_payload
from .responses import (
    CarResponse,
    ClassicValidationResponse,
    DeleteResponse,
    ErrorResponse,
    HealthCheckResponse,
)

__all__ = [
    "CarPayload",
    "parse_car_payload",
    "CarResponse",
    "ClassicValidationResponse",
    "DeleteResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
