"""Service layer for business logic.

This layer contains the decision logic of the API: who may call it,
which payloads are acceptable, and when a car counts as classic.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service / Repository
    (HTTP)  -> (Business) / (Data Access)
"""

from .authorizer import API_KEY_HEADER, Authorizer
from .classic import CLASSIC_AGE_YEARS, classic_threshold_year, utc_now
from .validation import REQUIRED_FIELDS, validate

__all__ = [
    "API_KEY_HEADER",
    "Authorizer",
    "CLASSIC_AGE_YEARS",
    "classic_threshold_year",
    "utc_now",
    "REQUIRED_FIELDS",
    "validate",
]
