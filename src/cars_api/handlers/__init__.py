"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers compose authorization, deserialization, validation and
persistence, and map every outcome to a status code.

Architecture:
    Handler -> Service / Repository
    (HTTP)  -> (Business) / (Data Access)
"""

from .car_handler import CarHandler

__all__ = [
    "CarHandler",
]
