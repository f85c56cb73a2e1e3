"""Cars API - CRUD over cars guarded by a shared-secret API key.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CarStore, SecretProvider)
    - repositories: Data access implementations (SQLAlchemy, AWS Secrets Manager, environment)
    - services: Business logic (authorization, validation, classic rule)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

For HTTP API:
    ```python
    from cars_api.api.app import app
    ```
"""

from cars_api.config import Settings, get_settings
from cars_api.dto import CarPayload, CarResponse, parse_car_payload
from cars_api.entities import CarEntity
from cars_api.exceptions import CarsApiError, MalformedInput, PersistenceError, SecretUnavailable
from cars_api.handlers import CarHandler
from cars_api.protocols import CarStore, SecretProvider
from cars_api.repositories import AwsSecretsManagerProvider, EnvSecretProvider, SqlCarRepository
from cars_api.services import Authorizer, classic_threshold_year, validate

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "CarsApiError",
    "MalformedInput",
    "PersistenceError",
    "SecretUnavailable",
    # Protocols (interfaces)
    "CarStore",
    "SecretProvider",
    # Services (business logic)
    "Authorizer",
    "classic_threshold_year",
    "validate",
    # Handlers (HTTP)
    "CarHandler",
    # Repositories (data access)
    "AwsSecretsManagerProvider",
    "EnvSecretProvider",
    "SqlCarRepository",
    # Entities (domain models)
    "CarEntity",
    # DTOs (API contracts)
    "CarPayload",
    "CarResponse",
    "parse_car_payload",
]
