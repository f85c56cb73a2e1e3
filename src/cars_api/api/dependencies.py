"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Collaborators built once in lifespan (one secret client per process)
    - Dependency functions retrieve from request.app.state
    - Per-request work (secret fetch, DB connection) happens inside the handler
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cars_api.config import Settings, get_settings
from cars_api.handlers import CarHandler
from cars_api.log import configure_logging, log_event
from cars_api.protocols import SecretProvider
from cars_api.repositories import AwsSecretsManagerProvider, EnvSecretProvider, SqlCarRepository
from cars_api.services import Authorizer


def get_handler(request: Request) -> CarHandler:
    """Dependency injection for CarHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CarHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "car_handler", None)
    if handler is None:
        raise RuntimeError("CarHandler not initialized. Check lifespan setup.")
    return handler


def build_secret_provider(settings: Settings) -> SecretProvider:
    """Create the secret provider selected by SECRET_BACKEND."""
    if settings.secret_backend == "aws":
        return AwsSecretsManagerProvider.create(region_name=settings.aws_region)
    return EnvSecretProvider()


def build_handler(secret_provider: SecretProvider, settings: Settings) -> CarHandler:
    """Wire the authorizer and repository around one shared secret provider."""
    authorizer = Authorizer(secret_provider, secret_name=settings.api_key_secret_name)
    repository = SqlCarRepository.create(
        secret_provider=secret_provider,
        connection_secret_name=settings.connection_string_secret_name,
    )
    return CarHandler(authorizer=authorizer, repository=repository)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Secret provider (one client for the process lifetime)
    2. Handler (authorizer + repository) - stored in app.state.car_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    secret_provider = build_secret_provider(settings)
    app.state.secret_provider = secret_provider
    app.state.car_handler = build_handler(secret_provider, settings)

    log_event("api_starting", secret_backend=settings.secret_backend)

    yield

    del app.state.car_handler
    del app.state.secret_provider
    log_event("api_stopping")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CarHandler, Depends(get_handler)]
