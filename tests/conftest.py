from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cars_api.api.app import create_app
from cars_api.exceptions import SecretUnavailable
from cars_api.handlers import CarHandler
from cars_api.repositories import SqlCarRepository, create_car_engine, create_schema
from cars_api.services import Authorizer

API_KEY_SECRET = "Final-Secret-Key"
CONNECTION_SECRET = "SqlConnectionString"
API_KEY = "s3cret-key"
FIXED_NOW = datetime(2025, 6, 1, 12, 30, tzinfo=timezone.utc)


class FakeSecretProvider:
    """Implements SecretProvider for tests; records every lookup."""

    def __init__(self, secrets: dict[str, str] | None = None) -> None:
        self.secrets = dict(secrets or {})
        self.calls: list[str] = []

    def get(self, name: str) -> str:
        self.calls.append(name)
        if name not in self.secrets:
            raise SecretUnavailable(name, "not in fake store")
        return self.secrets[name]


@pytest.fixture()
def database_url(tmp_path) -> str:
    url = f"sqlite:///{tmp_path / 'cars.db'}"
    engine = create_car_engine(url)
    try:
        create_schema(engine)
    finally:
        engine.dispose()
    return url


@pytest.fixture()
def secrets(database_url) -> FakeSecretProvider:
    return FakeSecretProvider({API_KEY_SECRET: API_KEY, CONNECTION_SECRET: database_url})


@pytest.fixture()
def repository(secrets) -> SqlCarRepository:
    return SqlCarRepository(secrets, connection_secret_name=CONNECTION_SECRET)


@pytest.fixture()
def test_app(secrets, repository) -> FastAPI:
    # TestClient is used without a context manager, so lifespan does not run
    # and the state set here is what the routes see.
    app = create_app()
    app.state.car_handler = CarHandler(
        authorizer=Authorizer(secrets, secret_name=API_KEY_SECRET),
        repository=repository,
        clock=lambda: FIXED_NOW,
    )
    return app


@pytest.fixture()
def client(test_app) -> TestClient:
    return TestClient(test_app)


@pytest.fixture()
def auth() -> dict[str, str]:
    return {"x-api-key": API_KEY}


def car_body(**overrides) -> dict:
    body = {"manufacture": "Volvo", "year": "1990", "model": "240", "color": "Blue"}
    body.update(overrides)
    return body
