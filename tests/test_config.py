import pytest
from conftest import car_body
from fastapi.testclient import TestClient

from cars_api.api import dependencies
from cars_api.api.app import create_app
from cars_api.config import Settings
from cars_api.repositories import EnvSecretProvider, create_car_engine, create_schema


def test_settings_defaults():
    settings = Settings(secret_backend="env", log_level="INFO")
    assert settings.api_key_secret_name == "Final-Secret-Key"
    assert settings.connection_string_secret_name == "SqlConnectionString"


def test_settings_rejects_unknown_secret_backend():
    with pytest.raises(ValueError, match="SECRET_BACKEND"):
        Settings(secret_backend="vault", log_level="INFO")


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(secret_backend="env", log_level="LOUD")


def test_env_backend_builds_env_provider():
    settings = Settings(secret_backend="env", log_level="INFO")
    assert isinstance(dependencies.build_secret_provider(settings), EnvSecretProvider)


def test_lifespan_wires_env_backed_app(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'cars.db'}"
    engine = create_car_engine(url)
    create_schema(engine)
    engine.dispose()

    monkeypatch.setenv("FINAL_SECRET_KEY", "local-key")
    monkeypatch.setenv("SQLCONNECTIONSTRING", url)
    settings = Settings(secret_backend="env", log_level="WARNING")
    monkeypatch.setattr(dependencies, "get_settings", lambda: settings)

    with TestClient(create_app()) as client:
        created = client.post("/cars", json=car_body(), headers={"x-api-key": "local-key"})
        listed = client.get("/cars", headers={"x-api-key": "local-key"})

    assert created.status_code == 201
    assert listed.json() == [created.json()]
