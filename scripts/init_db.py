#!/usr/bin/env python3
"""
Create the Cars table for local development.

Reads the connection string through the configured secret backend, the
same way the API does, and creates the table if it is missing.
"""

from cars_api.api.dependencies import build_secret_provider
from cars_api.config import get_settings
from cars_api.log import configure_logging, log_event
from cars_api.repositories import create_car_engine, create_schema


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    secret_provider = build_secret_provider(settings)
    engine = create_car_engine(secret_provider.get(settings.connection_string_secret_name))
    try:
        create_schema(engine)
    finally:
        engine.dispose()

    log_event("schema_created", dialect=engine.dialect.name)


if __name__ == "__main__":
    main()
