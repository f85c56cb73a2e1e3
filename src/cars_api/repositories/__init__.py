"""Repository layer for data access.

This layer abstracts external dependencies (secret store, relational
database) behind protocol-based interfaces. This enables:
- Easy swapping of implementations (AWS → environment, SQL Server → SQLite, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from cars_api.protocols import CarStore, SecretProvider

from .schema import cars, create_schema
from .secret_providers import AwsSecretsManagerProvider, EnvSecretProvider
from .sql_repository import SqlCarRepository, create_car_engine, parse_year

__all__ = [
    "CarStore",
    "SecretProvider",
    "AwsSecretsManagerProvider",
    "EnvSecretProvider",
    "SqlCarRepository",
    "cars",
    "create_car_engine",
    "create_schema",
    "parse_year",
]
