"""SQLAlchemy implementation of CarStore.

Every operation fetches the connection string from the secret store,
opens one connection inside a transaction, and disposes of the engine
afterwards. ``NullPool`` keeps SQLAlchemy from holding connections
between requests.
"""

import re
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from uuid import UUID

from sqlalchemy import create_engine, delete, false, insert, or_, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from cars_api.config import get_settings
from cars_api.entities import CarEntity
from cars_api.exceptions import PersistenceError, SecretUnavailable
from cars_api.protocols import SecretProvider

from .schema import cars

# SQL Server caps a statement at 2100 bound parameters.
_ID_BATCH_SIZE = 500

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
# 32-bit signed int range; years outside it do not count as integers.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_NOT_CLASSIC = or_(cars.c.is_classic == false(), cars.c.is_classic.is_(None))


def create_car_engine(url: str) -> Engine:
    """Build an engine that opens a new DBAPI connection on every checkout."""
    return create_engine(url, poolclass=NullPool)


def parse_year(year: str | None) -> int | None:
    """Parse a stored year as an integer, or None when it is not one.

    Accepts surrounding whitespace and a leading sign, digits only
    otherwise ("1_990" and "1990.0" are not years), within the 32-bit
    signed int range.
    """
    if year is None or not _INTEGER_RE.fullmatch(year):
        return None
    value = int(year)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class SqlCarRepository:
    """Relational implementation of the CarStore protocol.

    This class satisfies the CarStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        secret_provider: SecretProvider,
        connection_secret_name: str | None = None,
        engine_factory: Callable[[str], Engine] = create_car_engine,
    ) -> None:
        """Initialize the repository.

        Args:
            secret_provider: Source of the connection string.
            connection_secret_name: Name of the connection string secret. Defaults to settings.
            engine_factory: Builds an engine from a database URL.
        """
        self._secrets = secret_provider
        self._connection_secret_name = (
            connection_secret_name or get_settings().connection_string_secret_name
        )
        self._engine_factory = engine_factory

    @classmethod
    def create(
        cls,
        secret_provider: SecretProvider,
        connection_secret_name: str | None = None,
    ) -> "SqlCarRepository":
        """Factory method to create SqlCarRepository with the default engine factory."""
        return cls(secret_provider=secret_provider, connection_secret_name=connection_secret_name)

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        """Open a connection in a transaction and always release it."""
        try:
            url = self._secrets.get(self._connection_secret_name)
        except SecretUnavailable as e:
            raise PersistenceError("Database connection string is unavailable") from e

        try:
            engine = self._engine_factory(url)
        except (SQLAlchemyError, ImportError) as e:
            raise PersistenceError(f"Could not configure database engine: {type(e).__name__}") from e

        try:
            with engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            raise PersistenceError(f"Database operation failed: {type(e).__name__}") from e
        finally:
            engine.dispose()

    def insert(self, car: CarEntity) -> tuple[CarEntity, int]:
        new_car = CarEntity(
            id=uuid.uuid4(),
            manufacture=car.manufacture,
            year=car.year,
            model=car.model,
            color=car.color,
        )
        statement = insert(cars).values(
            id=new_car.id,
            manufacture=new_car.manufacture,
            year=new_car.year,
            model=new_car.model,
            color=new_car.color,
        )
        with self._connection() as conn:
            result = conn.execute(statement)
            return new_car, result.rowcount

    def list_all(self) -> list[CarEntity]:
        statement = select(
            cars.c.id,
            cars.c.manufacture,
            cars.c.year,
            cars.c.model,
            cars.c.color,
            cars.c.is_classic,
        )
        with self._connection() as conn:
            rows = conn.execute(statement).all()

        return [
            CarEntity(
                id=car_id,
                manufacture=manufacture,
                year=year,
                model=model,
                color=color,
                is_classic=bool(is_classic),
            )
            for car_id, manufacture, year, model, color, is_classic in rows
        ]

    def update_by_id(self, car_id: UUID, car: CarEntity) -> int:
        statement = (
            update(cars)
            .where(cars.c.id == car_id)
            .values(
                manufacture=car.manufacture,
                year=car.year,
                model=car.model,
                color=car.color,
                is_classic=car.is_classic,
            )
        )
        with self._connection() as conn:
            return conn.execute(statement).rowcount

    def delete_by_id(self, car_id: UUID) -> int:
        with self._connection() as conn:
            return conn.execute(delete(cars).where(cars.c.id == car_id)).rowcount

    def bulk_mark_classic(self, threshold_year: int) -> int:
        with self._connection() as conn:
            candidates = conn.execute(select(cars.c.id, cars.c.year).where(_NOT_CLASSIC)).all()

            ids = []
            for car_id, year in candidates:
                parsed = parse_year(year)
                if parsed is not None and parsed < threshold_year:
                    ids.append(car_id)

            updated = 0
            for start in range(0, len(ids), _ID_BATCH_SIZE):
                batch = ids[start : start + _ID_BATCH_SIZE]
                statement = (
                    update(cars)
                    .where(cars.c.id.in_(batch), _NOT_CLASSIC)
                    .values(is_classic=True)
                )
                updated += conn.execute(statement).rowcount
            return updated
