"""SQLAlchemy Core definition of the Cars table.

Column names follow the existing database table; Python code addresses
the columns through their lowercase keys.
"""

from sqlalchemy import Boolean, Column, MetaData, String, Table, Uuid, false
from sqlalchemy.engine import Engine

metadata = MetaData()

cars = Table(
    "Cars",
    metadata,
    Column("Id", Uuid, key="id", primary_key=True),
    Column("Manufacture", String(100), key="manufacture", nullable=False),
    Column("Year", String(10), key="year", nullable=False),
    Column("Model", String(100), key="model", nullable=False),
    Column("Color", String(50), key="color", nullable=False),
    # Nullable for rows written before the column had a default.
    Column("IsClassic", Boolean, key="is_classic", nullable=True, server_default=false()),
)


def create_schema(engine: Engine) -> None:
    """Create the Cars table if it does not exist (local development and tests)."""
    metadata.create_all(engine, checkfirst=True)
