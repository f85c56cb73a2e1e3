"""Car domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CarEntity:
    """Domain entity for a single row of the Cars table.

    Attributes:
        id: Server-assigned identifier (None until the repository assigns one)
        manufacture: Manufacturer name
        year: Model year, stored as text
        model: Model name
        color: Paint color
        is_classic: Whether the car has been classified as classic
    """

    id: UUID | None
    manufacture: str
    year: str
    model: str
    color: str
    is_classic: bool = False
