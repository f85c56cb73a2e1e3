"""Car storage protocol.

Defines the interface for the relational backend holding the Cars table.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from cars_api.entities import CarEntity


@runtime_checkable
class CarStore(Protocol):
    """Protocol for Car persistence.

    Each method acquires its own connection and releases it before
    returning. Mutating methods return the number of rows affected;
    0 from an id-targeted mutation means the id does not exist.

    All methods raise PersistenceError on backend failure.
    """

    def insert(self, car: CarEntity) -> tuple[CarEntity, int]:
        """Insert a car under a freshly generated id.

        Any id on ``car`` is ignored, and the classic flag is left to the
        storage default.

        Args:
            car: The car to insert

        Returns:
            Tuple of (car as persisted, including its new id; rows inserted)
        """
        ...

    def list_all(self) -> list[CarEntity]:
        """Return every car, fully materialized."""
        ...

    def update_by_id(self, car_id: UUID, car: CarEntity) -> int:
        """Replace all mutable fields of the car with the given id.

        Args:
            car_id: Target row
            car: New values (its own id is ignored)

        Returns:
            Number of rows updated
        """
        ...

    def delete_by_id(self, car_id: UUID) -> int:
        """Physically delete the car with the given id.

        Returns:
            Number of rows deleted
        """
        ...

    def bulk_mark_classic(self, threshold_year: int) -> int:
        """Mark as classic every car older than the threshold.

        A row matches when its year parses as an integer strictly below
        ``threshold_year`` and it is not already classic. Rows with a
        non-numeric year are skipped.

        Returns:
            Number of rows changed
        """
        ...
