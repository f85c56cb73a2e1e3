"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (AWS Secrets Manager → environment, SQL Server → SQLite, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .car_store import CarStore
from .secret_provider import SecretProvider

__all__ = [
    "CarStore",
    "SecretProvider",
]
