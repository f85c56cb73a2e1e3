"""Exception types raised inside the service.

None of these reach the HTTP host: handlers catch them and map them to
status codes (see ``cars_api.handlers.car_handler``).
"""


class CarsApiError(Exception):
    """Base class for all service errors."""


class SecretUnavailable(CarsApiError):
    """Raised when a named secret cannot be fetched from the secret store."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        self.reason = reason
        message = f"Secret unavailable: {name}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class PersistenceError(CarsApiError):
    """Raised when the relational backend cannot be reached or a statement fails."""


class MalformedInput(CarsApiError):
    """Raised when a request body is not valid JSON or does not match the Car schema."""
