"""Secret provider protocol.

Defines the interface for any secret store that can return a secret
value by name.

Implementations can include:
- AWS Secrets Manager (production)
- Process environment / .env file (local development)
- In-memory fakes (tests)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretProvider(Protocol):
    """Protocol for named secret lookup.

    Every call is a fresh fetch; implementations must not cache values,
    so a rotated secret takes effect on the next request.
    """

    def get(self, name: str) -> str:
        """Fetch a secret value by name.

        Args:
            name: The secret's name in the store

        Returns:
            The secret value

        Raises:
            SecretUnavailable: If the store is unreachable or the secret does not exist
        """
        ...
