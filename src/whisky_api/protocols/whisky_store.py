"""Whisky storage protocol.

Defines the interface for any storage engine that can keep whiskies
keyed by a numeric identifier.

Implementations can include:
- In-process dictionary (default, used for local runs and tests)
- Redis hashes
- Any relational or document database
"""

from typing import Protocol, runtime_checkable

from whisky_api.entities import WhiskyEntity


@runtime_checkable
class WhiskyStore(Protocol):
    """Protocol for whisky storage engines.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Example:
        ```python
        from whisky_api.protocols import WhiskyStore

        # Type check passes for any matching implementation
        store: WhiskyStore = InMemoryWhiskyRepository()
        store: WhiskyStore = RedisWhiskyRepository(redis_client)
        ```
    """

    def insert(self, name: str | None, origin: str | None) -> int:
        """Store a new whisky under a freshly allocated identifier.

        Args:
            name: The whisky name
            origin: The whisky origin

        Returns:
            The identifier assigned to the new whisky
        """
        ...

    def replace(self, whisky: WhiskyEntity) -> bool:
        """Overwrite the stored whisky that has the same identifier.

        Args:
            whisky: A persisted whisky (id is not None)

        Returns:
            True if a whisky with that id existed and was overwritten
        """
        ...

    def get(self, whisky_id: int) -> WhiskyEntity | None:
        """Fetch a whisky by identifier.

        Args:
            whisky_id: The identifier to look up

        Returns:
            The stored whisky, or None if absent
        """
        ...

    def list_all(self) -> list[WhiskyEntity]:
        """Return every stored whisky, ordered by identifier."""
        ...

    def remove(self, whisky_id: int) -> bool:
        """Delete a whisky by identifier.

        Args:
            whisky_id: The identifier to delete

        Returns:
            True if deleted, False if there was nothing to delete
        """
        ...

    def count(self) -> int:
        """Count stored whiskies."""
        ...
