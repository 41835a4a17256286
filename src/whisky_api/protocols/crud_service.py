"""CRUD service protocol.

Defines the create/read/read-all/update/delete contract the HTTP handlers
depend on. The service is the system of record for whiskies and is
expected to be safe to call from concurrent requests.
"""

from typing import Protocol, runtime_checkable

from whisky_api.entities import DeleteOutcome, WhiskyEntity


@runtime_checkable
class WhiskyCrudService(Protocol):
    """Protocol for the whisky CRUD collaborator.

    Handlers only ever talk to this protocol, so tests can pass in
    a recording fake and production can pass in WhiskyService.
    """

    def save(self, whisky: WhiskyEntity) -> WhiskyEntity:
        """Insert or update a whisky.

        A whisky without an id is inserted and gets a new id.
        A whisky with an id overwrites the stored one.

        Args:
            whisky: The whisky to persist

        Returns:
            The persisted whisky, always with an id
        """
        ...

    def read_one(self, whisky_id: int) -> WhiskyEntity | None:
        """Read a whisky by id.

        Args:
            whisky_id: The identifier to look up

        Returns:
            The whisky, or None if absent
        """
        ...

    def read_all(self) -> list[WhiskyEntity]:
        """Read every whisky, in store order."""
        ...

    def delete(self, whisky_id: int) -> DeleteOutcome:
        """Delete a whisky by id.

        Args:
            whisky_id: The identifier to delete

        Returns:
            DeleteOutcome.DELETED, or DeleteOutcome.NOT_FOUND if absent
        """
        ...
