"""Whisky CRUD service.

This service is the system of record the HTTP handlers talk to. It
implements the WhiskyCrudService protocol on top of a WhiskyStore.
"""

import logging
from dataclasses import replace

from whisky_api.entities import DeleteOutcome, WhiskyEntity
from whisky_api.protocols import WhiskyStore

logger = logging.getLogger(__name__)

# Loaded by seed() into an empty store.
SAMPLE_WHISKIES = (
    ("Bowmore 15 Years Laimrig", "Scotland, Islay"),
    ("Talisker 57° North", "Scotland, Island"),
)


class WhiskyService:
    """Core whisky CRUD service.

    This service depends on the WhiskyStore PROTOCOL, not a concrete
    implementation, so it works the same over the in-memory and Redis
    repositories.

    Example:
        ```python
        from whisky_api.repositories import InMemoryWhiskyRepository
        from whisky_api.services import WhiskyService

        service = WhiskyService.create(repository=InMemoryWhiskyRepository())
        talisker = service.save(WhiskyEntity(id=None, name="Talisker", origin="Scotland"))
        ```
    """

    def __init__(self, repository: WhiskyStore) -> None:
        """Initialize the whisky service.

        Args:
            repository: Whisky storage engine (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: WhiskyStore) -> "WhiskyService":
        """Factory method to create WhiskyService.

        Args:
            repository: Whisky storage engine (required).

        Returns:
            Configured WhiskyService instance
        """
        return cls(repository=repository)

    def save(self, whisky: WhiskyEntity) -> WhiskyEntity:
        """Insert or update a whisky.

        Business logic:
        1. No id: insert and return the whisky with its new id
        2. Id present and stored: overwrite name and origin
        3. Id present but not stored: insert under a new id

        Args:
            whisky: The whisky to persist

        Returns:
            The persisted whisky
        """
        if whisky.id is not None and self._repository.replace(whisky):
            logger.debug("Updated whisky id=%s", whisky.id)
            return whisky

        new_id = self._repository.insert(whisky.name, whisky.origin)
        logger.debug("Inserted whisky id=%s", new_id)
        return replace(whisky, id=new_id)

    def read_one(self, whisky_id: int) -> WhiskyEntity | None:
        return self._repository.get(whisky_id)

    def read_all(self) -> list[WhiskyEntity]:
        return self._repository.list_all()

    def delete(self, whisky_id: int) -> DeleteOutcome:
        """Delete a whisky by id.

        Args:
            whisky_id: The identifier to delete

        Returns:
            DeleteOutcome.DELETED, or DeleteOutcome.NOT_FOUND when nothing was stored
        """
        if self._repository.remove(whisky_id):
            logger.debug("Deleted whisky id=%s", whisky_id)
            return DeleteOutcome.DELETED
        return DeleteOutcome.NOT_FOUND

    def seed(self) -> int:
        """Load the sample whiskies if the store is empty.

        Returns:
            Number of whiskies inserted
        """
        if self._repository.count() > 0:
            return 0
        for name, origin in SAMPLE_WHISKIES:
            self._repository.insert(name, origin)
        logger.info("Seeded %d sample whiskies", len(SAMPLE_WHISKIES))
        return len(SAMPLE_WHISKIES)
