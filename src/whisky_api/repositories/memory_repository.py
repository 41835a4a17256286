"""In-process whisky storage.

This is the default storage engine: whiskies live in a dictionary for the
lifetime of the process. No external services required.
"""

import itertools
import threading

from whisky_api.entities import WhiskyEntity


class InMemoryWhiskyRepository:
    """Dictionary-backed implementation of WhiskyStore.

    This class satisfies the WhiskyStore protocol through structural
    typing - no explicit inheritance needed.

    A single lock guards the dictionary and the id sequence, so the
    repository can be shared by requests running in the threadpool.
    Identifiers start at 1 and are never reused.
    """

    def __init__(self, start_id: int = 1) -> None:
        """Initialize an empty repository.

        Args:
            start_id: First identifier handed out by insert().
        """
        self._whiskies: dict[int, WhiskyEntity] = {}
        self._ids = itertools.count(start_id)
        self._lock = threading.Lock()

    @classmethod
    def create(cls) -> "InMemoryWhiskyRepository":
        """Factory method to create an empty InMemoryWhiskyRepository."""
        return cls()

    def insert(self, name: str | None, origin: str | None) -> int:
        with self._lock:
            whisky_id = next(self._ids)
            self._whiskies[whisky_id] = WhiskyEntity(id=whisky_id, name=name, origin=origin)
        return whisky_id

    def replace(self, whisky: WhiskyEntity) -> bool:
        if whisky.id is None:
            raise ValueError("Cannot replace a whisky without an id")
        with self._lock:
            if whisky.id not in self._whiskies:
                return False
            self._whiskies[whisky.id] = whisky
        return True

    def get(self, whisky_id: int) -> WhiskyEntity | None:
        with self._lock:
            return self._whiskies.get(whisky_id)

    def list_all(self) -> list[WhiskyEntity]:
        with self._lock:
            return [self._whiskies[key] for key in sorted(self._whiskies)]

    def remove(self, whisky_id: int) -> bool:
        with self._lock:
            return self._whiskies.pop(whisky_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._whiskies)
