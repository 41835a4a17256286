"""Shared fixtures for the whisky API tests."""

import pytest
from fastapi.testclient import TestClient

from whisky_api.api.app import create_app
from whisky_api.config import Settings
from whisky_api.entities import DeleteOutcome, WhiskyEntity
from whisky_api.repositories import InMemoryWhiskyRepository
from whisky_api.services import WhiskyService


class RecordingCrudService:
    """WhiskyCrudService fake that records every call.

    Delegates to a real WhiskyService over an in-memory repository, so
    responses reflect actual stored state.
    """

    def __init__(self) -> None:
        self._service = WhiskyService(repository=InMemoryWhiskyRepository())
        self.calls: list[tuple[str, object]] = []

    def calls_to(self, name: str) -> list[object]:
        return [arg for call, arg in self.calls if call == name]

    def save(self, whisky: WhiskyEntity) -> WhiskyEntity:
        self.calls.append(("save", whisky))
        return self._service.save(whisky)

    def read_one(self, whisky_id: int) -> WhiskyEntity | None:
        self.calls.append(("read_one", whisky_id))
        return self._service.read_one(whisky_id)

    def read_all(self) -> list[WhiskyEntity]:
        self.calls.append(("read_all", None))
        return self._service.read_all()

    def delete(self, whisky_id: int) -> DeleteOutcome:
        self.calls.append(("delete", whisky_id))
        return self._service.delete(whisky_id)

    def add(self, name: str, origin: str) -> WhiskyEntity:
        """Store a whisky without recording the call."""
        return self._service.save(WhiskyEntity(id=None, name=name, origin=origin))


@pytest.fixture
def test_settings():
    return Settings(log_level="WARNING", seed_data=False)


@pytest.fixture
def crud_service():
    return RecordingCrudService()


@pytest.fixture
def client(crud_service, test_settings):
    """Test client running the full app (lifespan included) over the recording fake."""
    app = create_app(crud_service=crud_service, app_settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client
