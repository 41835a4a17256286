"""Whisky API - REST CRUD service for a whisky collection.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (WhiskyCrudService, WhiskyStore)
    - repositories: Storage implementations (in-memory, Redis)
    - services: CRUD logic (WhiskyService)
    - handlers: HTTP request/response translation (WhiskyHandler)
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from whisky_api.repositories import InMemoryWhiskyRepository
    from whisky_api.services import WhiskyService

    service = WhiskyService.create(repository=InMemoryWhiskyRepository())
    ```

For HTTP API:
    ```python
    from whisky_api.api.app import app, create_app
    ```
"""

from whisky_api.config import get_redis_client, settings
from whisky_api.dto import CreateWhiskyRequest, UpdateWhiskyRequest, WhiskyResponse
from whisky_api.entities import DeleteOutcome, WhiskyEntity
from whisky_api.handlers import WhiskyHandler
from whisky_api.protocols import WhiskyCrudService, WhiskyStore
from whisky_api.repositories import InMemoryWhiskyRepository, RedisWhiskyRepository
from whisky_api.services import WhiskyService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "WhiskyCrudService",
    "WhiskyStore",
    # Services (CRUD)
    "WhiskyService",
    # Handlers (HTTP)
    "WhiskyHandler",
    # Repositories (storage)
    "InMemoryWhiskyRepository",
    "RedisWhiskyRepository",
    # Entities (domain models)
    "WhiskyEntity",
    "DeleteOutcome",
    # DTOs (API contracts)
    "CreateWhiskyRequest",
    "UpdateWhiskyRequest",
    "WhiskyResponse",
]
