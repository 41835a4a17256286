"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (CRUD)  -> (Storage)

Usage:
    ```python
    from whisky_api.services import WhiskyService

    service = WhiskyService.create(repository=InMemoryWhiskyRepository())
    ```
"""

from .whisky_service import WhiskyService

__all__ = [
    "WhiskyService",
]
