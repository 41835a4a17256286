"""Repository layer for data access.

This layer abstracts the storage engine behind the WhiskyStore protocol.
This enables:
- Easy swapping of implementations (in-memory → Redis, etc.)
- Unit testing without a running database
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from whisky_api.protocols import WhiskyStore

from .memory_repository import InMemoryWhiskyRepository
from .redis_repository import RedisWhiskyRepository

__all__ = [
    "WhiskyStore",
    "InMemoryWhiskyRepository",
    "RedisWhiskyRepository",
]
