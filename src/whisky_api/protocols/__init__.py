"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory → Redis, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from whisky_api.protocols import WhiskyCrudService, WhiskyStore

    # Type hints work with any implementation
    store: WhiskyStore = InMemoryWhiskyRepository()      # works
    store: WhiskyStore = RedisWhiskyRepository(redis_client)  # also works
    ```
"""

from .crud_service import WhiskyCrudService
from .whisky_store import WhiskyStore

__all__ = [
    "WhiskyCrudService",
    "WhiskyStore",
]
