"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request decoding and response serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateWhiskyRequest, UpdateWhiskyRequest
from .responses import WhiskyResponse

__all__ = [
    "CreateWhiskyRequest",
    "UpdateWhiskyRequest",
    "WhiskyResponse",
]
