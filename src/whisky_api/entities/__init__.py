"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by handlers, services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .delete_outcome import DeleteOutcome
from .whisky import WhiskyEntity

__all__ = ["DeleteOutcome", "WhiskyEntity"]
