"""Delete outcome returned by the CRUD service."""

from enum import Enum


class DeleteOutcome(Enum):
    """Result of deleting a whisky by id.

    Deleting an id the store does not know is an ordinary outcome,
    not an error, so callers branch on the value instead of catching.
    """

    DELETED = "deleted"
    NOT_FOUND = "not_found"
