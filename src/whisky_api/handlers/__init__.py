"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on the CRUD service protocol, not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (CRUD)  -> (Storage)
"""

from .whisky_handler import WhiskyHandler, merge_whisky, parse_whisky_id

__all__ = [
    "WhiskyHandler",
    "merge_whisky",
    "parse_whisky_id",
]
