"""HTTP handlers for whisky CRUD operations.

Handlers convert between request bodies / path parameters and calls on the
CRUD service. They handle HTTP concerns like status codes, content types
and malformed input. Each handler returns exactly one response.
"""

import logging
import re
from dataclasses import replace

from pydantic import ValidationError
from starlette.responses import Response

from whisky_api.dto import CreateWhiskyRequest, UpdateWhiskyRequest, WhiskyResponse
from whisky_api.entities import DeleteOutcome, WhiskyEntity
from whisky_api.exceptions import BadWhiskyIdError
from whisky_api.http_responses import APPLICATION_JSON_CHARSET_UTF_8, PrettyJSONResponse
from whisky_api.protocols import WhiskyCrudService

logger = logging.getLogger(__name__)

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
# Sign plus 19 digits covers the whole 64-bit range.
_MAX_ID_LENGTH = 20


def parse_whisky_id(raw_id: str | None) -> int:
    """Parse the ``id`` path parameter as a signed 64-bit integer.

    Args:
        raw_id: The path segment exactly as received

    Returns:
        The parsed identifier

    Raises:
        BadWhiskyIdError: If the value is empty, not a plain decimal
            integer, or outside the 64-bit range. The app renders it as
            400 text/html ``Bad ID. ID="<raw_id>"``.
    """
    if raw_id is None or not _SIGNED_DIGITS.fullmatch(raw_id):
        raise BadWhiskyIdError(str(raw_id), reason="not a decimal integer")
    if len(raw_id) > _MAX_ID_LENGTH:
        raise BadWhiskyIdError(raw_id, reason="out of 64-bit range")

    value = int(raw_id)
    if not LONG_MIN <= value <= LONG_MAX:
        raise BadWhiskyIdError(raw_id, reason="out of 64-bit range")
    return value


def merge_whisky(stored: WhiskyEntity, changes: UpdateWhiskyRequest) -> WhiskyEntity:
    """Build the updated whisky from the stored one and the request.

    The id always comes from the stored whisky. A key absent from the
    request keeps the stored value; an explicit null clears it.
    """
    return replace(stored, **changes.model_dump(include=changes.model_fields_set))


class WhiskyHandler:
    """HTTP handlers for whisky CRUD operations.

    This handler delegates persistence to a WhiskyCrudService
    and handles HTTP-specific concerns like:
    - Decoding and validating request bodies
    - Converting entities to DTOs
    - Setting status codes and content types

    Example:
        ```python
        from whisky_api.handlers import WhiskyHandler
        from whisky_api.services import WhiskyService

        handler = WhiskyHandler(crud_service=WhiskyService.create(repository=repo))

        # Use in FastAPI route
        @router.get("/rest/whiskys/{id}")
        def get_one(id: str):
            return handler.get_one(id)
        ```
    """

    def __init__(self, crud_service: WhiskyCrudService) -> None:
        """Initialize the whisky handler.

        Args:
            crud_service: The CRUD collaborator (required).
        """
        self._crud = crud_service

    @staticmethod
    def _json(content: WhiskyEntity | list[WhiskyEntity], status_code: int = 200) -> PrettyJSONResponse:
        if isinstance(content, list):
            payload = [WhiskyResponse.from_entity(w).model_dump() for w in content]
        else:
            payload = WhiskyResponse.from_entity(content).model_dump()
        return PrettyJSONResponse(payload, status_code=status_code)

    def add_one(self, body: bytes) -> Response:
        """Handle POST <prefix> requests.

        Args:
            body: The materialized request body

        Returns:
            201 with the created whisky, or 400 if the body is not a Whisky object
        """
        try:
            request = CreateWhiskyRequest.model_validate_json(body)
        except ValidationError as e:
            logger.error("Malformed Whisky object: %s", e.errors(include_url=False, include_input=False))
            return Response(
                content="Malformed Whisky object",
                status_code=400,
                media_type=APPLICATION_JSON_CHARSET_UTF_8,
            )

        whisky = self._crud.save(WhiskyEntity(id=None, name=request.name, origin=request.origin))
        return self._json(whisky, status_code=201)

    def get_one(self, raw_id: str) -> Response:
        """Handle GET <prefix>/{id} requests.

        Args:
            raw_id: The id path segment

        Returns:
            200 with the whisky, or 404 if it does not exist
        """
        whisky_id = parse_whisky_id(raw_id)

        whisky = self._crud.read_one(whisky_id)
        if whisky is None:
            return Response(content=f"Whisky not found for id={whisky_id}", status_code=404)
        return self._json(whisky)

    def get_all(self) -> Response:
        """Handle GET <prefix> requests."""
        return self._json(self._crud.read_all())

    def update_one(self, raw_id: str, body: bytes) -> Response:
        """Handle PUT <prefix>/{id} requests.

        Steps:
        1. Parse the id
        2. Decode the body as a JSON object with optional string name/origin
        3. Fetch the stored whisky (404 with empty body if missing)
        4. Merge and save

        Args:
            raw_id: The id path segment
            body: The materialized request body

        Returns:
            200 with the saved whisky, 400 for a malformed body, 404 if missing
        """
        whisky_id = parse_whisky_id(raw_id)

        try:
            changes = UpdateWhiskyRequest.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                "Malformed Whisky object for id=%s: %s",
                whisky_id,
                e.errors(include_url=False, include_input=False),
            )
            return Response(content="Malformed Whisky object.", status_code=400)

        stored = self._crud.read_one(whisky_id)
        if stored is None:
            return Response(status_code=404)

        saved = self._crud.save(merge_whisky(stored, changes))
        return self._json(saved)

    def delete_one(self, raw_id: str) -> Response:
        """Handle DELETE <prefix>/{id} requests.

        A successful delete answers 204 with no body; HTTP/1.1 servers
        refuse to send one on 204.
        """
        whisky_id = parse_whisky_id(raw_id)

        if self._crud.delete(whisky_id) is DeleteOutcome.NOT_FOUND:
            return Response(
                content=f"Can not delete Whisky because it does not exist. ID={whisky_id}",
                status_code=404,
            )
        logger.info("Deleted. ID=%s", whisky_id)
        return Response(status_code=204)
