"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from whisky_api.config import Settings, get_redis_client
from whisky_api.exceptions import BodyTooLargeError
from whisky_api.handlers import WhiskyHandler
from whisky_api.logging_config import setup_logging
from whisky_api.protocols import WhiskyCrudService, WhiskyStore
from whisky_api.repositories import InMemoryWhiskyRepository, RedisWhiskyRepository
from whisky_api.services import WhiskyService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> WhiskyHandler:
    """Dependency injection for WhiskyHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The WhiskyHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "whisky_handler", None)
    if handler is None:
        raise RuntimeError("WhiskyHandler not initialized. Check lifespan setup.")
    return handler


async def read_request_body(request: Request) -> bytes:
    """Read the whole request body into memory before the handler runs.

    Registered on every route under the resource prefix. FastAPI caches
    the result per request, so handlers that also take the body as a
    parameter get the same bytes without a second read.

    With a limit set, a declared Content-Length over the limit is refused
    without reading, and a streamed body is refused as soon as it passes
    the limit.

    Raises:
        BodyTooLargeError: If the body exceeds app.state.max_body_size
            (-1 disables the check)
    """
    limit = getattr(request.app.state, "max_body_size", -1)
    if limit < 0:
        return await request.body()

    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise BodyTooLargeError(size=int(declared), limit=limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise BodyTooLargeError(size=len(body), limit=limit)
    return bytes(body)


def build_repository(app_settings: Settings) -> WhiskyStore:
    """Create the storage engine selected by WHISKY_STORE."""
    if app_settings.uses_redis:
        return RedisWhiskyRepository(
            redis_client=get_redis_client(app_settings),
            key_prefix=app_settings.redis_key_prefix,
        )
    return InMemoryWhiskyRepository.create()


def build_lifespan(
    app_settings: Settings,
    crud_service: WhiskyCrudService | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Initializes all layers and stores the handler in app.state:
    1. Repository (storage) - from settings, unless crud_service is given
    2. Service (CRUD) - wraps the repository
    3. Handler (HTTP) - app.state.whisky_handler

    Args:
        app_settings: Settings the app was created with
        crud_service: Ready-made CRUD collaborator (tests, custom storage).
            When given, no repository is built and nothing is seeded.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(app_settings.log_level)

        service = crud_service
        if service is None:
            repository = build_repository(app_settings)
            whisky_service = WhiskyService.create(repository=repository)
            if app_settings.seed_data:
                whisky_service.seed()
            service = whisky_service
            logger.info("Whisky store: %s", app_settings.whisky_store)

        app.state.whisky_handler = WhiskyHandler(crud_service=service)
        logger.info("Whisky API ready under %s", app_settings.api_prefix)

        yield

        del app.state.whisky_handler
        logger.info("Whisky API shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WhiskyHandler, Depends(get_handler)]
BodyDep = Annotated[bytes, Depends(read_request_body)]
