import logging

from fastapi import FastAPI, Request
from starlette.responses import PlainTextResponse, Response

from whisky_api.api.dependencies import build_lifespan
from whisky_api.api.middleware import RequestLoggingMiddleware
from whisky_api.api.router import create_router
from whisky_api.config import Settings, settings
from whisky_api.exceptions import BadWhiskyIdError, BodyTooLargeError, WhiskyStorageError
from whisky_api.http_responses import html_response
from whisky_api.protocols import WhiskyCrudService

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions to HTTP responses.

    BadWhiskyIdError    → 400 text/html
    BodyTooLargeError   → 413
    WhiskyStorageError  → 500
    """

    @app.exception_handler(BadWhiskyIdError)
    async def handle_bad_id(request: Request, exc: BadWhiskyIdError) -> Response:
        logger.error("%s (%s)", exc.message, exc.context.get("reason"))
        return html_response(exc.message, status_code=400)

    @app.exception_handler(BodyTooLargeError)
    async def handle_body_too_large(request: Request, exc: BodyTooLargeError) -> Response:
        logger.warning("Rejected %d byte body on %s (limit %d)", exc.size, request.url.path, exc.limit)
        return PlainTextResponse(exc.message, status_code=413)

    @app.exception_handler(WhiskyStorageError)
    async def handle_storage_error(request: Request, exc: WhiskyStorageError) -> Response:
        logger.error("%s | Context: %s", exc.message, exc.context, exc_info=exc)
        return PlainTextResponse("Internal Server Error", status_code=500)


def create_app(
    crud_service: WhiskyCrudService | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        crud_service: CRUD collaborator to serve. If None, one is built in the
            lifespan from the configured store.
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        Configured FastAPI instance
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Whisky API",
        description="REST API for a whisky collection",
        version="0.1.0",
        lifespan=build_lifespan(app_settings, crud_service),
    )
    app.state.max_body_size = app_settings.max_body_size

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(create_router(app_settings.api_prefix))

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "whisky_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
