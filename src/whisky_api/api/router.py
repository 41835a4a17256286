"""Route table for the whisky API.

Routes are matched in registration order and the first match wins:

    any    /                 static greeting page
    *      <prefix>*         body materialization (before every handler below)
    POST   <prefix>          create
    GET    <prefix>/{id}     read one
    GET    <prefix>          read all
    PUT    <prefix>/{id}     update
    DELETE <prefix>/{id}     delete

The route functions are plain ``def`` so the blocking CRUD calls run in
FastAPI's threadpool; only body materialization is async.
"""

from fastapi import APIRouter, Depends
from starlette.responses import Response

from whisky_api.api.dependencies import BodyDep, HandlerDep, read_request_body
from whisky_api.http_responses import html_response

HELLO_MESSAGE = "<h1>Hello from the Whisky REST API</h1>"

ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_router(prefix: str) -> APIRouter:
    """Create the router with the landing page and the five whisky routes.

    Args:
        prefix: Resource path prefix, e.g. "/rest/whiskys"

    Returns:
        An APIRouter ready for app.include_router()
    """
    router = APIRouter()

    @router.api_route("/", methods=ROOT_METHODS, include_in_schema=False)
    def hello() -> Response:
        return html_response(HELLO_MESSAGE)

    whiskys = APIRouter(
        prefix=prefix,
        tags=["whiskys"],
        dependencies=[Depends(read_request_body)],
    )

    # Create
    @whiskys.post("", status_code=201)
    def add_one(handler: HandlerDep, body: BodyDep) -> Response:
        return handler.add_one(body)

    # Read one
    @whiskys.get("/{id}")
    def get_one(id: str, handler: HandlerDep) -> Response:
        return handler.get_one(id)

    # Read all
    @whiskys.get("")
    def get_all(handler: HandlerDep) -> Response:
        return handler.get_all()

    # Update
    @whiskys.put("/{id}")
    def update_one(id: str, handler: HandlerDep, body: BodyDep) -> Response:
        return handler.update_one(id, body)

    # Delete
    @whiskys.delete("/{id}")
    def delete_one(id: str, handler: HandlerDep) -> Response:
        return handler.delete_one(id)

    router.include_router(whiskys)
    return router
