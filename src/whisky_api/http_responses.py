"""Response helpers shared by the handlers and the app.

The JSON responses are pretty-printed with the exact content type
clients of this API expect.
"""

import json
from typing import Any

from starlette.responses import JSONResponse, Response

CONTENT_TYPE = "content-type"
APPLICATION_JSON_CHARSET_UTF_8 = "application/json; charset=utf-8"
TEXT_HTML = "text/html"


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with a two-space indent."""

    media_type = APPLICATION_JSON_CHARSET_UTF_8

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def html_response(content: str, status_code: int = 200) -> Response:
    """Build a response whose content type is exactly ``text/html``.

    Starlette appends a charset to ``text/*`` media types, so the header is
    set directly instead of through ``media_type``.
    """
    return Response(content=content, status_code=status_code, headers={CONTENT_TYPE: TEXT_HTML})
