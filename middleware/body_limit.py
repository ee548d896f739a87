"""Request Body Size Limit Middleware

Rejects requests whose body exceeds config.MAX_BODY_SIZE_BYTES with
413 {"error": "Request body too large"}.

Product payloads may carry base64 encoded images, so the limit is generous
(10 MB by default).
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

import config

TOO_LARGE_MESSAGE = "Request body too large"


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware that enforces a maximum request body size."""

    def __init__(self, app, max_body_size: int | None = None):
        super().__init__(app)
        self.max_body_size = max_body_size or config.MAX_BODY_SIZE_BYTES

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length is not None and content_length.isdigit() and int(content_length) > self.max_body_size:
            return JSONResponse(status_code=413, content={"error": TOO_LARGE_MESSAGE})

        # Chunked uploads carry no Content-Length; read and measure
        if content_length is None and request.method in ("POST", "PUT", "PATCH"):
            body = await request.body()
            if len(body) > self.max_body_size:
                return JSONResponse(status_code=413, content={"error": TOO_LARGE_MESSAGE})

        return await call_next(request)
