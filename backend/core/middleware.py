"""Response header middleware wrapped around the API router."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Adds permissive CORS headers and answers every OPTIONS request itself."""

    def __init__(self, app, allow_origin: str, allow_methods: str, allow_headers: str):
        super().__init__(app)
        self.headers = {
            'Access-Control-Allow-Origin': allow_origin,
            'Access-Control-Allow-Methods': allow_methods,
            'Access-Control-Allow-Headers': allow_headers,
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == 'OPTIONS':
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers.update(self.headers)
        return response


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        # error bodies are plain text and already say so
        response.headers.setdefault('content-type', 'application/json')
        return response
