from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from realip.config import settings
from realip.resolver import from_request


class RealIPMiddleware(BaseHTTPMiddleware):
    """Resolve the client address once and store it on request.state."""

    async def dispatch(self, request: Request, call_next):
        setattr(request.state, settings.state_attribute, from_request(request))
        return await call_next(request)
