from fastapi import Request

from realip.config import settings
from realip.resolver import from_request


async def get_real_ip(request: Request) -> str:
    """FastAPI dependency returning the resolved client address.

    Uses the value stored by RealIPMiddleware when installed, otherwise
    resolves from the request directly.
    """
    address = getattr(request.state, settings.state_attribute, None)
    if address is None:
        address = from_request(request)
    return address
