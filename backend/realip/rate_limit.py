from starlette.requests import Request

from slowapi import Limiter

from realip.resolver import from_request


def get_client_ip(request: Request) -> str:
    """Rate-limit key: the resolved client address, or "unknown".

    Requests that resolve to nothing share the "unknown" bucket.
    """
    return from_request(request) or "unknown"


# Uses in-memory storage by default. Rate limits reset on deploy/restart
# and are per-instance. If scaling to multiple backend instances, switch
# to Redis: Limiter(key_func=..., storage_uri="redis://...")
limiter = Limiter(key_func=get_client_ip)
