import ipaddress
import logging
import warnings
from collections.abc import Callable, Iterator

from starlette.requests import Request

from realip.config import settings
from realip.exceptions import InvalidAddressError
from realip.headers import HeaderSnapshot
from realip.networks import is_private_address

logger = logging.getLogger(__name__)


def strip_port(remote_addr: str) -> str:
    """Remove a trailing ":port" from a transport address.

    "203.0.113.7:8080" -> "203.0.113.7", "[2001:db8::1]:8080" -> "2001:db8::1".
    A bare IPv6 literal is returned unchanged.
    """
    if ":" not in remote_addr:
        return remote_addr

    if remote_addr.startswith("["):
        end = remote_addr.find("]")
        if end != -1:
            return remote_addr[1:end]

    if remote_addr.count(":") > 1:
        try:
            ipaddress.ip_address(remote_addr)
        except ValueError:
            pass
        else:
            return remote_addr

    return remote_addr.rsplit(":", 1)[0]


def _first_public(candidates: Iterator[str], source: str) -> str | None:
    for address in candidates:
        try:
            private = is_private_address(address)
        except InvalidAddressError:
            logger.debug("Skipping unparseable %s candidate %r", source, address)
            continue
        if private:
            logger.debug("Skipping reserved %s candidate %s", source, address)
            continue
        return address
    return None


def _forwarded_for_candidates(headers: HeaderSnapshot) -> Iterator[str]:
    # Occurrences in order received, then left to right within each value
    for value in headers.forwarded_for:
        for token in value.split(","):
            yield token.strip()


def _forwarded_candidates(headers: HeaderSnapshot, strict: bool) -> Iterator[str]:
    for group in headers.forwarded.split(";"):
        for piece in group.split(","):
            if not strict and "for" not in piece:
                continue
            parts = piece.split("=")
            if len(parts) != 2:
                continue
            key, value = parts
            if strict and key.strip().lower() != "for":
                continue
            yield value.strip().lstrip('"[').rstrip(']"')


def _from_forwarded_for(headers: HeaderSnapshot, strict: bool | None) -> str | None:
    return _first_public(_forwarded_for_candidates(headers), "X-Forwarded-For")


def _from_forwarded(headers: HeaderSnapshot, strict: bool | None) -> str | None:
    if not headers.forwarded:
        return None
    if strict is None:
        strict = settings.strict_forwarded_keys
    return _first_public(_forwarded_candidates(headers, strict), "Forwarded")


# Checked in order; the first non-None result wins.
_STEPS: tuple[Callable[[HeaderSnapshot, bool | None], str | None], ...] = (
    _from_forwarded_for,
    _from_forwarded,
)


def resolve(
    remote_addr: str,
    headers: HeaderSnapshot,
    *,
    strict_forwarded_keys: bool | None = None,
) -> str:
    """Return the client's real public IP address.

    Precedence:
      1. no proxy headers at all -> remote address without its port
      2. first public address in X-Forwarded-For
      3. first public "for=" address in Forwarded
      4. X-Real-IP, verbatim (may be empty)

    Candidates that fail to parse are skipped; header content never makes
    this raise. Settings are only loaded when the Forwarded header is scanned
    without an explicit strict_forwarded_keys, so an invalid REALIP_*
    environment surfaces there as a pydantic ValidationError.
    """
    if headers.is_empty:
        return strip_port(remote_addr or "")

    for step in _STEPS:
        address = step(headers, strict_forwarded_keys)
        if address is not None:
            logger.debug("Resolved client address %s via %s", address, step.__name__)
            return address

    logger.debug("No public address in proxy headers, using X-Real-IP")
    return headers.real_ip


def from_request(request: Request) -> str:
    """Return the client's real public IP address from request headers."""
    remote_addr = request.client.host if request.client else ""
    return resolve(remote_addr, HeaderSnapshot.from_headers(request.headers))


def real_ip(request: Request) -> str:
    """Deprecated alias of from_request."""
    warnings.warn(
        "real_ip() is deprecated, use from_request() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return from_request(request)
