from collections.abc import Mapping
from dataclasses import dataclass

X_REAL_IP = "X-Real-IP"
X_FORWARDED_FOR = "X-Forwarded-For"
# RFC 7239 defines the "Forwarded" header to replace the X-Forwarded-* family,
# e.g. Forwarded: for=192.0.2.60;proto=https;by=203.0.113.43
FORWARDED = "Forwarded"


def _getlist(headers, name: str) -> list[str]:
    """Return every occurrence of a header, in the order received."""
    # starlette.datastructures.Headers and similar multi-dicts
    if hasattr(headers, "getlist"):
        return list(headers.getlist(name))

    wanted = name.lower()
    values: list[str] = []
    for key, value in headers.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, (list, tuple)):
            values.extend(value)
        else:
            values.append(value)
    return values


def _first(headers, name: str) -> str:
    values = _getlist(headers, name)
    return values[0] if values else ""


@dataclass(frozen=True)
class HeaderSnapshot:
    """The proxy headers of one request, as read by the resolver."""

    real_ip: str = ""
    forwarded_for: tuple[str, ...] = ()
    forwarded: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping | None) -> "HeaderSnapshot":
        if headers is None:
            return cls()
        return cls(
            real_ip=_first(headers, X_REAL_IP),
            forwarded_for=tuple(_getlist(headers, X_FORWARDED_FOR)),
            forwarded=_first(headers, FORWARDED),
        )

    @property
    def is_empty(self) -> bool:
        return not self.real_ip and not self.forwarded_for and not self.forwarded
