"""Reserved address blocks and the classifier built on them.

References:
    https://en.wikipedia.org/wiki/Private_network
    https://en.wikipedia.org/wiki/Link-local_address
"""

import ipaddress

from realip.exceptions import InvalidAddressError

RESERVED_NETWORKS: tuple[ipaddress.IPv4Network | ipaddress.IPv6Network, ...] = tuple(
    ipaddress.ip_network(block)
    for block in (
        "127.0.0.0/8",  # localhost
        "10.0.0.0/8",  # 24-bit block
        "172.16.0.0/12",  # 20-bit block
        "192.168.0.0/16",  # 16-bit block
        "169.254.0.0/16",  # link local address
        "::1/128",  # localhost IPv6
        "fc00::/7",  # unique local address IPv6
        "fe80::/10",  # link local address IPv6
    )
)


def parse_address(address: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse an IP literal. Raises InvalidAddressError on failure.

    Zone-scoped IPv6 literals ("fe80::1%eth0") are rejected.
    """
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        raise InvalidAddressError(address) from None
    if getattr(ip, "scope_id", None):
        raise InvalidAddressError(address)
    return ip


def is_private_address(address: str) -> bool:
    """Return True if the address falls inside a reserved block.

    Raises InvalidAddressError if the address does not parse; callers must
    treat that as untrusted rather than public.
    """
    ip = parse_address(address)
    # ::ffff:a.b.c.d is matched against the IPv4 blocks
    if ip.version == 6 and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped

    return any(ip in network for network in RESERVED_NETWORKS)


def is_public_address(address: str) -> bool:
    """True only for a valid address outside every reserved block."""
    try:
        return not is_private_address(address)
    except InvalidAddressError:
        return False
