from realip.exceptions import InvalidAddressError, RealIPError
from realip.headers import HeaderSnapshot
from realip.networks import RESERVED_NETWORKS, is_private_address, is_public_address
from realip.resolver import from_request, real_ip, resolve

__all__ = [
    "RESERVED_NETWORKS",
    "HeaderSnapshot",
    "InvalidAddressError",
    "RealIPError",
    "from_request",
    "is_private_address",
    "is_public_address",
    "real_ip",
    "resolve",
]
