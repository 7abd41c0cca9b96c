class RealIPError(Exception):
    """Base class for errors raised by realip."""


class InvalidAddressError(RealIPError, ValueError):
    """Raised when a candidate string is not a valid IP literal."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"address is not valid: {address!r}")
