"""Errors raised while parsing node IP values."""


class NodeIPError(ValueError):
    """Base class for invalid node IP configuration."""


class InvalidArityError(NodeIPError):
    """Value holds neither a single IP nor a dual-stack pair."""


class UnspecifiedAddressError(NodeIPError):
    """Dual-stack pair includes 0.0.0.0 or ::."""


class DualStackUnsupportedError(NodeIPError):
    """Dual-stack pair rejected by the current configuration."""


class IPParseError(NodeIPError):
    """Token could not be interpreted as an IP address."""
