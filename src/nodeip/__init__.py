"""Parsing and validation of node IP configuration."""

__version__ = "1.0.0"

from nodeip.exceptions import (
    NodeIPError,
    InvalidArityError,
    UnspecifiedAddressError,
    DualStackUnsupportedError,
    IPParseError,
)
from nodeip.node import parse_node_ip_argument, parse_node_ip_annotation

__all__ = [
    "__version__",
    "NodeIPError",
    "InvalidArityError",
    "UnspecifiedAddressError",
    "DualStackUnsupportedError",
    "IPParseError",
    "parse_node_ip_argument",
    "parse_node_ip_annotation",
]
