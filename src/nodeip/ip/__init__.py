"""IP literal parsing and list helpers."""

from nodeip.ip.parser import (
    IPAddress,
    parse_ip,
    is_unspecified,
    is_ipv6,
    check_dual_stack_pair,
)
from nodeip.ip.utils import split_ip_list

__all__ = [
    "IPAddress",
    "parse_ip",
    "is_unspecified",
    "is_ipv6",
    "check_dual_stack_pair",
    "split_ip_list",
]
