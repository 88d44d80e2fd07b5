"""Lenient parsing of single IP address literals."""

import ipaddress
import logging
import re
from typing import List, Optional, Sequence, Union

from nodeip.exceptions import InvalidArityError

logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_DECIMAL_FIELD = re.compile(r"[0-9]+")


def _normalize_ipv4(text: str) -> Optional[str]:
    """Return canonical dotted-decimal form, reading leading zeros as decimal."""
    fields = text.split(".")
    if len(fields) != 4:
        return None
    octets: List[int] = []
    for field in fields:
        if not _DECIMAL_FIELD.fullmatch(field):
            return None
        value = int(field)
        if value > 255:
            return None
        octets.append(value)
    return ".".join(str(octet) for octet in octets)


def _parse_ipv6(text: str) -> IPAddress:
    # Zone identifiers are not part of a node IP.
    if "%" in text:
        raise ValueError(f"zone identifier not allowed in {text!r}")

    head, sep, tail = text.rpartition(":")
    if "." in tail:
        embedded = _normalize_ipv4(tail)
        if embedded is None:
            raise ValueError(f"invalid embedded IPv4 address in {text!r}")
        text = f"{head}{sep}{embedded}"

    address = ipaddress.IPv6Address(text)
    if address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def parse_ip(text: str) -> Optional[IPAddress]:
    """
    Parse a single IPv4 or IPv6 literal.

    Non-canonical forms are accepted: IPv4 octets with leading zeros
    ("01.2.3.004") and uncompressed or zero-padded IPv6 groups.
    IPv4-mapped IPv6 addresses are returned as IPv4.

    Args:
        text: Candidate IP literal; surrounding whitespace is not stripped

    Returns:
        The parsed address, or None if text is not an IP address
    """
    try:
        if ":" in text:
            return _parse_ipv6(text)
        normalized = _normalize_ipv4(text)
        if normalized is None:
            raise ValueError(f"{text!r} is not a dotted-decimal IPv4 address")
        return ipaddress.IPv4Address(normalized)
    except (ValueError, AttributeError) as e:
        logger.debug(f"Could not parse IP {text!r}: {e}")
        return None


def is_unspecified(address: IPAddress) -> bool:
    """Check for 0.0.0.0 or ::."""
    return address.is_unspecified


def is_ipv6(address: IPAddress) -> bool:
    return address.version == 6


def check_dual_stack_pair(addresses: Sequence[IPAddress]) -> None:
    """
    Ensure addresses hold one IP or one IPv4 plus one IPv6.

    Raises:
        InvalidArityError: More than two addresses, or a single-family pair.
    """
    if len(addresses) > 2 or (
        len(addresses) == 2 and is_ipv6(addresses[0]) == is_ipv6(addresses[1])
    ):
        raise InvalidArityError(
            "must contain either a single IP or a dual-stack pair of IPs"
        )
