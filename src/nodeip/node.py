"""Parsing of the --node-ip argument and the provided-node-ip annotation."""

import logging
from typing import List

from nodeip.exceptions import (
    DualStackUnsupportedError,
    IPParseError,
    UnspecifiedAddressError,
)
from nodeip.ip import (
    IPAddress,
    check_dual_stack_pair,
    is_unspecified,
    parse_ip,
    split_ip_list,
)

logger = logging.getLogger(__name__)

CLOUD_PROVIDER_NONE = ""
CLOUD_PROVIDER_EXTERNAL = "external"

# Node annotation holding the IP requested via --node-ip when a cloud
# provider is in use.
PROVIDED_NODE_IP_ANNOTATION = "alpha.kubernetes.io/provided-node-ip"


def dual_stack_supported(cloud_provider: str, allow_cloud_dual_stack: bool) -> bool:
    """Whether a dual-stack --node-ip is allowed for this cloud provider."""
    if not cloud_provider or cloud_provider == CLOUD_PROVIDER_EXTERNAL:
        return True
    return allow_cloud_dual_stack


def parse_node_ip_argument(
    node_ip: str,
    cloud_provider: str,
    allow_cloud_dual_stack: bool,
) -> List[IPAddress]:
    """
    Parse the value of the --node-ip command line flag.

    Tokens are trimmed; anything that is not an IP address is ignored.

    Args:
        node_ip: Comma-separated flag value
        cloud_provider: Name of the cloud provider in use ("" for none)
        allow_cloud_dual_stack: Allow dual-stack even for legacy providers

    Returns:
        Zero, one or two addresses in input order

    Raises:
        InvalidArityError: More than two IPs, or two of the same family.
        DualStackUnsupportedError: Dual-stack pair not allowed for the provider.
        UnspecifiedAddressError: Dual-stack pair includes 0.0.0.0 or ::.
    """
    addresses: List[IPAddress] = []
    if not node_ip:
        return addresses

    for token in split_ip_list(node_ip, trim=True):
        address = parse_ip(token)
        if address is None:
            logger.info("Could not parse node IP, ignoring: %r", token)
            continue
        addresses.append(address)

    check_dual_stack_pair(addresses)
    if len(addresses) == 2:
        if not dual_stack_supported(cloud_provider, allow_cloud_dual_stack):
            raise DualStackUnsupportedError(
                f"dual-stack --node-ip {node_ip!r} not supported in this configuration"
            )
        if is_unspecified(addresses[0]) or is_unspecified(addresses[1]):
            raise UnspecifiedAddressError(
                f"dual-stack --node-ip {node_ip!r} cannot include '0.0.0.0' or '::'"
            )

    return addresses


def parse_node_ip_annotation(annotation: str) -> IPAddress:
    """
    Parse the value of the provided-node-ip annotation.

    Annotations are written by the node itself, so unlike
    parse_node_ip_argument every token must be a valid IP with no
    surrounding whitespace, and dual-stack values are never accepted.

    Raises:
        IPParseError: A token is not an IP address.
        InvalidArityError: More than two IPs, or two of the same family.
        DualStackUnsupportedError: Value is a dual-stack pair.
    """
    addresses: List[IPAddress] = []
    for token in split_ip_list(annotation, trim=False):
        address = parse_ip(token)
        if address is None:
            raise IPParseError(f"could not parse {token!r} as an IP address")
        addresses.append(address)

    check_dual_stack_pair(addresses)
    if len(addresses) == 2:
        raise DualStackUnsupportedError(
            f"dual-stack node IP annotation {annotation!r} not supported in this configuration"
        )

    return addresses[0]
