"""CLI entry point for node-ip."""

import argparse
import logging
import sys

import httpx
from dotenv import load_dotenv

from nodeip import __version__
from nodeip.clients.kubernetes import KubernetesClient
from nodeip.config import Config
from nodeip.exceptions import NodeIPError
from nodeip.node import parse_node_ip_annotation, parse_node_ip_argument

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="node-ip",
        description="Validate and parse node IP configuration",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--node-ip",
        metavar="IPS",
        help="Parse a --node-ip style value (single IP or dual-stack pair)",
    )
    source.add_argument(
        "--annotation",
        metavar="VALUE",
        help="Parse a provided-node-ip annotation value",
    )
    source.add_argument(
        "--node",
        metavar="NAME",
        help="Read and parse the provided-node-ip annotation of a node",
    )
    parser.add_argument(
        "--cloud-provider",
        default=None,
        help="Cloud provider in use (overrides CLOUD_PROVIDER)",
    )
    parser.add_argument(
        "--allow-cloud-dual-stack",
        action="store_true",
        default=None,
        help="Allow a dual-stack --node-ip with legacy cloud providers",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for node-ip CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env(
            cloud_provider=args.cloud_provider,
            allow_cloud_dual_stack=args.allow_cloud_dual_stack,
        )
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    try:
        if args.node_ip is not None:
            addresses = parse_node_ip_argument(
                args.node_ip, config.cloud_provider, config.allow_cloud_dual_stack
            )
        elif args.annotation is not None:
            addresses = [parse_node_ip_annotation(args.annotation)]
        else:
            if not config.kube_api_url:
                print("Configuration error: KUBE_API_URL is required with --node", file=sys.stderr)
                sys.exit(1)
            with KubernetesClient(config.kube_api_url, config.kube_token) as client:
                address = client.get_provided_node_ip(args.node)
            addresses = [address] if address is not None else []
    except NodeIPError as exc:
        print(f"Invalid node IP: {exc}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError:
        logger.exception("Failed to read node %s", args.node)
        sys.exit(1)

    for address in addresses:
        print(address)
