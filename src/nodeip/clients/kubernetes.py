"""
Kubernetes API client using httpx for reading node annotations.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from nodeip.ip import IPAddress
from nodeip.node import PROVIDED_NODE_IP_ANNOTATION, parse_node_ip_annotation

logger = logging.getLogger(__name__)


class KubernetesClient:
    """Reads Node objects from the Kubernetes API server."""

    def __init__(self, api_url: str, token: Optional[str] = None, verify: bool = True):
        """Initialize client for the API server at api_url."""
        self.api_url = api_url.rstrip("/")
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.Client(timeout=30.0, headers=self.headers, verify=verify)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "KubernetesClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_node(self, name: str) -> Dict[str, Any]:
        """Fetch a Node object."""
        url = f"{self.api_url}/api/v1/nodes/{name}"
        resp = self.client.get(url)
        resp.raise_for_status()
        return resp.json()

    def fetch_node_annotations(self, name: str) -> Dict[str, str]:
        """Fetch the annotations of a Node; empty if it has none."""
        node = self.fetch_node(name)
        return (node.get("metadata") or {}).get("annotations") or {}

    def get_provided_node_ip(self, name: str) -> Optional[IPAddress]:
        """
        Read the provided-node-ip annotation of a Node.

        Returns:
            The annotated address, or None if the node has no annotation

        Raises:
            httpx.HTTPStatusError: If the API server rejects the request.
            NodeIPError: If the annotation value is invalid.
        """
        annotations = self.fetch_node_annotations(name)
        value = annotations.get(PROVIDED_NODE_IP_ANNOTATION)
        if value is None:
            logger.debug(f"Node {name} has no {PROVIDED_NODE_IP_ANNOTATION} annotation")
            return None
        return parse_node_ip_annotation(value)
