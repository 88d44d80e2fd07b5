"""Configuration module for node IP parsing."""

import os
import logging
from typing import Optional

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("", "0", "false", "no", "off")


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")


class Config:
    """Application configuration."""

    def __init__(
        self,
        cloud_provider: str = "",
        allow_cloud_dual_stack: bool = False,
        kube_api_url: Optional[str] = None,
        kube_token: Optional[str] = None,
    ):
        self.cloud_provider = cloud_provider
        self.allow_cloud_dual_stack = allow_cloud_dual_stack
        self.kube_api_url = kube_api_url
        self.kube_token = kube_token

    @classmethod
    def from_env(
        cls,
        cloud_provider: Optional[str] = None,
        allow_cloud_dual_stack: Optional[bool] = None,
    ) -> "Config":
        """Create configuration from environment variables.

        Reads CLOUD_PROVIDER, ALLOW_CLOUD_DUAL_STACK, KUBE_API_URL and
        KUBE_TOKEN from the environment. Explicit arguments take precedence
        over the environment.

        Raises:
            ValueError: If ALLOW_CLOUD_DUAL_STACK is not a boolean.
        """
        if cloud_provider is None:
            cloud_provider = os.getenv("CLOUD_PROVIDER", "").strip()
        if allow_cloud_dual_stack is None:
            allow_cloud_dual_stack = _parse_bool(
                "ALLOW_CLOUD_DUAL_STACK", os.getenv("ALLOW_CLOUD_DUAL_STACK", "")
            )

        return cls(
            cloud_provider=cloud_provider,
            allow_cloud_dual_stack=allow_cloud_dual_stack,
            kube_api_url=os.getenv("KUBE_API_URL") or None,
            kube_token=os.getenv("KUBE_TOKEN") or None,
        )

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Reduce noise from third-party libraries
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)

    def __repr__(self) -> str:
        """Return string representation with masked token."""
        def _mask(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            if len(value) <= 12:
                return "***"
            return value[:4] + "***" + value[-4:]

        return (
            f"Config(cloud_provider={self.cloud_provider!r}, "
            f"allow_cloud_dual_stack={self.allow_cloud_dual_stack}, "
            f"kube_api_url={self.kube_api_url!r}, "
            f"kube_token={_mask(self.kube_token)!r})"
        )
