"""
Archon Bridge Runtime Configuration

Combines defaults, YAML config, and environment variables into a BridgeConfig.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit

from archon_bridge.configs.constants import DEFAULT_ENDPOINT, SUPPORTED_SCHEMES, get_timeout
from archon_bridge.configs.yaml_config import load_yaml_config
from archon_bridge.exceptions import ConfigurationError, InvalidEndpointError


@dataclass
class BridgeConfig:
    """Resolved settings for one bridge run."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[float] = None
    headers: dict[str, str] = field(default_factory=dict)
    debug: bool = False

    @property
    def scheme(self) -> str:
        return urlsplit(self.endpoint).scheme.lower()

    def to_dict(self) -> dict:
        return {
            "endpoint": self.endpoint,
            "timeout": self.timeout,
            "headers": dict(self.headers),
            "debug": self.debug,
        }


def validate_endpoint(url: str) -> str:
    """
    Check that an endpoint URL can be reached over HTTP.

    Args:
        url: Endpoint URL

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        InvalidEndpointError: Unsupported scheme or missing host
    """
    url = url.strip()
    parts = urlsplit(url)
    if parts.scheme.lower() not in SUPPORTED_SCHEMES:
        raise InvalidEndpointError(
            f"Unsupported endpoint scheme '{parts.scheme}', expected http or https",
            url=url,
        )
    if not parts.hostname:
        raise InvalidEndpointError("Endpoint URL has no host", url=url)
    return url


def parse_timeout(value) -> Optional[float]:
    """
    Parse a timeout setting.

    Empty values and "none" mean no timeout.

    Raises:
        ConfigurationError: Value is not a positive number
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or value.lower() == "none":
            return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout: {value!r}")
    if seconds <= 0:
        raise ConfigurationError(f"Timeout must be positive: {value!r}")
    return seconds


def get_bridge_config() -> BridgeConfig:
    """
    Get bridge configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables (MCP_URL, ARCHON_BRIDGE_TIMEOUT, ARCHON_BRIDGE_DEBUG)
    2. YAML config file, `bridge:` section
    3. Defaults

    Returns:
        Validated BridgeConfig

    Raises:
        ConfigurationError: Invalid endpoint or timeout
    """
    yaml_config = load_yaml_config()
    section = yaml_config.get("bridge") or {}
    if not isinstance(section, dict):
        raise ConfigurationError("'bridge' section in config.yaml must be a mapping")

    endpoint = section.get("endpoint") or DEFAULT_ENDPOINT
    timeout = parse_timeout(section.get("timeout", get_timeout("http_request")))
    headers = section.get("headers") or {}
    if not isinstance(headers, dict):
        raise ConfigurationError("'bridge.headers' in config.yaml must be a mapping")
    debug = bool(section.get("debug", False))

    # Environment overrides
    if os.environ.get("MCP_URL"):
        endpoint = os.environ["MCP_URL"]
    if "ARCHON_BRIDGE_TIMEOUT" in os.environ:
        timeout = parse_timeout(os.environ["ARCHON_BRIDGE_TIMEOUT"])
    if os.environ.get("ARCHON_BRIDGE_DEBUG"):
        debug = os.environ["ARCHON_BRIDGE_DEBUG"].lower() in ("true", "1", "yes")

    return BridgeConfig(
        endpoint=validate_endpoint(str(endpoint)),
        timeout=timeout,
        headers={str(k): str(v) for k, v in headers.items()},
        debug=debug,
    )
