"""
Archon Bridge Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from archon_bridge.configs.logging import get_logger, setup_logging

# Paths
from archon_bridge.configs.paths import get_data_path, ensure_data_dir

# Constants
from archon_bridge.configs.constants import (
    ACCEPT_HEADER_VALUE,
    DEFAULT_ENDPOINT,
    SESSION_HEADER,
    TIMEOUTS,
    get_timeout,
)

# YAML config
from archon_bridge.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    get_config_path,
    load_yaml_config,
    create_default_config,
)

# Runtime
from archon_bridge.configs.runtime import (
    BridgeConfig,
    get_bridge_config,
    validate_endpoint,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Constants
    "ACCEPT_HEADER_VALUE",
    "DEFAULT_ENDPOINT",
    "SESSION_HEADER",
    "TIMEOUTS",
    "get_timeout",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Runtime
    "BridgeConfig",
    "get_bridge_config",
    "validate_endpoint",
]
