"""
Archon Bridge YAML Configuration

Loading, saving, and defaults for ~/.archon-bridge/config.yaml.
"""

from pathlib import Path

import yaml

from archon_bridge.configs.paths import ensure_data_dir, get_data_path

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# Archon Bridge Configuration
# Environment variables override anything set here.

bridge:
  # Remote MCP endpoint (overridden by MCP_URL)
  endpoint: "https://archon.technology/mcp"

  # Per-request timeout in seconds; leave empty to wait forever
  timeout:

  # Extra headers sent with every upstream request
  headers: {}

  # Enable debug logging
  debug: false
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from ~/.archon-bridge/config.yaml.

    Returns:
        Configuration dictionary (empty if file doesn't exist or is unreadable)
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        loaded = yaml.safe_load(config_path.read_text())
    except (OSError, yaml.YAMLError):
        return {}
    return loaded if isinstance(loaded, dict) else {}


def create_default_config() -> Path:
    """
    Write the default config.yaml if none exists.

    Returns:
        Path to config.yaml
    """
    ensure_data_dir()
    config_path = get_config_path()
    if not config_path.exists():
        config_path.write_text(DEFAULT_CONFIG_YAML)
    return config_path
