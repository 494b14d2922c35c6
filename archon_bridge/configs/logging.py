"""
Archon Bridge Logging Configuration

Configures logging based on environment variables:
- ARCHON_BRIDGE_DEBUG: Enable debug logging (default: false)
- ARCHON_BRIDGE_LOG_FILE: Log file path (default: ~/.archon-bridge/bridge.log)

stdout carries protocol output, so every handler here writes to stderr or a file.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from archon_bridge.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the bridge.

    Args:
        debug: Enable debug level. Defaults to ARCHON_BRIDGE_DEBUG env var.
        log_file: Log file path. Defaults to ARCHON_BRIDGE_LOG_FILE env var,
                  or $ARCHON_BRIDGE_DATA_PATH/bridge.log if not set.
                  Pass an empty string to log to stderr only.

    Returns:
        Root logger for archon_bridge
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("ARCHON_BRIDGE_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("ARCHON_BRIDGE_LOG_FILE")
        if log_file is None:
            log_file = str(get_data_path() / "bridge.log")

    # Set log level
    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Get root bridge logger
    logger = logging.getLogger("archon_bridge")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # Open the log file first; an unwritable location falls back to stderr only
    file_handler = None
    file_error = None
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
        except OSError as e:
            file_error = e

    # Always add stderr handler (but only for warnings+ unless debug)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if file_handler is not None:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if file_handler is not None:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_file}")
    elif file_error:
        logger.warning(f"Cannot write log file {log_file}, logging to stderr only: {file_error}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "dispatcher", "runner", "config")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"archon_bridge.{component}")
