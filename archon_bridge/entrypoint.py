"""
Archon Bridge Entrypoint

Dispatches to the appropriate mode based on command line argument.

Modes:
  bridge   - Run the stdio-to-HTTP bridge (default)
  config   - Print the resolved configuration as JSON
  init     - Write a default config.yaml if none exists
  version  - Print the package version
"""

import asyncio
import json
import sys

from archon_bridge import __version__
from archon_bridge.configs import create_default_config, get_bridge_config, get_logger, setup_logging
from archon_bridge.exceptions import ConfigurationError

USAGE = "Usage: archon-bridge [bridge|config|init|version]"


def run_bridge() -> int:
    """Run the bridge until stdin drains or a signal arrives."""
    from archon_bridge.bridge import serve_stdio

    try:
        config = get_bridge_config()
    except ConfigurationError as e:
        setup_logging()
        get_logger("entrypoint").error(f"Invalid configuration: {e}")
        return 1

    setup_logging(debug=config.debug)
    logger = get_logger("entrypoint")
    logger.info(f"Bridge starting, endpoint: {config.endpoint}")

    try:
        return asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        logger.info("Bridge interrupted")
        return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    mode = args[0] if args else "bridge"

    if mode == "bridge":
        return run_bridge()

    elif mode == "config":
        try:
            config = get_bridge_config()
        except ConfigurationError as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    elif mode == "init":
        path = create_default_config()
        print(f"Config file: {path}")
        return 0

    elif mode == "version":
        print(__version__)
        return 0

    else:
        print(f"Unknown mode: {mode}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
