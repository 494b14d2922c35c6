from archon_bridge.entrypoint import run

run()
