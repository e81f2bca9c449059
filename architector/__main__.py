"""Run the Architector MCP server: ``python -m architector``."""

from architector.interfaces.mcp.server import main

if __name__ == "__main__":
    main()
