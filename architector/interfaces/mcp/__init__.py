"""MCP (Model Context Protocol) interface.

Entry point:
    from architector.interfaces.mcp.server import build_server, main
"""
