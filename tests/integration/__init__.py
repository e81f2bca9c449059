"""
Integration tests for the architector MCP server.

These tests build the real FastMCP server in-process against a temporary
storage root and exercise its registered tools and resources.
"""
