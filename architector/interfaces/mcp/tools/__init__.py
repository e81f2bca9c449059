"""MCP tool implementations.

Each ``*_impl`` takes the ArchitectureService explicitly so it can be
exercised without a running server.
"""
