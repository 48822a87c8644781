"""MCP resources served by the server."""
