"""MCP server for JSON Healer."""
