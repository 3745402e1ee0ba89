"""MCP servers exposing device hub operations as tools."""
