"""MCP server exposing Android device control tools."""

__version__ = "0.1.0"
