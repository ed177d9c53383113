"""Nova Poshta API client and MCP server."""

__version__ = "0.1.0"
