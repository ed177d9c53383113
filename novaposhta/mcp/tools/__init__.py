# MCP tools for Nova Poshta operations
# Tools are registered on the FastMCP server in server.py
