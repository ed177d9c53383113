# Nova Poshta MCP server: tools over the async client
