# tools package for MCP server tools
# Modules in this package should expose a `get_tools(client: KeywordsApiClient) -> dict[str, dict]`
# mapping tool names to {"func", "title", "description"}. Modules whose name starts with "_" are skipped.
# Server will dynamically import modules from this directory and register the returned callables as MCP tools.
__all__ = []
