from kpu_mcp.core.logging_config import setup_logging, get_logger
from kpu_mcp.core.api_client import KeywordsApiClient, DEFAULT_TIMEOUT
from kpu_mcp.core.config import get_api_key, get_config
from kpu_mcp.core.errors import ConfigurationError
from mcp.server.fastmcp import FastMCP
from pathlib import Path
from importlib import import_module
from typing import Optional
import pkgutil
import inspect
import sys

logger = get_logger(__name__)

TOOLS_PACKAGE = "kpu_mcp.tools"
tools_path = Path(__file__).resolve().parent / "tools"


def register_tools(mcp: FastMCP, client: KeywordsApiClient) -> list[str]:
    """Import every public module of the tools package and register the tools it provides."""
    logger.info("Loading MCP tools...")
    registered_tool_names: list[str] = []
    for _finder, name, _ispkg in pkgutil.iter_modules([str(tools_path)]):
        if name.startswith("_"):
            continue
        module_name = f"{TOOLS_PACKAGE}.{name}"
        try:
            mod = import_module(module_name)
        except Exception:
            logger.exception(f"Failed to load tools from module {module_name}")
            continue
        logger.info(f"Imported tools module: {module_name}")
        if not hasattr(mod, "get_tools"):
            continue

        sig = inspect.signature(mod.get_tools)
        mapping = mod.get_tools(client) if len(sig.parameters) > 0 else mod.get_tools()

        # mapping: tool_name -> { 'func': callable, 'title': str, 'description': str }
        for tool_name, meta in mapping.items():
            if isinstance(meta, dict):
                func = meta.get("func")
                title = meta.get("title")
                description = meta.get("description")
            else:
                # meta must be a callable
                func, title, description = meta, None, None

            if not func:
                logger.warning(f"Tool {tool_name} in {module_name} did not provide a callable; skipping")
                continue

            try:
                # Tools answer with a single text block, never structured content
                mcp.add_tool(func, name=tool_name, title=title, description=description, structured_output=False)
            except Exception:
                logger.exception(f"Failed to register tool {tool_name} from {module_name}")
                continue
            logger.info(f"Added tool via add_tool: {tool_name} (title={title}) from {module_name}")
            registered_tool_names.append(tool_name)

    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return registered_tool_names


def create_server(api_key: Optional[str] = None, client: Optional[KeywordsApiClient] = None) -> FastMCP:
    """Build the FastMCP server with all keyword tools registered.

    Either an API key or a ready `KeywordsApiClient` must be supplied; when both are
    missing the key is read from the environment and a missing key raises
    ConfigurationError.
    """
    cfg = get_config()
    if client is None:
        if api_key is None:
            api_key = get_api_key()
        if not api_key.strip():
            raise ConfigurationError("API key must not be empty")
        client = KeywordsApiClient(api_key, timeout=float(cfg.get("request_timeout", DEFAULT_TIMEOUT)))

    mcp = FastMCP(cfg.get("server_name", "keywordspeopleuse"))
    logger.info("MCP server instance created: %s %s", mcp.name, cfg.get("server_version", ""))
    register_tools(mcp, client)
    return mcp


def main() -> None:
    setup_logging()
    logger.info("MCP server bootstrap starting.")
    try:
        mcp = create_server()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("KeywordsPeopleUse MCP Server running on stdio")
    try:
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/ for details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
