from kpu_mcp.utils.get_endpoint import build_query_url, get_endpoint

__all__ = ["build_query_url", "get_endpoint"]
