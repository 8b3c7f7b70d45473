from urllib.parse import quote
from kpu_mcp.core.config import get_config
import sys

# Same unreserved set as JavaScript's encodeURIComponent
_QUERY_SAFE_CHARS = "-_.!~*'()"


def get_endpoint(key):
    _cfg = get_config() or {}
    base_url = _cfg.get("api_url", "").rstrip("/")
    if not base_url:
        sys.exit("Error: 'api_url' must be set in config.yaml")

    path = _cfg.get("api_paths", {}).get(key)
    if not path:
        sys.exit(f"Error: Missing API path for key '{key}' in config.yaml under 'api_paths'")

    return f"{base_url}{path}"


def build_query_url(key: str, q: str, hl: str, gl: str) -> str:
    """Return the endpoint URL for `key` with the query string attached.

    Only `q` is percent-encoded; `hl` and `gl` are validated two-letter codes.
    """
    encoded = quote(q, safe=_QUERY_SAFE_CHARS)
    return f"{get_endpoint(key)}?q={encoded}&hl={hl}&gl={gl}"
