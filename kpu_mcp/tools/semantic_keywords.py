from typing import Any

from kpu_mcp.core.api_client import KeywordsApiClient
from kpu_mcp.core.models import SemanticKeywordsResponse
from kpu_mcp.core.normalizers import extract_semantic_keywords
from kpu_mcp.tools._common import (
    DEFAULT_COUNTRY,
    DEFAULT_LANGUAGE,
    FAILED_MESSAGE,
    CountryCode,
    LanguageCode,
    fetch_result,
    query_param,
    render,
)

Query = query_param("semantic keywords")


def get_tools(client: KeywordsApiClient) -> dict[str, Any]:

    async def semantic_keywords(
        q: Query,
        hl: LanguageCode = DEFAULT_LANGUAGE,
        gl: CountryCode = DEFAULT_COUNTRY,
    ) -> str:
        result = await fetch_result(client, "semantic_keywords", SemanticKeywordsResponse, q, hl, gl)
        if result is None:
            return FAILED_MESSAGE

        keywords = extract_semantic_keywords(result)
        if not keywords:
            return f"No keywords found for {q}"
        return render(f"Semantically related keywords for {q}:", keywords)

    return {
        "semantic-keywords": {
            "func": semantic_keywords,
            "title": "Semantic keywords",
            "description": "Get Semantic (similar, related) keywords for a given query",
        }
    }
