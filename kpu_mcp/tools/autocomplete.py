from typing import Any

from kpu_mcp.core.api_client import KeywordsApiClient
from kpu_mcp.core.models import SuggestionsResponse
from kpu_mcp.core.normalizers import extract_autocomplete
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

Query = query_param("Google Autocomplete suggestions")


def get_tools(client: KeywordsApiClient) -> dict[str, Any]:

    async def google_autocomplete(
        q: Query,
        hl: LanguageCode = DEFAULT_LANGUAGE,
        gl: CountryCode = DEFAULT_COUNTRY,
    ) -> str:
        result = await fetch_result(client, "suggestions", SuggestionsResponse, q, hl, gl)
        if result is None:
            return FAILED_MESSAGE

        suggestions = extract_autocomplete(result)
        if not suggestions:
            return f"No questions found for {q}"
        return render(f"Google Autocomplete suggestions for {q}:", suggestions)

    return {
        "google-autocomplete": {
            "func": google_autocomplete,
            "title": "Google Autocomplete",
            "description": "Get Google Autocomplete suggestions for a given query",
        }
    }
