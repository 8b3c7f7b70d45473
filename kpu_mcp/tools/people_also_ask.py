from typing import Any

from kpu_mcp.core.api_client import KeywordsApiClient
from kpu_mcp.core.models import AlsoAskResponse
from kpu_mcp.core.normalizers import extract_people_also_ask
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

Query = query_param("People Also Ask questions")


def get_tools(client: KeywordsApiClient) -> dict[str, Any]:

    async def people_also_ask(
        q: Query,
        hl: LanguageCode = DEFAULT_LANGUAGE,
        gl: CountryCode = DEFAULT_COUNTRY,
    ) -> str:
        """Return the People Also Ask questions Google shows for `q`, follow-ups included."""
        result = await fetch_result(client, "alsoask", AlsoAskResponse, q, hl, gl)
        if result is None:
            return FAILED_MESSAGE

        questions = extract_people_also_ask(result)
        if not questions:
            return f"No questions found for {q}"
        return render(f"People Also Ask questions for {q}:", questions)

    return {
        "people-also-ask": {
            "func": people_also_ask,
            "title": "People Also Ask",
            "description": "Get People Also Ask questions for a given query",
        }
    }
