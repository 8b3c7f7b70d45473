from typing import Any, Optional

from kpu_mcp.core.api_client import KeywordsApiClient
from kpu_mcp.core.models import ForumsResponse
from kpu_mcp.core.normalizers import ForumQuestions, extract_forums
from kpu_mcp.tools._common import (
    DEFAULT_COUNTRY,
    DEFAULT_LANGUAGE,
    FAILED_MESSAGE,
    CountryCode,
    LanguageCode,
    fetch_result,
    query_param,
)

Query = query_param("Reddit and Quora questions")


def render_forums(q: str, questions: ForumQuestions) -> str:
    reddit = "\n".join(questions.reddit)
    quora = "\n".join(questions.quora)
    return f"Questions for {q}:\n\nReddit:\n\n{reddit}\n\nQuora:\n\n{quora}"


def get_tools(client: KeywordsApiClient) -> dict[str, Any]:

    async def forums(
        q: Query,
        hl: Optional[LanguageCode] = DEFAULT_LANGUAGE,
        gl: Optional[CountryCode] = DEFAULT_COUNTRY,
    ) -> str:
        """Return Reddit and Quora threads for `q`; `hl`/`gl` may be passed as null."""
        hl = hl or DEFAULT_LANGUAGE
        gl = gl or DEFAULT_COUNTRY
        result = await fetch_result(client, "forums", ForumsResponse, q, hl, gl)
        if result is None:
            return FAILED_MESSAGE

        questions = extract_forums(result)
        if questions.is_empty():
            return f"No questions found for {q}"
        return render_forums(q, questions)

    return {
        "forums": {
            "func": forums,
            "title": "Forum questions",
            "description": "Get Reddit and Quora questions for a given query",
        }
    }
