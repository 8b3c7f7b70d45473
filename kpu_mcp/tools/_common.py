"""Pieces shared by the keyword tools: parameter types, messages and the fetch/decode step."""
import logging
from typing import Annotated, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from kpu_mcp.core.api_client import KeywordsApiClient
from kpu_mcp.core.normalizers import decode_result
from kpu_mcp.utils import build_query_url

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_COUNTRY = "us"

FAILED_MESSAGE = "Failed to retrieve data"

LanguageCode = Annotated[
    str,
    Field(min_length=2, max_length=2, description="Two-letter language code (e.g. en, fr, es, de)"),
]
CountryCode = Annotated[
    str,
    Field(min_length=2, max_length=2, description="Two-letter country code (e.g. us, uk, ca, in, au)"),
]


def query_param(purpose: str):
    """Annotated type for the `q` parameter of a tool."""
    return Annotated[str, Field(min_length=2, description=f"A query to use for getting {purpose}")]


ResponseT = TypeVar("ResponseT", bound=BaseModel)


async def fetch_result(
    client: KeywordsApiClient,
    endpoint: str,
    response_model: Type[ResponseT],
    q: str,
    hl: str,
    gl: str,
) -> Optional[BaseModel]:
    """Query `endpoint` and return the decoded `result` object.

    Returns None when the request failed, the body does not match `response_model`,
    or `result` is missing.
    """
    url = build_query_url(endpoint, q, hl, gl)
    outcome = await client.fetch(url)
    if not outcome.ok:
        logger.warning(f"No data from {endpoint} for q={q!r}: {outcome.failure.value}")
        return None

    try:
        result = decode_result(response_model, outcome.data)
    except ValidationError as e:
        logger.warning(f"Unexpected {endpoint} payload for q={q!r}: {e.error_count()} validation error(s)")
        return None

    if result is None:
        logger.warning(f"Response from {endpoint} for q={q!r} has no 'result' field")
        return None
    return result


def render(header: str, items) -> str:
    return f"{header}\n\n" + "\n".join(items)
