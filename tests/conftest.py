from unittest.mock import AsyncMock

import pytest

from kpu_mcp.core.api_client import FetchResult, KeywordsApiClient


@pytest.fixture
def stub_client():
    """KeywordsApiClient double; set `stub_client.fetch.return_value` per test."""
    client = AsyncMock(spec=KeywordsApiClient)
    client.fetch.return_value = FetchResult.success({"result": {}}, 200)
    return client
