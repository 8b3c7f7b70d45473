from unittest.mock import patch

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from kpu_mcp import server
from kpu_mcp.core.api_client import FetchResult, KeywordsApiClient
from kpu_mcp.core.config import get_api_key
from kpu_mcp.core.errors import ConfigurationError
from tests.helpers import fetched_url, result_text

TOOL_NAMES = {"people-also-ask", "google-autocomplete", "forums", "semantic-keywords"}


@pytest.fixture
def mcp(stub_client):
    return server.create_server(client=stub_client)


@pytest.mark.asyncio
async def test_all_tools_are_registered(mcp):
    tools = await mcp.list_tools()

    assert {t.name for t in tools} == TOOL_NAMES
    assert mcp.name == "keywordspeopleuse"


@pytest.mark.asyncio
async def test_tool_schema_declares_constraints_and_defaults(mcp):
    tools = {t.name: t for t in await mcp.list_tools()}
    schema = tools["people-also-ask"].inputSchema

    assert schema["required"] == ["q"]
    assert schema["properties"]["q"]["minLength"] == 2
    assert schema["properties"]["hl"]["default"] == "en"
    assert schema["properties"]["gl"]["default"] == "us"
    assert schema["properties"]["hl"]["minLength"] == 2
    assert schema["properties"]["hl"]["maxLength"] == 2
    assert tools["forums"].description == "Get Reddit and Quora questions for a given query"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", sorted(TOOL_NAMES))
@pytest.mark.parametrize(
    "arguments",
    [
        {"q": "c"},
        {"q": ""},
        {"q": "coffee", "hl": "eng"},
        {"q": "coffee", "hl": "e"},
        {"q": "coffee", "gl": "usa"},
        {"q": "coffee", "gl": ""},
        {"hl": "en", "gl": "us"},
    ],
)
async def test_invalid_parameters_are_rejected_before_fetch(mcp, stub_client, name, arguments):
    with pytest.raises(ToolError):
        await mcp.call_tool(name, arguments)

    stub_client.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_call_tool_applies_defaults(mcp, stub_client):
    stub_client.fetch.return_value = FetchResult.success(
        {"result": {"children": [{"children": ["espresso"]}]}}
    )

    result = await mcp.call_tool("semantic-keywords", {"q": "coffee"})

    assert result_text(result) == "Semantically related keywords for coffee:\n\nespresso"
    assert fetched_url(stub_client).endswith("/semantic_keywords?q=coffee&hl=en&gl=us")


@pytest.mark.asyncio
async def test_call_tool_failure_is_a_text_result(mcp, stub_client):
    stub_client.fetch.return_value = FetchResult.success(None)

    result = await mcp.call_tool("people-also-ask", {"q": "coffee", "hl": "en", "gl": "us"})

    assert result_text(result) == "Failed to retrieve data"


def test_create_server_builds_client_from_api_key():
    with patch("kpu_mcp.server.register_tools") as register:
        server.create_server(api_key="secret-key")

    client = register.call_args.args[1]
    assert isinstance(client, KeywordsApiClient)


def test_create_server_without_api_key_fails(monkeypatch):
    monkeypatch.delenv("KPU_API_KEY", raising=False)
    with patch("kpu_mcp.core.config.load_env"):
        with pytest.raises(ConfigurationError, match="KPU_API_KEY"):
            server.create_server()


@pytest.mark.parametrize("value", ["", "   "])
def test_get_api_key_rejects_blank(monkeypatch, value):
    monkeypatch.setenv("KPU_API_KEY", value)
    with patch("kpu_mcp.core.config.load_env"):
        with pytest.raises(ConfigurationError):
            get_api_key()


def test_get_api_key_reads_environment(monkeypatch):
    monkeypatch.setenv("KPU_API_KEY", "secret-key")
    with patch("kpu_mcp.core.config.load_env"):
        assert get_api_key() == "secret-key"


def test_main_exits_non_zero_without_api_key():
    with patch("kpu_mcp.server.setup_logging"), \
            patch("kpu_mcp.server.create_server", side_effect=ConfigurationError("Paste KPU_API_KEY inside the .env file")), \
            patch("kpu_mcp.server.FastMCP.run") as run:
        with pytest.raises(SystemExit) as exc_info:
            server.main()

    assert exc_info.value.code == 1
    run.assert_not_called()


def test_main_runs_stdio_transport(stub_client):
    mcp = server.create_server(client=stub_client)
    with patch("kpu_mcp.server.setup_logging"), \
            patch("kpu_mcp.server.create_server", return_value=mcp), \
            patch.object(mcp, "run") as run:
        server.main()

    run.assert_called_once_with(transport="stdio")


@pytest.mark.asyncio
async def test_tools_declare_no_output_schema(mcp):
    tools = await mcp.list_tools()

    assert len(tools) == len(TOOL_NAMES)
    for t in tools:
        assert t.outputSchema is None, t.name


@pytest.mark.asyncio
@pytest.mark.parametrize("name", sorted(TOOL_NAMES))
async def test_call_tool_returns_only_a_text_block(mcp, stub_client, name):
    stub_client.fetch.return_value = FetchResult.success({"result": {}})

    result = await mcp.call_tool(name, {"q": "coffee"})

    assert result_text(result).endswith("found for coffee")


@pytest.mark.parametrize("api_key", ["", "   "])
def test_create_server_with_blank_api_key_fails(api_key):
    with pytest.raises(ConfigurationError):
        server.create_server(api_key=api_key)


def test_main_exits_non_zero_with_blank_api_key(monkeypatch):
    monkeypatch.setenv("KPU_API_KEY", "")
    with patch("kpu_mcp.server.setup_logging"), \
            patch("kpu_mcp.core.config.load_env"), \
            patch("kpu_mcp.server.FastMCP.run") as run:
        with pytest.raises(SystemExit) as exc_info:
            server.main()

    assert exc_info.value.code == 1
    run.assert_not_called()
