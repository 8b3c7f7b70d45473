def fetched_url(client) -> str:
    """URL passed to the single fetch() call made by a tool."""
    client.fetch.assert_awaited_once()
    return client.fetch.await_args.args[0]


def result_text(result) -> str:
    """Text of the single content block returned by FastMCP.call_tool.

    A (content, structured_output) tuple means the tool also returned structured
    content, which the keyword tools never do.
    """
    assert not isinstance(result, tuple), f"unexpected structured output: {result[1]!r}"
    assert len(result) == 1
    assert result[0].type == "text"
    return result[0].text
