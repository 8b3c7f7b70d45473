"""Errors raised outside of tool calls.

Failures that happen while a tool runs are never raised to the caller; they are
reported through `FetchResult` and rendered as text by the tool handlers.
"""


class ConfigurationError(RuntimeError):
    """Required startup configuration (such as the API key) is missing."""
