"""MCP server exposing KeywordsPeopleUse keyword research as tools."""

__version__ = "1.0.0"
