"""Schemas for the upstream API responses.

Every endpoint wraps its payload in a top-level `result` object, but each nests
the interesting strings differently. All fields and list entries are optional:
a missing or `null` value decodes to `None` and contributes nothing when flattened.
"""
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _scalar_text(value: Any) -> Optional[str]:
    """Render JSON scalars as text; objects, arrays and null become None."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


Text = Annotated[Optional[str], BeforeValidator(_scalar_text)]


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


# /alsoask

class AlsoAskQuestion(_Lenient):
    question: Text = None
    children: Optional[List[Optional["AlsoAskQuestion"]]] = None


class AlsoAskResult(_Lenient):
    children: Optional[List[Optional[AlsoAskQuestion]]] = None


class AlsoAskResponse(_Lenient):
    result: Optional[AlsoAskResult] = None


# /suggestions

class SuggestionGroup(_Lenient):
    questions: Optional[List[Text]] = None


class SuggestionsResult(_Lenient):
    children: Optional[List[Optional[SuggestionGroup]]] = None


class SuggestionsResponse(_Lenient):
    result: Optional[SuggestionsResult] = None


# /forums

class ForumThread(_Lenient):
    name: Text = None


class ForumBucket(_Lenient):
    children: Optional[List[Optional[ForumThread]]] = None


class ForumsResult(_Lenient):
    # Positional: [0] is Reddit, [1] is Quora
    children: Optional[List[Optional[ForumBucket]]] = None


class ForumsResponse(_Lenient):
    result: Optional[ForumsResult] = None


# /semantic_keywords

class KeywordGroup(_Lenient):
    children: Optional[List[Text]] = None


class SemanticKeywordsResult(_Lenient):
    children: Optional[List[Optional[KeywordGroup]]] = None


class SemanticKeywordsResponse(_Lenient):
    result: Optional[SemanticKeywordsResult] = None


AlsoAskQuestion.model_rebuild()
