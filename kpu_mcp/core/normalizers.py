"""Flatten decoded API responses into ordered lists of strings.

`decode_result` turns a raw JSON document into the endpoint's `result` object;
the `extract_*` functions flatten that object. `normalize_*` chain both steps.
Order follows the upstream nesting, duplicates are kept, and `null` entries are
dropped at every level.
"""
from typing import Any, List, NamedTuple, Optional, Type

from pydantic import BaseModel

from kpu_mcp.core.models import (
    AlsoAskResponse,
    AlsoAskResult,
    ForumsResponse,
    ForumsResult,
    SemanticKeywordsResponse,
    SemanticKeywordsResult,
    SuggestionsResponse,
    SuggestionsResult,
)


class ForumQuestions(NamedTuple):
    reddit: List[str]
    quora: List[str]

    def is_empty(self) -> bool:
        return not self.reddit and not self.quora


def decode_result(response_model: Type[BaseModel], raw: Any) -> Optional[BaseModel]:
    """Validate `raw` against `response_model` and return its `result` (None when absent).

    Raises pydantic.ValidationError when the document does not have the endpoint's shape,
    e.g. `result` is not an object.
    """
    return response_model.model_validate(raw).result


def extract_people_also_ask(result: AlsoAskResult) -> List[str]:
    """Each question followed by its direct follow-up questions (two levels only)."""
    questions: List[str] = []
    for child in result.children or []:
        if child is None:
            continue
        if child.question is not None:
            questions.append(child.question)
        for grandchild in child.children or []:
            if grandchild is not None and grandchild.question is not None:
                questions.append(grandchild.question)
    return questions


def extract_autocomplete(result: SuggestionsResult) -> List[str]:
    return [
        suggestion
        for group in result.children or []
        if group is not None
        for suggestion in group.questions or []
        if suggestion is not None
    ]


def extract_forums(result: ForumsResult) -> ForumQuestions:
    """Split forum threads into Reddit and Quora by bucket position.

    The API does not label the buckets; index 0 is Reddit and index 1 is Quora.
    If it ever reorders them the sections will be swapped.
    """
    buckets = result.children or []

    def _names(index: int) -> List[str]:
        if index >= len(buckets) or buckets[index] is None:
            return []
        return [
            thread.name
            for thread in buckets[index].children or []
            if thread is not None and thread.name is not None
        ]

    return ForumQuestions(reddit=_names(0), quora=_names(1))


def extract_semantic_keywords(result: SemanticKeywordsResult) -> List[str]:
    return [
        keyword
        for group in result.children or []
        if group is not None
        for keyword in group.children or []
        if keyword is not None
    ]


# The normalize_* helpers raise pydantic.ValidationError on malformed documents,
# like decode_result. A missing `result` yields no items.

def normalize_people_also_ask(raw: Any) -> List[str]:
    result = decode_result(AlsoAskResponse, raw)
    return extract_people_also_ask(result) if result is not None else []


def normalize_autocomplete(raw: Any) -> List[str]:
    result = decode_result(SuggestionsResponse, raw)
    return extract_autocomplete(result) if result is not None else []


def normalize_forums(raw: Any) -> ForumQuestions:
    result = decode_result(ForumsResponse, raw)
    return extract_forums(result) if result is not None else ForumQuestions([], [])


def normalize_semantic_keywords(raw: Any) -> List[str]:
    result = decode_result(SemanticKeywordsResponse, raw)
    return extract_semantic_keywords(result) if result is not None else []
