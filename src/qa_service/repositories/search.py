"""Full-text match and relevance expressions over ``questions.text_body``.

PostgreSQL ranks against the stored ``ts_body`` search vector. Other
backends (SQLite in the test suite) fall back to a whole-word,
case-insensitive ``REGEXP`` match on the plain-text body, ranked by how often
the query words occur as substrings. The fallback does no stemming, so ``sorted`` does not
match ``sort`` there.
"""
from __future__ import annotations

import re
from typing import NamedTuple

from sqlalchemy import Float, and_, cast, func, literal_column
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.sql.elements import ColumnElement

from qa_service.models import Question

__all__ = ["TextMatch", "text_match"]

SEARCH_CONFIG = "english"

_WORD = re.compile(r"\w+")


class TextMatch(NamedTuple):
    """Filter selecting matching questions and the score to order them by."""

    condition: ColumnElement[bool]
    rank: ColumnElement[float]


def _postgres_match(query: str) -> TextMatch:
    ts_body = literal_column("questions.ts_body", type_=TSVECTOR)
    tsquery = func.websearch_to_tsquery(SEARCH_CONFIG, query)
    return TextMatch(
        condition=ts_body.bool_op("@@")(tsquery),
        rank=func.ts_rank(ts_body, tsquery),
    )


def _occurrences(term: str) -> ColumnElement[float]:
    body = func.lower(Question.text_body)
    removed = func.length(body) - func.length(func.replace(body, term, ""))
    return cast(removed, Float) / len(term)


def _whole_word(term: str) -> str:
    return rf"(?i)\b{re.escape(term)}\b"


def _fallback_match(query: str) -> TextMatch | None:
    terms = list(dict.fromkeys(_WORD.findall(query.lower())))
    if not terms:
        return None
    condition = and_(*(Question.text_body.regexp_match(_whole_word(term)) for term in terms))
    rank = _occurrences(terms[0])
    for term in terms[1:]:
        rank = rank + _occurrences(term)
    return TextMatch(condition=condition, rank=rank)


def text_match(dialect_name: str, query: str) -> TextMatch | None:
    """Build the match/rank pair for ``query`` on the given SQL dialect.

    Returns:
        None when the query cannot match anything (no words on the fallback
        path); callers should return an empty result.
    """
    if dialect_name == "postgresql":
        return _postgres_match(query)
    return _fallback_match(query)
