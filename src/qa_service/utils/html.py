"""Helpers for turning stored HTML into plain text."""

from __future__ import annotations

import html
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, NavigableString
from bs4.element import PageElement

__all__ = ["PREVIEW_LENGTH", "html_to_plain_text"]

PREVIEW_LENGTH = 256

# Elements whose boundaries separate words once the tags are gone.
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "li", "main", "nav", "ol", "p", "pre", "section", "table", "tbody",
    "td", "tfoot", "th", "thead", "tr", "ul",
]
BREAK_TAGS = ["br", "hr"]


def _starts_with_space(node: PageElement | None) -> bool:
    return isinstance(node, NavigableString) and node[:1].isspace()


def _ends_with_space(node: PageElement | None) -> bool:
    return isinstance(node, NavigableString) and node[-1:].isspace()


def _separate_blocks(soup: BeautifulSoup) -> None:
    for element in soup.find_all(BLOCK_TAGS):
        before, after = element.previous_sibling, element.next_sibling
        if before is not None and not _ends_with_space(before):
            element.insert_before(" ")
        if after is not None and not _starts_with_space(after):
            element.insert_after(" ")
    for element in soup.find_all(BREAK_TAGS):
        before, after = element.previous_sibling, element.next_sibling
        joins_words = (
            before is not None
            and after is not None
            and not _ends_with_space(before)
            and not _starts_with_space(after)
        )
        if joins_words:
            element.replace_with(" ")
        else:
            element.decompose()


def html_to_plain_text(markup: str) -> str:
    """Convert HTML to plain text for full-text search and previews.

    Entities are resolved first, then tags are stripped, then every newline
    becomes a single space. Block-level elements and line breaks that sit
    directly against other text leave one space behind so neighbouring words
    stay apart; inline tags (``<b>``, ``<a>``, ...) leave nothing. Malformed
    markup is stripped on a best-effort basis and never raises.

    Args:
        markup: HTML fragment as stored on a question, answer or comment.

    Returns:
        The text content with entities decoded and no line breaks.
    """
    decoded = html.unescape(markup)
    # Entities were resolved above; re-escape "&" so the parser does not decode a second time.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(decoded.replace("&", "&amp;"), "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    _separate_blocks(soup)
    return soup.get_text().replace("\n", " ")
