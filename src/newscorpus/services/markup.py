"""Thin wrappers around BeautifulSoup selection that report bad selectors uniformly."""

from __future__ import annotations

from typing import List

import soupsieve
from bs4 import BeautifulSoup, Tag

from newscorpus.errors import MarkupError

__all__ = ["parse_html", "select", "select_one"]

PARSER = "lxml"


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, PARSER)


def select(node: Tag, selector: str, *, url: str | None = None) -> List[Tag]:
    """Return every element under ``node`` matching ``selector`` in document order."""

    try:
        return list(node.select(selector))
    except soupsieve.SelectorSyntaxError as exc:
        raise MarkupError(f"Invalid selector {selector!r}: {exc}", url=url) from exc


def select_one(node: Tag, selector: str, *, url: str | None = None) -> Tag | None:
    """Return the first element under ``node`` matching ``selector``."""

    try:
        return node.select_one(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise MarkupError(f"Invalid selector {selector!r}: {exc}", url=url) from exc
