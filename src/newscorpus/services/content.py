"""Extraction of body paragraphs from an article page."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from newscorpus.config import SiteConfig
from newscorpus.errors import BodyNotFound
from newscorpus.services.markup import select, select_one

__all__ = ["BOILERPLATE_MARKERS", "clean_paragraph", "extract_paragraphs", "paragraph_text"]

#: Text injected by some sites between paragraphs for screen readers.
BOILERPLATE_MARKERS = ("Article content",)


def clean_paragraph(text: str) -> str:
    """Drop boilerplate markers and collapse ``newline + space`` runs."""

    for marker in BOILERPLATE_MARKERS:
        text = text.replace(marker, "")
    return text.replace("\n ", "").strip()


def paragraph_text(element: Tag) -> str:
    """Return the cleaned text of one paragraph element, possibly empty.

    Paragraphs split over several text nodes (links, emphasis, line breaks)
    are joined line by line.  Single node paragraphs use the element's inner
    markup.
    """

    fragments = list(element.strings)
    if len(fragments) > 1:
        return clean_paragraph("\n".join(fragments))
    return clean_paragraph(element.decode_contents())


def extract_paragraphs(
    soup: BeautifulSoup, site: SiteConfig, *, url: str | None = None
) -> List[str]:
    """Return the non-empty paragraphs of the article body in document order."""

    body = select_one(soup, site.body_selector, url=url)
    if body is None:
        raise BodyNotFound(f"No element matches {site.body_selector!r}", url=url)

    paragraphs: List[str] = []
    for element in select(body, site.paragraph_selector, url=url):
        text = paragraph_text(element)
        if text:
            paragraphs.append(text)
    return paragraphs
