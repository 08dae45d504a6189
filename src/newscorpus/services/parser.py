"""Assembly of an :class:`~newscorpus.models.Article` from raw HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup

from newscorpus.config import SiteConfig
from newscorpus.errors import TitleNotFound
from newscorpus.models import Article
from newscorpus.services.content import extract_paragraphs
from newscorpus.services.dates import extract_date
from newscorpus.services.markup import parse_html

__all__ = ["extract_title", "parse_article"]


def extract_title(soup: BeautifulSoup, *, url: str | None = None) -> str:
    """Return the stripped text of the page ``<title>``."""

    title = soup.title.get_text(strip=True) if soup.title else ""
    if not title:
        raise TitleNotFound("Page has no title", url=url)
    return title


def parse_article(html: str, site: SiteConfig, *, url: str | None = None) -> Article:
    """Extract title, date and paragraphs; the first failing stage raises."""

    soup = parse_html(html)
    title = extract_title(soup, url=url)
    canonical_date = extract_date(soup, url=url)
    paragraphs = extract_paragraphs(soup, site, url=url)
    return Article(title=title, paragraphs=paragraphs, canonical_date=canonical_date)
