from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from newscorpus.config import SiteConfig
from newscorpus.errors import BodyNotFound, DateNotFound, TitleNotFound
from newscorpus.services.content import clean_paragraph, extract_paragraphs
from newscorpus.services.parser import extract_title, parse_article

SITE = SiteConfig(
    name="example",
    listing_url="https://example.com/news",
    link_selector="a.card",
    link_prefix="example.com",
    body_selector="div.story",
    paragraph_selector="p",
)


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def test_paragraphs_keep_document_order_and_drop_empties() -> None:
    html = """
    <html><body>
        <p>Outside the body</p>
        <div class="story">
            <p>First</p>
            <p></p>
            <p>Article content</p>
            <p>Line one<br/>Line two</p>
            <p>   </p>
            <p>Last</p>
        </div>
    </body></html>
    """

    paragraphs = extract_paragraphs(soup(html), SITE)

    assert paragraphs == ["First", "Line one\nLine two", "Last"]
    assert all(paragraphs)


def test_boilerplate_marker_is_removed_inside_text() -> None:
    html = '<div class="story"><p>Article contentBreaking<br/>news</p></div>'

    assert extract_paragraphs(soup(html), SITE) == ["Breaking\nnews"]


def test_boilerplate_only_multi_node_paragraph_is_dropped() -> None:
    html = '<div class="story"><p>Article content<br/> </p><p>Real</p></div>'

    assert extract_paragraphs(soup(html), SITE) == ["Real"]


def test_single_node_paragraph_uses_inner_markup() -> None:
    html = '<div class="story"><p>Fish &amp; chips</p></div>'

    assert extract_paragraphs(soup(html), SITE) == ["Fish &amp; chips"]


def test_missing_body_raises() -> None:
    with pytest.raises(BodyNotFound):
        extract_paragraphs(soup("<html><body><p>loose</p></body></html>"), SITE)


def test_clean_paragraph_collapses_newline_space() -> None:
    assert clean_paragraph("Hello\n world") == "Helloworld"
    assert clean_paragraph("  Article content  ") == ""


def test_extract_title_requires_text() -> None:
    assert extract_title(soup("<title> Story | CBC News </title>")) == "Story | CBC News"

    with pytest.raises(TitleNotFound):
        extract_title(soup("<html><head></head><body></body></html>"))


def test_parse_article_assembles_all_stages() -> None:
    html = """
    <html><head><title>Story | CBC News</title></head><body>
        <time class="timeStamp" datetime="2024-11-20T08:15:00Z"></time>
        <div class="story"><p>One</p><p>Two</p></div>
    </body></html>
    """

    article = parse_article(html, SITE)

    assert article.title == "Story | CBC News"
    assert article.canonical_date == "20-11-2024"
    assert article.paragraphs == ["One", "Two"]


def test_parse_article_short_circuits_on_first_failure() -> None:
    html = '<html><head><title>T</title></head><body><div class="story"><p>x</p></div></body></html>'

    with pytest.raises(DateNotFound) as info:
        parse_article(html, SITE, url="https://example.com/news/t")

    assert info.value.url == "https://example.com/news/t"
