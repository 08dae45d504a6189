from __future__ import annotations

from types import SimpleNamespace

import pytest
from bs4 import BeautifulSoup

from newscorpus.config import SiteConfig
from newscorpus.errors import NetworkError
from newscorpus.services.links import discover_links, extract_links

SITE = SiteConfig(
    name="example",
    listing_url="https://example.com/news",
    link_selector="a.card",
    link_prefix="example.com",
    body_selector="div.story",
    paragraph_selector="p",
)

LISTING = """
<html><body>
    <a class="card" href="/news/one">One</a>
    <a class="card" href="/sports/two">Two</a>
    <a href="/news/three">Three</a>
    <a class="card">No href</a>
    <a class="card" href="/news/four">Four</a>
    <a class="card" href="/news/one">One again</a>
</body></html>
"""


def test_extract_links_filters_by_selector_and_path() -> None:
    links = extract_links(BeautifulSoup(LISTING, "lxml"), SITE)

    assert links == [
        "https://example.com/news/one",
        "https://example.com/news/four",
        "https://example.com/news/one",
    ]


def test_no_matching_anchor_yields_empty_list() -> None:
    html = '<html><body><a class="card" href="/opinion/x">x</a></body></html>'

    assert extract_links(BeautifulSoup(html, "lxml"), SITE) == []


def test_discover_links_fetches_listing_url() -> None:
    requested: list[str] = []

    def fake_fetch(url: str) -> str:
        requested.append(url)
        return LISTING

    links = discover_links(SITE, SimpleNamespace(fetch=fake_fetch))

    assert requested == ["https://example.com/news"]
    assert len(links) == 3


def test_discover_links_propagates_network_error() -> None:
    def failing_fetch(url: str) -> str:
        raise NetworkError("boom", url=url)

    with pytest.raises(NetworkError):
        discover_links(SITE, SimpleNamespace(fetch=failing_fetch))
