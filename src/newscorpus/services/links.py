"""Discovery of article links on a site's listing page."""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from newscorpus.config import SiteConfig
from newscorpus.services.fetcher import ArticleFetcher
from newscorpus.services.markup import parse_html, select

__all__ = ["discover_links", "extract_links"]

logger = logging.getLogger(__name__)


def extract_links(soup: BeautifulSoup, site: SiteConfig) -> List[str]:
    """Return absolute article URLs found in an already parsed listing page.

    Only anchors matching ``site.link_selector`` whose ``href`` contains
    ``site.link_path_filter`` are kept.  Document order is preserved and
    duplicates are not removed.
    """

    links: List[str] = []
    for anchor in select(soup, site.link_selector, url=str(site.listing_url)):
        href = anchor.get("href")
        if not href or site.link_path_filter not in href:
            continue
        links.append(site.build_link(href))
    return links


def discover_links(site: SiteConfig, fetcher: ArticleFetcher) -> List[str]:
    """Fetch the listing page of ``site`` and extract candidate article links."""

    listing_url = str(site.listing_url)
    html = fetcher.fetch(listing_url)
    links = extract_links(parse_html(html), site)
    logger.info("Discovered %d links on %s", len(links), listing_url)
    return links
