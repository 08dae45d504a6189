"""Per-site orchestration of discovery, extraction and persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Sequence, Union

import requests

from newscorpus.config import DEFAULT_TITLE_SUFFIXES, SiteConfig
from newscorpus.corpus import resolve_corpus_root, site_root
from newscorpus.errors import ScrapeError
from newscorpus.models import ScrapeReport, SkippedLink
from newscorpus.services.fetcher import REQUEST_TIMEOUT, ArticleFetcher
from newscorpus.services.links import discover_links
from newscorpus.services.parser import parse_article
from newscorpus.services.writer import write_article

__all__ = ["SiteScraper"]

logger = logging.getLogger(__name__)


class SiteScraper:
    """Drive one or more sites from listing page to files on disk.

    Discovery failures propagate to the caller because a site without links
    has nothing to process.  Every failure after discovery is confined to
    the link that caused it.
    """

    discover_links = staticmethod(discover_links)
    parse_article = staticmethod(parse_article)
    write_article = staticmethod(write_article)

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        corpus_root: Path | str | None = None,
        title_suffixes: Sequence[str] = DEFAULT_TITLE_SUFFIXES,
        timeout: tuple[int, int] = REQUEST_TIMEOUT,
    ) -> None:
        self._fetcher = ArticleFetcher(session, timeout=timeout)
        self._corpus_root = resolve_corpus_root(corpus_root)
        self._title_suffixes = tuple(title_suffixes)

    @property
    def corpus_root(self) -> Path:
        return self._corpus_root

    def scrape(self, site: SiteConfig) -> ScrapeReport:
        """Scrape every article currently linked from the listing page of ``site``."""

        links = self.discover_links(site, self._fetcher)
        report = ScrapeReport(site=site.name, discovered=len(links))
        root = site_root(site.name, self._corpus_root)

        for link in links:
            try:
                html = self._fetcher.fetch(link)
                article = self.parse_article(html, site, url=link)
                path = self.write_article(article, root, self._title_suffixes, url=link)
            except ScrapeError as exc:
                logger.warning("Skipping %s (%s): %s", link, exc.reason, exc)
                report.skipped.append(SkippedLink(url=link, reason=exc.reason, message=str(exc)))
                continue
            except Exception as exc:  # noqa: BLE001
                logger.exception("Unexpected failure while processing %s", link)
                report.skipped.append(
                    SkippedLink(url=link, reason=type(exc).__name__, message=str(exc))
                )
                continue

            report.written.append(str(path))

        logger.info(
            "Finished %s: %d discovered, %d written, %d skipped",
            site.name,
            report.discovered,
            report.succeeded,
            len(report.skipped),
        )
        return report

    def scrape_all(
        self, sites: Iterable[SiteConfig]
    ) -> Dict[str, Union[ScrapeReport, ScrapeError]]:
        """Scrape ``sites`` one after another.

        A site whose discovery fails is recorded with its error and the
        remaining sites still run.
        """

        outcomes: Dict[str, Union[ScrapeReport, ScrapeError]] = {}
        for site in sites:
            logger.info("Scraping %s (%s)", site.name, site.listing_url)
            try:
                outcomes[site.name] = self.scrape(site)
            except ScrapeError as exc:
                logger.error("Discovery failed for %s: %s", site.name, exc)
                outcomes[site.name] = exc
        return outcomes
