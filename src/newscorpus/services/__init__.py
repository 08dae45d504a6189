"""Service layer entry points for the news corpus scraper."""

from __future__ import annotations

from .fetcher import ArticleFetcher  # noqa: F401
from .scraper import SiteScraper  # noqa: F401

__all__ = ["ArticleFetcher", "SiteScraper"]
