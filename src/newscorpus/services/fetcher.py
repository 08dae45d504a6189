"""HTTP access for listing and article pages."""

from __future__ import annotations

import logging
from typing import Tuple

import requests

from newscorpus.errors import NetworkError

__all__ = ["ArticleFetcher", "DEFAULT_HEADERS", "REQUEST_TIMEOUT"]

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}

REQUEST_TIMEOUT: Tuple[int, int] = (10, 60)


class ArticleFetcher:
    """Issue single, unretried GET requests and return the response body."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: Tuple[int, int] = REQUEST_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        if session is None:
            self._session.headers.update(DEFAULT_HEADERS)
        self._timeout = timeout

    def fetch(self, url: str) -> str:
        """Return the HTML text served at ``url``.

        Raises :class:`~newscorpus.errors.NetworkError` for transport failures
        and non-success status codes.
        """

        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc
        return response.text
