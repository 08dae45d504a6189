"""Exceptions raised while discovering, extracting and persisting articles."""

from __future__ import annotations

__all__ = [
    "BodyNotFound",
    "DateNotFound",
    "MarkupError",
    "NetworkError",
    "ScrapeError",
    "TitleNotFound",
    "WriteError",
]


class ScrapeError(Exception):
    """Base class for every failure of the scraping pipeline."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url

    @property
    def reason(self) -> str:
        """Short machine friendly name of the failure kind."""

        return type(self).__name__


class NetworkError(ScrapeError):
    """A listing or article request failed at the transport or HTTP level."""


class MarkupError(ScrapeError):
    """A configured selector could not be compiled."""


class TitleNotFound(ScrapeError):
    """The article page has no usable ``<title>``."""


class DateNotFound(ScrapeError):
    """None of the date strategies produced a publication date."""


class BodyNotFound(ScrapeError):
    """The configured body container matched nothing."""


class WriteError(ScrapeError):
    """The article could not be written to the corpus tree."""
