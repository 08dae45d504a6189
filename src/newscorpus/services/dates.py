"""Publication date extraction.

Each supported site publishes its date differently, so extraction is an
ordered chain of small strategies.  A strategy takes the parsed page and
returns a *raw* date string (``day-month-year`` where the month may still be a
name or a bare numeral) or ``None`` when its markup is absent.  The chain then
canonicalizes the first usable result to ``DD-MM-YYYY``.
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Callable, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from newscorpus.errors import DateNotFound

__all__ = [
    "DATE_STRATEGIES",
    "DateStrategy",
    "byline_date",
    "canonicalize_date",
    "extract_date",
    "published_label_date",
    "timestamp_attribute_date",
]

logger = logging.getLogger(__name__)

DateStrategy = Callable[[BeautifulSoup], Optional[str]]

_ISO_DATE = re.compile(r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})")
_PUBLISHED_LABEL = re.compile(r"Published (?P<m>[A-Za-z]{3}) (?P<d>\d\d?), (?P<y>\d{4})")
_BYLINE = re.compile(r"[A-Za-z]{3,}\.?, (?P<m>[A-Za-z]+) (?P<d>\d\d?), (?P<y>\d{4})")
_RAW_DATE = re.compile(r"^(?P<d>\d{1,2})-(?P<m>[A-Za-z]+|\d{1,2})-(?P<y>\d{4})$")

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_MONTHS = {name: index for index, name in enumerate(_MONTH_NAMES, start=1)}
_MONTHS.update({name[:3]: index for name, index in list(_MONTHS.items())})
_MONTHS["sept"] = 9


def _first_text(element: Tag) -> str:
    return next(iter(element.strings), "")


def timestamp_attribute_date(soup: BeautifulSoup) -> str | None:
    """Read ``<time class="timeStamp" datetime="YYYY-MM-DD...">``."""

    element = soup.select_one("time.timeStamp")
    if element is None:
        return None
    value = element.get("datetime")
    if not value:
        return None
    match = _ISO_DATE.match(value)
    if match is None:
        return None
    return f"{match['d']}-{match['m']}-{match['y']}"


def published_label_date(soup: BeautifulSoup) -> str | None:
    """Read ``<span class="published-date__since">Published Mar 5, 2024</span>``.

    The month abbreviation is kept as published, except that ``Mar`` becomes
    the bare numeral ``3``; :func:`canonicalize_date` pads it later.
    """

    element = soup.select_one("span.published-date__since")
    if element is None:
        return None
    match = _PUBLISHED_LABEL.search(_first_text(element))
    if match is None:
        return None
    return f"{match['d']}-{match['m']}-{match['y']}".replace("Mar", "3")


def byline_date(soup: BeautifulSoup) -> str | None:
    """Read ``<span class="article__published-date">Tue., March 5, 2024</span>``."""

    element = soup.select_one("span.article__published-date")
    if element is None:
        return None
    match = _BYLINE.search(_first_text(element))
    if match is None:
        return None
    return f"{match['d']}-{match['m']}-{match['y']}"


DATE_STRATEGIES: tuple[DateStrategy, ...] = (
    timestamp_attribute_date,
    published_label_date,
    byline_date,
)


def canonicalize_date(raw: str) -> str | None:
    """Return ``raw`` as a zero padded ``DD-MM-YYYY`` string.

    ``raw`` must look like ``day-month-year`` with the month given as a
    numeral, a full English month name or its abbreviation.  ``None`` is
    returned for anything else, including impossible calendar dates.
    """

    match = _RAW_DATE.match(raw.strip())
    if match is None:
        return None

    month_token = match["m"]
    if month_token.isdigit():
        month = int(month_token)
    else:
        month = _MONTHS.get(month_token.lower())
        if month is None:
            return None

    try:
        parsed = datetime.date(int(match["y"]), month, int(match["d"]))
    except ValueError:
        return None
    return parsed.strftime("%d-%m-%Y")


def extract_date(
    soup: BeautifulSoup,
    strategies: Sequence[DateStrategy] = DATE_STRATEGIES,
    *,
    url: str | None = None,
) -> str:
    """Run ``strategies`` in order and return the first canonical date found."""

    for strategy in strategies:
        raw = strategy(soup)
        if raw is None:
            continue
        canonical = canonicalize_date(raw)
        if canonical is not None:
            return canonical
        logger.debug("%s produced unusable date %r", strategy.__name__, raw)

    raise DateNotFound("No publication date found", url=url)
