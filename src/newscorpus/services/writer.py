"""Persistence of extracted articles into the date-partitioned corpus tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from newscorpus.config import DEFAULT_TITLE_SUFFIXES
from newscorpus.errors import TitleNotFound, WriteError
from newscorpus.models import Article

__all__ = ["article_path", "slugify", "write_article"]

logger = logging.getLogger(__name__)


def slugify(title: str, suffixes: Iterable[str] = DEFAULT_TITLE_SUFFIXES) -> str:
    """Return the lowercase, underscore-joined filename stem for ``title``."""

    slug = title
    for suffix in suffixes:
        slug = slug.replace(suffix, "")
    slug = slug.strip().replace(" ", "_").replace(os.sep, "-")
    if os.altsep:
        slug = slug.replace(os.altsep, "-")
    return slug.lower()


def article_path(
    article: Article,
    site_root: Path | str,
    suffixes: Iterable[str] = DEFAULT_TITLE_SUFFIXES,
    *,
    url: str | None = None,
) -> Path:
    """Derive ``site_root/<canonical date>/<slug>.txt`` for ``article``.

    A title consisting only of boilerplate has no usable filename and raises
    :class:`~newscorpus.errors.TitleNotFound`.
    """

    slug = slugify(article.title, suffixes)
    if not slug:
        raise TitleNotFound(f"Title {article.title!r} leaves an empty filename", url=url)
    return Path(site_root) / article.canonical_date / f"{slug}.txt"


def write_article(
    article: Article,
    site_root: Path | str,
    suffixes: Iterable[str] = DEFAULT_TITLE_SUFFIXES,
    *,
    url: str | None = None,
) -> Path:
    """Write ``article`` below ``site_root``, replacing any previous file at that path."""

    path = article_path(article, site_root, suffixes, url=url)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as file:
            for paragraph in article.paragraphs:
                file.write(paragraph)
                file.write("\n\n")
    except OSError as exc:
        raise WriteError(f"Could not write {path}: {exc}", url=url) from exc

    logger.info("Stored %s", path)
    return path
