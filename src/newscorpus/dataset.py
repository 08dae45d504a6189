"""Read access to the scraped corpus for downstream dataset preparation."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from newscorpus.corpus import resolve_corpus_root

__all__ = [
    "ArticleEntry",
    "DEFAULT_SEED",
    "RawDataset",
    "load_raw_dataset",
    "normalize_date_dir",
    "scan_corpus",
]

logger = logging.getLogger(__name__)

DEFAULT_SEED = 12345

# Older runs wrote month names into directory names.
_LEGACY_MONTHS = (("March", "03"), ("Mar", "03"), ("Feb", "02"))


class ArticleEntry(BaseModel):
    """Location and metadata of one persisted article."""

    model_config = ConfigDict(frozen=True)

    date: str
    path: Path
    site: str


class RawDataset(BaseModel):
    """Shuffled split of the corpus entries."""

    train: List[ArticleEntry] = Field(default_factory=list)
    test: List[ArticleEntry] = Field(default_factory=list)


def normalize_date_dir(name: str) -> str:
    """Rewrite legacy month names in a date directory name to numerals."""

    for legacy, numeral in _LEGACY_MONTHS:
        name = name.replace(legacy, numeral)
    return name


def _read_day_dir(day_dir: Path, site: str) -> List[ArticleEntry]:
    date = normalize_date_dir(day_dir.name)
    return [
        ArticleEntry(date=date, path=path, site=site) for path in sorted(day_dir.iterdir())
    ]


def scan_corpus(corpus_root: Path | str | None = None) -> List[ArticleEntry]:
    """Walk ``<root>/<site>/<date>/*`` and return an entry per article file.

    Entries that are not directories at the site or date level are ignored,
    as are date directories that cannot be read.
    """

    root = resolve_corpus_root(corpus_root)
    entries: List[ArticleEntry] = []
    for site_dir in sorted(root.iterdir()):
        if not site_dir.is_dir():
            continue
        for day_dir in sorted(site_dir.iterdir()):
            if not day_dir.is_dir():
                continue
            try:
                entries.extend(_read_day_dir(day_dir, site_dir.name))
            except OSError as exc:
                logger.warning("Cannot read %s: %s", day_dir, exc)
    return entries


def load_raw_dataset(
    corpus_root: Path | str | None = None,
    train_fraction: float = 0.2,
    *,
    seed: int = DEFAULT_SEED,
) -> RawDataset:
    """Shuffle the corpus deterministically and split it into train and test entries."""

    if not 0.0 <= train_fraction <= 1.0:
        raise ValueError(f"train_fraction must be between 0 and 1, got {train_fraction}")

    entries = scan_corpus(corpus_root)
    random.Random(seed).shuffle(entries)

    n_train = round(len(entries) * train_fraction)
    logger.info(
        "Split %d articles into %d train / %d test", len(entries), n_train, len(entries) - n_train
    )
    return RawDataset(train=entries[:n_train], test=entries[n_train:])
