"""Utilities for locating the on-disk corpus tree written by the scraper."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

#: Environment variable that overrides the corpus location.
CORPUS_ROOT_ENV = "NEWSCORPUS_ROOT"

#: Default location, relative to the working directory, where articles are written.
DEFAULT_CORPUS_ROOT = Path("scraped")


_Pathish = Union[str, Path]


def resolve_corpus_root(corpus_root: _Pathish | None = None) -> Path:
    """Return a :class:`Path` pointing at the corpus root.

    An explicit ``corpus_root`` wins; otherwise :data:`CORPUS_ROOT_ENV` is
    consulted and finally :data:`DEFAULT_CORPUS_ROOT` is used.  The path is not
    created on disk.
    """

    if corpus_root is not None:
        return Path(corpus_root)
    from_env = os.environ.get(CORPUS_ROOT_ENV, "").strip()
    if from_env:
        return Path(from_env)
    return DEFAULT_CORPUS_ROOT


def site_root(site_name: str, corpus_root: _Pathish | None = None) -> Path:
    """Return the directory holding every article of ``site_name``."""

    return resolve_corpus_root(corpus_root) / site_name


__all__ = [
    "CORPUS_ROOT_ENV",
    "DEFAULT_CORPUS_ROOT",
    "resolve_corpus_root",
    "site_root",
]
