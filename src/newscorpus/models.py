"""Domain models used across the application."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

CANONICAL_DATE_PATTERN = r"^\d{2}-\d{2}-\d{4}$"


class Article(BaseModel):
    """A fully extracted article, ready to be written to the corpus."""

    title: str = Field(..., min_length=1)
    paragraphs: List[str] = Field(default_factory=list)
    canonical_date: str = Field(..., pattern=CANONICAL_DATE_PATTERN)


class SkippedLink(BaseModel):
    """A discovered link whose processing failed."""

    url: str
    reason: str
    message: str


class ScrapeReport(BaseModel):
    """Outcome of running the pipeline over one site."""

    site: str
    discovered: int = 0
    written: List[str] = Field(default_factory=list)
    skipped: List[SkippedLink] = Field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.written)

    @property
    def clean(self) -> bool:
        """``True`` when no discovered link was skipped."""

        return not self.skipped
