"""Configuration models and the default site registry for the news corpus scraper."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List

import soupsieve
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError, field_validator

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SITES",
    "DEFAULT_TITLE_SUFFIXES",
    "SiteConfig",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "sites.json"

#: Site names appended to ``<title>`` that never belong in a filename.
DEFAULT_TITLE_SUFFIXES = (" | CBC News", " | National Post", " | The Star")


class SiteConfig(BaseModel):
    """Markup conventions of a single news source."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Corpus subdirectory for the site")
    listing_url: HttpUrl = Field(..., description="Index page enumerating article links")
    link_selector: str = Field(..., min_length=1, description="CSS selector for article anchors")
    link_path_filter: str = Field(
        default="/news/",
        min_length=1,
        description="Substring an href must contain to be treated as an article",
    )
    link_prefix: str = Field(
        ..., min_length=1, description="Host prepended to hrefs to build absolute URLs"
    )
    body_selector: str = Field(
        ..., min_length=1, description="CSS selector for the article content container"
    )
    paragraph_selector: str = Field(
        ..., min_length=1, description="CSS selector for paragraphs inside the container"
    )

    @field_validator("link_selector", "body_selector", "paragraph_selector")
    @classmethod
    def _compile_selector(cls, value: str) -> str:
        try:
            soupsieve.compile(value)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Invalid CSS selector {value!r}: {exc}") from exc
        return value

    def build_link(self, href: str) -> str:
        """Return the absolute article URL for a listing ``href``."""

        return f"https://{self.link_prefix}{href}"


DEFAULT_SITES: Dict[str, SiteConfig] = {
    site.name: site
    for site in (
        SiteConfig(
            name="cbc",
            listing_url="https://www.cbc.ca/news",
            link_selector="a.card",
            link_prefix="cbc.ca",
            body_selector="div.story",
            paragraph_selector="p",
        ),
        SiteConfig(
            name="national_post",
            listing_url="https://nationalpost.com/category/news/",
            link_selector="a.article-card__link",
            link_prefix="nationalpost.com",
            body_selector="section.article-content__content-group",
            paragraph_selector="p.section.article-content__content-group",
        ),
        SiteConfig(
            name="the_star",
            listing_url="https://www.thestar.com/news/world",
            link_selector="a.c-mediacard",
            link_prefix="thestar.com",
            body_selector="div.c-article-body__content",
            paragraph_selector="p.text-block-container",
        ),
    )
}


class AppConfig(BaseModel):
    """Collection of :class:`SiteConfig` entries plus shared filename rules."""

    sites: List[SiteConfig] = Field(default_factory=list)
    title_suffixes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TITLE_SUFFIXES),
        description="Boilerplate stripped from article titles before deriving filenames",
    )

    @classmethod
    def default(cls) -> "AppConfig":
        """Return the configuration holding the built-in site registry."""

        return cls(sites=list(DEFAULT_SITES.values()))

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "AppConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    def iter_sites(self) -> Iterable[SiteConfig]:
        """Iterate over configured sites."""

        return iter(self.sites)

    def site_names(self) -> List[str]:
        return [site.name for site in self.sites]

    def get_site(self, name: str) -> SiteConfig:
        """Return the site called ``name`` or raise :class:`KeyError`."""

        for site in self.sites:
            if site.name == name:
                return site
        raise KeyError(name)
