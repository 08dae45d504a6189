"""Command line interface for scraping sites and inspecting the corpus."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import typer

from newscorpus.config import AppConfig
from newscorpus.corpus import resolve_corpus_root
from newscorpus.dataset import DEFAULT_SEED, load_raw_dataset
from newscorpus.errors import ScrapeError
from newscorpus.models import ScrapeReport
from newscorpus.services.scraper import SiteScraper

__all__ = ["app", "main"]

EXIT_FAILED = 1
EXIT_USAGE = 2

app = typer.Typer(help="newscorpus CLI: build a text corpus from news websites")


def _load_config(path: Optional[Path]) -> AppConfig:
    if path is None:
        return AppConfig.default()
    try:
        return AppConfig.from_file(path)
    except ValueError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_FAILED)


@app.callback()
def configure(
    log_level: str = typer.Option("INFO", "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Set up logging before any command runs."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@app.command()
def scrape(
    sites: Optional[List[str]] = typer.Argument(None, help="Site names to scrape (default: all)"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Corpus root directory"),
    strict: bool = typer.Option(False, "--strict", help="Fail when any article was skipped"),
) -> None:
    """Scrape configured sites into the corpus and print a JSON report."""
    conf = _load_config(config)

    requested = sites or []
    unknown = [name for name in requested if name not in conf.site_names()]
    if unknown:
        typer.secho(f"Unknown site(s): {', '.join(unknown)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)
    selected = [conf.get_site(name) for name in requested] or list(conf.iter_sites())

    scraper = SiteScraper(corpus_root=output, title_suffixes=conf.title_suffixes)
    outcomes = scraper.scrape_all(selected)

    reports: List[ScrapeReport] = []
    errors = []
    for name, outcome in outcomes.items():
        if isinstance(outcome, ScrapeError):
            errors.append({"site": name, "reason": outcome.reason, "error": str(outcome)})
        else:
            reports.append(outcome)

    payload = {
        "corpus_root": str(scraper.corpus_root),
        "sites": [report.model_dump() for report in reports],
        "errors": errors,
    }
    typer.echo(json.dumps(payload, indent=2))

    if errors:
        raise typer.Exit(code=EXIT_FAILED)
    if strict and any(not report.clean for report in reports):
        raise typer.Exit(code=EXIT_FAILED)


@app.command("sites")
def list_sites(
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
) -> None:
    """List configured sites and their listing pages."""
    for site in _load_config(config).iter_sites():
        typer.echo(f"{site.name}\t{site.listing_url}")


@app.command()
def dataset(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Corpus root directory"),
    train_fraction: float = typer.Option(0.2, "--train-fraction", min=0.0, max=1.0),
    seed: int = typer.Option(DEFAULT_SEED, "--seed"),
) -> None:
    """Split the scraped corpus into train/test entries and print their sizes."""
    root = resolve_corpus_root(output)
    try:
        raw = load_raw_dataset(root, train_fraction, seed=seed)
    except OSError as exc:
        typer.secho(f"Cannot read corpus root {root}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_FAILED)

    payload = {"corpus_root": str(root), "train": len(raw.train), "test": len(raw.test)}
    typer.echo(json.dumps(payload, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> None:  # console_scripts entrypoint wrapper
    app(args=list(argv) if argv is not None else None, prog_name="newscorpus")


if __name__ == "__main__":
    main()
