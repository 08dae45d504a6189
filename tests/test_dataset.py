from __future__ import annotations

from pathlib import Path

import pytest

from newscorpus.corpus import CORPUS_ROOT_ENV, DEFAULT_CORPUS_ROOT, resolve_corpus_root
from newscorpus.dataset import load_raw_dataset, normalize_date_dir, scan_corpus


def build_corpus(root: Path) -> None:
    files = [
        "cbc/05-03-2024/budget.txt",
        "cbc/06-03-2024/floods.txt",
        "national_post/5-Mar-2024/election.txt",
        "the_star/14-Feb-2024/summit.txt",
        "the_star/14-Feb-2024/markets.txt",
    ]
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("text\n\n", encoding="utf-8")
    (root / "README").write_text("not a site", encoding="utf-8")
    (root / "cbc" / "stray.txt").write_text("not a day", encoding="utf-8")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("05-03-2024", "05-03-2024"),
        ("5-March-2024", "5-03-2024"),
        ("5-Mar-2024", "5-03-2024"),
        ("14-Feb-2024", "14-02-2024"),
        ("5-3-2024", "5-3-2024"),
    ],
)
def test_normalize_date_dir(name: str, expected: str) -> None:
    assert normalize_date_dir(name) == expected


def test_scan_corpus_walks_site_and_date_directories(tmp_path: Path) -> None:
    build_corpus(tmp_path)

    entries = scan_corpus(tmp_path)

    assert len(entries) == 5
    assert {entry.site for entry in entries} == {"cbc", "national_post", "the_star"}
    election = next(entry for entry in entries if entry.path.name == "election.txt")
    assert election.date == "5-03-2024"
    assert election.path == tmp_path / "national_post" / "5-Mar-2024" / "election.txt"


def test_scan_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_corpus(tmp_path / "missing")


def test_split_is_deterministic(tmp_path: Path) -> None:
    build_corpus(tmp_path)

    first = load_raw_dataset(tmp_path, 0.2, seed=7)
    second = load_raw_dataset(tmp_path, 0.2, seed=7)

    assert len(first.train) == 1
    assert len(first.test) == 4
    assert first == second
    assert {entry.path for entry in first.train + first.test} == {
        entry.path for entry in scan_corpus(tmp_path)
    }


def test_split_rejects_bad_fraction(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_raw_dataset(tmp_path, 1.5)


def test_corpus_root_resolution(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CORPUS_ROOT_ENV, raising=False)
    assert resolve_corpus_root() == DEFAULT_CORPUS_ROOT

    monkeypatch.setenv(CORPUS_ROOT_ENV, str(tmp_path))
    assert resolve_corpus_root() == tmp_path
    assert resolve_corpus_root("elsewhere") == Path("elsewhere")
