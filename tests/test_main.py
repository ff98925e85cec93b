from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tracklist_harvester.main import main, parse_args


def test_crawl_defaults() -> None:
    args = parse_args(["crawl"])

    assert args.catalog == "mixtapes.json"
    assert args.output == "nts_tracklists"
    assert args.checkpoint == "checkpoint.json"
    assert args.rate == 5.0


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_args([])


def test_crawl_exits_nonzero_on_bad_catalog(tmp_path: Path) -> None:
    status = main(["crawl", "--catalog", str(tmp_path / "missing.json"), "--output", str(tmp_path / "out")])

    assert status == 1


def test_crawl_with_empty_catalog(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    catalog = tmp_path / "mixtapes.json"
    catalog.write_text(json.dumps({"results": []}), encoding="utf-8")
    caplog.set_level(logging.INFO)

    status = main(
        [
            "crawl",
            "--catalog",
            str(catalog),
            "--output",
            str(tmp_path / "out"),
            "--checkpoint",
            str(tmp_path / "checkpoint.json"),
        ]
    )

    assert status == 0
    assert "All shows processed" in caplog.text


def test_count_command(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    show_file = tmp_path / "out" / "mix" / "foo_tracklist.json"
    show_file.parent.mkdir(parents=True)
    show_file.write_text(json.dumps([{"artist": "A", "title": "T"}]), encoding="utf-8")
    caplog.set_level(logging.INFO)

    status = main(["count", "--output", str(tmp_path / "out")])

    assert status == 0
    assert "Total number of tracks: 1" in caplog.text
    assert "foo_tracklist: Total = 1, Deduplicated = 1" in caplog.text


def test_count_requires_existing_folder(tmp_path: Path) -> None:
    assert main(["count", "--output", str(tmp_path / "nothing")]) == 1
