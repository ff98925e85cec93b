from __future__ import annotations

import json
from pathlib import Path

import pytest

from tracklist_harvester.models import Track
from tracklist_harvester.output import TracklistWriter, sanitize_show_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("foo", "foo"),
        ("The Trilogy Tapes", "the_trilogy_tapes"),
        ("AC/DC  Hour\tLive", "ac_dc_hour_live"),
    ],
)
def test_sanitize_show_name(name: str, expected: str) -> None:
    assert sanitize_show_name(name) == expected


def test_path_layout(output_dir: Path) -> None:
    writer = TracklistWriter(output_dir)

    path = writer.path_for("poolside", "Sun Ra Hour")

    assert path == output_dir / "poolside" / "sun_ra_hour_tracklist.json"


def test_save_writes_artist_title_array(output_dir: Path) -> None:
    writer = TracklistWriter(output_dir)
    path = writer.path_for("mix", "foo")

    writer.save(path, [Track("A", "T"), Track("B", "U")])

    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"artist": "A", "title": "T"},
        {"artist": "B", "title": "U"},
    ]
    assert writer.load(path) == [Track("A", "T"), Track("B", "U")]


def test_load_missing_or_corrupt_is_empty(output_dir: Path) -> None:
    writer = TracklistWriter(output_dir)
    path = writer.path_for("mix", "foo")

    assert writer.load(path) == []

    path.parent.mkdir(parents=True)
    path.write_text("[{", encoding="utf-8")
    assert writer.load(path) == []

    path.write_text('{"artist": "A"}', encoding="utf-8")
    assert writer.load(path) == []


def test_load_skips_malformed_entries(output_dir: Path) -> None:
    writer = TracklistWriter(output_dir)
    path = writer.path_for("mix", "foo")
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps([{"artist": "A", "title": "T"}, {"artist": "B"}, "junk"]),
        encoding="utf-8",
    )

    assert writer.load(path) == [Track("A", "T")]


def test_load_skips_entries_with_non_string_fields(output_dir: Path) -> None:
    writer = TracklistWriter(output_dir)
    path = writer.path_for("mix", "foo")
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps([{"artist": ["X", "Y"], "title": "T"}, {"artist": "A", "title": "T"}]),
        encoding="utf-8",
    )

    assert writer.load(path) == [Track("A", "T")]
