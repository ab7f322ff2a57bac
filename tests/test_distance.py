"""Tests for distance-note parsing."""

from __future__ import annotations

import pandas as pd
import pytest

from rottnest_birds.analysis.distance import explode_distance_notes, parse_distance_notes
from rottnest_birds.reference.distance import DISTANCE_RANKS


class TestParseDistanceNotes:
    """Test parse_distance_notes."""

    def test_mixed_notes(self) -> None:
        """Known buckets are kept in order and the junk segment is dropped."""
        readings = parse_distance_notes("0-5m=2, 10-15m=1, junk, 40-50m=3")

        assert [(r.distance, r.rank, r.count) for r in readings] == [
            ("0-5m", 1, 2),
            ("10-15m", 3, 1),
            ("40-50m", 7, 3),
        ]

    def test_every_label(self) -> None:
        notes = ",".join(f"{label}={i}" for i, label in enumerate(DISTANCE_RANKS, start=1))
        readings = parse_distance_notes(notes)
        assert [r.rank for r in readings] == list(range(1, 9))
        assert [r.count for r in readings] == list(range(1, 9))

    @pytest.mark.parametrize("notes", [None, float("nan"), "", "   ", "seen near the lake"])
    def test_nothing_to_parse(self, notes: object) -> None:
        assert parse_distance_notes(notes) == []

    def test_unknown_labels_dropped(self) -> None:
        """Labels must match the table exactly apart from outer whitespace."""
        readings = parse_distance_notes("0-5M=1, 0 - 5m=1, 60m=2,  >50m =4")
        assert [(r.distance, r.count) for r in readings] == [(">50m", 4)]

    def test_splits_on_first_equals(self) -> None:
        readings = parse_distance_notes("5-10m=2=3")
        assert len(readings) == 1
        assert readings[0].distance == "5-10m"
        assert readings[0].count is None

    def test_non_integer_count_kept_as_none(self) -> None:
        readings = parse_distance_notes("0-5m=several, 5-10m= 4 ")
        assert [(r.rank, r.count) for r in readings] == [(1, None), (2, 4)]

    def test_only_first_eight_segments(self) -> None:
        """Segments after the eighth are ignored, even if valid."""
        notes = ", ".join(["0-5m=1"] * 8 + ["40-50m=9"])
        readings = parse_distance_notes(notes)
        assert len(readings) == 8
        assert all(r.rank == 1 for r in readings)

    def test_empty_segments_count_towards_limit(self) -> None:
        notes = ",,,,,,,,40-50m=9"
        assert parse_distance_notes(notes) == []


class TestExplodeDistanceNotes:
    """Test explode_distance_notes."""

    def test_one_row_per_reading(self) -> None:
        frame = pd.DataFrame(
            {
                "Survey ID": ["S1", "S1", "S2"],
                "Common Name": ["Silvereye", "Galah", "Red Wattlebird"],
                "Scientific Name": [
                    "Zosterops lateralis",
                    "Eolophus roseicapilla",
                    "Anthochaera carunculata",
                ],
                "surveyGroup": ["bushBirds", "bushBirds", "other"],
                "Year": pd.array([2019, 2019, None], dtype="Int64"),
                "Sighting Notes": ["0-5m=2, 10-15m=1", "", "40-50m=3, junk"],
            }
        )

        exploded = explode_distance_notes(frame)

        assert list(exploded.columns) == [
            "Survey ID",
            "Common Name",
            "Scientific Name",
            "surveyGroup",
            "Year",
            "distance",
            "distance_rank",
            "count",
        ]
        assert exploded["Common Name"].tolist() == ["Silvereye", "Silvereye", "Red Wattlebird"]
        assert exploded["distance_rank"].tolist() == [1, 3, 7]
        assert exploded["count"].tolist() == [2, 1, 3]
        assert exploded["Year"].isna().tolist() == [False, False, True]

    def test_no_readings(self) -> None:
        frame = pd.DataFrame(
            {"Common Name": ["Silvereye"], "Sighting Notes": ["flock of 12"]}
        )

        exploded = explode_distance_notes(frame)

        assert exploded.empty
        assert list(exploded.columns) == ["Common Name", "distance", "distance_rank", "count"]

    def test_unreadable_count_is_na(self) -> None:
        frame = pd.DataFrame({"Common Name": ["Silvereye"], "Sighting Notes": ["0-5m=lots"]})
        exploded = explode_distance_notes(frame)
        assert len(exploded) == 1
        assert exploded["count"].isna().all()
