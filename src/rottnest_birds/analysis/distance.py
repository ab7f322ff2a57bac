"""Parse distance-bucketed counts out of free-text sighting notes.

Observers on the bushbird transects write notes like::

    0-5m=2, 10-15m=1, 40-50m=3

Anything that isn't a known bucket label followed by ``=`` is ignored.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from rottnest_birds.reference.distance import DISTANCE_RANKS, MAX_DISTANCE_SEGMENTS
from rottnest_birds.schemas import DistanceReading

# Sighting columns carried onto each parsed reading, when present
CARRIED_COLUMNS: tuple[str, ...] = (
    "Survey ID",
    "Common Name",
    "Scientific Name",
    "surveyGroup",
    "Year",
)

READING_COLUMNS: tuple[str, ...] = ("distance", "distance_rank", "count")


def _parse_count(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_distance_notes(notes: Any) -> list[DistanceReading]:
    """Extract bucketed counts from one notes string.

    Only the first ``MAX_DISTANCE_SEGMENTS`` comma-separated segments are
    read. A segment is kept if it splits on its first ``=`` into a known
    bucket label (surrounding whitespace ignored) and a count. A count that
    isn't an integer is kept as None.

    Args:
        notes: Raw ``Sighting Notes`` value; None/NaN yields no readings.

    Returns:
        Readings in note order; empty if nothing matched.
    """
    if not isinstance(notes, str):
        return []

    readings: list[DistanceReading] = []
    for segment in notes.split(",")[:MAX_DISTANCE_SEGMENTS]:
        if not segment.strip():
            continue
        label, sep, raw_count = segment.partition("=")
        if not sep:
            continue
        label = label.strip()
        rank = DISTANCE_RANKS.get(label)
        if rank is None:
            continue
        readings.append(DistanceReading(distance=label, rank=rank, count=_parse_count(raw_count)))
    return readings


def explode_distance_notes(frame: pd.DataFrame) -> pd.DataFrame:
    """One row per (sighting, distance reading).

    Sightings without usable notes contribute no rows.

    Returns:
        DataFrame with the carried sighting columns present in ``frame``,
        followed by ``distance``, ``distance_rank`` and ``count``.
    """
    carried = [col for col in CARRIED_COLUMNS if col in frame.columns]
    records: list[dict[str, Any]] = []
    for idx, notes in frame["Sighting Notes"].items():
        readings = parse_distance_notes(notes)
        if not readings:
            continue
        base = {col: frame.at[idx, col] for col in carried}
        for reading in readings:
            records.append(
                {
                    **base,
                    "distance": reading.distance,
                    "distance_rank": reading.rank,
                    "count": reading.count,
                }
            )

    exploded = pd.DataFrame.from_records(records, columns=[*carried, *READING_COLUMNS])
    dtypes = {"distance": object, "distance_rank": "int64", "count": "Int64"}
    if "Year" in carried:
        dtypes["Year"] = "Int64"
    return exploded.astype(dtypes)
