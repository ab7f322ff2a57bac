"""Distance buckets recorded in sighting notes."""

# Label as written in the notes -> ordinal rank, nearest first
DISTANCE_RANKS: dict[str, int] = {
    "0-5m": 1,
    "5-10m": 2,
    "10-15m": 3,
    "15-20m": 4,
    "20-30m": 5,
    "30-40m": 6,
    "40-50m": 7,
    ">50m": 8,
}

# Notes never hold more entries than there are buckets
MAX_DISTANCE_SEGMENTS: int = 8
