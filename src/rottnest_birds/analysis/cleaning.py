"""Type coercion and row filters applied before any aggregation."""

from __future__ import annotations

import pandas as pd

from rottnest_birds.reference.surveys import YES


def prepare_observations(
    frame: pd.DataFrame,
    start_date_format: str = "mixed",
    dayfirst: bool = True,
) -> pd.DataFrame:
    """Coerce the text columns the analysis depends on.

    - ``Latitude``/``Longitude`` become floats.
    - ``Start Date`` becomes a datetime; ``Year`` and ``Month`` are taken
      from it as nullable integers.

    Values that don't parse become missing rather than raising. Aggregations
    that group by Year/Month drop them; everything else keeps the row.

    Args:
        frame: Merged observations as read from the intermediate CSV.
        start_date_format: ``format`` argument for ``pandas.to_datetime``.
        dayfirst: Read ambiguous dates such as ``01/10/2019`` as day/month
            for every row (Birdata exports are Australian).

    Returns:
        New DataFrame; the input is not modified.
    """
    start = pd.to_datetime(
        frame["Start Date"], format=start_date_format, dayfirst=dayfirst, errors="coerce"
    )
    return frame.assign(
        **{
            "Latitude": pd.to_numeric(frame["Latitude"], errors="coerce"),
            "Longitude": pd.to_numeric(frame["Longitude"], errors="coerce"),
            "Start Date": start.dt.normalize(),
            "Year": start.dt.year.astype("Int64"),
            "Month": start.dt.month.astype("Int64"),
        }
    )


def filter_complete_surveys(frame: pd.DataFrame) -> pd.DataFrame:
    """Keep rows from surveys that were completed with all species recorded."""
    complete = (frame["Completed"] == YES) & (frame["All Species Recorded"] == YES)
    return frame.loc[complete].reset_index(drop=True)
