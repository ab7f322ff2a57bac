"""Schema checks and surrogate keys for freshly loaded exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rottnest_birds.datasources.birdata.models import SURVEY_KEY, SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable

    import pandas as pd


def require_columns(frame: pd.DataFrame, columns: Iterable[str], table: str) -> None:
    """Raise SchemaMismatchError if any of ``columns`` is absent from ``frame``.

    Args:
        frame: Loaded table.
        columns: Column names that must be present (exact, case-sensitive).
        table: Table name for the error message.
    """
    missing = [col for col in columns if col not in frame.columns]
    if missing:
        msg = f"{table} is missing required columns: {', '.join(missing)}"
        raise SchemaMismatchError(msg)


def assign_survey_keys(surveys: pd.DataFrame) -> pd.DataFrame:
    """Give every survey a surrogate integer key.

    Exact duplicate rows are collapsed first. After that each ``Survey ID``
    must appear once; two rows with the same ID but different metadata mean
    the export is inconsistent and the run stops.

    Returns:
        New DataFrame with a ``survey_key`` column (0..n-1, in file order).
    """
    deduped = surveys.drop_duplicates(ignore_index=True)
    dupes = deduped["Survey ID"].duplicated(keep=False)
    if dupes.any():
        ids = sorted(deduped.loc[dupes, "Survey ID"].unique())
        shown = ", ".join(ids[:5])
        msg = f"surveys has {len(ids)} Survey IDs with conflicting rows (e.g. {shown})"
        raise SchemaMismatchError(msg)

    keyed = deduped.copy()
    keyed[SURVEY_KEY] = range(len(keyed))
    return keyed
