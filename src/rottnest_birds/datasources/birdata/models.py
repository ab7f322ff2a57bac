"""Birdata result types and errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd

# Surrogate survey identifier added at load time; never written out
SURVEY_KEY = "survey_key"


class BirdataError(Exception):
    """Base class for fatal problems with the survey exports."""


class MissingInputError(BirdataError, FileNotFoundError):
    """A required input table is not on disk."""


class SchemaMismatchError(BirdataError, ValueError):
    """An input table lacks required columns or has ambiguous survey IDs."""


class JoinMismatchError(BirdataError, ValueError):
    """Sightings disagree with their survey on one or more shared columns."""

    def __init__(self, mismatches: dict[str, int]) -> None:
        self.mismatches = mismatches
        detail = ", ".join(f"{col!r} ({n} rows)" for col, n in mismatches.items())
        super().__init__(f"Sightings disagree with their survey on: {detail}")


@dataclass
class MergeResult:
    """Sightings joined to their in-region surveys, with drop accounting."""

    merged: pd.DataFrame
    sightings_total: int
    sightings_outside_region: int
    sightings_without_survey: int

    @property
    def rows(self) -> int:
        """Number of merged rows."""
        return len(self.merged)
