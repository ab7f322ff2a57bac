"""
Domain models for the survey pipeline.

Tables move between stages as pandas DataFrames; these models cover the
values that are computed per row and need a fixed vocabulary or shape.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class SurveyGroup(StrEnum):
    """Analysis partition a survey falls into."""

    BUSH_BIRDS = "bushBirds"
    STANDARD_SURVEYS = "standardSurveys"
    OTHER = "other"


class DistanceReading(BaseModel):
    """One ``<distance range>=<count>`` entry from a sighting's notes."""

    model_config = {"frozen": True}

    distance: str = Field(..., description="Bucket label, e.g. '10-15m'")
    rank: int = Field(..., ge=1, le=8, description="Ordinal rank, 1 = nearest")
    count: int | None = Field(default=None, description="Birds in the bucket; None if unreadable")
