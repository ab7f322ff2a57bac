"""Birdata survey/sighting exports.

Public API:
  - loader: require_columns, assign_survey_keys
  - merge: region_mask, filter_region, merge_sightings
  - models: MergeResult, SURVEY_KEY and the error hierarchy

Geographic focus: Rottnest Island, cut out of the Perth NRM export.
"""

from rottnest_birds.datasources.birdata.loader import assign_survey_keys, require_columns
from rottnest_birds.datasources.birdata.merge import filter_region, merge_sightings, region_mask
from rottnest_birds.datasources.birdata.models import (
    SURVEY_KEY,
    BirdataError,
    JoinMismatchError,
    MergeResult,
    MissingInputError,
    SchemaMismatchError,
)

__all__ = [
    "SURVEY_KEY",
    "BirdataError",
    "JoinMismatchError",
    "MergeResult",
    "MissingInputError",
    "SchemaMismatchError",
    "assign_survey_keys",
    "filter_region",
    "merge_sightings",
    "region_mask",
    "require_columns",
]
