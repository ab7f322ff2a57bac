"""Static survey constants.

Reference data that doesn't change between runs: the region of interest,
the shared survey schema, classification markers and distance buckets.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from rottnest_birds.reference.distance import DISTANCE_RANKS as DISTANCE_RANKS
from rottnest_birds.reference.distance import MAX_DISTANCE_SEGMENTS as MAX_DISTANCE_SEGMENTS
from rottnest_birds.reference.geography import ROTTNEST_BBOX as ROTTNEST_BBOX
from rottnest_birds.reference.geography import BoundingBox as BoundingBox
from rottnest_birds.reference.surveys import BEST_SURVEY_TYPES as BEST_SURVEY_TYPES
from rottnest_birds.reference.surveys import BUSHBIRD_MARKER as BUSHBIRD_MARKER
from rottnest_birds.reference.surveys import EXPECTED_SURVEY_YEARS as EXPECTED_SURVEY_YEARS
from rottnest_birds.reference.surveys import JOIN_COLUMNS as JOIN_COLUMNS
from rottnest_birds.reference.surveys import YES as YES
