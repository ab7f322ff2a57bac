"""Survey schema and classification constants."""

# Columns shared by surveys.csv and sightings.csv, in export order.
# A sighting belongs to a survey only if every one of these matches.
JOIN_COLUMNS: tuple[str, ...] = (
    "Survey ID",
    "Source",
    "Source Ref",
    "Completed",
    "All Species Recorded",
    "Survey Point ID",
    "Survey Point Name",
    "Latitude",
    "Longitude",
    "Accuracy (m)",
    "Number of Observers",
    "Survey Notes",
    "Start Date",
    "Start Time",
    "Finish Date",
    "Survey Type",
    "Duration (mins)",
    "Program",
    "Water Level",
    "Raisers Edge ID",
    "User Name",
    "Private Survey",
    "Shared Site",
)

YES = "Yes"

# Case-sensitive substring of "Source Ref" identifying the bushbird project
BUSHBIRD_MARKER = "Bushbird"

# Standardized protocols; exact string match against "Survey Type"
BEST_SURVEY_TYPES: frozenset[str] = frozenset(
    {
        "2ha, 20 minute search",
        "500m area search",
        "5km area search",
    }
)

# Survey years covered by the dataset window
EXPECTED_SURVEY_YEARS: int = 3
