"""Schedule-to-occurrence expansion for the eventide calendar."""
from eventide_schedule.expand import (
    effective_end,
    expand,
    expand_range,
    is_daily,
    occurs_on_weekday,
    schedule_weekdays,
    weekday_of,
)
from eventide_schedule.gates import exists_on, is_live, rotation_matches
from eventide_schedule.keys import occurrence_key, parse_occurrence_key
from eventide_schedule.types import Occurrence

__all__ = [
    "Occurrence",
    "expand",
    "expand_range",
    "effective_end",
    "exists_on",
    "rotation_matches",
    "is_live",
    "is_daily",
    "occurs_on_weekday",
    "schedule_weekdays",
    "weekday_of",
    "occurrence_key",
    "parse_occurrence_key",
]
