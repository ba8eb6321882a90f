"""Daily, weekly and monthly views over the event catalog."""
from eventide_timeline.daily import (
    DailyTimeline,
    EventOccurrences,
    current_game_day,
    display_sort_key,
    occurrences_for_day,
    step_day,
)
from eventide_timeline.monthly import (
    LANES,
    MonthBar,
    MonthlyView,
    can_step_back,
    events_for_month,
    lane_of,
    month_bounds,
    step_month,
)
from eventide_timeline.status import (
    Phase,
    ResetCountdowns,
    StatusReport,
    format_duration,
    format_duration_with_days,
    occurrence_status,
    reset_countdowns,
)
from eventide_timeline.weekly import (
    DAY_NAMES,
    WeekBar,
    WeekDay,
    WeeklyView,
    current_week_start,
    events_for_week,
    game_week_number,
    step_week,
)

__all__ = [
    "occurrences_for_day",
    "DailyTimeline",
    "EventOccurrences",
    "display_sort_key",
    "step_day",
    "current_game_day",
    "events_for_week",
    "WeeklyView",
    "WeekDay",
    "WeekBar",
    "DAY_NAMES",
    "game_week_number",
    "step_week",
    "current_week_start",
    "events_for_month",
    "MonthlyView",
    "MonthBar",
    "LANES",
    "lane_of",
    "month_bounds",
    "step_month",
    "can_step_back",
    "Phase",
    "StatusReport",
    "occurrence_status",
    "format_duration",
    "format_duration_with_days",
    "ResetCountdowns",
    "reset_countdowns",
]
