"""Time-of-day evaluation of a weekly opening schedule."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from pydantic import ValidationError

from landmark_core.models.landmark import DAYS_OF_WEEK, DayHours

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ScheduleInstant:
    """A local wall-clock instant: weekday name plus minutes since midnight."""

    day_name: str
    minutes_since_midnight: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "ScheduleInstant":
        return cls(
            day_name=DAYS_OF_WEEK[moment.weekday()],
            minutes_since_midnight=moment.hour * 60 + moment.minute,
        )


def parse_time_of_day(value: Optional[str]) -> Optional[int]:
    """Parse "HH:MM" into minutes since midnight, ``None`` when unusable."""
    if not isinstance(value, str):
        return None
    parts = value.strip().split(":")
    if len(parts) != 2:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return hours * 60 + minutes


def coerce_day_hours(value: Any) -> Optional[DayHours]:
    """Accept a DayHours or a raw ``{"open", "close", "closed"}`` mapping; ``None`` if unusable."""
    if value is None or isinstance(value, DayHours):
        return value
    if not isinstance(value, Mapping):
        return None
    try:
        return DayHours.model_validate(dict(value))
    except ValidationError:
        return None


def day_interval(day_hours: Any) -> Optional[Tuple[int, int]]:
    """Normalized (open, close) minutes, or ``None`` when the day counts as closed.

    ``day_hours`` may be a DayHours or a raw mapping as stored in documents.
    """
    day_hours = coerce_day_hours(day_hours)
    if day_hours is None or day_hours.closed:
        return None
    open_minutes = parse_time_of_day(day_hours.open)
    close_minutes = parse_time_of_day(day_hours.close)
    if open_minutes is None or close_minutes is None:
        return None
    return open_minutes, close_minutes


def is_open_at(schedule: Optional[Mapping[str, DayHours]], instant: ScheduleInstant) -> bool:
    """
    Whether the schedule is open at ``instant``.

    Both bounds are inclusive. Missing days, closed days and days with a
    missing bound are closed. A range with close before open is taken
    literally, so it never matches after midnight.
    """
    if not schedule:
        return False
    interval = day_interval(schedule.get(instant.day_name.lower()))
    if interval is None:
        return False
    open_minutes, close_minutes = interval
    return open_minutes <= instant.minutes_since_midnight <= close_minutes


def is_open_now(
    schedule: Optional[Mapping[str, DayHours]], now: Optional[datetime] = None
) -> bool:
    return is_open_at(schedule, ScheduleInstant.from_datetime(now or datetime.now()))


def to_12_hour(time: Optional[str]) -> str:
    """Convert "HH:MM" to "h:mm AM/PM"; empty string for unusable input."""
    minutes_total = parse_time_of_day(time)
    if minutes_total is None:
        return ""
    hours, minutes = divmod(minutes_total, 60)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def open_status(
    schedule: Optional[Mapping[str, DayHours]], now: Optional[datetime] = None
) -> str:
    """Short status line used in landmark lists."""
    if not schedule:
        return "Opening hours unavailable"

    instant = ScheduleInstant.from_datetime(now or datetime.now())
    today = coerce_day_hours(schedule.get(instant.day_name))
    if day_interval(today) is None:
        return "Closed today"
    if is_open_at(schedule, instant):
        return f"Open now until {today.close}"
    return "Closed now"
