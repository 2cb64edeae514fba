"""Compression of a weekly schedule into contiguous display day-ranges."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from landmark_core.models.landmark import DAYS_OF_WEEK, DayHours

from .evaluator import coerce_day_hours, day_interval, to_12_hour

CLOSED_TEXT = "Closed"


@dataclass(frozen=True)
class ScheduleGroup:
    """Run of contiguous days sharing the same opening interval."""

    days: Tuple[str, ...]
    day_label: str
    display_text: str

    @property
    def is_closed(self) -> bool:
        return self.display_text == CLOSED_TEXT


def format_day_hours(day_hours: Any) -> str:
    day_hours = coerce_day_hours(day_hours)
    interval = day_interval(day_hours)
    if interval is None:
        return CLOSED_TEXT
    return f"Open from {to_12_hour(day_hours.open)} to {to_12_hour(day_hours.close)}"


def compress(schedule: Optional[Mapping[str, DayHours]]) -> List[ScheduleGroup]:
    """
    Group contiguous days of the canonical week with equal hours.

    Days are compared by their normalized (open, close) minutes, closed days
    all sharing one key. Only neighbours in Monday..Sunday order are merged.
    """
    schedule = schedule or {}
    groups: List[ScheduleGroup] = []
    current_days: List[str] = []
    current_key = None
    current_text = ""

    for day in DAYS_OF_WEEK:
        day_hours = coerce_day_hours(schedule.get(day))
        key = day_interval(day_hours)
        if current_days and key == current_key:
            current_days.append(day)
            continue
        if current_days:
            groups.append(_build_group(current_days, current_text))
        current_days = [day]
        current_key = key
        current_text = format_day_hours(day_hours)

    groups.append(_build_group(current_days, current_text))
    return groups


def format_schedule_lines(schedule: Optional[Mapping[str, DayHours]]) -> List[str]:
    return [f"{group.day_label}: {group.display_text}" for group in compress(schedule)]


def _build_group(days: List[str], display_text: str) -> ScheduleGroup:
    if len(days) == 1:
        label = days[0].capitalize()
    else:
        label = f"{days[0].capitalize()} - {days[-1].capitalize()}"
    return ScheduleGroup(days=tuple(days), day_label=label, display_text=display_text)
