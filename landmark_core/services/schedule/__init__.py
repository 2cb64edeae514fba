# Schedule service package
from .compressor import ScheduleGroup, compress, format_day_hours, format_schedule_lines
from .evaluator import (
    ScheduleInstant,
    is_open_at,
    is_open_now,
    open_status,
    parse_time_of_day,
    to_12_hour,
)

__all__ = [
    "ScheduleGroup",
    "ScheduleInstant",
    "compress",
    "format_day_hours",
    "format_schedule_lines",
    "is_open_at",
    "is_open_now",
    "open_status",
    "parse_time_of_day",
    "to_12_hour",
]
