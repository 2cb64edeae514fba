"""Unit tests for the opening-hours evaluator."""
from datetime import datetime

from landmark_core.models.landmark import DayHours
from landmark_core.services.schedule.evaluator import (
    ScheduleInstant,
    day_interval,
    is_open_at,
    is_open_now,
    open_status,
    parse_time_of_day,
    to_12_hour,
)


def _weekday_schedule():
    hours = DayHours(open="09:00", close="17:00", closed=False)
    schedule = {
        day: hours
        for day in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
    }
    schedule["sunday"] = DayHours(closed=True)
    return schedule


# 2024-01-01 was a Monday
WEDNESDAY_10AM = datetime(2024, 1, 3, 10, 0)


def test_open_during_hours():
    assert is_open_at(_weekday_schedule(), ScheduleInstant("wednesday", 10 * 60))


def test_bounds_are_inclusive():
    schedule = _weekday_schedule()
    assert is_open_at(schedule, ScheduleInstant("monday", 9 * 60))
    assert is_open_at(schedule, ScheduleInstant("monday", 17 * 60))
    assert not is_open_at(schedule, ScheduleInstant("monday", 9 * 60 - 1))
    assert not is_open_at(schedule, ScheduleInstant("monday", 17 * 60 + 1))


def test_closed_day_is_never_open():
    schedule = _weekday_schedule()
    assert not any(
        is_open_at(schedule, ScheduleInstant("sunday", minute)) for minute in range(24 * 60)
    )


def test_closed_flag_wins_over_hours():
    schedule = {"monday": DayHours(open="00:00", close="23:59", closed=True)}
    assert not is_open_at(schedule, ScheduleInstant("monday", 12 * 60))


def test_missing_day_or_bound_is_closed():
    schedule = {
        "monday": DayHours(open="09:00", close=None),
        "tuesday": DayHours(open=None, close="17:00"),
    }
    assert not is_open_at(schedule, ScheduleInstant("monday", 10 * 60))
    assert not is_open_at(schedule, ScheduleInstant("tuesday", 10 * 60))
    assert not is_open_at(schedule, ScheduleInstant("wednesday", 10 * 60))
    assert not is_open_at({}, ScheduleInstant("monday", 10 * 60))
    assert not is_open_at(None, ScheduleInstant("monday", 10 * 60))


def test_malformed_time_is_closed():
    schedule = {"monday": DayHours(open="nine", close="17:00")}
    assert not is_open_at(schedule, ScheduleInstant("monday", 10 * 60))
    assert day_interval(schedule["monday"]) is None


def test_overnight_range_is_evaluated_literally():
    schedule = {"friday": DayHours(open="22:00", close="02:00")}
    assert not is_open_at(schedule, ScheduleInstant("friday", 60))
    assert not is_open_at(schedule, ScheduleInstant("friday", 23 * 60))


def test_parse_time_of_day():
    assert parse_time_of_day("00:00") == 0
    assert parse_time_of_day("09:05") == 545
    assert parse_time_of_day("9:05") == 545
    assert parse_time_of_day("23:59") == 1439
    assert parse_time_of_day("24:00") is None
    assert parse_time_of_day("12:60") is None
    assert parse_time_of_day("1200") is None
    assert parse_time_of_day(None) is None


def test_to_12_hour():
    assert to_12_hour("00:05") == "12:05 AM"
    assert to_12_hour("09:00") == "9:00 AM"
    assert to_12_hour("12:30") == "12:30 PM"
    assert to_12_hour("17:00") == "5:00 PM"
    assert to_12_hour("23:59") == "11:59 PM"
    assert to_12_hour(None) == ""
    assert to_12_hour("25:00") == ""


def test_instant_from_datetime():
    instant = ScheduleInstant.from_datetime(WEDNESDAY_10AM)
    assert instant == ScheduleInstant("wednesday", 600)


def test_is_open_now_uses_supplied_clock():
    schedule = _weekday_schedule()
    assert is_open_now(schedule, WEDNESDAY_10AM)
    assert not is_open_now(schedule, datetime(2024, 1, 7, 10, 0))


def test_open_status_lines():
    schedule = _weekday_schedule()
    assert open_status({}) == "Opening hours unavailable"
    assert open_status(None) == "Opening hours unavailable"
    assert open_status(schedule, datetime(2024, 1, 7, 10, 0)) == "Closed today"
    assert open_status(schedule, WEDNESDAY_10AM) == "Open now until 17:00"
    assert open_status(schedule, datetime(2024, 1, 3, 18, 0)) == "Closed now"


def test_non_plain_digit_times_are_rejected():
    assert parse_time_of_day("+9:00") is None
    assert parse_time_of_day("1_0:00") is None
    assert parse_time_of_day("٩:00") is None
    assert parse_time_of_day("9 :00") is None
    assert parse_time_of_day("-1:30") is None

    schedule = {"monday": DayHours(open="+9:00", close="17:00")}
    assert not is_open_at(schedule, ScheduleInstant("monday", 10 * 60))


def test_raw_mapping_days_are_accepted():
    schedule = {
        "monday": {"open": "09:00", "close": "17:00", "closed": False},
        "tuesday": {"closed": True},
        "wednesday": {"open": 9, "close": "17:00"},
    }
    assert is_open_at(schedule, ScheduleInstant("monday", 10 * 60))
    assert not is_open_at(schedule, ScheduleInstant("tuesday", 10 * 60))
    assert not is_open_at(schedule, ScheduleInstant("wednesday", 10 * 60))
    assert open_status(schedule, datetime(2024, 1, 1, 10, 0)) == "Open now until 17:00"
    assert open_status(schedule, datetime(2024, 1, 3, 10, 0)) == "Closed today"
