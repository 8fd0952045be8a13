"""Date and time-range helpers for shifts and calendar weeks.

All values are naive local dates/times; nothing here touches timezones.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Union

DATE_FORMAT = "%Y-%m-%d"


class ShiftRange(NamedTuple):
    start: datetime
    end: datetime


class InvalidRange(NamedTuple):
    message: str


class WeekBounds(NamedTuple):
    start_date: date
    end_date: date


class AdjacentDates(NamedTuple):
    previous: date
    next: date


def _to_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def _to_time(value: Union[time, str]) -> time:
    if isinstance(value, time):
        return value
    # "HH:MM" or "HH:MM:SS"; missing parts default to 0
    parts = [int(p) for p in value.split(":")] + [0, 0]
    return time(parts[0], parts[1], parts[2])


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def combine_date_time(day: Union[date, str], time_of_day: Union[time, str]) -> datetime:
    # naive local clock; any offset on the time of day is dropped
    return datetime.combine(_to_date(day), _to_time(time_of_day).replace(microsecond=0, tzinfo=None))


def shift_range(
    day: Union[date, str],
    start_time: Union[time, str],
    end_time: Union[time, str],
) -> Union[ShiftRange, InvalidRange]:
    """
    Absolute start/end instants of a shift.

    An end time earlier than the start means the shift runs past midnight,
    so the end rolls over to the next day. Equal times are rejected.
    """
    start = combine_date_time(day, start_time)
    end = combine_date_time(day, end_time)

    if end == start:
        return InvalidRange("Shift end time must be after the start time")
    if end < start:
        end += timedelta(days=1)

    return ShiftRange(start, end)


def ranges_overlap(a: ShiftRange, b: ShiftRange) -> bool:
    # half-open intervals: touching endpoints do not overlap
    return a.start < b.end and b.start < a.end


def week_bounds(day: Union[date, str]) -> WeekBounds:
    d = _to_date(day)
    start = d - timedelta(days=d.weekday())  # Monday = 0
    return WeekBounds(start, start + timedelta(days=6))


def adjacent_dates(day: Union[date, str]) -> AdjacentDates:
    d = _to_date(day)
    return AdjacentDates(d - timedelta(days=1), d + timedelta(days=1))
