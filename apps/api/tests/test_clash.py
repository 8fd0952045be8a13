"""Tests for the clash detector."""

from datetime import date, time

import pytest

from shiftboard.core.errors import ValidationError
from shiftboard.repositories.shifts import ShiftRepository
from shiftboard.services.clash import find_clash


def test_no_shifts_no_clash(db):
    assert find_clash(ShiftRepository(db), date(2024, 1, 8), time(9), time(17)) is None


def test_overlapping_shift_is_reported(db, add_shift):
    existing = add_shift("A", date(2024, 1, 8), time(9), time(17))

    clash = find_clash(ShiftRepository(db), date(2024, 1, 8), time(16), time(18))

    assert clash is not None
    assert clash.shift_id == existing.shift_id


def test_touching_shifts_do_not_clash(db, add_shift):
    add_shift("A", date(2024, 1, 8), time(9), time(17))

    assert find_clash(ShiftRepository(db), date(2024, 1, 8), time(17), time(20)) is None
    assert find_clash(ShiftRepository(db), date(2024, 1, 8), time(6), time(9)) is None


def test_overnight_shift_clashes_with_next_day(db, add_shift):
    overnight = add_shift("Night", date(2024, 1, 8), time(23), time(1))

    clash = find_clash(ShiftRepository(db), date(2024, 1, 9), time(0, 30), time(2))

    assert clash is not None
    assert clash.shift_id == overnight.shift_id


def test_new_overnight_shift_clashes_with_next_morning(db, add_shift):
    early = add_shift("Early", date(2024, 1, 9), time(0, 30), time(2))

    clash = find_clash(ShiftRepository(db), date(2024, 1, 8), time(23), time(1))

    assert clash is not None
    assert clash.shift_id == early.shift_id


def test_shift_outside_window_is_ignored(db, add_shift):
    add_shift("Night", date(2024, 1, 8), time(23), time(1))

    assert find_clash(ShiftRepository(db), date(2024, 1, 10), time(9), time(17)) is None


def test_excluded_shift_is_skipped(db, add_shift):
    existing = add_shift("A", date(2024, 1, 8), time(9), time(17))

    clash = find_clash(
        ShiftRepository(db), date(2024, 1, 8), time(10), time(12), exclude_id=existing.shift_id
    )

    assert clash is None


def test_first_clash_follows_date_then_start_order(db, add_shift):
    add_shift("Late", date(2024, 1, 8), time(14), time(20))
    early = add_shift("Early", date(2024, 1, 8), time(8), time(13))

    clash = find_clash(ShiftRepository(db), date(2024, 1, 8), time(7), time(22))

    assert clash.shift_id == early.shift_id


def test_invalid_candidate_range_raises(db):
    with pytest.raises(ValidationError) as exc:
        find_clash(ShiftRepository(db), date(2024, 1, 8), time(9), time(9))
    assert exc.value.status_code == 400


def test_overnight_clash_across_week_boundary(db, add_shift):
    sunday_night = add_shift("Sunday night", date(2024, 1, 14), time(23), time(1))

    clash = find_clash(ShiftRepository(db), date(2024, 1, 15), time(0, 30), time(2))

    assert clash is not None
    assert clash.shift_id == sunday_night.shift_id
