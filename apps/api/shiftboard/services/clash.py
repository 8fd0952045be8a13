from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional, Union
from uuid import UUID

from shiftboard.core.errors import ValidationError
from shiftboard.models.shift import Shift
from shiftboard.repositories.shifts import ShiftRepository
from shiftboard.services.dates import InvalidRange, adjacent_dates, ranges_overlap, shift_range

logger = logging.getLogger(__name__)


def find_clash(
    shifts: ShiftRepository,
    day: Union[date, str],
    start_time: Union[time, str],
    end_time: Union[time, str],
    exclude_id: Optional[UUID] = None,
) -> Optional[Shift]:
    """
    First stored shift whose time range overlaps the candidate, or None.

    Only shifts dated the day before through the day after can overlap:
    an overnight shift reaches at most one day forward.
    """
    candidate = shift_range(day, start_time, end_time)
    if isinstance(candidate, InvalidRange):
        raise ValidationError(candidate.message)

    window = adjacent_dates(day)
    for existing in shifts.find(window.previous, window.next):
        if exclude_id is not None and existing.shift_id == exclude_id:
            continue

        existing_range = shift_range(existing.date, existing.start_time, existing.end_time)
        if isinstance(existing_range, InvalidRange):
            logger.warning("Skipping stored shift %s with an empty time range", existing.shift_id)
            continue

        if ranges_overlap(candidate, existing_range):
            return existing

    return None
