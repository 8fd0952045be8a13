from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from sqlalchemy.exc import IntegrityError

from shiftboard.core.errors import AlreadyPublishedError, PublishedWeekError, ValidationError
from shiftboard.models.week import Week
from shiftboard.repositories.shifts import ShiftRepository
from shiftboard.repositories.weeks import WeekRepository
from shiftboard.services.clock import Clock, system_clock
from shiftboard.services.dates import WeekBounds, format_date, week_bounds

logger = logging.getLogger(__name__)


def week_summary(week: Optional[Week], bounds: WeekBounds) -> dict:
    """Projection returned to callers; a placeholder when the week has no row yet."""
    if week is None:
        return {
            "startDate": format_date(bounds.start_date),
            "endDate": format_date(bounds.end_date),
            "isPublished": False,
            "publishedAt": None,
        }

    return {
        "id": str(week.week_id),
        "startDate": format_date(week.start_date),
        "endDate": format_date(week.end_date),
        "isPublished": bool(week.is_published),
        "publishedAt": week.published_at.isoformat() if week.published_at else None,
    }


def check_not_published(week: Optional[Week]) -> None:
    if week is not None and week.is_published:
        raise PublishedWeekError()


class WeekReconciler:
    def __init__(self, weeks: WeekRepository, shifts: ShiftRepository, clock: Clock = system_clock):
        self.weeks = weeks
        self.shifts = shifts
        self.clock = clock

    def ensure_week(self, start_date: date, end_date: date) -> Week:
        """Get-or-create the week keyed by its Monday."""
        existing = self.weeks.find_one(start_date)
        if existing:
            return existing

        try:
            return self.weeks.create(start_date=start_date, end_date=end_date, is_published=False)
        except IntegrityError:
            # another writer created it between our read and insert
            self.weeks.rollback()
            winner = self.weeks.find_one(start_date)
            if winner is None:
                raise
            logger.info("Week %s created concurrently, reusing it", start_date)
            return winner

    def publish(self, week_start: Union[date, str]) -> dict:
        bounds = week_bounds(week_start)

        # checked before ensure_week so a rejected publish leaves no week row behind
        if self.shifts.count(bounds.start_date, bounds.end_date) == 0:
            raise ValidationError("Cannot publish an empty week.")

        week = self.ensure_week(bounds.start_date, bounds.end_date)
        if week.is_published:
            raise AlreadyPublishedError()

        updated = self.weeks.update_by_id(
            week.week_id,
            is_published=True,
            published_at=self.clock(),
            end_date=bounds.end_date,
        )
        logger.info("Published week %s", format_date(bounds.start_date))
        return week_summary(updated, bounds)
