"""
Shift use cases: listing, create, update, delete and week publication.

Every mutation re-reads the owning week's publish flag before writing;
shifts carry no status of their own.
"""
from __future__ import annotations

import logging
from datetime import date, time
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy.orm import Session

from shiftboard.core.errors import ConflictError, NotFoundError, UnsupportedOperationError, ValidationError
from shiftboard.models.shift import Shift
from shiftboard.repositories.shifts import ShiftRepository
from shiftboard.repositories.weeks import WeekRepository
from shiftboard.schemas.shift import ShiftCreate, ShiftUpdate
from shiftboard.services.clash import find_clash
from shiftboard.services.clock import Clock, system_clock
from shiftboard.services.dates import InvalidRange, shift_range, week_bounds
from shiftboard.services.weeks import WeekReconciler, check_not_published, week_summary

logger = logging.getLogger(__name__)


def _validate_range(day: date, start_time: time, end_time: time) -> None:
    result = shift_range(day, start_time, end_time)
    if isinstance(result, InvalidRange):
        raise ValidationError(result.message)


class ShiftService:
    def __init__(self, db: Session, clock: Clock = system_clock):
        self.shifts = ShiftRepository(db)
        self.weeks = WeekRepository(db)
        self.clock = clock
        self.reconciler = WeekReconciler(self.weeks, self.shifts, clock)

    # ---------- reads ----------
    def find(self, week_start: Optional[Union[date, str]] = None) -> dict:
        base_date = week_start if week_start else self.clock().date()
        bounds = week_bounds(base_date)
        week = self.weeks.find_one(bounds.start_date)
        shifts = self.shifts.find(bounds.start_date, bounds.end_date)
        return {"shifts": shifts, "week": week_summary(week, bounds)}

    def find_by_id(self, shift_id: UUID) -> Shift:
        shift = self.shifts.find_by_id(shift_id)
        if not shift:
            raise NotFoundError()
        return shift

    # ---------- writes ----------
    def _check_clash(
        self,
        day: date,
        start_time: time,
        end_time: time,
        ignore_clash: bool,
        exclude_id: Optional[UUID] = None,
    ) -> None:
        clashing = find_clash(self.shifts, day, start_time, end_time, exclude_id)
        if clashing is None:
            return
        if not ignore_clash:
            logger.info("Shift on %s %s-%s clashes with %s", day, start_time, end_time, clashing.shift_id)
            raise ConflictError(clashing)
        logger.info("Clash with %s ignored on request", clashing.shift_id)

    def create(self, payload: ShiftCreate) -> Shift:
        _validate_range(payload.date, payload.start_time, payload.end_time)

        bounds = week_bounds(payload.date)
        check_not_published(self.weeks.find_one(bounds.start_date))

        self._check_clash(payload.date, payload.start_time, payload.end_time, payload.ignore_clash)

        week = self.reconciler.ensure_week(bounds.start_date, bounds.end_date)
        return self.shifts.create(
            name=payload.name,
            date=payload.date,
            start_time=payload.start_time,
            end_time=payload.end_time,
            week_id=week.week_id,
        )

    def update_by_id(self, shift_id: UUID, payload: ShiftUpdate) -> Shift:
        existing = self.shifts.find_by_id(shift_id, with_week=True)
        if not existing:
            raise NotFoundError()

        check_not_published(existing.week)

        updated_date = payload.date if payload.date is not None else existing.date
        updated_start = payload.start_time if payload.start_time is not None else existing.start_time
        updated_end = payload.end_time if payload.end_time is not None else existing.end_time
        _validate_range(updated_date, updated_start, updated_end)

        bounds = week_bounds(updated_date)
        target_week = self.weeks.find_one(bounds.start_date)
        if target_week and target_week.week_id != existing.week_id:
            check_not_published(target_week)

        self._check_clash(updated_date, updated_start, updated_end, payload.ignore_clash, exclude_id=shift_id)

        week = self.reconciler.ensure_week(bounds.start_date, bounds.end_date)
        if week.week_id != existing.week_id:
            logger.info("Moving shift %s to week %s", shift_id, bounds.start_date)

        return self.shifts.update_by_id(
            shift_id,
            name=payload.name if payload.name is not None else existing.name,
            date=updated_date,
            start_time=updated_start,
            end_time=updated_end,
            week_id=week.week_id,
        )

    def delete_by_id(self, shift_id: Union[UUID, List[UUID]]) -> bool:
        if isinstance(shift_id, (list, tuple, set)):
            raise UnsupportedOperationError()

        existing = self.shifts.find_by_id(shift_id, with_week=True)
        if not existing:
            raise NotFoundError()

        check_not_published(existing.week)
        return self.shifts.delete_by_id(shift_id)

    def publish_week(self, week_start: Union[date, str]) -> dict:
        return self.reconciler.publish(week_start)
