"""Data access for shifts."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session, joinedload

from shiftboard.models.shift import Shift

logger = logging.getLogger(__name__)


class ShiftRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, date_from: date, date_to: date) -> List[Shift]:
        """Shifts dated within [date_from, date_to], ordered by date then start time."""
        logger.info("Find shifts")
        return list(
            self.db.execute(
                select(Shift)
                .where(and_(Shift.date >= date_from, Shift.date <= date_to))
                .order_by(Shift.date, Shift.start_time)
            ).scalars()
        )

    def count(self, date_from: date, date_to: date) -> int:
        logger.info("Count shifts")
        return self.db.execute(
            select(func.count())
            .select_from(Shift)
            .where(and_(Shift.date >= date_from, Shift.date <= date_to))
        ).scalar_one()

    def find_by_id(self, shift_id: UUID, with_week: bool = False) -> Optional[Shift]:
        logger.info("Find shift by id")
        stmt = select(Shift).where(Shift.shift_id == shift_id)
        if with_week:
            stmt = stmt.options(joinedload(Shift.week))
        return self.db.execute(stmt).scalars().first()

    def create(self, **fields) -> Shift:
        logger.info("Create shift")
        shift = Shift(**fields)
        self.db.add(shift)
        self.db.commit()
        self.db.refresh(shift)
        return shift

    def update_by_id(self, shift_id: UUID, **fields) -> Optional[Shift]:
        logger.info("Update shift by id")
        shift = self.db.get(Shift, shift_id)
        if shift is None:
            return None
        for key, value in fields.items():
            setattr(shift, key, value)
        self.db.commit()
        self.db.refresh(shift)
        return shift

    def delete_by_id(self, shift_id: UUID) -> bool:
        logger.info("Delete shift")
        shift = self.db.get(Shift, shift_id)
        if shift is None:
            return False
        self.db.delete(shift)
        self.db.commit()
        return True
