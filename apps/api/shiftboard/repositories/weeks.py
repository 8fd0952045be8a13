"""Data access for weeks."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from shiftboard.models.week import Week

logger = logging.getLogger(__name__)


class WeekRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_one(self, start_date: date) -> Optional[Week]:
        logger.info("Find week")
        return self.db.execute(select(Week).where(Week.start_date == start_date)).scalars().first()

    def find_by_id(self, week_id: UUID) -> Optional[Week]:
        logger.info("Find week by id")
        return self.db.get(Week, week_id)

    def create(self, **fields) -> Week:
        """Insert a week; IntegrityError propagates if start_date is taken."""
        logger.info("Create week")
        week = Week(**fields)
        self.db.add(week)
        self.db.commit()
        self.db.refresh(week)
        return week

    def update_by_id(self, week_id: UUID, **fields) -> Optional[Week]:
        logger.info("Update week by id")
        week = self.db.get(Week, week_id)
        if week is None:
            return None
        for key, value in fields.items():
            setattr(week, key, value)
        self.db.commit()
        self.db.refresh(week)
        return week

    def rollback(self) -> None:
        self.db.rollback()
