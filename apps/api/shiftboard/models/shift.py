import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Text, Time, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shiftboard.core.database import Base

from shiftboard.models.week import Week  # noqa: F401


class Shift(Base):
    __tablename__ = "shifts"
    __table_args__ = (Index("ix_shifts_date_start_time", "date", "start_time"),)

    shift_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    week_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("weeks.week_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # owning week; read on demand, never traversed the other way
    week = relationship("Week", lazy="select")
