import uuid
from sqlalchemy import Boolean, Column, Date, DateTime, Uuid
from sqlalchemy.sql import func

from shiftboard.core.database import Base


class Week(Base):
    __tablename__ = "weeks"

    week_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # natural key: the Monday of the calendar week
    start_date = Column(Date, nullable=False, unique=True, index=True)
    end_date = Column(Date, nullable=False)

    is_published = Column(Boolean, nullable=False, default=False)
    published_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
