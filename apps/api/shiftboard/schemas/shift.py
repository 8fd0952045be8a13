import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _naive_time(v: Optional[dt.time]) -> Optional[dt.time]:
    # shift times are local wall-clock values
    if v is not None and v.tzinfo is not None:
        raise ValueError("time must not carry a UTC offset")
    return v


class ShiftCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    date: dt.date
    start_time: dt.time = Field(alias="startTime", description="HH:MM or HH:MM:SS")
    end_time: dt.time = Field(alias="endTime", description="HH:MM or HH:MM:SS")
    ignore_clash: bool = Field(False, alias="ignoreClash")

    @field_validator("start_time", "end_time")
    @classmethod
    def check_naive_times(cls, v):
        return _naive_time(v)


class ShiftUpdate(BaseModel):
    """Partial update: fields left out keep their stored value."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = Field(None, alias="startTime")
    end_time: Optional[dt.time] = Field(None, alias="endTime")
    ignore_clash: bool = Field(False, alias="ignoreClash")

    @field_validator("start_time", "end_time")
    @classmethod
    def check_naive_times(cls, v):
        return _naive_time(v)


class PublishWeekRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week_start: dt.date = Field(alias="weekStart")


class ShiftOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(validation_alias="shift_id", serialization_alias="id")
    name: str
    date: dt.date
    start_time: dt.time = Field(serialization_alias="startTime")
    end_time: dt.time = Field(serialization_alias="endTime")
    week_id: UUID = Field(serialization_alias="weekId")
