from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from shiftboard.core.database import get_db
from shiftboard.schemas.shift import PublishWeekRequest, ShiftCreate, ShiftOut, ShiftUpdate
from shiftboard.services.clock import Clock, get_clock
from shiftboard.services.shifts import ShiftService

router = APIRouter()


def get_shift_service(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)) -> ShiftService:
    return ShiftService(db, clock)


def _dump(shift) -> dict:
    return ShiftOut.model_validate(shift).model_dump(mode="json", by_alias=True)


@router.get("")
def list_shifts(
    week_start: Optional[date] = Query(None, alias="weekStart", description="Any date in the week; defaults to today"),
    service: ShiftService = Depends(get_shift_service),
):
    """Shifts of one Monday-to-Sunday week plus that week's publish status."""
    result = service.find(week_start)
    return {"shifts": [_dump(s) for s in result["shifts"]], "week": result["week"]}


@router.post("/publish")
def publish_week(req: PublishWeekRequest, service: ShiftService = Depends(get_shift_service)):
    return service.publish_week(req.week_start)


@router.get("/{shift_id}")
def get_shift(shift_id: UUID, service: ShiftService = Depends(get_shift_service)):
    return _dump(service.find_by_id(shift_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_shift(req: ShiftCreate, service: ShiftService = Depends(get_shift_service)):
    """Create a shift. Pass ignoreClash=true to save it despite an overlap (409 otherwise)."""
    return _dump(service.create(req))


@router.patch("/{shift_id}")
def update_shift(shift_id: UUID, req: ShiftUpdate, service: ShiftService = Depends(get_shift_service)):
    return _dump(service.update_by_id(shift_id, req))


@router.delete("/{shift_id}")
def delete_shift(shift_id: UUID, service: ShiftService = Depends(get_shift_service)):
    service.delete_by_id(shift_id)
    return {"deleted": True, "id": str(shift_id)}
