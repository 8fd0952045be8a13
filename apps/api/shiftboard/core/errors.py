"""Business errors raised by the shift service.

Each one is an ``HTTPException`` so it reaches the transport boundary
unchanged and FastAPI renders it as ``{"detail": ...}``.
"""
from typing import Any, Optional

from fastapi import HTTPException, status

from shiftboard.schemas.shift import ShiftOut


class ShiftServiceError(HTTPException):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        self.message = message or self.message
        super().__init__(status_code=self.status_code, detail=detail if detail is not None else self.message)


class ValidationError(ShiftServiceError):
    """Malformed time range or an attempt to publish an empty week."""

    message = "Invalid shift"


class PublishedWeekError(ShiftServiceError):
    message = "This week has already been published and cannot be modified."


class AlreadyPublishedError(ShiftServiceError):
    message = "This week has already been published."


class UnsupportedOperationError(ShiftServiceError):
    message = "Batch delete is not supported"


class NotFoundError(ShiftServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Shift not found"


class ConflictError(ShiftServiceError):
    """Overlapping shift found and the caller did not ask to ignore it."""

    status_code = status.HTTP_409_CONFLICT
    message = "Shift clashes with an existing shift."

    def __init__(self, conflict_shift, message: Optional[str] = None):
        self.conflict_shift = conflict_shift
        payload = ShiftOut.model_validate(conflict_shift).model_dump(mode="json", by_alias=True)
        super().__init__(
            message,
            detail={"message": message or self.message, "conflictShift": payload},
        )
