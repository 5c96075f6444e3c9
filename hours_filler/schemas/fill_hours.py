from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TimeSlot(BaseModel):
    clock_in: Optional[str] = None
    clock_out: Optional[str] = None

    @field_validator("clock_in", "clock_out", mode="before")
    @classmethod
    def stringify_numbers(cls, v):
        """
        The frontend may send times as bare numbers (e.g. 9).
        Non-zero numbers are forwarded as text, zero counts as empty.
        """
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v) if v else None
        return v

    @property
    def is_complete(self) -> bool:
        # Slots with an empty end are skipped, never submitted
        return bool(self.clock_in and self.clock_out)


class FillHoursRequest(BaseModel):
    """
    POST /fill-hours request body.
    Empty lists are allowed. Missing, null or empty scalars are rejected with a 400.
    """
    cookie: str = Field(..., min_length=1)
    dateFrom: date
    dateTo: date
    hoursMonThurs: List[TimeSlot]
    hoursFri: List[TimeSlot]
    holidays: List[str]


class MessageResponse(BaseModel):
    message: str
