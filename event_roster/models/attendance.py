"""
Attendance record model
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from event_roster.core.ids import utc_now

class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"

class AttendanceRecord(BaseModel):
    """One attendee's status at one event.

    At most one record exists per (event_id, attendee_id) pair.
    """
    id: int = Field(gt=0)
    event_id: int
    attendee_id: int
    status: AttendanceStatus = AttendanceStatus.UNKNOWN
    timestamp: datetime = Field(default_factory=utc_now)  # last write

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        # Stored values outside the enum read back as unknown
        try:
            return AttendanceStatus(value)
        except ValueError:
            return AttendanceStatus.UNKNOWN
