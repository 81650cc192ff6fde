"""
Attendance-related Pydantic schemas
"""

from typing import Optional
from pydantic import BaseModel, Field

from event_roster.models import Attendee, AttendanceRecord, AttendanceStatus

class AttendanceCreate(BaseModel):
    """Schema for recording an attendee's status at an event"""
    event_id: int = Field(gt=0)
    attendee_id: int = Field(gt=0)
    status: AttendanceStatus

class EnrichedAttendanceRecord(AttendanceRecord):
    """Attendance record with the attendee's contact fields copied in.

    Built for display only and never persisted. The contact fields are
    ``None`` when the attendee no longer exists.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_record(
        cls,
        record: AttendanceRecord,
        attendee: Optional[Attendee],
    ) -> "EnrichedAttendanceRecord":
        return cls(
            **record.model_dump(),
            name=attendee.name if attendee else None,
            email=attendee.email if attendee else None,
            phone=attendee.phone if attendee else None,
        )
