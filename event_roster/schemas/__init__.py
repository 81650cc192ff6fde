"""
Pydantic schemas package
"""

from .common import *
from .event import *
from .attendee import *
from .attendance import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "AttendeeCreate",
    "AttendanceCreate",
    "EnrichedAttendanceRecord",
]
