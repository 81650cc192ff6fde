"""
Record models package
"""

from .event import Event
from .attendee import Attendee
from .attendance import AttendanceRecord, AttendanceStatus

__all__ = ["Event", "Attendee", "AttendanceRecord", "AttendanceStatus"]
