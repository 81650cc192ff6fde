"""
Event roster data layer: events, attendees and attendance
"""

from event_roster.services.repositories import RosterRepository
from event_roster.services.roster_service import RosterService
from event_roster.services.attendance_view_service import AttendanceViewService

__all__ = ["RosterRepository", "RosterService", "AttendanceViewService"]
