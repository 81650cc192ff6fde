"""
Read-side views joining attendance with attendee details
"""

import logging
from typing import Dict, List

from event_roster.core.errors import NotFoundError
from event_roster.models import Attendee, AttendanceStatus, Event
from event_roster.schemas import EnrichedAttendanceRecord
from event_roster.services.repositories import RosterRepository

logger = logging.getLogger(__name__)

class AttendanceViewService:
    """Service for attendance listings of a single event"""

    def __init__(self, repo: RosterRepository):
        self.repo = repo

    def _require_event(self, event_id: int) -> Event:
        event = self.repo.events.get(event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    def list_attendance_for_event(self, event_id: int) -> List[EnrichedAttendanceRecord]:
        """Attendance records of an event with attendee name, email and phone

        A record whose attendee is gone is still returned, with the
        contact fields left empty.
        """
        repo = self.repo
        with repo.locked(repo.events, repo.attendees, repo.attendance):
            self._require_event(event_id)
            attendees: Dict[int, Attendee] = {a.id: a for a in repo.attendees.load()}
            records = [r for r in repo.attendance.load() if r.event_id == event_id]

        enriched = []
        for record in records:
            attendee = attendees.get(record.attendee_id)
            if attendee is None:
                logger.warning(
                    "Attendance record %s references missing attendee %s",
                    record.id, record.attendee_id,
                )
            enriched.append(EnrichedAttendanceRecord.from_record(record, attendee))
        return enriched

    def list_unregistered_attendees(self, event_id: int) -> List[Attendee]:
        """Attendees with no attendance record for the event, in stored order"""
        repo = self.repo
        with repo.locked(repo.events, repo.attendees, repo.attendance):
            self._require_event(event_id)
            registered = {r.attendee_id for r in repo.attendance.load() if r.event_id == event_id}
            return [a for a in repo.attendees.load() if a.id not in registered]

    def attendance_summary(self, event_id: int) -> Dict:
        """Per-status counts for an event plus the unregistered count"""
        repo = self.repo
        with repo.locked(repo.events, repo.attendees, repo.attendance):
            event = self._require_event(event_id)
            records = [r for r in repo.attendance.load() if r.event_id == event_id]
            unregistered = len(self.list_unregistered_attendees(event_id))

        counts = {status.value: 0 for status in AttendanceStatus}
        for record in records:
            counts[record.status.value] += 1

        return {
            "event_id": event.id,
            "event_title": event.title,
            "event_date": event.date.isoformat(),
            "total_records": len(records),
            "present": counts[AttendanceStatus.PRESENT.value],
            "absent": counts[AttendanceStatus.ABSENT.value],
            "unknown": counts[AttendanceStatus.UNKNOWN.value],
            "unregistered": unregistered,
        }
