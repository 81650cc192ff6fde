"""
Roster service: events, attendees and attendance with cross-collection integrity
"""

import logging
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from event_roster.core.errors import DuplicateEmailError, NotFoundError, ValidationError
from event_roster.core.ids import next_id, utc_now
from event_roster.models import Attendee, AttendanceRecord, Event
from event_roster.schemas import AttendanceCreate, AttendeeCreate, EnrichedAttendanceRecord, EventCreate
from event_roster.services.repositories import RosterRepository

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

def validate_input(schema: Type[SchemaT], message: str, **fields: Any) -> SchemaT:
    """Validate caller input, raising the domain ValidationError on failure"""
    try:
        return schema(**fields)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError(message, details=errors) from exc

class RosterService:
    """Service enforcing integrity rules across the three collections

    Every operation loads what it needs, validates, mutates and persists
    before returning. Cascading deletes write the attendance collection
    first so an interrupted cascade never leaves orphaned attendance.
    """

    def __init__(self, repo: RosterRepository):
        self.repo = repo

    # -------- Events --------

    def list_events(self) -> List[Event]:
        return self.repo.events.list()

    def get_event(self, event_id: int) -> Event:
        event = self.repo.events.get(event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    def create_event(
        self,
        title: str,
        date: Any,
        location: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Event:
        """Create an event with a fresh id and creation time"""
        data = validate_input(
            EventCreate, "Title and date are required",
            title=title, date=date, location=location, description=description,
        )
        event = self.repo.events.insert(**data.model_dump(), created_at=utc_now())
        logger.info("Event created: id=%s title=%s date=%s", event.id, event.title, event.date)
        return event

    def update_event(
        self,
        event_id: int,
        title: str,
        date: Any,
        location: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Event:
        """Replace an event's editable fields; id and created_at are kept"""
        data = validate_input(
            EventCreate, "Title and date are required",
            title=title, date=date, location=location, description=description,
        )
        event = self.repo.events.update(event_id, **data.model_dump())
        if event is None:
            raise NotFoundError("Event", event_id)
        logger.info("Event updated: id=%s", event_id)
        return event

    def delete_event(self, event_id: int) -> None:
        """Delete an event and every attendance record for it"""
        events, attendance = self.repo.events, self.repo.attendance
        with self.repo.locked(events, attendance):
            if not events.exists(event_id):
                raise NotFoundError("Event", event_id)
            removed = attendance.delete_where(lambda r: r.event_id == event_id)
            events.delete(event_id)
        logger.info("Event deleted: id=%s attendance_removed=%d", event_id, removed)

    # -------- Attendees --------

    def list_attendees(self) -> List[Attendee]:
        return self.repo.attendees.list()

    def get_attendee(self, attendee_id: int) -> Attendee:
        attendee = self.repo.attendees.get(attendee_id)
        if attendee is None:
            raise NotFoundError("Attendee", attendee_id)
        return attendee

    def create_attendee(self, name: str, email: str, phone: Optional[str] = None) -> Attendee:
        """Create an attendee; the email must not be registered yet"""
        data = validate_input(
            AttendeeCreate, "Name and email are required",
            name=name, email=email, phone=phone,
        )
        attendees = self.repo.attendees
        with attendees.lock:
            if attendees.find(lambda a: a.email == data.email) is not None:
                raise DuplicateEmailError(data.email)
            attendee = attendees.insert(**data.model_dump(), created_at=utc_now())
        logger.info("Attendee created: id=%s", attendee.id)
        return attendee

    def update_attendee(
        self,
        attendee_id: int,
        name: str,
        email: str,
        phone: Optional[str] = None,
    ) -> Attendee:
        """Replace an attendee's fields; the email may only clash with itself"""
        data = validate_input(
            AttendeeCreate, "Name and email are required",
            name=name, email=email, phone=phone,
        )
        attendees = self.repo.attendees
        with attendees.lock:
            records = attendees.load()
            if not any(a.id == attendee_id for a in records):
                raise NotFoundError("Attendee", attendee_id)
            if any(a.email == data.email and a.id != attendee_id for a in records):
                raise DuplicateEmailError(data.email)
            attendee = attendees.update(attendee_id, **data.model_dump())
        logger.info("Attendee updated: id=%s", attendee_id)
        return attendee

    def delete_attendee(self, attendee_id: int) -> None:
        """Delete an attendee and every attendance record for them"""
        attendees, attendance = self.repo.attendees, self.repo.attendance
        with self.repo.locked(attendees, attendance):
            if not attendees.exists(attendee_id):
                raise NotFoundError("Attendee", attendee_id)
            removed = attendance.delete_where(lambda r: r.attendee_id == attendee_id)
            attendees.delete(attendee_id)
        logger.info("Attendee deleted: id=%s attendance_removed=%d", attendee_id, removed)

    # -------- Attendance --------

    def record_attendance(self, event_id: int, attendee_id: int, status: Any) -> EnrichedAttendanceRecord:
        """Insert or update the attendance record for an (event, attendee) pair

        An existing record for the pair keeps its id and gets the new
        status and a fresh timestamp. The returned record carries the
        attendee's current name, email and phone.
        """
        data = validate_input(
            AttendanceCreate, "Event ID, attendee ID, and status are required",
            event_id=event_id, attendee_id=attendee_id, status=status,
        )
        repo = self.repo
        with repo.locked(repo.events, repo.attendees, repo.attendance):
            if not repo.events.exists(data.event_id):
                raise NotFoundError("Event", data.event_id)
            attendee = repo.attendees.get(data.attendee_id)
            if attendee is None:
                raise NotFoundError("Attendee", data.attendee_id)

            records = repo.attendance.load()
            now = utc_now()
            for index, existing in enumerate(records):
                if existing.event_id == data.event_id and existing.attendee_id == data.attendee_id:
                    record = existing.model_copy(update={"status": data.status, "timestamp": now})
                    records[index] = record
                    action = "updated"
                    break
            else:
                record = AttendanceRecord(
                    id=next_id(records),
                    event_id=data.event_id,
                    attendee_id=data.attendee_id,
                    status=data.status,
                    timestamp=now,
                )
                records.append(record)
                action = "created"
            repo.attendance.save(records)

        logger.info(
            "Attendance %s: id=%s event_id=%s attendee_id=%s status=%s",
            action, record.id, record.event_id, record.attendee_id, record.status.value,
        )
        return EnrichedAttendanceRecord.from_record(record, attendee)

    def delete_attendance_record(self, record_id: int) -> None:
        if self.repo.attendance.delete(record_id) is None:
            raise NotFoundError("Attendance record", record_id)
        logger.info("Attendance record deleted: id=%s", record_id)
