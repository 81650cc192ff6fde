"""
Repository container wiring the three collection stores together.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Iterator, Optional

from event_roster.core.config import Settings, settings as default_settings
from event_roster.core.store import CollectionStore
from event_roster.models import AttendanceRecord, Attendee, Event

logger = logging.getLogger(__name__)


class RosterRepository:
    """Owns the events, attendees and attendance stores.

    Created once per process and handed to the services that need it.
    Multi-collection operations must take locks through :meth:`locked`,
    which always acquires them in the order events, attendees,
    attendance.
    """

    def __init__(
        self,
        events: CollectionStore[Event],
        attendees: CollectionStore[Attendee],
        attendance: CollectionStore[AttendanceRecord],
    ) -> None:
        self.events = events
        self.attendees = attendees
        self.attendance = attendance

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "RosterRepository":
        config = config or default_settings
        data_dir = Path(config.DATA_DIR)
        return cls(
            events=CollectionStore(data_dir / config.EVENTS_FILE, Event, config.JSON_INDENT),
            attendees=CollectionStore(data_dir / config.ATTENDEES_FILE, Attendee, config.JSON_INDENT),
            attendance=CollectionStore(data_dir / config.ATTENDANCE_FILE, AttendanceRecord, config.JSON_INDENT),
        )

    @property
    def stores(self) -> tuple:
        return (self.events, self.attendees, self.attendance)

    def open(self) -> "RosterRepository":
        """Create any missing collection files."""
        for store in self.stores:
            store.ensure_exists()
        logger.info("Data files initialized in %s", self.events.path.parent)
        return self

    @contextmanager
    def locked(self, *stores: CollectionStore) -> Iterator[None]:
        """Hold the locks of *stores* in canonical order."""
        with ExitStack() as stack:
            for store in self.stores:
                if any(store is s for s in stores):
                    stack.enter_context(store.lock)
            yield
