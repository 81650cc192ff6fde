"""
Event Roster - data layer entry point
Initializes the data files and wires the services for a process
"""

import logging
from typing import Optional, Tuple

from event_roster.core.config import Settings, settings
from event_roster.core.logging_config import configure_logging
from event_roster.services.repositories import RosterRepository
from event_roster.services.roster_service import RosterService
from event_roster.services.attendance_view_service import AttendanceViewService

logger = logging.getLogger(__name__)

def create_services(config: Optional[Settings] = None) -> Tuple[RosterService, AttendanceViewService]:
    """Open the repository once and build the services sharing it"""
    repo = RosterRepository.from_settings(config or settings).open()
    return RosterService(repo), AttendanceViewService(repo)

def main() -> None:
    configure_logging()
    roster, _ = create_services()
    logger.info(
        "Roster ready: %d events, %d attendees",
        len(roster.list_events()),
        len(roster.list_attendees()),
    )

if __name__ == "__main__":
    main()
