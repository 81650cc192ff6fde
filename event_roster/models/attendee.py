"""
Attendee model
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from event_roster.core.ids import utc_now

class Attendee(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)  # unique across attendees, exact match
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
