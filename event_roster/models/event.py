"""
Event model
"""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field

from event_roster.core.ids import utc_now

class Event(BaseModel):
    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    date: dt.date
    location: Optional[str] = None
    description: Optional[str] = None
    created_at: dt.datetime = Field(default_factory=utc_now)
