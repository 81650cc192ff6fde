"""
Event-related Pydantic schemas
"""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field

class EventCreate(BaseModel):
    """Schema for creating or replacing an event"""
    title: str = Field(min_length=1)
    date: dt.date
    location: Optional[str] = None
    description: Optional[str] = None
