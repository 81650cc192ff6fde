"""
Attendee-related Pydantic schemas
"""

from typing import Optional
from pydantic import BaseModel, Field

class AttendeeCreate(BaseModel):
    """Schema for creating or replacing an attendee"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = None
