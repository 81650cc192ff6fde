"""
Configuration settings for the data layer
"""

import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Storage
    DATA_DIR: str = os.getenv("DATA_DIR", "./data")
    EVENTS_FILE: str = "events.json"
    ATTENDEES_FILE: str = "attendees.json"
    ATTENDANCE_FILE: str = "attendance.json"
    JSON_INDENT: int = 2

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"

settings = Settings()
