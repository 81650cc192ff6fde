"""Exception hierarchy for the roster data layer.

Every error carries an ``http_status`` and a stable ``error_code`` so the
HTTP layer can map it without inspecting the message.
"""

from typing import Any, Optional


class RosterError(Exception):
    """Base exception for all roster errors."""

    http_status = 500
    error_code = "roster_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


# --- Caller errors ---
class ValidationError(RosterError):
    """Missing or malformed required input."""

    http_status = 400
    error_code = "validation_error"


class NotFoundError(RosterError):
    """A referenced id does not exist."""

    http_status = 404
    error_code = "not_found"

    def __init__(self, resource: str, record_id: Any):
        super().__init__(f"{resource} not found", details={"id": record_id})
        self.resource = resource
        self.record_id = record_id


class DuplicateEmailError(RosterError):
    """Another attendee already uses this email address."""

    http_status = 400
    error_code = "duplicate_email"

    def __init__(self, email: str):
        super().__init__("Email address already registered", details={"email": email})
        self.email = email


# --- Storage ---
class StorageError(RosterError):
    """Durable storage failure."""

    error_code = "storage_error"

    def __init__(self, message: str, path: Any = None):
        super().__init__(message, details={"path": str(path)} if path is not None else None)
        self.path = path


class StorageIOError(StorageError):
    """Reading or writing a collection file failed."""

    error_code = "storage_io_error"


class StorageCorruptError(StorageError):
    """A collection file exists but cannot be parsed."""

    error_code = "storage_corrupt"
