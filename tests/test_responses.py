"""
Tests for the error and success envelopes handed to the HTTP layer
"""

import json
from datetime import date

import pytest

from event_roster.core.errors import (
    DuplicateEmailError,
    NotFoundError,
    StorageCorruptError,
    StorageIOError,
    ValidationError,
)
from event_roster.models import Event
from event_roster.utils.responses import error_response, success_response

def body(response):
    return json.loads(response.body)

@pytest.mark.parametrize("exc, status_code, error_code", [
    (ValidationError("Title and date are required"), 400, "validation_error"),
    (NotFoundError("Event", 3), 404, "not_found"),
    (DuplicateEmailError("bo@x.com"), 400, "duplicate_email"),
    (StorageIOError("Cannot write collection 'events'", "/data/events.json"), 500, "storage_io_error"),
    (StorageCorruptError("Collection 'events' is corrupt", "/data/events.json"), 500, "storage_corrupt"),
])
def test_error_status_mapping(exc, status_code, error_code):
    response = error_response(exc)

    assert response.status_code == status_code
    payload = body(response)
    assert payload["success"] is False
    assert payload["error_code"] == error_code
    assert payload["message"] == exc.message

def test_not_found_details():
    payload = body(error_response(NotFoundError("Attendee", 12)))
    assert payload["message"] == "Attendee not found"
    assert payload["details"] == {"id": 12}

def test_storage_error_details_carry_path():
    payload = body(error_response(StorageCorruptError("corrupt", "/data/attendance.json")))
    assert payload["details"] == {"path": "/data/attendance.json"}

def test_success_response_serializes_records():
    event = Event(id=1, title="Kickoff", date=date(2024, 1, 10))

    response = success_response("Event created successfully", data=event, status_code=201)

    assert response.status_code == 201
    payload = body(response)
    assert payload["success"] is True
    assert payload["data"]["date"] == "2024-01-10"
    assert payload["data"]["title"] == "Kickoff"

def test_envelopes_exported_from_utils_package():
    import event_roster.utils as utils

    assert utils.error_response is error_response
    assert utils.success_response is success_response
