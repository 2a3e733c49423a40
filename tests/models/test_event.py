"""Tests for event models."""

from datetime import datetime, timezone
from uuid import UUID

import pytest
from pydantic import TypeAdapter, ValidationError

from srenity.models import Booking, Event, Id, NewBooking, NewLease

BOOKING_ID = UUID("2d2e0f3a-8b9c-4dae-9f2a-3b4c5d6e7f80")
LEASE_ID = UUID("3e3f1a4b-9cad-4ebf-8a3b-4c5d6e7f8091")


def test_booking_decodes_relations() -> None:
    """Test a booking with a single-relation lease and room."""
    booking = TypeAdapter(Event).validate_python(
        {
            "id": str(BOOKING_ID),
            "type": "booking",
            "name": "Standup",
            "start": "2024-05-01T09:00:00+00:00",
            "end": "2024-05-01T09:15:00+00:00",
            "lease": {"id": str(LEASE_ID), "type": "lease"},
        }
    )

    assert isinstance(booking, Booking)
    assert booking.lease is not None
    assert booking.lease.id == LEASE_ID
    assert booking.room is None
    assert booking.end - booking.start == datetime(2024, 1, 1, 0, 15) - datetime(2024, 1, 1)


@pytest.mark.parametrize("tag", ["lease", "booking"])
def test_naive_start_is_rejected(tag: str) -> None:
    """Test that timestamps without an offset are rejected."""
    data = {
        "id": str(BOOKING_ID),
        "type": tag,
        "name": "Naive",
        "start": "2024-01-01T00:00:00",
        "end": "2024-01-01T01:00:00+00:00",
    }

    with pytest.raises(ValidationError):
        TypeAdapter(Event).validate_python(data)


def test_new_lease_rejects_naive_start() -> None:
    """Test that creation payloads require aware timestamps too."""
    with pytest.raises(ValidationError):
        NewLease(name="Office lease", start=datetime(2024, 1, 1))


def test_aware_start_keeps_offset() -> None:
    """Test that an aware start is re-sent with its offset."""
    lease = TypeAdapter(Event).validate_python(
        {"id": str(LEASE_ID), "type": "lease", "name": "Office lease", "start": "2024-01-01T00:00:00+02:00"}
    )

    assert lease.to_json()["start"] == "2024-01-01T00:00:00+02:00"


def test_new_booking_requires_lease() -> None:
    """Test that a booking cannot be created without its lease."""
    with pytest.raises(ValidationError):
        NewBooking(name="Standup", start="2024-05-01T09:00:00Z", end="2024-05-01T09:15:00Z")


def test_new_lease_references_by_id() -> None:
    """Test that creation payloads reference other entities by bare id."""
    lease = NewLease(
        name="Office lease",
        start=datetime(2024, 1, 1, tzinfo=timezone.utc),
        leasee=[Id(id=BOOKING_ID)],
        lease_of=[Id(id=LEASE_ID)],
    )

    assert lease.to_json() == {
        "type": "lease",
        "name": "Office lease",
        "start": "2024-01-01T00:00:00Z",
        "leasee": [{"id": str(BOOKING_ID)}],
        "leaseOf": [{"id": str(LEASE_ID)}],
    }
