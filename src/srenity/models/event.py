"""Event models: leases and bookings.

Unlike the other categories, creation payloads reference other entities by
bare ``Id`` objects rather than relations.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import AwareDatetime, Field

from srenity.models.base import Category, Entity, Id, Relation, Resource


class EventType(str, Enum):
    LEASE = "lease"
    BOOKING = "booking"


class Lease(Entity):
    type: Literal["lease"] = "lease"
    start: AwareDatetime
    end: AwareDatetime | None = None
    leasee: list[Relation] | None = None
    leasor: list[Relation] | None = None
    lease_of: list[Relation] | None = None


class Booking(Entity):
    type: Literal["booking"] = "booking"
    start: AwareDatetime
    end: AwareDatetime
    booked_by: Relation | None = None
    lease: Relation | None = None
    room: Relation | None = None


class NewLease(Resource):
    type: Literal["lease"] = "lease"
    start: AwareDatetime
    end: AwareDatetime | None = None
    leasee: list[Id] | None = None
    leasor: list[Id] | None = None
    lease_of: list[Id] | None = None


class NewBooking(Resource):
    type: Literal["booking"] = "booking"
    start: AwareDatetime
    end: AwareDatetime
    booked_by: Id | None = None
    lease: Id
    room: Id | None = None


Event = Annotated[Lease | Booking, Field(discriminator="type")]
NewEvent = Annotated[NewLease | NewBooking, Field(discriminator="type")]

EVENT = Category(path="event", kinds=EventType, entity=Event, new_entity=NewEvent, deletable=True)
