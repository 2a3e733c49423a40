"""Space models: zones, buildings, levels, rooms and entrances."""

from enum import Enum
from typing import Annotated, Literal
from uuid import UUID

from pydantic import Field

from srenity.models.base import Category, Entity, Identifier, Relation, Resource, SrenityModel


class SpaceType(str, Enum):
    ACCESS_CONTROL_ZONE = "access_control_zone"
    BUILDING = "building"
    LEVEL = "level"
    ROOM = "room"
    ENTRANCE = "entrance"


class Area(SrenityModel):
    """Architectural area measures embedded in a space."""

    id: UUID
    type: str
    name: str
    identifiers: list[Identifier] | None = None
    gross_area: float | None = None
    net_area: float | None = None
    rentable_area: float | None = None


class Capacity(SrenityModel):
    """Occupancy measures embedded in a space."""

    id: UUID
    type: str
    name: str
    identifiers: list[Identifier] | None = None
    max_occupancy: float | None = None
    seating_capacity: float | None = None


class _SpaceFields(Resource):
    has_part: list[Relation] | None = None
    is_part_of: list[Relation] | None = None
    is_location_of: list[Relation] | None = None
    area: Area | None = None
    capacity: Capacity | None = None
    address: list[Relation] | None = None
    included_in: list[Relation] | None = None
    has_point: list[Relation] | None = None


class _LevelFields(_SpaceFields):
    level_number: int | None = Field(default=None, ge=0)


class _BookableFields(_SpaceFields):
    bookable: bool | None = None


class AccessControlZone(Entity, _SpaceFields):
    type: Literal["access_control_zone"] = "access_control_zone"


class Building(Entity, _SpaceFields):
    type: Literal["building"] = "building"


class Level(Entity, _LevelFields):
    type: Literal["level"] = "level"


class Room(Entity, _BookableFields):
    type: Literal["room"] = "room"


class Entrance(Entity, _BookableFields):
    type: Literal["entrance"] = "entrance"


class NewAccessControlZone(_SpaceFields):
    type: Literal["access_control_zone"] = "access_control_zone"


class NewBuilding(_SpaceFields):
    type: Literal["building"] = "building"


class NewLevel(_LevelFields):
    type: Literal["level"] = "level"


class NewRoom(_BookableFields):
    type: Literal["room"] = "room"


class NewEntrance(_BookableFields):
    type: Literal["entrance"] = "entrance"


Space = Annotated[AccessControlZone | Building | Level | Room | Entrance, Field(discriminator="type")]
NewSpace = Annotated[
    NewAccessControlZone | NewBuilding | NewLevel | NewRoom | NewEntrance,
    Field(discriminator="type"),
]

SPACE = Category(path="space", kinds=SpaceType, entity=Space, new_entity=NewSpace)
