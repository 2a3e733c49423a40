"""Shared building blocks for the Srenity data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, get_args
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from srenity.errors import Unknown


class SrenityModel(BaseModel):
    """Base model using the camelCase wire names of the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Id(SrenityModel):
    """A bare server-assigned identifier, as returned by create calls."""

    id: UUID


class Identifier(SrenityModel):
    """An identifier of the entity in an external integration."""

    integration: str
    external_id: str


class Relation(SrenityModel):
    """Point-in-time reference to another entity.

    A relation is a snapshot: its name and type are captured when it is
    created and are not refreshed if the referenced entity changes.
    """

    id: UUID
    type: str | None = None
    name: str | None = None

    @classmethod
    def from_id(cls, id: UUID) -> "Relation":
        """Reference an entity whose type and name are unknown."""
        return cls(id=id)

    @classmethod
    def parse(cls, value: str) -> "Relation":
        """Reference an entity by the string form of its id."""
        try:
            return cls(id=UUID(value))
        except ValueError as e:
            raise Unknown("Failed to parse UUID") from e

    @classmethod
    def of(cls, entity: "Entity") -> "Relation":
        """Reference a loaded entity."""
        return entity.to_relation()


class Resource(SrenityModel):
    """Fields shared by every full and creation variant."""

    type: str
    name: str
    identifiers: list[Identifier] | None = None


class Entity(Resource):
    """A stored entity carrying its server-assigned id."""

    id: UUID

    def to_relation(self) -> Relation:
        """Capture id, type tag and name of this entity as a relation."""
        return Relation(id=self.id, type=self.type, name=self.name)


@dataclass(frozen=True)
class Category:
    """One of the entity categories exposed by the API.

    Attributes:
        path: Endpoint path segment, e.g. ``agent``
        kinds: Enum of subtype tags, used as the list filter and relation type
        entity: Discriminated union of the full variants
        new_entity: Discriminated union of the creation variants
        deletable: Whether the API exposes a delete call for this category
    """

    path: str
    kinds: type[Enum]
    entity: Any
    new_entity: Any
    deletable: bool = False

    @property
    def entity_types(self) -> tuple[type[Entity], ...]:
        """Concrete full variant classes of this category."""
        return _union_members(self.entity)

    @property
    def new_entity_types(self) -> tuple[type[Resource], ...]:
        """Concrete creation variant classes of this category."""
        return _union_members(self.new_entity)

    def kind(self, value: str) -> Enum:
        """Look up a subtype tag, raising ValueError for unknown tags."""
        try:
            return self.kinds(value)
        except ValueError as e:
            supported = [k.value for k in self.kinds]
            raise ValueError(f"Unknown {self.path} type: '{value}'. Supported types: {supported}") from e


def _union_members(annotated: Any) -> tuple[Any, ...]:
    union, *_ = get_args(annotated)
    return get_args(union)
