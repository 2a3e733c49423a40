"""Information models: standalone area, capacity and address records."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from srenity.models.base import Category, Entity, Resource


class InformationType(str, Enum):
    ARCHITECTURE_AREA = "architecture_area"
    ARCHITECTURE_CAPACITY = "architecture_capacity"
    POSTAL_ADDRESS = "postal_address"


class _ArchitectureAreaFields(Resource):
    gross_area: float | None = None
    net_area: float | None = None
    rentable_area: float | None = None


class _ArchitectureCapacityFields(Resource):
    max_occupancy: int | None = Field(default=None, ge=0)
    seating_capacity: int | None = Field(default=None, ge=0)


class _PostalAddressFields(Resource):
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    country: str | None = None
    postal_code: str | None = None
    region: str | None = None


class ArchitectureArea(Entity, _ArchitectureAreaFields):
    type: Literal["architecture_area"] = "architecture_area"


class ArchitectureCapacity(Entity, _ArchitectureCapacityFields):
    type: Literal["architecture_capacity"] = "architecture_capacity"


class PostalAddress(Entity, _PostalAddressFields):
    type: Literal["postal_address"] = "postal_address"


class NewArchitectureArea(_ArchitectureAreaFields):
    type: Literal["architecture_area"] = "architecture_area"


class NewArchitectureCapacity(_ArchitectureCapacityFields):
    type: Literal["architecture_capacity"] = "architecture_capacity"


class NewPostalAddress(_PostalAddressFields):
    type: Literal["postal_address"] = "postal_address"


Information = Annotated[ArchitectureArea | ArchitectureCapacity | PostalAddress, Field(discriminator="type")]
NewInformation = Annotated[
    NewArchitectureArea | NewArchitectureCapacity | NewPostalAddress,
    Field(discriminator="type"),
]

INFORMATION = Category(path="information", kinds=InformationType, entity=Information, new_entity=NewInformation)
