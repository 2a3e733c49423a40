"""Collection models: groupings of spaces such as apartments and premises."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from srenity.models.base import Category, Entity, Relation, Resource


class CollectionType(str, Enum):
    APARTMENT = "apartment"
    PREMISES = "premises"
    REAL_ESTATE = "real_estate"


class _CollectionFields(Resource):
    includes: list[Relation] | None = None


class Apartment(Entity, _CollectionFields):
    type: Literal["apartment"] = "apartment"


class Premises(Entity, _CollectionFields):
    type: Literal["premises"] = "premises"


class RealEstate(Entity, _CollectionFields):
    type: Literal["real_estate"] = "real_estate"


class NewApartment(_CollectionFields):
    type: Literal["apartment"] = "apartment"


class NewPremises(_CollectionFields):
    type: Literal["premises"] = "premises"


class NewRealEstate(_CollectionFields):
    type: Literal["real_estate"] = "real_estate"


Collection = Annotated[Apartment | Premises | RealEstate, Field(discriminator="type")]
NewCollection = Annotated[NewApartment | NewPremises | NewRealEstate, Field(discriminator="type")]

COLLECTION = Category(path="collection", kinds=CollectionType, entity=Collection, new_entity=NewCollection)
