"""Agent models: access groups, organisations and people."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from srenity.models.base import Category, Entity, Relation, Resource, SrenityModel


class AgentType(str, Enum):
    ACCESS_GROUP = "access_group"
    COMPANY = "company"
    DEPARTMENT = "department"
    PERSON = "person"


class _AgentFields(Resource):
    member_of: list[Relation] | None = None


class _OrganizationFields(_AgentFields):
    logo: str | None = None
    has_member: list[Relation] | None = None


class _AccessGroupFields(_OrganizationFields):
    includes_door: list[Relation] | None = None
    includes_zone: list[Relation] | None = None


class _PersonFields(_AgentFields):
    family_name: str | None = None
    given_name: str | None = None
    gender: str | None = None
    image: str | None = None


class AccessGroup(Entity, _AccessGroupFields):
    type: Literal["access_group"] = "access_group"


class Company(Entity, _OrganizationFields):
    type: Literal["company"] = "company"


class Department(Entity, _OrganizationFields):
    type: Literal["department"] = "department"


class Person(Entity, _PersonFields):
    type: Literal["person"] = "person"


class NewAccessGroup(_AccessGroupFields):
    type: Literal["access_group"] = "access_group"


class NewCompany(_OrganizationFields):
    type: Literal["company"] = "company"


class NewDepartment(_OrganizationFields):
    type: Literal["department"] = "department"


class NewPerson(_PersonFields):
    type: Literal["person"] = "person"


Agent = Annotated[AccessGroup | Company | Department | Person, Field(discriminator="type")]
NewAgent = Annotated[NewAccessGroup | NewCompany | NewDepartment | NewPerson, Field(discriminator="type")]


class Key(SrenityModel):
    """An access key registered for a person."""

    type: str
    provider: str
    key: str


AGENT = Category(path="agent", kinds=AgentType, entity=Agent, new_entity=NewAgent, deletable=True)
