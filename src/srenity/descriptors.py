"""Concrete request descriptors for the Srenity API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID

from srenity.models import Auth, Category, Entity, Id, Key, Resource
from srenity.request import Request

AUTH_ENDPOINT = "realms/Core/protocol/openid-connect/token"


@dataclass(frozen=True)
class AuthRequest(Request[Auth]):
    """Client-credentials grant against the auth service."""

    username: str
    password: str = field(repr=False)

    def endpoint(self) -> str:
        return AUTH_ENDPOINT

    def method(self) -> str:
        return "POST"

    def response_type(self) -> Any:
        return Auth

    def form(self) -> dict[str, str]:
        return {"grant_type": "client_credentials"}

    def basic_auth(self) -> tuple[str, str]:
        return (self.username, self.password)

    def body(self) -> None:
        return None


@dataclass(frozen=True)
class ListRequest(Request[list[Any]]):
    """List the entities of one subtype in a category."""

    category: Category
    kind: Enum

    def endpoint(self) -> str:
        return self.category.path

    def method(self) -> str:
        return "GET"

    def response_type(self) -> Any:
        return list[self.category.entity]

    def query(self) -> dict[str, str]:
        return {"type": self.kind.value}


@dataclass(frozen=True)
class CreateRequest(Request[Id]):
    """Create an entity; the server answers with its new id."""

    category: Category
    payload: Resource

    def endpoint(self) -> str:
        return self.category.path

    def method(self) -> str:
        return "POST"

    def response_type(self) -> Any:
        return Id


@dataclass(frozen=True)
class GetRequest(Request[Any]):
    """Get one entity by id."""

    category: Category
    id: UUID

    def endpoint(self) -> str:
        return f"{self.category.path}/{self.id}"

    def method(self) -> str:
        return "GET"

    def response_type(self) -> Any:
        return self.category.entity


@dataclass(frozen=True)
class ReplaceRequest(Request[Any]):
    """Replace a stored entity with the full payload."""

    category: Category
    payload: Entity

    def endpoint(self) -> str:
        return f"{self.category.path}/{self.payload.id}"

    def method(self) -> str:
        return "PUT"

    def response_type(self) -> Any:
        return Any


@dataclass(frozen=True)
class DeleteRequest(Request[Any]):
    """Delete an entity by id."""

    category: Category
    id: UUID

    def endpoint(self) -> str:
        return f"{self.category.path}/{self.id}"

    def method(self) -> str:
        return "DELETE"

    def response_type(self) -> Any:
        return Any


@dataclass(frozen=True)
class PersonKeysRequest(Request[list[Key]]):
    """List the access keys registered for a person."""

    id: UUID

    def endpoint(self) -> str:
        return f"person/{self.id}/keys"

    def method(self) -> str:
        return "GET"

    def response_type(self) -> Any:
        return list[Key]
