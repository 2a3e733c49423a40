"""Authentication models."""

from pydantic import AliasChoices, Field

from srenity.models.base import SrenityModel


class Auth(SrenityModel):
    """Bearer token issued by the auth service."""

    access_token: str = Field(validation_alias=AliasChoices("accessToken", "access_token"))
