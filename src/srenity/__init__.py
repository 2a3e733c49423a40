"""Srenity - typed client for the Srenity building management API."""

from srenity.descriptors import AuthRequest
from srenity.errors import (
    BadRequest,
    ClientDecodeError,
    ClientError,
    Forbidden,
    InternalError,
    NotFound,
    SrenityError,
    Unauthorized,
    Unknown,
)
from srenity.handler import Handler
from srenity.request import Request

__version__ = "0.1.0"

__all__ = [
    "AuthRequest",
    "BadRequest",
    "ClientDecodeError",
    "ClientError",
    "Forbidden",
    "Handler",
    "InternalError",
    "NotFound",
    "Request",
    "SrenityError",
    "Unauthorized",
    "Unknown",
]
