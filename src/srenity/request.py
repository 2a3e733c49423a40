"""Request descriptor contract shared by every API call.

A descriptor describes one call as data (path, method, query, form, body and
expected response shape). Building a descriptor into an ``httpx.Request`` is
pure; only ``execute`` and ``execute_opt`` perform I/O.
"""

from abc import ABC, abstractmethod
from collections.abc import Generator
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from srenity.errors import classify_decode_error, classify_response, classify_transport_error

T = TypeVar("T")


class BearerAuth(httpx.Auth):
    """Attach a caller-supplied bearer token."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def authorize(request: httpx.Request, auth: httpx.Auth) -> httpx.Request:
    """Apply a single-step auth flow to an unsent request."""
    return next(auth.sync_auth_flow(request))


def encode(value: Any) -> Any:
    """Encode models to JSON-ready data, omitting fields that are None."""
    return to_jsonable_python(value, by_alias=True, exclude_none=True)


def join_url(base_url: str, endpoint: str) -> str:
    """Join an endpoint path onto a base URL."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


class Request(ABC, Generic[T]):
    """Description of one API call whose response decodes into ``T``."""

    payload: Any = None

    @abstractmethod
    def endpoint(self) -> str:
        """Path relative to the base URL, e.g. ``agent/<id>``."""

    @abstractmethod
    def method(self) -> str:
        """HTTP method."""

    @abstractmethod
    def response_type(self) -> Any:
        """Type the response body decodes into."""

    def query(self) -> dict[str, str] | None:
        return None

    def form(self) -> dict[str, str] | None:
        return None

    def basic_auth(self) -> tuple[str, str] | None:
        return None

    def body(self) -> Any | None:
        """JSON body of the call. Descriptors without a payload send none."""
        return self.payload

    def build(self, client: httpx.Client, base_url: str) -> httpx.Request:
        """Build the unsent request against ``base_url``.

        Args:
            client: Transport client used to build and later send the request
            base_url: Base URL the endpoint is joined onto

        Returns:
            Request with query, form, JSON body and basic auth attached
        """
        body = self.body()
        request = client.build_request(
            self.method(),
            join_url(base_url, self.endpoint()),
            params=self.query(),
            data=self.form(),
            json=encode(body) if body is not None else None,
        )

        credentials = self.basic_auth()
        if credentials is not None:
            request = authorize(request, httpx.BasicAuth(*credentials))
        return request

    def execute(self, client: httpx.Client, request: httpx.Request) -> T:
        """Send the request and decode the required response body."""
        response = self._send(client, request)
        return self.decode(response.content)

    def execute_opt(self, client: httpx.Client, request: httpx.Request) -> T | None:
        """Send the request, treating an empty response body as ``None``."""
        response = self._send(client, request)
        if not response.content.strip():
            return None
        return self.decode(response.content)

    def decode(self, content: bytes) -> T:
        """Decode a successful response body into the expected type."""
        try:
            return TypeAdapter(self.response_type()).validate_json(content)
        except ValidationError as e:
            raise classify_decode_error(e) from e

    def _send(self, client: httpx.Client, request: httpx.Request) -> httpx.Response:
        try:
            response = client.send(request)
        except httpx.HTTPError as e:
            raise classify_transport_error(e) from e

        if not response.is_success:
            raise classify_response(response.status_code, response.content)
        return response
