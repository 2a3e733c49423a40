"""Tests for the request descriptor contract."""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx
import pytest

from srenity.errors import ClientDecodeError, ClientError, NotFound, Unknown
from srenity.models import Id
from srenity.request import BearerAuth, Request, authorize, encode, join_url

ClientFactory = Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]


@dataclass(frozen=True)
class Widget(Request[Id]):
    """Minimal descriptor posting its payload."""

    payload: dict[str, Any] | None = None

    def endpoint(self) -> str:
        return "widget/7"

    def method(self) -> str:
        return "POST"

    def response_type(self) -> Any:
        return Id


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError("building must not send anything")


def test_join_url() -> None:
    """Test joining endpoints onto base URLs with and without slashes."""
    assert join_url("https://api.test/v1", "agent") == "https://api.test/v1/agent"
    assert join_url("https://api.test/v1/", "/agent/1") == "https://api.test/v1/agent/1"


def test_build_is_pure(make_client: ClientFactory, sent: list[httpx.Request]) -> None:
    """Test that building a request performs no I/O."""
    client = make_client(_unreachable)

    request = Widget(payload={"name": "w"}).build(client, "https://api.test/v1")

    assert sent == []
    assert request.method == "POST"
    assert str(request.url) == "https://api.test/v1/widget/7"
    assert json.loads(request.content) == {"name": "w"}
    assert "authorization" not in request.headers


def test_build_without_payload_sends_no_body(make_client: ClientFactory) -> None:
    """Test that a descriptor without payload builds an empty request."""
    request = Widget().build(make_client(_unreachable), "https://api.test")

    assert request.content == b""
    assert "content-type" not in request.headers


def test_bearer_auth_is_attached(make_client: ClientFactory) -> None:
    """Test attaching a bearer token to a built request."""
    request = Widget().build(make_client(_unreachable), "https://api.test")

    request = authorize(request, BearerAuth("tok-123"))

    assert request.headers["Authorization"] == "Bearer tok-123"


def test_encode_omits_none() -> None:
    """Test that encoding drops None values instead of emitting null."""
    assert encode({"a": None, "b": 1}) == {"b": 1}


def test_execute_decodes_body(make_client: ClientFactory) -> None:
    """Test that a successful response is decoded into the expected type."""
    id = "5b1f7a4e-58a4-4c1e-9d7d-0c3c5b0a9e11"
    client = make_client(lambda request: httpx.Response(201, json={"id": id}))
    descriptor = Widget(payload={"name": "w"})

    result = descriptor.execute(client, descriptor.build(client, "https://api.test"))

    assert str(result.id) == id


def test_execute_requires_body(make_client: ClientFactory) -> None:
    """Test that a missing body is a decode error in required mode."""
    client = make_client(lambda request: httpx.Response(200))
    descriptor = Widget()

    with pytest.raises(ClientDecodeError):
        descriptor.execute(client, descriptor.build(client, "https://api.test"))


def test_execute_rejects_malformed_body(make_client: ClientFactory) -> None:
    """Test that a body of the wrong shape is a decode error."""
    client = make_client(lambda request: httpx.Response(200, json={"identifier": "x"}))
    descriptor = Widget()

    with pytest.raises(ClientDecodeError):
        descriptor.execute(client, descriptor.build(client, "https://api.test"))


def test_execute_opt_allows_empty_body(make_client: ClientFactory) -> None:
    """Test that an empty body is a legitimate None in optional mode."""
    client = make_client(lambda request: httpx.Response(204))
    descriptor = Widget()

    assert descriptor.execute_opt(client, descriptor.build(client, "https://api.test")) is None


def test_execute_opt_decodes_present_body(make_client: ClientFactory) -> None:
    """Test that optional mode still decodes a present body."""
    id = "5b1f7a4e-58a4-4c1e-9d7d-0c3c5b0a9e11"
    client = make_client(lambda request: httpx.Response(200, json={"id": id}))
    descriptor = Widget()

    result = descriptor.execute_opt(client, descriptor.build(client, "https://api.test"))

    assert result is not None
    assert str(result.id) == id


def test_execute_classifies_error_status(make_client: ClientFactory) -> None:
    """Test that non-2xx responses raise the classified error."""
    client = make_client(lambda request: httpx.Response(404, json={"message": "no such widget"}))
    descriptor = Widget()

    with pytest.raises(NotFound, match="no such widget"):
        descriptor.execute_opt(client, descriptor.build(client, "https://api.test"))


def test_execute_classifies_error_without_body(make_client: ClientFactory) -> None:
    """Test that a bodiless error status is Unknown."""
    client = make_client(lambda request: httpx.Response(503))
    descriptor = Widget()

    with pytest.raises(Unknown) as exc_info:
        descriptor.execute(client, descriptor.build(client, "https://api.test"))

    assert exc_info.value.message == "No body for status: 503"


def test_execute_classifies_transport_failure(make_client: ClientFactory) -> None:
    """Test that connection failures surface as ClientError."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(refuse)
    descriptor = Widget()

    with pytest.raises(ClientError, match="connection refused"):
        descriptor.execute(client, descriptor.build(client, "https://api.test"))
