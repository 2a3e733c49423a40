"""Dispatcher for Srenity API calls."""

from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import UUID

import httpx
import structlog
from pydantic_core import PydanticSerializationError

from srenity.descriptors import (
    AuthRequest,
    CreateRequest,
    DeleteRequest,
    GetRequest,
    ListRequest,
    PersonKeysRequest,
    ReplaceRequest,
)
from srenity.errors import classify_transport_error
from srenity.models import (
    AGENT,
    ASSET,
    COLLECTION,
    EVENT,
    INFORMATION,
    SPACE,
    Agent,
    AgentType,
    Asset,
    AssetType,
    Auth,
    Collection,
    CollectionType,
    Event,
    EventType,
    Information,
    InformationType,
    Key,
    NewAgent,
    NewAsset,
    NewCollection,
    NewEvent,
    NewInformation,
    NewSpace,
    Space,
    SpaceType,
)
from srenity.request import BearerAuth, Request, authorize

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True)
class Handler:
    """Build and execute Srenity API calls.

    The handler holds nothing but the two base URLs. The transport client and
    the bearer token are supplied by the caller on every call, so calls are
    independent of each other and may run concurrently.

    Every operation raises one of the classified ``SrenityError`` kinds on
    failure.
    """

    api_url: str
    auth_url: str

    def __post_init__(self) -> None:
        logger.info("Srenity handler initialized", api_url=self.api_url, auth_url=self.auth_url)

    def auth(self, client: httpx.Client, credentials: AuthRequest) -> Auth:
        """Exchange client credentials for a bearer token."""
        logger.debug("Authenticating", method=credentials.method(), endpoint=credentials.endpoint())
        request = self._build(client, credentials, self.auth_url)
        auth = credentials.execute(client, request)
        logger.debug("Authenticated", username=credentials.username)
        return auth

    def agents(self, client: httpx.Client, token: str, agent_type: AgentType) -> list[Agent]:
        """Get all agents of the given type."""
        return self.send(client, ListRequest(AGENT, agent_type), token)

    def create_agent(self, client: httpx.Client, token: str, payload: NewAgent) -> UUID:
        """Create an agent and return its id."""
        return self.send(client, CreateRequest(AGENT, payload), token).id

    def agent(self, client: httpx.Client, token: str, id: UUID) -> Agent:
        """Get the agent with the given id."""
        return self.send(client, GetRequest(AGENT, id), token)

    def replace_agent(self, client: httpx.Client, token: str, payload: Agent) -> None:
        """Replace an agent."""
        self.send_opt(client, ReplaceRequest(AGENT, payload), token)

    def delete_agent(self, client: httpx.Client, token: str, id: UUID) -> None:
        """Delete an agent."""
        self.send_opt(client, DeleteRequest(AGENT, id), token)

    def person_keys(self, client: httpx.Client, token: str, id: UUID) -> list[Key]:
        """Get the keys registered for a person."""
        return self.send(client, PersonKeysRequest(id), token)

    def events(self, client: httpx.Client, token: str, event_type: EventType) -> list[Event]:
        """Get all events of the given type."""
        return self.send(client, ListRequest(EVENT, event_type), token)

    def create_event(self, client: httpx.Client, token: str, payload: NewEvent) -> UUID:
        """Create an event and return its id."""
        return self.send(client, CreateRequest(EVENT, payload), token).id

    def event(self, client: httpx.Client, token: str, id: UUID) -> Event:
        """Get the event with the given id."""
        return self.send(client, GetRequest(EVENT, id), token)

    def replace_event(self, client: httpx.Client, token: str, payload: Event) -> None:
        """Replace an event."""
        self.send_opt(client, ReplaceRequest(EVENT, payload), token)

    def delete_event(self, client: httpx.Client, token: str, id: UUID) -> None:
        """Delete an event."""
        self.send_opt(client, DeleteRequest(EVENT, id), token)

    def spaces(self, client: httpx.Client, token: str, space_type: SpaceType) -> list[Space]:
        """Get all spaces of the given type."""
        return self.send(client, ListRequest(SPACE, space_type), token)

    def create_space(self, client: httpx.Client, token: str, payload: NewSpace) -> UUID:
        """Create a space and return its id."""
        return self.send(client, CreateRequest(SPACE, payload), token).id

    def space(self, client: httpx.Client, token: str, id: UUID) -> Space:
        """Get the space with the given id."""
        return self.send(client, GetRequest(SPACE, id), token)

    def replace_space(self, client: httpx.Client, token: str, payload: Space) -> None:
        """Replace a space."""
        self.send_opt(client, ReplaceRequest(SPACE, payload), token)

    def assets(self, client: httpx.Client, token: str, asset_type: AssetType) -> list[Asset]:
        """Get all assets of the given type."""
        return self.send(client, ListRequest(ASSET, asset_type), token)

    def create_asset(self, client: httpx.Client, token: str, payload: NewAsset) -> UUID:
        """Create an asset and return its id."""
        return self.send(client, CreateRequest(ASSET, payload), token).id

    def asset(self, client: httpx.Client, token: str, id: UUID) -> Asset:
        """Get the asset with the given id."""
        return self.send(client, GetRequest(ASSET, id), token)

    def replace_asset(self, client: httpx.Client, token: str, payload: Asset) -> None:
        """Replace an asset."""
        self.send_opt(client, ReplaceRequest(ASSET, payload), token)

    def collections(self, client: httpx.Client, token: str, collection_type: CollectionType) -> list[Collection]:
        """Get all collections of the given type."""
        return self.send(client, ListRequest(COLLECTION, collection_type), token)

    def create_collection(self, client: httpx.Client, token: str, payload: NewCollection) -> UUID:
        """Create a collection and return its id."""
        return self.send(client, CreateRequest(COLLECTION, payload), token).id

    def collection(self, client: httpx.Client, token: str, id: UUID) -> Collection:
        """Get the collection with the given id."""
        return self.send(client, GetRequest(COLLECTION, id), token)

    def replace_collection(self, client: httpx.Client, token: str, payload: Collection) -> None:
        """Replace a collection."""
        self.send_opt(client, ReplaceRequest(COLLECTION, payload), token)

    def all_information(
        self, client: httpx.Client, token: str, information_type: InformationType
    ) -> list[Information]:
        """Get all information of the given type."""
        return self.send(client, ListRequest(INFORMATION, information_type), token)

    def create_information(self, client: httpx.Client, token: str, payload: NewInformation) -> UUID:
        """Create information and return its id."""
        return self.send(client, CreateRequest(INFORMATION, payload), token).id

    def information(self, client: httpx.Client, token: str, id: UUID) -> Information:
        """Get the information with the given id."""
        return self.send(client, GetRequest(INFORMATION, id), token)

    def replace_information(self, client: httpx.Client, token: str, payload: Information) -> None:
        """Replace information."""
        self.send_opt(client, ReplaceRequest(INFORMATION, payload), token)

    def send(self, client: httpx.Client, payload: Request[T], token: str) -> T:
        """Send a request to the API and decode the response into ``T``."""
        self._log_request(payload)
        request = authorize(self._build(client, payload, self.api_url), BearerAuth(token))
        response = payload.execute(client, request)
        self._log_response(payload, response)
        return response

    def send_opt(self, client: httpx.Client, payload: Request[T], token: str) -> T | None:
        """Send a request to the API, allowing an empty response body."""
        self._log_request(payload)
        request = authorize(self._build(client, payload, self.api_url), BearerAuth(token))
        response = payload.execute_opt(client, request)
        self._log_response(payload, response)
        return response

    def _build(self, client: httpx.Client, payload: Request[Any], base_url: str) -> httpx.Request:
        try:
            return payload.build(client, base_url)
        except (httpx.InvalidURL, httpx.HTTPError, PydanticSerializationError, TypeError, ValueError) as e:
            raise classify_transport_error(e) from e

    def _log_request(self, payload: Request[Any]) -> None:
        logger.debug("Sending request", method=payload.method(), endpoint=payload.endpoint(), body=payload.body())

    def _log_response(self, payload: Request[Any], response: Any) -> None:
        logger.debug("Received response", method=payload.method(), endpoint=payload.endpoint(), response=response)
