"""CLI for the srenity client."""

import json
import sys
from pathlib import Path
from typing import Annotated, Any, Literal
from uuid import UUID

import httpx
import structlog
from cyclopts import App, Parameter
from pydantic import TypeAdapter

from srenity.config import API_URL, AUTH_URL, CLIENT_ID, CLIENT_SECRET, get_config
from srenity.config_commands import config_app
from srenity.descriptors import (
    AuthRequest,
    CreateRequest,
    DeleteRequest,
    GetRequest,
    ListRequest,
    PersonKeysRequest,
    ReplaceRequest,
)
from srenity.errors import SrenityError
from srenity.handler import Handler
from srenity.models import CATEGORIES, Category
from srenity.request import encode

logger = structlog.get_logger()

app = App(
    help="Srenity - client for the Srenity building management API",
)

app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def get_handler() -> Handler:
    """Get a handler for the configured base URLs."""
    config = get_config()
    return Handler(api_url=config.require(API_URL), auth_url=config.require(AUTH_URL))


def get_credentials() -> AuthRequest:
    """Get the configured client credentials."""
    config = get_config()
    return AuthRequest(username=config.require(CLIENT_ID), password=config.require(CLIENT_SECRET))


def get_category(name: str) -> Category:
    """Look up a category by its endpoint name."""
    category = CATEGORIES.get(name.lower())
    if category is None:
        raise ValueError(f"Unknown category: '{name}'. Supported categories: {[*CATEGORIES]}")
    return category


def _token(handler: Handler, client: httpx.Client) -> str:
    return handler.auth(client, get_credentials()).access_token


def _print_json(value: Any) -> None:
    print(json.dumps(encode(value), indent=2))


@app.command
def token() -> None:
    """Authenticate and print a bearer token."""
    handler = get_handler()
    with httpx.Client() as client:
        print(_token(handler, client))


@app.command(name="list")
def list_entities(category: str, kind: str) -> None:
    """List the entities of one type in a category."""
    cat = get_category(category)
    descriptor = ListRequest(cat, cat.kind(kind))
    handler = get_handler()

    with httpx.Client() as client:
        entities = handler.send(client, descriptor, _token(handler, client))

    logger.info("Listed entities", category=cat.path, kind=kind, count=len(entities))
    _print_json(entities)


@app.command
def get(category: str, entity_id: str) -> None:
    """Get an entity by ID."""
    descriptor = GetRequest(get_category(category), UUID(entity_id))
    handler = get_handler()

    with httpx.Client() as client:
        entity = handler.send(client, descriptor, _token(handler, client))
    _print_json(entity)


@app.command
def create(category: str, file: Path) -> None:
    """Create an entity from a JSON file (without id)."""
    cat = get_category(category)
    payload = TypeAdapter(cat.new_entity).validate_json(file.read_text())
    handler = get_handler()

    with httpx.Client() as client:
        created = handler.send(client, CreateRequest(cat, payload), _token(handler, client))
    print(f"Created {cat.path} {created.id}")


@app.command
def replace(category: str, file: Path) -> None:
    """Replace an entity with the full contents of a JSON file."""
    cat = get_category(category)
    payload = TypeAdapter(cat.entity).validate_json(file.read_text())
    handler = get_handler()

    with httpx.Client() as client:
        handler.send_opt(client, ReplaceRequest(cat, payload), _token(handler, client))
    print(f"Replaced {cat.path} {payload.id}")


@app.command
def delete(category: str, *entity_ids: str) -> None:
    """Delete one or more agents or events."""
    cat = get_category(category)
    if not cat.deletable:
        deletable = [c.path for c in CATEGORIES.values() if c.deletable]
        raise ValueError(f"Cannot delete {cat.path}. Deletable categories: {deletable}")
    ids = [UUID(entity_id) for entity_id in entity_ids]
    handler = get_handler()

    with httpx.Client() as client:
        bearer = _token(handler, client)
        for entity_id in ids:
            handler.send_opt(client, DeleteRequest(cat, entity_id), bearer)
    print(f"Deleted {len(ids)} {cat.path}(s)")


@app.command
def keys(person_id: str) -> None:
    """List the keys registered for a person."""
    descriptor = PersonKeysRequest(UUID(person_id))
    handler = get_handler()

    with httpx.Client() as client:
        person_keys = handler.send(client, descriptor, _token(handler, client))
    _print_json(person_keys)


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    try:
        app(tokens)
    except (SrenityError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    app.meta()
