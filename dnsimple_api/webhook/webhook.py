"""Reading and parsing the events delivered by webhook."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .events import event_data_for


@dataclass
class Actor:
    """The entity that triggered an event: a user, support or the system."""

    id: str = ""
    entity: str = ""
    pretty: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Actor:
        return cls(
            id=data.get("id") or "",
            entity=data.get("entity") or "",
            pretty=data.get("pretty") or "",
        )


@dataclass
class Account:
    """The account an event is attached to.

    ``attributes`` holds the whole decoded account object.
    """

    id: int = 0
    display: str = ""
    identifier: str = ""
    attributes: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> Account:
        return cls(
            id=data.get("id") or 0,
            display=data.get("display") or "",
            identifier=data.get("identifier") or "",
            attributes=dict(data),
        )


@dataclass
class Event:
    """A webhook event with its typed data and the raw payload."""

    api_version: str = ""
    request_id: str = ""
    name: str = ""
    actor: Actor | None = None
    account: Account | None = None
    data: Any = None
    payload: bytes = b""


def _object(value: Any, what: str) -> dict | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object")
    return value


def parse_event(payload: bytes | str) -> Event:
    """Decode an event payload; the data type follows the event name.

    Raises ValueError when the payload is not a JSON object of the expected shape.
    """
    raw = payload.encode() if isinstance(payload, str) else bytes(payload)
    document = json.loads(raw)
    if not isinstance(document, dict):
        raise ValueError("event payload must be a JSON object")

    actor = _object(document.get("actor"), "actor")
    account = _object(document.get("account"), "account")
    name = document.get("name") or ""

    return Event(
        api_version=document.get("api_version") or "",
        request_id=document.get("request_identifier") or "",
        name=name,
        actor=Actor.from_dict(actor) if actor is not None else None,
        account=Account.from_dict(account) if account is not None else None,
        data=event_data_for(name, document.get("data")),
        payload=raw,
    )