"""Webhooks registered for an account."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .client import Client, ListOptions, Response, versioned


def webhook_path(account_id: str, webhook_id: int = 0) -> str:
    """Path of the webhooks collection of an account, or of one webhook."""
    path = f"/{account_id}/webhooks"
    if webhook_id:
        path = f"{path}/{webhook_id}"
    return path


@dataclass
class Webhook:
    """A webhook."""

    id: int = 0
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Webhook:
        return cls(id=data.get("id") or 0, url=data.get("url") or "")

    def to_dict(self) -> dict:
        """The request payload: only the fields that are set."""
        return {key: value for key, value in dataclasses.asdict(self).items() if value}


class WebhooksService:
    """Calls for webhooks."""

    def __init__(self, client: Client):
        self.client = client

    def list_webhooks(self, account_id: str, options: ListOptions | None = None) -> Response:
        """List the webhooks of an account; the endpoint takes no list options."""
        response = self.client.get(versioned(webhook_path(account_id)))
        return dataclasses.replace(response, data=[Webhook.from_dict(d) for d in response.data or []])

    def create_webhook(self, account_id: str, webhook_attributes: Webhook) -> Response:
        response = self.client.post(versioned(webhook_path(account_id)), webhook_attributes.to_dict())
        data = Webhook.from_dict(response.data) if response.data is not None else None
        return dataclasses.replace(response, data=data)

    def get_webhook(self, account_id: str, webhook_id: int) -> Response:
        response = self.client.get(versioned(webhook_path(account_id, webhook_id)))
        data = Webhook.from_dict(response.data) if response.data is not None else None
        return dataclasses.replace(response, data=data)

    def delete_webhook(self, account_id: str, webhook_id: int) -> Response:
        response = self.client.delete(versioned(webhook_path(account_id, webhook_id)))
        return dataclasses.replace(response, data=None)