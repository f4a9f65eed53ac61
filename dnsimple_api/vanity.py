"""Vanity name servers of a domain."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .client import Client, Response, versioned


def vanity_name_server_path(account_id: str, domain_identifier: str) -> str:
    """Path of the vanity name servers of a domain."""
    return f"/{account_id}/vanity/{domain_identifier}"


@dataclass
class VanityNameServer:
    """A single vanity name server."""

    id: int = 0
    name: str = ""
    ipv4: str = ""
    ipv6: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> VanityNameServer:
        return cls(
            id=data.get("id") or 0,
            name=data.get("name") or "",
            ipv4=data.get("ipv4") or "",
            ipv6=data.get("ipv6") or "",
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


class VanityNameServersService:
    """Calls for vanity name servers."""

    def __init__(self, client: Client):
        self.client = client

    def enable_vanity_name_servers(self, account_id: str, domain_identifier: str) -> Response:
        path = versioned(vanity_name_server_path(account_id, domain_identifier))
        response = self.client.put(path)
        servers = [VanityNameServer.from_dict(d) for d in response.data or []]
        return dataclasses.replace(response, data=servers)

    def disable_vanity_name_servers(self, account_id: str, domain_identifier: str) -> Response:
        path = versioned(vanity_name_server_path(account_id, domain_identifier))
        return dataclasses.replace(self.client.delete(path), data=None)