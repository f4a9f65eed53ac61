"""Registrar calls for delegation and whois privacy."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .client import Client, Response, versioned
from .vanity import VanityNameServer


def _registrar_domain_path(account_id: str, domain_name: str) -> str:
    return f"/{account_id}/registrar/domains/{domain_name}"


@dataclass
class WhoisPrivacy:
    """The whois privacy of a domain."""

    id: int = 0
    domain_id: int = 0
    enabled: bool = False
    expires_on: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> WhoisPrivacy:
        return cls(
            id=data.get("id") or 0,
            domain_id=data.get("domain_id") or 0,
            enabled=bool(data.get("enabled")),
            expires_on=data.get("expires_on") or "",
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass
class WhoisPrivacyRenewal:
    """A renewal of the whois privacy of a domain."""

    id: int = 0
    domain_id: int = 0
    whois_privacy_id: int = 0
    state: str = ""
    enabled: bool = False
    expires_on: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> WhoisPrivacyRenewal:
        return cls(
            id=data.get("id") or 0,
            domain_id=data.get("domain_id") or 0,
            whois_privacy_id=data.get("whois_privacy_id") or 0,
            state=data.get("state") or "",
            enabled=bool(data.get("enabled")),
            expires_on=data.get("expires_on") or "",
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


def _delegation(response: Response) -> Response:
    data = list(response.data) if response.data is not None else None
    return dataclasses.replace(response, data=data)


def _whois_privacy(response: Response) -> Response:
    data = WhoisPrivacy.from_dict(response.data) if response.data is not None else None
    return dataclasses.replace(response, data=data)


class RegistrarService:
    """Registrar calls: name server delegation and whois privacy."""

    def __init__(self, client: Client):
        self.client = client

    def get_domain_delegation(self, account_id: str, domain_name: str) -> Response:
        """The name servers the domain is delegated to, as a list of names."""
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/delegation")
        return _delegation(self.client.get(path))

    def change_domain_delegation(
        self, account_id: str, domain_name: str, new_delegation: list[str]
    ) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/delegation")
        payload = list(new_delegation) if new_delegation is not None else None
        return _delegation(self.client.put(path, payload))

    def change_domain_delegation_to_vanity(
        self, account_id: str, domain_name: str, new_delegation: list[str]
    ) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/delegation/vanity")
        payload = list(new_delegation) if new_delegation is not None else None
        response = self.client.put(path, payload)
        servers = [VanityNameServer.from_dict(d) for d in response.data or []]
        return dataclasses.replace(response, data=servers)

    def change_domain_delegation_from_vanity(self, account_id: str, domain_name: str) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/delegation/vanity")
        return dataclasses.replace(self.client.delete(path), data=None)

    def get_whois_privacy(self, account_id: str, domain_name: str) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/whois_privacy")
        return _whois_privacy(self.client.get(path))

    def enable_whois_privacy(self, account_id: str, domain_name: str) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/whois_privacy")
        return _whois_privacy(self.client.put(path))

    def disable_whois_privacy(self, account_id: str, domain_name: str) -> Response:
        path = versioned(f"{_registrar_domain_path(account_id, domain_name)}/whois_privacy")
        return _whois_privacy(self.client.delete(path))

    def renew_whois_privacy(self, account_id: str, domain_name: str) -> Response:
        path = versioned(
            f"{_registrar_domain_path(account_id, domain_name)}/whois_privacy/renewals"
        )
        response = self.client.post(path)
        data = WhoisPrivacyRenewal.from_dict(response.data) if response.data is not None else None
        return dataclasses.replace(response, data=data)