"""Top-level domains supported for registration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .client import Client, ListOptions, Response, add_url_query_options, versioned


@dataclass
class Tld:
    """A top-level domain and what it supports."""

    tld: str = ""
    tld_type: int = 0
    whois_privacy: bool = False
    auto_renew_only: bool = False
    minimum_registration: int = 0
    registration_enabled: bool = False
    renewal_enabled: bool = False
    transfer_enabled: bool = False
    dnssec_interface_type: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Tld:
        return cls(
            tld=data.get("tld") or "",
            tld_type=data.get("tld_type") or 0,
            whois_privacy=bool(data.get("whois_privacy")),
            auto_renew_only=bool(data.get("auto_renew_only")),
            minimum_registration=data.get("minimum_registration") or 0,
            registration_enabled=bool(data.get("registration_enabled")),
            renewal_enabled=bool(data.get("renewal_enabled")),
            transfer_enabled=bool(data.get("transfer_enabled")),
            dnssec_interface_type=data.get("dnssec_interface_type") or "",
        )


@dataclass
class TldExtendedAttributeOption:
    """One value that an extended attribute may take."""

    title: str = ""
    value: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> TldExtendedAttributeOption:
        return cls(
            title=data.get("title") or "",
            value=data.get("value") or "",
            description=data.get("description") or "",
        )


@dataclass
class TldExtendedAttribute:
    """An extended attribute supported or required by a TLD."""

    name: str = ""
    description: str = ""
    required: bool = False
    options: list[TldExtendedAttributeOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> TldExtendedAttribute:
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            required=bool(data.get("required")),
            options=[TldExtendedAttributeOption.from_dict(o) for o in data.get("options") or []],
        )


class TldsService:
    """Calls for TLDs."""

    def __init__(self, client: Client):
        self.client = client

    def list_tlds(self, options: ListOptions | None = None) -> Response:
        path = add_url_query_options(versioned("/tlds"), options)
        response = self.client.get(path)
        return dataclasses.replace(response, data=[Tld.from_dict(d) for d in response.data or []])

    def get_tld(self, tld: str) -> Response:
        response = self.client.get(versioned(f"/tlds/{tld}"))
        data = Tld.from_dict(response.data) if response.data is not None else None
        return dataclasses.replace(response, data=data)

    def get_tld_extended_attributes(self, tld: str) -> Response:
        response = self.client.get(versioned(f"/tlds/{tld}/extended_attributes"))
        attributes = [TldExtendedAttribute.from_dict(d) for d in response.data or []]
        return dataclasses.replace(response, data=attributes)