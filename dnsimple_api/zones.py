"""Zones, zone files, zone records and distribution checks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .client import Client, ListOptions, Response, add_url_query_options, versioned


def _zone_path(account_id: str, zone_name: str = "") -> str:
    path = f"/{account_id}/zones"
    if zone_name:
        path += f"/{zone_name}"
    return path


def zone_record_path(account_id: str, zone_name: str, record_id: int = 0) -> str:
    """Path of the records collection of a zone, or of one record."""
    path = f"/{account_id}/zones/{zone_name}/records"
    if record_id:
        path += f"/{record_id}"
    return path


@dataclass
class Zone:
    """A DNS zone."""

    id: int = 0
    account_id: int = 0
    name: str = ""
    reverse: bool = False
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(
            id=data.get("id") or 0,
            account_id=data.get("account_id") or 0,
            name=data.get("name") or "",
            reverse=bool(data.get("reverse")),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass
class ZoneFile:
    """The text of a zone file."""

    zone: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> ZoneFile:
        return cls(zone=data.get("zone") or "")


@dataclass
class ZoneDistribution:
    """Whether a zone or record is distributed across all name servers."""

    distributed: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> ZoneDistribution:
        return cls(distributed=bool(data.get("distributed")))


@dataclass
class ZoneRecord:
    """A record of a zone."""

    id: int = 0
    zone_id: str = ""
    parent_id: int = 0
    type: str = ""
    name: str = ""
    content: str = ""
    ttl: int = 0
    priority: int = 0
    system_record: bool = False
    regions: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> ZoneRecord:
        return cls(
            id=data.get("id") or 0,
            zone_id=data.get("zone_id") or "",
            parent_id=data.get("parent_id") or 0,
            type=data.get("type") or "",
            name=data.get("name") or "",
            content=data.get("content") or "",
            ttl=data.get("ttl") or 0,
            priority=data.get("priority") or 0,
            system_record=bool(data.get("system_record")),
            regions=list(data.get("regions") or []),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass
class ZoneRecordAttributes:
    """Attributes sent to create or update a zone record.

    ``name`` is None when it is not to be sent; an empty string is sent as is.
    """

    zone_id: str = ""
    type: str = ""
    name: str | None = None
    content: str = ""
    ttl: int = 0
    priority: int = 0
    regions: list[str] | None = None

    def to_dict(self) -> dict:
        payload: dict = {}
        if self.zone_id:
            payload["zone_id"] = self.zone_id
        if self.type:
            payload["type"] = self.type
        if self.name is not None:
            payload["name"] = self.name
        if self.content:
            payload["content"] = self.content
        if self.ttl:
            payload["ttl"] = self.ttl
        if self.priority:
            payload["priority"] = self.priority
        if self.regions:
            payload["regions"] = list(self.regions)
        return payload


@dataclass
class ZoneListOptions(ListOptions):
    """Options for listing zones."""

    name_like: str | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        if self.name_like is not None:
            query["name_like"] = self.name_like
        return query


@dataclass
class ZoneRecordListOptions(ListOptions):
    """Options for listing the records of a zone."""

    name: str | None = None
    name_like: str | None = None
    type: str | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        if self.name is not None:
            query["name"] = self.name
        if self.name_like is not None:
            query["name_like"] = self.name_like
        if self.type is not None:
            query["type"] = self.type
        return query


def _single(response: Response, kind) -> Response:
    data = kind.from_dict(response.data) if response.data is not None else None
    return dataclasses.replace(response, data=data)


def _many(response: Response, kind) -> Response:
    return dataclasses.replace(response, data=[kind.from_dict(d) for d in response.data or []])


class ZonesService:
    """Calls for zones and zone records."""

    def __init__(self, client: Client):
        self.client = client

    def list_zones(self, account_id: str, options: ZoneListOptions | None = None) -> Response:
        path = add_url_query_options(versioned(_zone_path(account_id)), options)
        return _many(self.client.get(path), Zone)

    def get_zone(self, account_id: str, zone_name: str) -> Response:
        return _single(self.client.get(versioned(_zone_path(account_id, zone_name))), Zone)

    def get_zone_file(self, account_id: str, zone_name: str) -> Response:
        path = versioned(f"{_zone_path(account_id, zone_name)}/file")
        return _single(self.client.get(path), ZoneFile)

    def check_zone_distribution(self, account_id: str, zone_name: str) -> Response:
        path = versioned(f"{_zone_path(account_id, zone_name)}/distribution")
        return _single(self.client.get(path), ZoneDistribution)

    def check_zone_record_distribution(self, account_id: str, zone_name: str, record_id: int) -> Response:
        path = versioned(f"{_zone_path(account_id, zone_name)}/records/{record_id}/distribution")
        return _single(self.client.get(path), ZoneDistribution)

    def list_records(
        self, account_id: str, zone_name: str, options: ZoneRecordListOptions | None = None
    ) -> Response:
        path = add_url_query_options(versioned(zone_record_path(account_id, zone_name)), options)
        return _many(self.client.get(path), ZoneRecord)

    def create_record(
        self, account_id: str, zone_name: str, record_attributes: ZoneRecordAttributes
    ) -> Response:
        path = versioned(zone_record_path(account_id, zone_name))
        return _single(self.client.post(path, record_attributes.to_dict()), ZoneRecord)

    def get_record(self, account_id: str, zone_name: str, record_id: int) -> Response:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return _single(self.client.get(path), ZoneRecord)

    def update_record(
        self,
        account_id: str,
        zone_name: str,
        record_id: int,
        record_attributes: ZoneRecordAttributes,
    ) -> Response:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return _single(self.client.patch(path, record_attributes.to_dict()), ZoneRecord)

    def delete_record(self, account_id: str, zone_name: str, record_id: int) -> Response:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return dataclasses.replace(self.client.delete(path), data=None)