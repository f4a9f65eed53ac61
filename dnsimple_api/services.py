"""One-click services and their application to domains."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .client import Client, ListOptions, Response, add_url_query_options, versioned


def service_path(service_identifier: str = "") -> str:
    """Path of the services collection or of one service."""
    path = "/services"
    if service_identifier:
        path += f"/{service_identifier}"
    return path


def domain_services_path(account_id: str, domain_identifier: str, service_identifier: str = "") -> str:
    """Path of the services applied to a domain, or of one of them."""
    if service_identifier:
        return f"/{account_id}/domains/{domain_identifier}/services/{service_identifier}"
    return f"/{account_id}/domains/{domain_identifier}/services"


@dataclass
class ServiceSetting:
    """A single setting of a one-click service."""

    name: str = ""
    label: str = ""
    append: str = ""
    description: str = ""
    example: str = ""
    password: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> ServiceSetting:
        return cls(
            name=data.get("name") or "",
            label=data.get("label") or "",
            append=data.get("append") or "",
            description=data.get("description") or "",
            example=data.get("example") or "",
            password=bool(data.get("password")),
        )


@dataclass
class Service:
    """A one-click service."""

    id: int = 0
    sid: str = ""
    name: str = ""
    description: str = ""
    setup_description: str = ""
    requires_setup: bool = False
    default_subdomain: str = ""
    created_at: str = ""
    updated_at: str = ""
    settings: list[ServiceSetting] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> Service:
        return cls(
            id=data.get("id") or 0,
            sid=data.get("sid") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            setup_description=data.get("setup_description") or "",
            requires_setup=bool(data.get("requires_setup")),
            default_subdomain=data.get("default_subdomain") or "",
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
            settings=[ServiceSetting.from_dict(s) for s in data.get("settings") or []],
        )


@dataclass
class DomainServiceSettings:
    """Optional settings sent when applying a service to a domain."""

    settings: dict[str, str] | None = None

    def to_dict(self) -> dict:
        if not self.settings:
            return {}
        return {"settings": dict(self.settings)}


class ServicesService:
    """Calls for one-click services."""

    def __init__(self, client: Client):
        self.client = client

    def list_services(self, options: ListOptions | None = None) -> Response:
        path = add_url_query_options(versioned(service_path()), options)
        response = self.client.get(path)
        services = [Service.from_dict(d) for d in response.data or []]
        return dataclasses.replace(response, data=services)

    def get_service(self, service_identifier: str) -> Response:
        response = self.client.get(versioned(service_path(service_identifier)))
        data = Service.from_dict(response.data) if response.data is not None else None
        return dataclasses.replace(response, data=data)

    def applied_services(
        self, account_id: str, domain_identifier: str, options: ListOptions | None = None
    ) -> Response:
        path = add_url_query_options(
            versioned(domain_services_path(account_id, domain_identifier)), options
        )
        response = self.client.get(path)
        services = [Service.from_dict(d) for d in response.data or []]
        return dataclasses.replace(response, data=services)

    def apply_service(
        self,
        account_id: str,
        service_identifier: str,
        domain_identifier: str,
        settings: DomainServiceSettings | None = None,
    ) -> Response:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        payload = (settings or DomainServiceSettings()).to_dict()
        response = self.client.post(path, payload)
        return dataclasses.replace(response, data=None)

    def unapply_service(self, account_id: str, service_identifier: str, domain_identifier: str) -> Response:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        response = self.client.delete(path)
        return dataclasses.replace(response, data=None)