"""Templates, their records and their application to domains."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .client import Client, ListOptions, Response, add_url_query_options, versioned


def template_path(account_id: str, template_identifier: str = "") -> str:
    """Path of the templates collection of an account, or of one template."""
    path = f"/{account_id}/templates"
    if template_identifier:
        path += f"/{template_identifier}"
    return path


def template_record_path(account_id: str, template_identifier: str, template_record_id: int = 0) -> str:
    """Path of the records collection of a template, or of one record."""
    base = template_path(account_id, template_identifier)
    if template_record_id:
        return f"{base}/records/{template_record_id}"
    return f"{base}/records"


def _domain_path(account_id: str, domain_identifier: str) -> str:
    return f"/{account_id}/domains/{domain_identifier}"


@dataclass
class Template:
    """A template of DNS records."""

    id: int = 0
    sid: str = ""
    account_id: int = 0
    name: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Template:
        return cls(
            id=data.get("id") or 0,
            sid=data.get("sid") or "",
            account_id=data.get("account_id") or 0,
            name=data.get("name") or "",
            description=data.get("description") or "",
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )

    def to_dict(self) -> dict:
        """The request payload: only the fields that are set."""
        return {key: value for key, value in dataclasses.asdict(self).items() if value}


@dataclass
class TemplateRecord:
    """A DNS record belonging to a template."""

    id: int = 0
    template_id: int = 0
    name: str = ""
    content: str = ""
    ttl: int = 0
    type: str = ""
    priority: int = 0
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> TemplateRecord:
        return cls(
            id=data.get("id") or 0,
            template_id=data.get("template_id") or 0,
            name=data.get("name") or "",
            content=data.get("content") or "",
            ttl=data.get("ttl") or 0,
            type=data.get("type") or "",
            priority=data.get("priority") or 0,
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )

    def to_dict(self) -> dict:
        """The request payload: the name always, other fields only when set."""
        payload = {
            key: value
            for key, value in dataclasses.asdict(self).items()
            if value and key != "name"
        }
        payload["name"] = self.name
        return payload


def _single(response: Response, kind) -> Response:
    data = kind.from_dict(response.data) if response.data is not None else None
    return dataclasses.replace(response, data=data)


def _many(response: Response, kind) -> Response:
    return dataclasses.replace(response, data=[kind.from_dict(d) for d in response.data or []])


class TemplatesService:
    """Calls for templates and template records."""

    def __init__(self, client: Client):
        self.client = client

    def list_templates(self, account_id: str, options: ListOptions | None = None) -> Response:
        path = add_url_query_options(versioned(template_path(account_id)), options)
        return _many(self.client.get(path), Template)

    def create_template(self, account_id: str, template_attributes: Template) -> Response:
        path = versioned(template_path(account_id))
        return _single(self.client.post(path, template_attributes.to_dict()), Template)

    def get_template(self, account_id: str, template_identifier: str) -> Response:
        path = versioned(template_path(account_id, template_identifier))
        return _single(self.client.get(path), Template)

    def update_template(
        self, account_id: str, template_identifier: str, template_attributes: Template
    ) -> Response:
        path = versioned(template_path(account_id, template_identifier))
        return _single(self.client.patch(path, template_attributes.to_dict()), Template)

    def delete_template(self, account_id: str, template_identifier: str) -> Response:
        path = versioned(template_path(account_id, template_identifier))
        return dataclasses.replace(self.client.delete(path), data=None)

    def apply_template(self, account_id: str, template_identifier: str, domain_identifier: str) -> Response:
        path = versioned(f"{_domain_path(account_id, domain_identifier)}/templates/{template_identifier}")
        return dataclasses.replace(self.client.post(path), data=None)

    def list_template_records(
        self, account_id: str, template_identifier: str, options: ListOptions | None = None
    ) -> Response:
        path = add_url_query_options(
            versioned(template_record_path(account_id, template_identifier)), options
        )
        return _many(self.client.get(path), TemplateRecord)

    def create_template_record(
        self, account_id: str, template_identifier: str, template_record_attributes: TemplateRecord
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier))
        response = self.client.post(path, template_record_attributes.to_dict())
        return _single(response, TemplateRecord)

    def get_template_record(
        self, account_id: str, template_identifier: str, template_record_id: int
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return _single(self.client.get(path), TemplateRecord)

    def delete_template_record(
        self, account_id: str, template_identifier: str, template_record_id: int
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return dataclasses.replace(self.client.delete(path), data=None)