"""Typed data carried by webhook events, chosen by event name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from ..registrar import WhoisPrivacy
from ..users import User
from ..webhooks import Webhook
from ..zones import Zone, ZoneRecord


def _optional(kind: Callable[[dict], Any], value: Any) -> Any:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"expected an object, got {type(value).__name__}")
    return kind(value)


def _raw(value: Any) -> dict | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"expected an object, got {type(value).__name__}")
    return dict(value)


class GenericEventData(dict):
    """Data of an event without a specific type: the plain decoded object."""

    @classmethod
    def _from_dict(cls, data: dict) -> GenericEventData:
        return cls(data)


@dataclass
class AccountEventData:
    """Data of an account event."""

    account: dict | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> AccountEventData:
        return cls(account=_raw(data.get("account")))


@dataclass
class AccountMembershipEventData:
    """Data of an account membership or invitation event."""

    account: dict | None = None
    account_invitation: dict | None = None
    user: User | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> AccountMembershipEventData:
        return cls(
            account=_raw(data.get("account")),
            account_invitation=_raw(data.get("account_invitation")),
            user=_optional(User.from_dict, data.get("user")),
        )


@dataclass
class CertificateEventData:
    """Data of a certificate event."""

    certificate: dict | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> CertificateEventData:
        return cls(certificate=_raw(data.get("certificate")))


@dataclass
class ContactEventData:
    """Data of a contact event."""

    contact: dict | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> ContactEventData:
        return cls(contact=_raw(data.get("contact")))


@dataclass
class DNSSECEventData:
    """Data of a DNSSEC event."""

    delegation_signer_record: dict | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> DNSSECEventData:
        return cls(delegation_signer_record=_raw(data.get("delegation_signer_record")))


@dataclass
class DomainEventData:
    """Data of a domain event."""

    auto: bool = False
    domain: dict | None = None
    registrant: dict | None = None
    delegation: list[str] | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> DomainEventData:
        name_servers = data.get("name_servers")
        if name_servers is not None and not isinstance(name_servers, list):
            raise ValueError("name_servers must be a list")
        return cls(
            auto=bool(data.get("auto")),
            domain=_raw(data.get("domain")),
            registrant=_raw(data.get("registrant")),
            delegation=list(name_servers) if name_servers is not None else None,
        )


@dataclass
class EmailForwardEventData:
    """Data of an email forward event."""

    email_forward: dict | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> EmailForwardEventData:
        return cls(email_forward=_raw(data.get("email_forward")))


@dataclass
class WebhookEventData:
    """Data of a webhook event."""

    webhook: Webhook | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> WebhookEventData:
        return cls(webhook=_optional(Webhook.from_dict, data.get("webhook")))


@dataclass
class WhoisPrivacyEventData:
    """Data of a whois privacy event."""

    domain: dict | None = None
    whois_privacy: WhoisPrivacy | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> WhoisPrivacyEventData:
        return cls(
            domain=_raw(data.get("domain")),
            whois_privacy=_optional(WhoisPrivacy.from_dict, data.get("whois_privacy")),
        )


@dataclass
class ZoneEventData:
    """Data of a zone event."""

    zone: Zone | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> ZoneEventData:
        return cls(zone=_optional(Zone.from_dict, data.get("zone")))


@dataclass
class ZoneRecordEventData:
    """Data of a zone record event."""

    zone_record: ZoneRecord | None = None

    @classmethod
    def _from_dict(cls, data: dict) -> ZoneRecordEventData:
        return cls(zone_record=_optional(ZoneRecord.from_dict, data.get("zone_record")))


_EVENT_TYPES: dict[str, type] = {}


def _register(kind: type, *names: str) -> None:
    for name in names:
        _EVENT_TYPES[name] = kind


_register(AccountEventData, "account.billing_settings_update", "account.update")
_register(
    AccountMembershipEventData,
    "account.user_invitation_accept",
    "account.user_invitation_revoke",
    "account.user_invite",
    "account.user_remove",
)
_register(CertificateEventData, "certificate.issue", "certificate.remove_private_key")
_register(ContactEventData, "contact.create", "contact.delete", "contact.update")
_register(
    DNSSECEventData,
    "dnssec.create",
    "dnssec.delete",
    "dnssec.rotation_complete",
    "dnssec.rotation_start",
)
_register(
    DomainEventData,
    "domain.auto_renewal_disable",
    "domain.auto_renewal_enable",
    "domain.create",
    "domain.delete",
    "domain.register",
    "domain.renew",
    "domain.delegation_change",
    "domain.registrant_change",
    "domain.resolution_disable",
    "domain.resolution_enable",
    "domain.transfer",
)
_register(EmailForwardEventData, "email_forward.create", "email_forward.delete", "email_forward.update")
_register(WebhookEventData, "webhook.create", "webhook.delete")
_register(
    WhoisPrivacyEventData,
    "whois_privacy.disable",
    "whois_privacy.enable",
    "whois_privacy.purchase",
    "whois_privacy.renew",
)
_register(ZoneEventData, "zone.create", "zone.delete")
_register(ZoneRecordEventData, "zone_record.create", "zone_record.delete", "zone_record.update")


def event_data_for(name: str, data: Any) -> Any:
    """Build the data object matching the event ``name`` from its decoded ``data`` node.

    Unknown names give a GenericEventData. Raises ValueError when the node is not an object.
    """
    kind = _EVENT_TYPES.get(name, GenericEventData)
    if data is None:
        return kind()
    if not isinstance(data, dict):
        raise ValueError(f"event data must be an object, got {type(data).__name__}")
    return kind._from_dict(data)