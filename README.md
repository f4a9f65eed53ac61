# dnsimple_api

A Python client for part of the DNSimple v2 HTTP API, plus a parser for the
events DNSimple delivers to your webhooks. It is a library only; it has no
command-line tool.

## Installation

```
pip install .
```

## Using the client

Create a `Client` (from `dnsimple_api.client`) with an API access token and a
base URL; `base_url` is required and a `ValueError` is raised without it. The
token, when given, is sent as a bearer `Authorization` header. You may pass
your own `httpx.Client` as `http_client`. The client is a context manager and
closes its HTTP connection on exit (or call `close()`).

```python
from dnsimple_api.client import Client
from dnsimple_api.zones import ZonesService, ZoneRecordAttributes, ZoneRecordListOptions

with Client(token="token", base_url="https://api.sandbox.dnsimple.com") as client:
    zones = ZonesService(client)

    response = zones.list_zones("1010", None)
    for zone in response.data:
        print(zone.name)

    records = zones.list_records(
        "1010",
        "example.com",
        ZoneRecordListOptions(type="A", page=1, per_page=20),
    )
    print(records.pagination)

    created = zones.create_record(
        "1010",
        "example.com",
        ZoneRecordAttributes(name="www", type="A", content="127.0.0.1"),
    )
    print(created.data.id)
```

Each part of the API has its own service object, built from the same client:

- `dnsimple_api.services.ServicesService`: list and get one-click services; list, apply and unapply the services of a domain
- `dnsimple_api.templates.TemplatesService`: templates, template records, applying a template to a domain
- `dnsimple_api.tlds.TldsService`: supported TLDs and their extended attributes
- `dnsimple_api.zones.ZonesService`: zones, zone files, zone records, distribution checks for zones and records
- `dnsimple_api.webhooks.WebhooksService`: list, create, get and delete account webhooks
- `dnsimple_api.vanity.VanityNameServersService`: enable and disable vanity name servers
- `dnsimple_api.registrar.RegistrarService`: name server delegation (plain and vanity) and whois privacy

Every call returns a `Response` holding the decoded `data` (dataclasses such
as `Zone`, `ZoneRecord`, `Template`, `Tld`, `WhoisPrivacy`, or a list of
them; delegation is a list of name server names; delete and apply calls give
`None`), the `pagination` of list calls as a `Pagination`, and the underlying
`http_response`. The `rate_limit`, `rate_limit_remaining` and
`rate_limit_reset` properties read the rate-limit headers of that response.

An error status (400 or above) raises `APIError`, which carries
`status_code`, `message` (the API's message when the body has one) and
`http_response`.

### List options

List calls accept a `ListOptions` with `page`, `per_page` and `sort`; zero or
empty values are not sent. `ZoneListOptions` adds `name_like`, and
`ZoneRecordListOptions` adds `name`, `name_like` and `type`; these are sent
whenever they are not `None`. `list_webhooks` accepts options but the endpoint
takes none, so they are not sent.

### Zone record attributes

Use `ZoneRecordAttributes` to create or update records. Its `name` is left
out of the request when it is `None`, and sent even when it is the empty
string, so the apex can be addressed with `name=""`. `regions` is sent only
when it is a non-empty list.

## Parsing webhook events

```python
from dnsimple_api.webhook.webhook import parse_event
from dnsimple_api.webhook.events import ZoneRecordEventData

event = parse_event(request_body)
print(event.name, event.account.display)

if isinstance(event.data, ZoneRecordEventData):
    print(event.data.zone_record)
```

`parse_event` takes bytes or a string and returns an `Event` with
`api_version`, `request_id`, `name`, `actor` (an `Actor`), `account` (an
`Account` with `id`, `display`, `identifier` and the whole decoded object in
`attributes`), `data` and the raw `payload`. It raises `ValueError` when the
payload is not a JSON object of the expected shape.

The type of `event.data` is chosen by the event name through
`event_data_for`, for example `WebhookEventData` for `webhook.create` or
`ZoneRecordEventData` for `zone_record.update`. Names without a specific type
give `GenericEventData`, a `dict` holding the raw data.

## What is not covered

The package has no calls for accounts, identity, domains, contacts,
certificates, email forwards, DNSSEC or domain registration, renewal and
transfer. In event data, objects of those kinds (accounts, invitations,
domains, contacts, certificates, email forwards, delegation signer records)
are kept as plain decoded dictionaries rather than typed objects.

## Running the tests

```
pip install ".[test]"
pytest
```