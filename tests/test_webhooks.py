import json

import httpx
import pytest

from dnsimple_api.client import APIError, Client, ListOptions
from dnsimple_api.webhooks import Webhook, WebhooksService, webhook_path


def _service(status, body, seen):
    def handler(request):
        seen.append(request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    client = Client(
        token="token",
        base_url="https://api.example.com",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    return WebhooksService(client)


def test_webhook_path():
    assert webhook_path("1010", 0) == "/1010/webhooks"
    assert webhook_path("1010", 1) == "/1010/webhooks/1"


def test_list_webhooks():
    seen = []
    body = {"data": [{"id": 1, "url": "https://webhook.test"}, {"id": 2, "url": "https://another.test"}]}
    response = _service(200, body, seen).list_webhooks("1010", None)
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/1010/webhooks"
    assert len(response.data) == 2
    assert response.data[0].id == 1
    assert response.data[0].url == "https://webhook.test"


def test_list_webhooks_ignores_options():
    seen = []
    _service(200, {"data": []}, seen).list_webhooks("1010", ListOptions(page=2, per_page=20))
    assert dict(seen[0].url.params) == {}


def test_create_webhook():
    seen = []
    body = {"data": {"id": 1, "url": "https://webhook.test"}}
    response = _service(201, body, seen).create_webhook("1010", Webhook(url="https://webhook.test"))
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v2/1010/webhooks"
    assert json.loads(seen[0].content) == {"url": "https://webhook.test"}
    assert response.data.id == 1
    assert response.data.url == "https://webhook.test"


def test_get_webhook():
    seen = []
    body = {"data": {"id": 1, "url": "https://webhook.test"}}
    response = _service(200, body, seen).get_webhook("1010", 1)
    assert seen[0].url.path == "/v2/1010/webhooks/1"
    assert response.data == Webhook(id=1, url="https://webhook.test")


def test_delete_webhook():
    seen = []
    response = _service(204, None, seen).delete_webhook("1010", 1)
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/v2/1010/webhooks/1"
    assert response.data is None


def test_get_webhook_not_found():
    seen = []
    with pytest.raises(APIError) as excinfo:
        _service(404, {"message": "Webhook `0` not found"}, seen).get_webhook("1010", 7)
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Webhook `0` not found"


def test_webhook_round_trip():
    webhook = Webhook(id=3, url="https://webhook.test")
    assert Webhook.from_dict(webhook.to_dict()) == webhook
    assert Webhook(url="https://webhook.test").to_dict() == {"url": "https://webhook.test"}