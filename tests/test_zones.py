import json

import httpx
import pytest

from dnsimple_api.client import APIError, Client, Pagination
from dnsimple_api.zones import (
    Zone,
    ZoneDistribution,
    ZoneFile,
    ZoneListOptions,
    ZoneRecord,
    ZoneRecordAttributes,
    ZoneRecordListOptions,
    ZonesService,
    zone_record_path,
)

ZONE_TEXT = (
    "$ORIGIN example.com.\n$TTL 1h\n"
    "example.com. 3600 IN SOA ns1.dnsimple.com. admin.dnsimple.com. 1453132552 86400 7200 604800 300\n"
    "example.com. 3600 IN NS ns1.dnsimple.com.\n"
    "example.com. 3600 IN NS ns2.dnsimple.com.\n"
    "example.com. 3600 IN NS ns3.dnsimple.com.\n"
    "example.com. 3600 IN NS ns4.dnsimple.com.\n"
)

RECORD_WWW = {
    "id": 1, "zone_id": "example.com", "parent_id": None, "name": "www",
    "content": "127.0.0.1", "ttl": 600, "priority": None, "type": "A",
    "regions": ["global"], "system_record": False,
    "created_at": "2016-01-07T17:45:13Z", "updated_at": "2016-01-07T17:45:13Z",
}

RECORD_MX = {
    "id": 5, "zone_id": "example.com", "parent_id": None, "name": "",
    "content": "mxb.example.com", "ttl": 3600, "priority": 20, "type": "MX",
    "regions": ["global"], "system_record": False,
    "created_at": "2016-10-05T09:51:35Z", "updated_at": "2016-10-05T09:51:35Z",
}

RECORDS_PAGE = {
    "data": [
        {"id": 1, "zone_id": "example.com", "name": "", "content": "ns1.dnsimple.com",
         "ttl": 3600, "type": "SOA", "regions": ["global"], "system_record": True},
        {"id": 2, "zone_id": "example.com", "name": "", "content": "ns1.dnsimple.com",
         "ttl": 3600, "type": "NS", "regions": ["global"], "system_record": True},
        {"id": 3, "zone_id": "example.com", "name": "", "content": "ns2.dnsimple.com",
         "ttl": 3600, "type": "NS", "regions": ["global"], "system_record": True},
        {"id": 4, "zone_id": "example.com", "name": "", "content": "ns3.dnsimple.com",
         "ttl": 3600, "type": "NS", "regions": ["global"], "system_record": True},
        {"id": 5, "zone_id": "example.com", "name": "", "content": "ns4.dnsimple.com",
         "ttl": 3600, "type": "NS", "regions": ["global"], "system_record": True},
    ],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 5, "total_pages": 1},
}

ZONES_PAGE = {
    "data": [
        {"id": 1, "account_id": 1010, "name": "example-alpha.com", "reverse": False,
         "created_at": "2015-04-23T07:40:03Z", "updated_at": "2015-04-23T07:40:03Z"},
        {"id": 2, "account_id": 1010, "name": "example-beta.com", "reverse": False,
         "created_at": "2015-04-23T07:40:03Z", "updated_at": "2015-04-23T07:40:03Z"},
    ],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 2, "total_pages": 1},
}


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
    return ZonesService(client)


def _body(request):
    return json.loads(request.content)


def test_zone_record_path():
    assert zone_record_path("1010", "example.com", 0) == "/1010/zones/example.com/records"
    assert zone_record_path("1010", "example.com", 1) == "/1010/zones/example.com/records/1"


def test_list_zones():
    seen = []
    response = _service(200, ZONES_PAGE, seen).list_zones("1010", None)
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/1010/zones"
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=2)
    assert len(response.data) == 2
    assert response.data[0].id == 1
    assert response.data[0].name == "example-alpha.com"


def test_list_zones_with_options():
    seen = []
    options = ZoneListOptions(name_like="example", page=2, per_page=20, sort="name,expiration:desc")
    _service(200, ZONES_PAGE, seen).list_zones("1010", options)
    assert dict(seen[0].url.params) == {
        "page": "2",
        "per_page": "20",
        "sort": "name,expiration:desc",
        "name_like": "example",
    }


def test_get_zone():
    seen = []
    body = {"data": ZONES_PAGE["data"][0]}
    response = _service(200, body, seen).get_zone("1010", "example.com")
    assert seen[0].url.path == "/v2/1010/zones/example.com"
    assert response.data == Zone(
        id=1,
        account_id=1010,
        name="example-alpha.com",
        reverse=False,
        created_at="2015-04-23T07:40:03Z",
        updated_at="2015-04-23T07:40:03Z",
    )


def test_get_zone_file():
    seen = []
    response = _service(200, {"data": {"zone": ZONE_TEXT}}, seen).get_zone_file("1010", "example.com")
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/1010/zones/example.com/file"
    assert response.data == ZoneFile(zone=ZONE_TEXT)


@pytest.mark.parametrize("distributed", [True, False])
def test_check_zone_distribution(distributed):
    seen = []
    body = {"data": {"distributed": distributed}}
    response = _service(200, body, seen).check_zone_distribution("1010", "example.com")
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/1010/zones/example.com/distribution"
    assert response.data == ZoneDistribution(distributed=distributed)


def test_check_zone_distribution_error():
    seen = []
    body = {"message": "Could not query zone, connection timed out"}
    with pytest.raises(APIError) as excinfo:
        _service(504, body, seen).check_zone_distribution("1010", "example.com")
    assert excinfo.value.status_code == 504
    assert excinfo.value.message == "Could not query zone, connection timed out"


@pytest.mark.parametrize("distributed", [True, False])
def test_check_zone_record_distribution(distributed):
    seen = []
    body = {"data": {"distributed": distributed}}
    response = _service(200, body, seen).check_zone_record_distribution("1010", "example.com", 1)
    assert seen[0].url.path == "/v2/1010/zones/example.com/records/1/distribution"
    assert response.data == ZoneDistribution(distributed=distributed)


def test_check_zone_record_distribution_error():
    seen = []
    body = {"message": "Could not query zone, connection timed out"}
    with pytest.raises(APIError) as excinfo:
        _service(504, body, seen).check_zone_record_distribution("1010", "example.com", 1)
    assert excinfo.value.status_code == 504


def test_list_records():
    seen = []
    response = _service(200, RECORDS_PAGE, seen).list_records("1010", "example.com", None)
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/1010/zones/example.com/records"
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=5)
    assert len(response.data) == 5
    assert response.data[0].id == 1
    assert response.data[0].name == ""
    assert response.data[0].regions == ["global"]


def test_list_records_with_options():
    seen = []
    options = ZoneRecordListOptions(
        name="example", name_like="www", type="A", page=2, per_page=20, sort="name,expiration:desc"
    )
    _service(200, RECORDS_PAGE, seen).list_records("1010", "example.com", options)
    assert dict(seen[0].url.params) == {
        "page": "2",
        "per_page": "20",
        "sort": "name,expiration:desc",
        "name": "example",
        "name_like": "www",
        "type": "A",
    }


def test_list_records_with_options_some_blank():
    seen = []
    options = ZoneRecordListOptions(name="example", type="A", page=2, sort="name,expiration:desc")
    _service(200, RECORDS_PAGE, seen).list_records("1010", "example.com", options)
    assert dict(seen[0].url.params) == {
        "page": "2",
        "sort": "name,expiration:desc",
        "name": "example",
        "type": "A",
    }


def test_create_record():
    seen = []
    attributes = ZoneRecordAttributes(name="foo", content="mxa.example.com", type="MX")
    response = _service(201, {"data": RECORD_WWW}, seen).create_record("1010", "example.com", attributes)
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v2/1010/zones/example.com/records"
    assert _body(seen[0]) == {"name": "foo", "content": "mxa.example.com", "type": "MX"}
    assert response.data.id == 1
    assert response.data.name == "www"
    assert response.data.type == "A"
    assert response.data.regions == ["global"]


def test_create_record_blank_name():
    seen = []
    apex = dict(RECORD_WWW, name="")
    attributes = ZoneRecordAttributes(name="", content="127.0.0.1", type="A")
    response = _service(201, {"data": apex}, seen).create_record("1010", "example.com", attributes)
    assert _body(seen[0]) == {"name": "", "content": "127.0.0.1", "type": "A"}
    assert response.data.name == ""
    assert response.data.regions == ["global"]


@pytest.mark.parametrize(
    "regions, expected",
    [
        ([], {"name": "foo"}),
        (["global"], {"name": "foo", "regions": ["global"]}),
    ],
)
def test_create_record_regions(regions, expected):
    seen = []
    attributes = ZoneRecordAttributes(name="foo", regions=regions)
    _service(201, {"data": RECORD_WWW}, seen).create_record("1", "example.com", attributes)
    assert seen[0].url.path == "/v2/1/zones/example.com/records"
    assert _body(seen[0]) == expected


def test_get_record():
    seen = []
    body = {
        "data": {
            "id": 5, "zone_id": "example.com", "parent_id": None, "name": "",
            "content": "mxa.example.com", "ttl": 600, "priority": 10, "type": "MX",
            "regions": ["SV1", "IAD"], "system_record": False,
            "created_at": "2016-10-05T09:51:35Z", "updated_at": "2016-10-05T09:51:35Z",
        }
    }
    response = _service(200, body, seen).get_record("1010", "example.com", 1539)
    assert seen[0].url.path == "/v2/1010/zones/example.com/records/1539"
    assert response.data == ZoneRecord(
        id=5,
        zone_id="example.com",
        parent_id=0,
        type="MX",
        name="",
        content="mxa.example.com",
        ttl=600,
        priority=10,
        system_record=False,
        regions=["SV1", "IAD"],
        created_at="2016-10-05T09:51:35Z",
        updated_at="2016-10-05T09:51:35Z",
    )


def test_update_record():
    seen = []
    attributes = ZoneRecordAttributes(name="foo", content="127.0.0.1")
    response = _service(200, {"data": RECORD_MX}, seen).update_record("1010", "example.com", 5, attributes)
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/v2/1010/zones/example.com/records/5"
    assert _body(seen[0]) == {"name": "foo", "content": "127.0.0.1"}
    assert response.data.id == 5
    assert response.data.content == "mxb.example.com"


def test_update_record_name_not_provided():
    seen = []
    attributes = ZoneRecordAttributes(content="127.0.0.1")
    _service(200, {"data": RECORD_MX}, seen).update_record("1010", "example.com", 5, attributes)
    assert _body(seen[0]) == {"content": "127.0.0.1"}


@pytest.mark.parametrize(
    "regions, expected",
    [
        ([], {"name": "foo"}),
        (["global"], {"name": "foo", "regions": ["global"]}),
    ],
)
def test_update_record_regions(regions, expected):
    seen = []
    attributes = ZoneRecordAttributes(name="foo", regions=regions)
    _service(200, {"data": RECORD_MX}, seen).update_record("2", "example.com", 1, attributes)
    assert seen[0].url.path == "/v2/2/zones/example.com/records/1"
    assert _body(seen[0]) == expected


def test_delete_record():
    seen = []
    response = _service(204, None, seen).delete_record("1010", "example.com", 2)
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/v2/1010/zones/example.com/records/2"
    assert response.data is None
    assert response.http_response.status_code == 204