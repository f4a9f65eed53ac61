"""HTTP client, pagination and list options shared by the API services."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

API_VERSION = "v2"
USER_AGENT = "dnsimple-api-python"


def versioned(path: str) -> str:
    """Prefix an API path with the API version."""
    return f"/{API_VERSION}{path}"


def add_url_query_options(path: str, options: Any) -> str:
    """Append the query parameters produced by ``options.to_query()`` to ``path``."""
    if options is None:
        return path
    params = options.to_query()
    if not params:
        return path
    parts = urlsplit(path)
    query = parse_qsl(parts.query, keep_blank_values=True) + list(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


class APIError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str, http_response: httpx.Response | None = None):
        self.status_code = status_code
        self.message = message
        self.http_response = http_response
        if http_response is not None:
            request = http_response.request
            text = f"{request.method} {request.url}: {status_code} {message}"
        else:
            text = f"{status_code} {message}"
        super().__init__(text)


@dataclass
class Pagination:
    """Pagination details of a collection response."""

    current_page: int = 0
    per_page: int = 0
    total_entries: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> Pagination:
        return cls(
            current_page=data.get("current_page") or 0,
            per_page=data.get("per_page") or 0,
            total_entries=data.get("total_entries") or 0,
            total_pages=data.get("total_pages") or 0,
        )


@dataclass
class ListOptions:
    """Paging and sorting options for list calls."""

    page: int | None = None
    per_page: int | None = None
    sort: str | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.page:
            query["page"] = str(self.page)
        if self.per_page:
            query["per_page"] = str(self.per_page)
        if self.sort:
            query["sort"] = self.sort
        return query


@dataclass
class Response:
    """The result of an API call: decoded data, pagination and the raw HTTP response."""

    data: Any = None
    pagination: Pagination | None = None
    http_response: httpx.Response | None = None

    def _header_int(self, name: str) -> int | None:
        if self.http_response is None:
            return None
        value = self.http_response.headers.get(name)
        return int(value) if value is not None else None

    @property
    def rate_limit(self) -> int | None:
        return self._header_int("X-RateLimit-Limit")

    @property
    def rate_limit_remaining(self) -> int | None:
        return self._header_int("X-RateLimit-Remaining")

    @property
    def rate_limit_reset(self) -> datetime | None:
        value = self._header_int("X-RateLimit-Reset")
        if value is None:
            return None
        return datetime.fromtimestamp(value, tz=timezone.utc)


class Client:
    """A small JSON client for the API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = USER_AGENT
        self._http = http_client if http_client is not None else httpx.Client(timeout=30.0)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, path: str, payload: Any = None) -> Response:
        """Send a request and decode the JSON answer; raise APIError on an error status."""
        content = json.dumps(payload).encode() if payload is not None else None
        http_response = self._http.request(
            method, self.base_url + path, headers=self._headers(), content=content
        )
        body: Any = None
        if http_response.content:
            try:
                body = http_response.json()
            except ValueError:
                body = None

        if http_response.status_code >= 400:
            message = http_response.reason_phrase
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            raise APIError(http_response.status_code, message, http_response)

        data = None
        pagination = None
        if isinstance(body, dict):
            data = body.get("data")
            if body.get("pagination") is not None:
                pagination = Pagination.from_dict(body["pagination"])
        return Response(data=data, pagination=pagination, http_response=http_response)

    def get(self, path: str) -> Response:
        return self.request("GET", path)

    def post(self, path: str, payload: Any = None) -> Response:
        return self.request("POST", path, payload)

    def put(self, path: str, payload: Any = None) -> Response:
        return self.request("PUT", path, payload)

    def patch(self, path: str, payload: Any = None) -> Response:
        return self.request("PATCH", path, payload)

    def delete(self, path: str) -> Response:
        return self.request("DELETE", path)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args) -> None:
        self.close()