"""A small HTTP client bound to a single server."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

_TIMEOUT = 30


class HttpError(Exception):
    """Raised when a request cannot be made or its response cannot be read."""


@dataclass
class HttpResponse:
    """The status, body and headers of a completed request."""

    status: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Parse the body as JSON."""
        try:
            return json.loads(self.text)
        except ValueError as exc:
            raise HttpError(f"Response body is not valid JSON: {exc}") from None


class HttpClient:
    """Sends requests to one server with a fixed user agent."""

    def __init__(self, user_agent: str) -> None:
        self._session = requests.Session()
        self._session.headers["User-Agent"] = user_agent
        self._base_url: str | None = None

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._session.close()

    def connect(self, server: str, port: int = 0) -> None:
        """Bind the client to ``server``; port 0 means the default HTTPS port."""
        if not server:
            raise HttpError("Failed to connect to the server!")
        if port in (0, 443):
            self._base_url = f"https://{server}"
        elif port == 80:
            self._base_url = f"http://{server}"
        else:
            self._base_url = f"http://{server}:{port}"

    def get(self, path: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Send a GET request for ``path``."""
        return self._send("GET", path, headers, None)

    def post(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> HttpResponse:
        """Send a POST request; a body is followed by a CRLF line ending."""
        data = None if body is None else (body + "\r\n").encode("utf-8")
        return self._send("POST", path, headers, data)

    def _send(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str] | None,
        data: bytes | None,
    ) -> HttpResponse:
        if self._base_url is None:
            raise HttpError("Failed to open the request!")
        try:
            response = self._session.request(
                method,
                self._base_url + path,
                headers=dict(headers or {}),
                data=data,
                timeout=_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise HttpError(f"Failed to send request: {exc}") from exc
        return HttpResponse(
            status=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )