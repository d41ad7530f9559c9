"""Access to the PluralKit REST API."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .config import Config
from .http import HttpClient
from .models import Member, Switch, System

USER_AGENT = "pk system tray/0.1.0.0"

_ALREADY_FRONTING = 40004


class ApiError(Exception):
    """Raised when the API rejects a request that should have succeeded."""


class PluralKit:
    """Client for the systems, members and switches endpoints."""

    def __init__(self, config: Config, client: HttpClient | None = None) -> None:
        self._client = client if client is not None else HttpClient(USER_AGENT)
        self._base_path = config.base_path
        self._auth_token = config.auth_token
        self._client.connect(config.hostname)

    def get_system(self, system_id: str) -> System | None:
        """Return the system with ``system_id``, or None if it cannot be fetched."""
        body = self._get(f"/systems/{system_id}")
        return None if body is None else System.from_json(body)

    def get_member(self, member_id: str) -> Member | None:
        """Return the member with ``member_id``, or None if it cannot be fetched."""
        body = self._get(f"/members/{member_id}")
        return None if body is None else Member.from_json(body)

    def get_members(self, system: System | str) -> list[Member]:
        """Return every member of ``system``; empty if they cannot be fetched."""
        body = self._get(f"/systems/{_system_id(system)}/members")
        if body is None:
            return []
        if not isinstance(body, list):
            raise ApiError("member list response is not an array")
        return [Member.from_json(entry) for entry in body]

    def get_fronters(self, system: System | str) -> list[Member]:
        """Return the members currently fronting; empty if unknown."""
        body = self._get(f"/systems/{_system_id(system)}/fronters")
        if body is None:
            return []
        return Switch.from_json(body).members

    def set_fronters(self, members: Iterable[str]) -> None:
        """Register a switch to ``members``; does nothing without a token."""
        if not self._auth_token:
            return
        response = self._client.post(
            self._base_path + "/systems/@me/switches",
            {
                "Authorization": self._auth_token,
                "Content-Type": "application/json",
            },
            json.dumps({"members": list(members)}),
        )
        if response.status == 200:
            return
        body = response.json()
        if isinstance(body, dict) and body.get("code") == _ALREADY_FRONTING:
            # The selected members are already fronting.
            return
        raise ApiError(f"switch request failed with status {response.status}")

    def _get(self, path: str) -> Any | None:
        headers = {"Authorization": self._auth_token} if self._auth_token else {}
        response = self._client.get(self._base_path + path, headers)
        if not response.text:
            return None
        body = response.json()
        if response.status != 200:
            return None
        return body


def _system_id(system: System | str) -> str:
    return system.id if isinstance(system, System) else system