"""Data models for the objects returned by the PluralKit API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


class ModelError(ValueError):
    """Raised when a JSON document does not match the expected model."""


_Converter = Callable[[Any, str], Any]


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ModelError(f"field {key!r} must be a string")
    return value


def _boolean(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ModelError(f"field {key!r} must be a boolean")
    return value


def _integer(value: Any, key: str) -> int:
    if not isinstance(value, (int, float)):
        raise ModelError(f"field {key!r} must be a number")
    return int(value)


def _nested(model: Any) -> _Converter:
    def convert(value: Any, key: str) -> Any:
        try:
            return model.from_json(value)
        except ModelError as exc:
            raise ModelError(f"in field {key!r}: {exc}") from None

    return convert


def _list_of(model: Any) -> _Converter:
    item = _nested(model)

    def convert(value: Any, key: str) -> list:
        if not isinstance(value, list):
            raise ModelError(f"field {key!r} must be an array")
        return [item(entry, key) for entry in value]

    return convert


def _parse(
    data: Any,
    converters: Mapping[str, _Converter],
    required: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Convert the known keys of a JSON object into constructor arguments.

    Required keys must be present; optional keys that are absent or null
    leave the model's default in place.
    """
    if not isinstance(data, Mapping):
        raise ModelError("expected a JSON object")
    values: dict[str, Any] = {}
    for key, convert in converters.items():
        if key in required:
            if key not in data:
                raise ModelError(f"missing required field {key!r}")
            values[key] = convert(data[key], key)
        elif data.get(key) is not None:
            values[key] = convert(data[key], key)
    return values


@dataclass
class SystemPrivacy:
    description_privacy: str = ""
    pronoun_privacy: str = ""
    member_list_privacy: str = ""
    group_list_privacy: str = ""
    front_privacy: str = ""
    front_history_privacy: str = ""

    @classmethod
    def from_json(cls, data: Any) -> SystemPrivacy:
        keys = (
            "description_privacy",
            "pronoun_privacy",
            "member_list_privacy",
            "group_list_privacy",
            "front_privacy",
            "front_history_privacy",
        )
        return cls(**_parse(data, {key: _string for key in keys}))


@dataclass
class System:
    id: str
    uuid: str
    name: str = ""
    description: str = ""
    tag: str = ""
    pronouns: str = ""
    avatar_url: str = ""
    banner: str = ""
    color: str = ""
    created: str = ""
    privacy: SystemPrivacy = field(default_factory=SystemPrivacy)

    @classmethod
    def from_json(cls, data: Any) -> System:
        converters: dict[str, _Converter] = {
            key: _string
            for key in (
                "id",
                "uuid",
                "name",
                "description",
                "tag",
                "pronouns",
                "avatar_url",
                "banner",
                "color",
                "created",
            )
        }
        converters["privacy"] = _nested(SystemPrivacy)
        return cls(**_parse(data, converters, frozenset({"id", "uuid"})))


@dataclass
class ProxyTag:
    prefix: str = ""
    suffix: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ProxyTag:
        return cls(**_parse(data, {"prefix": _string, "suffix": _string}))


@dataclass
class MemberPrivacy:
    visibility: str = ""
    name_privacy: str = ""
    description_privacy: str = ""
    birthday_privacy: str = ""
    pronoun_privacy: str = ""
    avatar_privacy: str = ""
    metadata_privacy: str = ""
    proxy_privacy: str = ""

    @classmethod
    def from_json(cls, data: Any) -> MemberPrivacy:
        keys = (
            "visibility",
            "name_privacy",
            "description_privacy",
            "birthday_privacy",
            "pronoun_privacy",
            "avatar_privacy",
            "metadata_privacy",
            "proxy_privacy",
        )
        return cls(**_parse(data, {key: _string for key in keys}))


@dataclass
class Member:
    id: str
    uuid: str
    name: str
    system: str = ""
    display_name: str = ""
    color: str = ""
    birthday: str = ""
    pronouns: str = ""
    avatar_url: str = ""
    webhook_avatar_url: str = ""
    banner: str = ""
    description: str = ""
    created: str = ""
    proxy_tags: list[ProxyTag] = field(default_factory=list)
    keep_proxy: bool = False
    tts: bool = False
    autoproxy_enabled: bool = False
    message_count: int = 0
    last_message_timestamp: str = ""
    privacy: MemberPrivacy = field(default_factory=MemberPrivacy)

    @classmethod
    def from_json(cls, data: Any) -> Member:
        converters: dict[str, _Converter] = {
            key: _string
            for key in (
                "id",
                "uuid",
                "system",
                "name",
                "display_name",
                "color",
                "birthday",
                "pronouns",
                "avatar_url",
                "webhook_avatar_url",
                "banner",
                "description",
                "created",
                "last_message_timestamp",
            )
        }
        converters.update(
            proxy_tags=_list_of(ProxyTag),
            keep_proxy=_boolean,
            tts=_boolean,
            autoproxy_enabled=_boolean,
            message_count=_integer,
            privacy=_nested(MemberPrivacy),
        )
        return cls(**_parse(data, converters, frozenset({"id", "uuid", "name"})))


@dataclass
class Switch:
    id: str
    timestamp: str
    members: list[Member] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Switch:
        converters = {
            "id": _string,
            "timestamp": _string,
            "members": _list_of(Member),
        }
        return cls(
            **_parse(data, converters, frozenset({"id", "timestamp", "members"}))
        )