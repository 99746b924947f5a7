"""Endpoint and webhook value types used in call payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Union

HttpMethod = Literal["GET", "POST"]


@dataclass(frozen=True, slots=True)
class PhoneEndpoint:
    number: str
    dtmf_answer: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "phone", "number": self.number}
        if self.dtmf_answer:
            data["dtmfAnswer"] = self.dtmf_answer
        return data


@dataclass(frozen=True, slots=True)
class SipEndpoint:
    uri: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "sip", "uri": self.uri}


@dataclass(frozen=True, slots=True)
class WebsocketEndpoint:
    uri: str
    content_type: str = "audio/l16;rate=16000"
    headers: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "websocket", "uri": self.uri, "content-type": self.content_type}
        if self.headers:
            data["headers"] = dict(self.headers)
        return data


@dataclass(frozen=True, slots=True)
class RawEndpoint:
    """Endpoint reported by the API in a shape this library does not model (app, vbc, ...)."""

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str | None:
        return self.data.get("type")

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)


Endpoint = Union[PhoneEndpoint, SipEndpoint, WebsocketEndpoint, RawEndpoint]


def endpoint_from_dict(data: Mapping[str, Any]) -> Endpoint:
    """Build an endpoint from its wire representation.

    Payloads without a ``type`` are treated as phone numbers, which is what
    the API reports for PSTN legs.
    """

    kind = data.get("type", "phone")
    if kind == "phone":
        return PhoneEndpoint(number=str(data["number"]), dtmf_answer=data.get("dtmfAnswer"))
    if kind == "sip":
        return SipEndpoint(uri=str(data["uri"]))
    if kind == "websocket":
        return WebsocketEndpoint(
            uri=str(data["uri"]),
            content_type=data.get("content-type", "audio/l16;rate=16000"),
            headers=dict(data.get("headers") or {}),
        )
    raise ValueError(f"Unsupported endpoint type: {kind}")


def coerce_endpoint(value: Endpoint | Mapping[str, Any] | str) -> Endpoint:
    if isinstance(value, (PhoneEndpoint, SipEndpoint, WebsocketEndpoint, RawEndpoint)):
        return value
    if isinstance(value, str):
        return PhoneEndpoint(number=value)
    return endpoint_from_dict(value)


def endpoint_from_response(data: Mapping[str, Any] | str) -> Endpoint:
    """Like :func:`coerce_endpoint`, but keeps unmodelled or incomplete legs as raw data."""

    if isinstance(data, str):
        return PhoneEndpoint(number=data)
    if not isinstance(data, Mapping):
        return RawEndpoint(data={"value": data})
    try:
        return endpoint_from_dict(data)
    except (KeyError, ValueError):
        return RawEndpoint(data=dict(data))


@dataclass(frozen=True, slots=True)
class Webhook:
    url: str
    method: HttpMethod = "POST"
