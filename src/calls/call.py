"""Call entity: request payload, server state and bound-client helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from calls.endpoints import Endpoint, Webhook, coerce_endpoint, endpoint_from_response
from entity.errors import ConfigurationError

if TYPE_CHECKING:
    from calls.client import CallClient

RESPONSE_FIELDS = (
    "conversation_uuid",
    "status",
    "direction",
    "rate",
    "price",
    "duration",
    "start_time",
    "end_time",
    "network",
)


def _coerce_webhook(value: Webhook | str | None) -> Webhook | None:
    if value is None or isinstance(value, Webhook):
        return value
    return Webhook(url=value)


class Call:
    """A single call on the Voice API.

    A ``Call`` is either built locally (an id, or the endpoints and webhooks
    for a new call) or hydrated from a response payload. Once ``client`` is
    set, the call can issue further requests against itself.
    """

    def __init__(
        self,
        id: str | None = None,
        *,
        to: Endpoint | str | Sequence[Endpoint | str | Mapping[str, Any]] | None = None,
        from_: Endpoint | str | Mapping[str, Any] | None = None,
        answer_webhook: Webhook | str | None = None,
        event_webhook: Webhook | str | None = None,
        fallback_webhook: Webhook | str | None = None,
        ncco: Iterable[Mapping[str, Any]] | None = None,
        machine_detection: str | None = None,
        length_timer: int | None = None,
        ringing_timer: int | None = None,
        client: CallClient | None = None,
    ) -> None:
        self.id = id
        self.to: list[Endpoint] = self._coerce_to(to)
        self.from_: Endpoint | None = coerce_endpoint(from_) if from_ is not None else None
        self.answer_webhook = _coerce_webhook(answer_webhook)
        self.event_webhook = _coerce_webhook(event_webhook)
        self.fallback_webhook = _coerce_webhook(fallback_webhook)
        self.ncco: list[dict[str, Any]] | None = [dict(action) for action in ncco] if ncco is not None else None
        self.machine_detection = machine_detection
        self.length_timer = length_timer
        self.ringing_timer = ringing_timer
        self.client = client

        self.conversation_uuid: str | None = None
        self.status: str | None = None
        self.direction: str | None = None
        self.rate: str | None = None
        self.price: str | None = None
        self.duration: str | None = None
        self.start_time: str | None = None
        self.end_time: str | None = None
        self.network: str | None = None
        self._data: dict[str, Any] = {}

    @staticmethod
    def _coerce_to(value: Any, parse=coerce_endpoint) -> list[Endpoint]:
        if value is None:
            return []
        if isinstance(value, (str, Mapping)) or not isinstance(value, Sequence):
            return [parse(value)]
        return [parse(item) for item in value]

    def __copy__(self) -> "Call":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.to = list(self.to)
        clone.ncco = [dict(action) for action in self.ncco] if self.ncco is not None else None
        clone._data = dict(self._data)
        return clone

    def __repr__(self) -> str:
        return f"Call(id={self.id!r}, status={self.status!r})"

    # Serialization

    def populate(self, data: Mapping[str, Any]) -> None:
        """Update this call from a response payload."""

        if data.get("uuid"):
            self.id = str(data["uuid"])
        elif data.get("id"):
            self.id = str(data["id"])

        for name in RESPONSE_FIELDS:
            if name in data:
                setattr(self, name, data[name])

        if data.get("to"):
            self.to = self._coerce_to(data["to"], endpoint_from_response)
        if data.get("from"):
            self.from_ = endpoint_from_response(data["from"])

        self._data.update(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], client: CallClient | None = None) -> "Call":
        call = cls(client=client)
        call.populate(data)
        return call

    def to_request_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.to:
            data["to"] = [endpoint.to_dict() for endpoint in self.to]
        if self.from_ is not None:
            data["from"] = self.from_.to_dict()
        if self.ncco is not None:
            data["ncco"] = [dict(action) for action in self.ncco]
        if self.answer_webhook is not None:
            data["answer_url"] = [self.answer_webhook.url]
            data["answer_method"] = self.answer_webhook.method
        if self.event_webhook is not None:
            data["event_url"] = [self.event_webhook.url]
            data["event_method"] = self.event_webhook.method
        if self.fallback_webhook is not None:
            data["fallback_url"] = [self.fallback_webhook.url]
            data["fallback_method"] = self.fallback_webhook.method
        if self.machine_detection is not None:
            data["machine_detection"] = self.machine_detection
        if self.length_timer is not None:
            data["length_timer"] = self.length_timer
        if self.ringing_timer is not None:
            data["ringing_timer"] = self.ringing_timer
        return data

    def to_dict(self) -> dict[str, Any]:
        data = dict(self._data)
        data.update(self.to_request_data())
        if self.id is not None:
            data["uuid"] = self.id
        return data

    # Bound-client operations

    def _require_client(self) -> CallClient:
        if self.client is None:
            raise ConfigurationError("Call is not bound to a client")
        return self.client

    def _require_id(self) -> str:
        if not self.id:
            raise ConfigurationError("Call has no id; create it first")
        return self.id

    def put(self, payload: Mapping[str, Any]) -> "Call":
        """Send ``PUT /v1/calls/<id>`` and merge any returned state."""

        response = self._require_client().api.update(self._require_id(), payload)
        if response:
            self.populate(response)
        return self

    def refresh(self) -> "Call":
        self.populate(self._require_client().api.get(self._require_id()))
        return self

    def hangup(self) -> "Call":
        return self.put({"action": "hangup"})

    def mute(self) -> "Call":
        return self.put({"action": "mute"})

    def unmute(self) -> "Call":
        return self.put({"action": "unmute"})

    def earmuff(self) -> "Call":
        return self.put({"action": "earmuff"})

    def unearmuff(self) -> "Call":
        return self.put({"action": "unearmuff"})

    def transfer(
        self,
        *,
        ncco: Iterable[Mapping[str, Any]] | None = None,
        url: str | None = None,
    ) -> "Call":
        """Move the call onto a new NCCO, given inline or by answer URL."""

        if (ncco is None) == (url is None):
            raise ValueError("transfer() needs exactly one of ncco or url")

        destination: dict[str, Any] = {"type": "ncco"}
        if ncco is not None:
            destination["ncco"] = [dict(action) for action in ncco]
        else:
            destination["url"] = [url]
        return self.put({"action": "transfer", "destination": destination})

    def talk(self, text: str, **kwargs: Any) -> None:
        self._require_client().talk(self, text, **kwargs)

    def talk_stop(self) -> None:
        self._require_client().talk_stop(self)

    def stream_audio(self, urls: str | Sequence[str], **kwargs: Any) -> None:
        self._require_client().stream_audio(self, urls, **kwargs)

    def stream_audio_stop(self) -> None:
        self._require_client().stream_audio_stop(self)

    def dtmf(self, digits: str) -> None:
        self._require_client().dtmf(self, digits)
