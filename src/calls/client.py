"""Collection-style client for the ``/v1/calls`` resource."""

from __future__ import annotations

import copy
import logging
import warnings
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Literal

from calls.call import Call
from calls.filter import Filter
from entity.collection import IterableAPICollection
from entity.errors import UnsupportedOperationError
from entity.filter import FilterInterface
from entity.hydrator import HydratorInterface
from transport.api_resource import APIResource

LOGGER = logging.getLogger(__name__)

MediaType = Literal["stream", "talk"]


def _deprecated(message: str) -> None:
    LOGGER.warning(message)
    warnings.warn(message, DeprecationWarning, stacklevel=3)


class CallClient:
    """Create, update, search and control calls.

    Media operations never touch the shared :class:`APIResource`; each one
    works on a copy scoped to ``/v1/calls/<call id>``.
    """

    def __init__(self, api: APIResource, hydrator: HydratorInterface) -> None:
        self._api = api
        self._hydrator = hydrator
        self._filter: FilterInterface | None = None

    @staticmethod
    def get_collection_name() -> str:
        return "calls"

    @classmethod
    def get_collection_path(cls) -> str:
        return "/v1/" + cls.get_collection_name()

    @property
    def api(self) -> APIResource:
        return self._api

    @property
    def hydrator(self) -> HydratorInterface:
        return self._hydrator

    def set_filter(self, filter: FilterInterface | None) -> None:
        self._filter = filter

    def get_filter(self) -> FilterInterface | None:
        return self._filter

    # Core operations

    def create(self, call: Call | Mapping[str, Any]) -> Call:
        """Place a new call and return it hydrated with the server-assigned id."""

        if isinstance(call, Call):
            body = call.to_request_data()
        else:
            _deprecated(
                "Passing a mapping to CallClient.create() is deprecated, please pass a Call object instead"
            )
            body = dict(call)

        response = self._api.create(body)
        created = self._hydrator.hydrate(response)
        created.client = self
        LOGGER.info("Created call %s (status=%s)", created.id, created.status)
        return created

    def update(self, payload: Mapping[str, Any], id_or_call: Call | str) -> Call:
        call = self._coerce_call(id_or_call)
        call.client = self
        call.put(payload)
        return call

    def get(self, call: Call | str) -> Call:
        if isinstance(call, Call):
            _deprecated("Passing a Call object to CallClient.get() is deprecated, please pass a string id")
        else:
            call = Call(call)
        if not call.id:
            raise ValueError("A call id is required for get()")

        response = self._api.get(call.id)
        self._hydrator.hydrate_object(response, call)
        call.client = self
        return call

    def search(self, filter: FilterInterface | None = None) -> IterableAPICollection:
        """Return a lazily paged collection of hydrated calls matching ``filter``."""

        collection = self._api.search(filter)
        collection.set_hydrator(self._hydrator)
        collection.set_client(self)
        return collection

    # Media control

    def stream_audio(
        self,
        call: Call | str,
        urls: str | Sequence[str],
        loop: int = 1,
        volume_level: float = 0.0,
    ) -> None:
        stream_url = [urls] if isinstance(urls, str) else list(urls)
        self._scoped_api(call).create(
            {"stream_url": stream_url, "loop": loop, "level": volume_level},
            "/stream",
        )

    def dtmf(self, call: Call | str, digits: str) -> None:
        self._scoped_api(call).create({"digits": digits}, "/dtmf")

    def talk(
        self,
        call: Call | str,
        text: str,
        voice_name: str = "Kimberly",
        loop: int = 1,
        volume_level: float = 0.0,
    ) -> None:
        self._scoped_api(call).create(
            {"text": text, "voice_name": voice_name, "loop": loop, "level": volume_level},
            "/talk",
        )

    def stream_audio_stop(self, call: Call | str) -> None:
        self._scoped_api(call).delete("stream")

    def talk_stop(self, call: Call | str) -> None:
        self._scoped_api(call).delete("talk")

    def _scoped_api(self, call: Call | str) -> APIResource:
        call_id = call.id if isinstance(call, Call) else call
        if not call_id:
            raise ValueError("A call id is required for media operations")

        api = copy.copy(self._api)
        api.set_base_uri(f"{self._api.base_uri}/{call_id}")
        return api

    @staticmethod
    def _coerce_call(id_or_call: Call | str) -> Call:
        if isinstance(id_or_call, Call):
            return id_or_call
        return Call(id_or_call)

    # Deprecated surface

    def __call__(self, filter: Filter | None = None) -> "CallClient":
        _deprecated("Calling CallClient directly is deprecated, please use search() instead")
        if filter is not None:
            self.set_filter(filter)
        return self

    def __iter__(self) -> Iterator[Call]:
        _deprecated("Iterating CallClient is deprecated, please iterate search() instead")
        return iter(self.search(self._filter))

    def put(self, payload: Mapping[str, Any], id_or_call: Call | str) -> Call:
        _deprecated("CallClient.put() is deprecated, please use update() instead")
        return self.update(payload, id_or_call)

    def post(self, call: Call | Mapping[str, Any]) -> Call:
        _deprecated("CallClient.post() is deprecated, please use create() instead")
        return self.create(call)

    def delete(self, call: Call | str, type: MediaType) -> Call:
        _deprecated("CallClient.delete() is deprecated, please use stream_audio_stop() or talk_stop() instead")
        call = self._coerce_call(call)
        if type == "stream":
            self.stream_audio_stop(call)
        elif type == "talk":
            self.talk_stop(call)
        else:
            raise ValueError(f"Unsupported media type for delete(): {type!r}")
        return call

    def __getitem__(self, call: Call | str) -> Call:
        _deprecated("Index access on CallClient is deprecated, please use get() instead")
        call = self._coerce_call(call)
        call.client = self
        return call

    def __contains__(self, call: object) -> bool:
        return True

    def __setitem__(self, key: Any, value: Any) -> None:
        raise UnsupportedOperationError("can not set collection properties")

    def __delitem__(self, key: Any) -> None:
        raise UnsupportedOperationError("can not unset collection properties")
