"""Generic JSON resource on top of a shared ``httpx.Client``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from entity.collection import IterableAPICollection
from entity.errors import InvalidResponseError
from entity.filter import FilterInterface

LOGGER = logging.getLogger(__name__)


class APIResource:
    """CRUD helper scoped to one base URI of the Voice API.

    Instances are cheap: ``copy.copy`` returns a new handle sharing the same
    ``httpx.Client``, so a copy can be re-scoped with :meth:`set_base_uri`
    without touching the original.
    """

    def __init__(
        self,
        http: httpx.Client,
        *,
        base_uri: str = "",
        collection_name: str = "",
        page_size: int = 10,
    ) -> None:
        self._http = http
        self._base_uri = base_uri.rstrip("/")
        self._collection_name = collection_name
        self._page_size = page_size

    @property
    def base_uri(self) -> str:
        return self._base_uri

    def set_base_uri(self, base_uri: str) -> None:
        self._base_uri = base_uri.rstrip("/")

    @property
    def collection_name(self) -> str:
        return self._collection_name

    @property
    def http(self) -> httpx.Client:
        return self._http

    def create(self, body: Mapping[str, Any], uri: str = "") -> dict[str, Any]:
        return self._send("POST", self._base_uri + uri, json=dict(body))

    def get(self, id: str, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._send("GET", self._item_url(id), params=dict(query) if query else None)

    def update(self, id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        return self._send("PUT", self._item_url(id), json=dict(body))

    def delete(self, id: str) -> dict[str, Any]:
        return self._send("DELETE", self._item_url(id))

    def search(self, filter: FilterInterface | None = None, uri: str = "") -> IterableAPICollection:
        return IterableAPICollection(self, filter, uri=uri, page_size=self._page_size)

    def request_page(self, url: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._send("GET", url, params=dict(params) if params else None)

    def _item_url(self, id: str) -> str:
        if not id:
            raise ValueError(f"An item id is required to address {self._base_uri}")
        return f"{self._base_uri}/{id}"

    def _send(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        LOGGER.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            LOGGER.error("%s %s failed: %s", method, url, exc)
            raise

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            LOGGER.error("%s %s returned a non-JSON body", method, url)
            raise InvalidResponseError(f"{method} {url} returned a non-JSON body") from exc
        if not isinstance(data, dict):
            raise InvalidResponseError(f"{method} {url} returned {type(data).__name__}, expected an object")
        return data
