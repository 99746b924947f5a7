"""Lazily paged view over a list endpoint."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from entity.filter import EmptyFilter, FilterInterface
from entity.hydrator import HydratorInterface

if TYPE_CHECKING:
    from transport.api_resource import APIResource

LOGGER = logging.getLogger(__name__)


class IterableAPICollection:
    """Iterate every record behind a HAL-style collection endpoint.

    Nothing is requested until the collection is iterated or :attr:`count` is
    read. Records are taken from ``_embedded[<collection name>]`` and pages are
    followed through ``_links.next.href``.
    """

    def __init__(
        self,
        api: APIResource,
        filter: FilterInterface | None = None,
        *,
        uri: str = "",
        page_size: int = 10,
    ) -> None:
        self._api = api
        self._filter: FilterInterface = filter if filter is not None else EmptyFilter()
        self._uri = uri
        self._page_size = page_size
        self._hydrator: HydratorInterface | None = None
        self._client: Any = None
        self._first_page: dict[str, Any] | None = None

    def set_hydrator(self, hydrator: HydratorInterface | None) -> None:
        self._hydrator = hydrator

    def set_client(self, client: Any) -> None:
        """Bind hydrated records to ``client`` so they can issue further requests."""

        self._client = client

    def get_filter(self) -> FilterInterface:
        return self._filter

    @property
    def count(self) -> int:
        page = self._load_first_page()
        if "count" in page:
            return int(page["count"])
        return len(self._records(page))

    def __iter__(self) -> Iterator[Any]:
        page = self._load_first_page()
        while True:
            records = self._records(page)
            for record in records:
                yield self._hydrate(record)

            next_href = self._next_href(page)
            if not records or not next_href:
                return
            LOGGER.debug("Fetching next %s page: %s", self._api.collection_name, next_href)
            page = self._api.request_page(next_href)

    def _load_first_page(self) -> dict[str, Any]:
        if self._first_page is None:
            params = dict(self._filter.get_query())
            params.setdefault("page_size", self._page_size)
            self._first_page = self._api.request_page(self._api.base_uri + self._uri, params)
        return self._first_page

    def _records(self, page: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        embedded = page.get("_embedded") or {}
        return list(embedded.get(self._api.collection_name) or [])

    @staticmethod
    def _next_href(page: Mapping[str, Any]) -> str | None:
        links = page.get("_links") or {}
        next_link = links.get("next") or {}
        href = next_link.get("href")
        return str(href) if href else None

    def _hydrate(self, record: Mapping[str, Any]) -> Any:
        if self._hydrator is None:
            return record

        obj = self._hydrator.hydrate(record)
        if self._client is not None and hasattr(obj, "client"):
            obj.client = self._client
        return obj
