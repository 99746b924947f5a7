from __future__ import annotations

import pytest

from calls.call import Call
from calls.endpoints import PhoneEndpoint, RawEndpoint
from calls.filter import Filter


def _page(uuids: list[str], *, count: int, next_href: str | None = None) -> dict:
    page = {
        "count": count,
        "page_size": 2,
        "_embedded": {"calls": [{"uuid": uuid, "status": "completed"} for uuid in uuids]},
        "_links": {"self": {"href": "/v1/calls"}},
    }
    if next_href:
        page["_links"]["next"] = {"href": next_href}
    return page


@pytest.fixture()
def two_pages(transport) -> None:
    transport.add("GET", "/v1/calls", json=_page(["c1", "c2"], count=3, next_href="/v1/calls?page_size=2&record_index=2"))
    transport.add("GET", "/v1/calls", json=_page(["c3"], count=3))


def test_search_yields_hydrated_calls_across_pages(call_client, transport, two_pages) -> None:
    collection = call_client.search()
    assert transport.requests == []

    calls = list(collection)

    assert [call.id for call in calls] == ["c1", "c2", "c3"]
    assert all(isinstance(call, Call) for call in calls)
    assert all(call.client is call_client for call in calls)
    assert len(transport.requests) == 2
    assert transport.requests[0].url.params["page_size"] == "2"
    assert transport.requests[1].url.params["record_index"] == "2"


def test_count_reads_first_page_only(call_client, transport, two_pages) -> None:
    collection = call_client.search()

    assert collection.count == 3
    assert len(transport.requests) == 1


def test_filter_becomes_query_parameters(call_client, transport) -> None:
    transport.add("GET", "/v1/calls", json=_page([], count=0))
    search_filter = Filter(status="answered", page_size=25, conversation_uuid="CON-1")

    collection = call_client.search(search_filter)
    assert list(collection) == []

    params = transport.last.url.params
    assert params["status"] == "answered"
    assert params["page_size"] == "25"
    assert params["conversation_uuid"] == "CON-1"
    assert collection.get_filter() is search_filter


def test_collection_without_hydrator_yields_raw_records(call_client, transport) -> None:
    transport.add("GET", "/v1/calls", json=_page(["c1"], count=1))

    records = list(call_client.api.search())

    assert records == [{"uuid": "c1", "status": "completed"}]


def test_search_keeps_unmodelled_endpoints_as_raw_data(call_client, transport) -> None:
    page = {
        "count": 3,
        "_embedded": {
            "calls": [
                {"uuid": "c1", "to": {"type": "app", "user": "alice"}, "from": {"type": "phone", "number": "15551234567"}},
                {"uuid": "c2", "to": {"type": "phone"}},
                {"uuid": "c3", "to": [{"type": "vbc", "extension": "1234"}]},
            ]
        },
        "_links": {},
    }
    transport.add("GET", "/v1/calls", json=page)

    calls = list(call_client.search())

    assert [call.id for call in calls] == ["c1", "c2", "c3"]
    assert calls[0].to == [RawEndpoint({"type": "app", "user": "alice"})]
    assert calls[0].to[0].type == "app"
    assert calls[0].from_ == PhoneEndpoint("15551234567")
    assert calls[1].to == [RawEndpoint({"type": "phone"})]
    assert calls[2].to_dict()["to"] == [{"type": "vbc", "extension": "1234"}]
