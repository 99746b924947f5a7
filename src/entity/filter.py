"""Query filter abstractions for collection searches."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FilterInterface(Protocol):
    """Anything that can render itself as query parameters."""

    def get_query(self) -> dict[str, Any]:  # pragma: no cover - protocol stub
        ...


class EmptyFilter:
    """Filter matching every record in a collection."""

    def get_query(self) -> dict[str, Any]:
        return {}
