"""Factory wiring a configured CallClient."""

from __future__ import annotations

import httpx

from calls.call import Call
from calls.client import CallClient
from config.settings import Settings, get_settings
from entity.errors import ConfigurationError
from entity.hydrator import ArrayHydrator
from transport.api_resource import APIResource


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the shared ``httpx.Client`` carrying auth and defaults."""

    if not settings.has_credentials:
        raise ConfigurationError(
            "Voice API credentials are not configured "
            "(set NEXMO_API_TOKEN or NEXMO_API_KEY/NEXMO_API_SECRET)"
        )

    headers = {
        "Accept": "application/json",
        "User-Agent": settings.nexmo_user_agent,
    }
    auth: httpx.Auth | None = None
    if settings.nexmo_api_token:
        headers["Authorization"] = f"Bearer {settings.nexmo_api_token}"
    else:
        auth = httpx.BasicAuth(settings.nexmo_api_key or "", settings.nexmo_api_secret or "")

    return httpx.Client(
        base_url=settings.nexmo_api_base_url,
        headers=headers,
        auth=auth,
        timeout=settings.nexmo_request_timeout,
    )


def build_call_client(
    settings: Settings | None = None,
    *,
    http_client: httpx.Client | None = None,
) -> CallClient:
    """Instantiate a CallClient for ``/v1/calls``."""

    settings = settings or get_settings()
    http = http_client if http_client is not None else build_http_client(settings)

    api = APIResource(
        http,
        base_uri=CallClient.get_collection_path(),
        collection_name=CallClient.get_collection_name(),
        page_size=settings.nexmo_search_page_size,
    )
    hydrator = ArrayHydrator(prototype=Call())
    return CallClient(api, hydrator)
