"""Client for the Voice API ``calls`` resource."""

from calls.call import Call
from calls.client import CallClient
from calls.endpoints import PhoneEndpoint, RawEndpoint, SipEndpoint, Webhook, WebsocketEndpoint
from calls.factory import build_call_client
from calls.filter import Filter

__all__ = [
    "Call",
    "CallClient",
    "Filter",
    "PhoneEndpoint",
    "RawEndpoint",
    "SipEndpoint",
    "Webhook",
    "WebsocketEndpoint",
    "build_call_client",
]
