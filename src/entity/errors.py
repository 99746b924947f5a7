"""Exceptions raised by the client library itself.

Transport failures are not wrapped: ``httpx.HTTPStatusError`` and
``httpx.TransportError`` reach the caller unchanged.
"""

from __future__ import annotations


class NexmoError(Exception):
    default_detail: str = "Nexmo client error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ConfigurationError(NexmoError):
    default_detail = "Client is not configured for this operation."


class UnsupportedOperationError(ConfigurationError):
    default_detail = "Operation is not supported on a read-only collection."


class InvalidResponseError(NexmoError):
    default_detail = "The API returned a body that is not a JSON object."
