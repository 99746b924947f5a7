"""HTTP transport for the Voice API.

Authentication, retries and timeouts belong to the injected ``httpx.Client``.
"""
