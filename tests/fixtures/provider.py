"""
Stub for the Azure Translator API.

Plugs into httpx.MockTransport, hands out queued responses in order and
records every outbound request so tests can assert on attempts, headers,
query strings and bodies.
"""

import json

import httpx


class ProviderStub:
    """Callable MockTransport handler with a queue of canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected provider call: {request.method} {request.url}")

        response = self.responses.pop(0)
        if isinstance(response, type) and issubclass(response, httpx.TransportError):
            raise response("provider unreachable", request=request)
        return response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def body_of(self, index: int = -1):
        return json.loads(self.requests[index].content)


def rate_limited() -> httpx.Response:
    return httpx.Response(429, json={"error": {"code": 429001, "message": "Too many requests"}})
