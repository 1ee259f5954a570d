import json

import httpx
import pytest
import pytest_asyncio

from messages_worker_sdk import ClientSettings, MessagesWorkerClient

TEST_BASE_URL = "http://messages-worker.test"


class RecordingHandler:
    """MockTransport handler that keeps every request it receives."""

    def __init__(self, handler):
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def json_response(status_code: int, payload) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None, base_url=TEST_BASE_URL, timeout_seconds=5)


@pytest_asyncio.fixture
async def make_client(settings):
    clients: list[MessagesWorkerClient] = []

    def _make(handler):
        recorder = RecordingHandler(handler)
        client = MessagesWorkerClient(settings, transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def no_network():
    def _fail(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request: {request.method} {request.url}")

    return _fail
