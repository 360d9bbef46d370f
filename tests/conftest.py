import os

import httpx
import pytest

from heater_dashboard.core.http_client import SampleFetcher

ENDPOINT = "http://controller.test/details"


class FakeClock:
    """Wall clock that advances one second per reading."""

    def __init__(self, start: float = 1_700_000_000.0, step: float = 1.0):
        self.now = start
        self.step = step

    def __call__(self) -> float:
        t = self.now
        self.now += self.step
        return t


@pytest.fixture
def mock_transport():
    """Mock httpx transport that replays queued responses or errors."""

    class MockTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.queue: list = []

        def add_json(self, json_data, status_code: int = 200):
            self.queue.append(lambda req: httpx.Response(status_code, json=json_data, request=req))

        def add_body(self, content: bytes, status_code: int = 200):
            self.queue.append(lambda req: httpx.Response(status_code, content=content, request=req))

        def add_error(self, exc_type=httpx.ConnectError):
            def raise_(req):
                raise exc_type("simulated failure", request=req)
            self.queue.append(raise_)

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if not self.queue:
                return httpx.Response(503, request=request)
            return self.queue.pop(0)(request)

    return MockTransport()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher(mock_transport, clock):
    return SampleFetcher(
        ENDPOINT,
        client=httpx.AsyncClient(transport=mock_transport),
        clock=clock,
    )


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
