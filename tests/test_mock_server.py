import httpx
import pytest
from fastapi.testclient import TestClient

from heater_dashboard.core.http_client import SampleFetcher
from heater_dashboard.mock_server import create_app


def test_details_defaults():
    client = TestClient(create_app())
    resp = client.get("/details")
    assert resp.status_code == 200
    assert resp.json() == {"cpu_temp": [25.0], "heater_temp": [30.0]}


def test_details_rounds_readings():
    client = TestClient(create_app(cpu_temp=41.23456, heater_temp=29.999))
    assert client.get("/details").json() == {"cpu_temp": [41.23], "heater_temp": [30.0]}


def test_unknown_path():
    client = TestClient(create_app())
    assert client.get("/tempareture/cpu").status_code == 404


@pytest.mark.asyncio
async def test_fetcher_against_mock_server():
    transport = httpx.ASGITransport(app=create_app(cpu_temp=55.5, heater_temp=33.0))
    fetcher = SampleFetcher(
        "http://mock/details",
        client=httpx.AsyncClient(transport=transport),
        clock=lambda: 5.0,
    )

    result = await fetcher.fetch_sample()
    await fetcher.aclose()

    assert result.ok
    assert (result.sample.cpu_temperature, result.sample.heater_temperature) == (55.5, 33.0)
