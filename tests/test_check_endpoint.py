import pytest

from heater_dashboard import check_endpoint as module
from heater_dashboard.check_endpoint import check_endpoint

from .conftest import ENDPOINT


@pytest.mark.asyncio
async def test_reports_sample(fetcher, mock_transport, capsys):
    mock_transport.add_json({"cpu_temp": [42.5], "heater_temp": [30.1]})

    assert await check_endpoint(ENDPOINT, fetcher=fetcher) is True

    out = capsys.readouterr().out
    assert "42.50 °C" in out
    assert "30.10 °C" in out
    assert fetcher.client.is_closed


@pytest.mark.asyncio
async def test_reports_failure(fetcher, mock_transport, capsys):
    mock_transport.add_json({}, status_code=500)

    assert await check_endpoint(ENDPOINT, fetcher=fetcher) is False

    assert "HTTP 500" in capsys.readouterr().out
    assert fetcher.client.is_closed


@pytest.mark.parametrize("ok, code", [(True, 0), (False, 1)])
def test_exit_code(monkeypatch, ok, code):
    seen = {}

    async def fake_check(endpoint_url, timeout):
        seen["args"] = (endpoint_url, timeout)
        return ok

    monkeypatch.setattr(module, "check_endpoint", fake_check)

    assert module.main(["--endpoint-url", ENDPOINT, "--timeout", "2"]) == code
    assert seen["args"] == (ENDPOINT, 2.0)
