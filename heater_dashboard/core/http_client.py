import logging
import math
import time
from typing import Any, Callable, Optional

import httpx

from .sample import FetchResult, Sample, SampleUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


def _first_reading(payload: dict, field: str) -> float:
    values = payload.get(field)
    if not isinstance(values, list) or not values:
        raise SampleUnavailable(f"'{field}' missing or empty")
    value = values[0]
    # bool is an int subclass, but never a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SampleUnavailable(f"'{field}[0]' is not a number: {value!r}")
    try:
        reading = float(value)
    except OverflowError:
        raise SampleUnavailable(f"'{field}[0]' out of range") from None
    if not math.isfinite(reading):
        raise SampleUnavailable(f"'{field}[0]' is not finite: {reading!r}")
    return reading


def parse_details(payload: Any, timestamp: float) -> Sample:
    """
    Build a Sample from a /details body.
    Only index 0 of `cpu_temp` and `heater_temp` is used.
    Raises SampleUnavailable when the body does not have that shape.
    """
    if not isinstance(payload, dict):
        raise SampleUnavailable(f"body is not a JSON object: {type(payload).__name__}")
    return Sample(
        timestamp=timestamp,
        cpu_temperature=_first_reading(payload, "cpu_temp"),
        heater_temperature=_first_reading(payload, "heater_temp"),
    )


class SampleFetcher:
    """Read the latest sensor pair from the heater controller's REST endpoint."""

    def __init__(self, endpoint_url: str, timeout: float = DEFAULT_TIMEOUT,
                 client: Optional[httpx.AsyncClient] = None,
                 clock: Callable[[], float] = time.time):
        self.endpoint_url = endpoint_url
        self.clock = clock
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_sample(self) -> FetchResult:
        """GET the endpoint once. Never raises; failures come back in the result."""
        try:
            response = await self.client.get(self.endpoint_url)
            if not response.is_success:
                raise SampleUnavailable(f"HTTP {response.status_code}")
            try:
                payload = response.json()
            except ValueError as e:
                raise SampleUnavailable(f"invalid JSON: {e}") from e
            sample = parse_details(payload, self.clock())
        except httpx.HTTPError as e:
            err = SampleUnavailable(f"{type(e).__name__}: {e}")
            logger.warning("[HTTP] GET %s failed: %s", self.endpoint_url, err.reason)
            return FetchResult.failure(err)
        except SampleUnavailable as err:
            logger.warning("[HTTP] GET %s failed: %s", self.endpoint_url, err.reason)
            return FetchResult.failure(err)

        logger.debug("[HTTP] cpu=%.2f heater=%.2f", sample.cpu_temperature, sample.heater_temperature)
        return FetchResult.success(sample)

    async def aclose(self):
        await self.client.aclose()
        logger.info("[HTTP] Client closed.")
