"""
SampleCollector: one poll per timer tick, appended to the chart's series.
"""
import logging
from enum import Enum
from typing import Dict, Optional, Sequence

from .data_buffer import SeriesBuffer
from .http_client import SampleFetcher
from .sample import Sample

logger = logging.getLogger(__name__)

CPU_SERIES = 0
HEATER_SERIES = 1


class CollectorState(Enum):
    IDLE = "idle"
    POLLING = "polling"


class SampleCollector:
    """
    Poll the endpoint and append each sample to the two series buffers.

    The buffers belong to the chart; the collector only appends. Polls are
    serialised: a tick that arrives while a poll is in flight is skipped, so
    timestamps in each series never go backwards.
    """

    def __init__(self, fetcher: SampleFetcher, series: Sequence[SeriesBuffer]):
        if len(series) != 2:
            raise ValueError(f"expected 2 series (cpu, heater), got {len(series)}")
        self.fetcher = fetcher
        self.series = series
        self.state = CollectorState.IDLE
        self.poll_count = 0
        self.success_count = 0
        self.failure_count = 0
        self.skipped_count = 0
        self.last_sample: Optional[Sample] = None

    async def on_refresh(self) -> Optional[Sample]:
        """Run one poll. Returns the appended sample, or None if nothing was drawn."""
        if self.state is CollectorState.POLLING:
            self.skipped_count += 1
            logger.debug("Previous poll still in flight, skipping tick")
            return None

        self.state = CollectorState.POLLING
        try:
            result = await self.fetcher.fetch_sample()
        finally:
            self.state = CollectorState.IDLE
        self.poll_count += 1

        if not result.ok:
            # gap in the chart for this cycle
            self.failure_count += 1
            return None

        sample = result.sample
        self.series[CPU_SERIES].append(sample.timestamp, sample.cpu_temperature)
        self.series[HEATER_SERIES].append(sample.timestamp, sample.heater_temperature)
        self.success_count += 1
        self.last_sample = sample
        return sample

    def get_stats(self) -> Dict[str, int]:
        return {
            "poll_count": self.poll_count,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "skipped_count": self.skipped_count,
        }

    def reset_stats(self):
        self.poll_count = 0
        self.success_count = 0
        self.failure_count = 0
        self.skipped_count = 0
