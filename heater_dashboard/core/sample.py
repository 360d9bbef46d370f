"""
Sample data model and fetch result.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Sample:
    """One timestamped pair of sensor readings"""
    timestamp: float            # Unix seconds
    cpu_temperature: float      # °C
    heater_temperature: float   # °C


class SampleUnavailable(Exception):
    """No sample could be read from the endpoint.

    Covers transport errors, non-success status and malformed bodies alike;
    `reason` is for diagnostics only.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


@dataclass(frozen=True)
class FetchResult:
    """Either a Sample or the SampleUnavailable that prevented it"""
    sample: Optional[Sample] = None
    error: Optional[SampleUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.sample is not None

    @classmethod
    def success(cls, sample: Sample) -> "FetchResult":
        return cls(sample=sample)

    @classmethod
    def failure(cls, error: SampleUnavailable) -> "FetchResult":
        return cls(error=error)
