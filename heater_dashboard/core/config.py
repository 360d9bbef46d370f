"""
Startup configuration for the dashboard.
"""
import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

DEFAULT_ENDPOINT_URL = "http://192.168.24.107/details"


class ConfigError(ValueError):
    """Invalid startup configuration"""


@dataclass(frozen=True)
class DashboardConfig:
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    refresh_interval: float = 10.0      # seconds between polls
    duration: float = 600.0             # visible window, seconds
    delay: float = -180.0               # negative: newest point sits left of the right edge
    y_min: float = -10.0
    y_max: float = 100.0
    timeout: float = 5.0                # per request, seconds
    log_level: str = "INFO"

    def validate(self) -> "DashboardConfig":
        try:
            url = httpx.URL(self.endpoint_url)
        except httpx.InvalidURL as e:
            raise ConfigError(f"invalid endpoint URL {self.endpoint_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigError(f"endpoint URL must be http(s)://host/...: {self.endpoint_url!r}")
        for name in ("refresh_interval", "duration", "timeout"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.y_min >= self.y_max:
            raise ConfigError(f"y_min ({self.y_min}) must be below y_max ({self.y_max})")
        if logging.getLevelName(self.log_level.upper()) not in (
                logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            raise ConfigError(f"unknown log level: {self.log_level!r}")
        return self


def build_parser() -> argparse.ArgumentParser:
    defaults = DashboardConfig()
    p = argparse.ArgumentParser(description="Realtime CPU / heater temperature dashboard")
    p.add_argument("--endpoint-url", default=defaults.endpoint_url,
                   help="URL of the /details endpoint (default: %(default)s)")
    p.add_argument("--refresh-interval", type=float, default=defaults.refresh_interval,
                   help="Seconds between polls (default: %(default)s)")
    p.add_argument("--duration", type=float, default=defaults.duration,
                   help="Visible time window in seconds (default: %(default)s)")
    p.add_argument("--delay", type=float, default=defaults.delay,
                   help="Display delay in seconds; negative leaves room on the right (default: %(default)s)")
    p.add_argument("--y-min", type=float, default=defaults.y_min)
    p.add_argument("--y-max", type=float, default=defaults.y_max)
    p.add_argument("--timeout", type=float, default=defaults.timeout,
                   help="HTTP request timeout in seconds (default: %(default)s)")
    p.add_argument("--log-level", default=defaults.log_level,
                   help="DEBUG, INFO, WARNING or ERROR (default: %(default)s)")
    return p


def load_config(argv: Optional[List[str]] = None,
                parser: Optional[argparse.ArgumentParser] = None) -> DashboardConfig:
    """Parse command-line options into a validated DashboardConfig.

    Raises ConfigError on invalid values.
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    return DashboardConfig(
        endpoint_url=args.endpoint_url,
        refresh_interval=args.refresh_interval,
        duration=args.duration,
        delay=args.delay,
        y_min=args.y_min,
        y_max=args.y_max,
        timeout=args.timeout,
        log_level=args.log_level,
    ).validate()
