"""
Poll the /details endpoint once without the GUI.
Useful for checking the controller is reachable and its response is readable.
"""

import argparse
import asyncio
import sys
from datetime import datetime
from typing import Optional

from heater_dashboard.core.config import DEFAULT_ENDPOINT_URL
from heater_dashboard.core.http_client import DEFAULT_TIMEOUT, SampleFetcher


async def check_endpoint(endpoint_url: str, timeout: float = DEFAULT_TIMEOUT,
                         fetcher: Optional[SampleFetcher] = None) -> bool:
    """Fetch one sample and print it. Returns True if a sample was read."""
    print("\n" + "="*50)
    print("  Endpoint check - Testing /details")
    print("="*50)
    print(f"\n[INFO] GET {endpoint_url}\n")

    fetcher = fetcher or SampleFetcher(endpoint_url, timeout=timeout)
    try:
        result = await fetcher.fetch_sample()
    finally:
        await fetcher.aclose()

    if not result.ok:
        print(f"❌ No sample: {result.error.reason}")
        print("\nMake sure:")
        print("  - The controller is powered and on the network")
        print("  - The URL points at its /details endpoint")
        return False

    sample = result.sample
    at = datetime.fromtimestamp(sample.timestamp).isoformat(timespec="seconds")
    print(f"✅ Sample at {at}:")
    print(f"   CPU temperature:    {sample.cpu_temperature:.2f} °C")
    print(f"   Heater temperature: {sample.heater_temperature:.2f} °C")
    return True


def main(argv=None):
    p = argparse.ArgumentParser(description="Fetch one sample from the /details endpoint")
    p.add_argument("--endpoint-url", default=DEFAULT_ENDPOINT_URL)
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = p.parse_args(argv)

    try:
        ok = asyncio.run(check_endpoint(args.endpoint_url, args.timeout))
    except KeyboardInterrupt:
        print("\n\n[INFO] Check cancelled by user")
        ok = False
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
