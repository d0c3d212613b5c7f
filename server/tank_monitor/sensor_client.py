#!/usr/bin/env python3
"""Simulated tank sensor: posts water levels and polls PID parameters over HTTP"""
import argparse
import asyncio
import random
import sys
from typing import Optional

import httpx

from tank_monitor.config.settings import PORT, SAMPLE_INTERVAL_SECONDS


class SimulatedTankSensor:
    def __init__(
        self,
        api_url: str,
        interval: float = SAMPLE_INTERVAL_SECONDS,
        start_level: float = 50.0,
        step: float = 2.0,
        rng: Optional[random.Random] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.interval = interval
        self.level = start_level
        self.step = step
        self.rng = rng or random.Random()
        self.params: Optional[dict] = None
        self.send_count = 0

    def next_level(self) -> float:
        """Random walk kept inside the tank (0-100%)"""
        self.level = min(100.0, max(0.0, self.level + self.rng.gauss(0.0, self.step)))
        return round(self.level, 2)

    async def send_water_level(self, client: httpx.AsyncClient, level: float) -> bool:
        """Send one reading to the server"""
        try:
            response = await client.post(f"{self.api_url}/waterLevel", json={"waterLevel": level})
            response.raise_for_status()
        except httpx.HTTPError as e:
            print(f"⚠️ Error sending water level: {e}")
            return False
        self.send_count += 1
        return True

    async def fetch_params(self, client: httpx.AsyncClient) -> Optional[dict]:
        """Fetch the setpoint and gains the controller should use"""
        try:
            response = await client.get(f"{self.api_url}/params")
            response.raise_for_status()
        except httpx.HTTPError as e:
            print(f"⚠️ Error fetching parameters: {e}")
            return None
        self.params = response.json()
        return self.params

    async def step_once(self, client: httpx.AsyncClient) -> bool:
        level = self.next_level()
        sent = await self.send_water_level(client, level)
        params = await self.fetch_params(client)
        if sent:
            print(f"📤 Water level: {level}% (total: {self.send_count})")
        if params is not None:
            print(
                f"📥 Setpoint={params['setpoint']} "
                f"Kp={params['kp']} Ki={params['ki']} Kd={params['kd']}"
            )
        return sent

    async def run(self, count: Optional[int] = None, client: Optional[httpx.AsyncClient] = None):
        """Run main loop; stops after `count` readings when given"""
        owns_client = client is None
        if owns_client:
            client = httpx.AsyncClient(timeout=10.0)

        print(f"🔌 Sending readings to {self.api_url} every {self.interval}s")
        try:
            sent = 0
            while count is None or sent < count:
                await self.step_once(client)
                sent += 1
                if count is None or sent < count:
                    await asyncio.sleep(self.interval)
        finally:
            if owns_client:
                await client.aclose()


def main():
    parser = argparse.ArgumentParser(
        description="Simulated water tank sensor - posts readings and polls PID parameters"
    )
    parser.add_argument(
        "--url", "-u",
        type=str,
        default=f"http://localhost:{PORT}/api",
        help=f"API base URL (default: http://localhost:{PORT}/api)"
    )
    parser.add_argument(
        "--interval", "-i",
        type=float,
        default=SAMPLE_INTERVAL_SECONDS,
        help=f"Seconds between readings (default: {SAMPLE_INTERVAL_SECONDS})"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=None,
        help="Number of readings to send (default: run until interrupted)"
    )
    parser.add_argument(
        "--start-level",
        type=float,
        default=50.0,
        help="Initial water level in percent (default: 50)"
    )

    args = parser.parse_args()

    if not args.url.startswith(("http://", "https://")):
        print("⚠️  URL must start with http:// or https://")
        print(f"   You provided: {args.url}")
        sys.exit(1)

    sensor = SimulatedTankSensor(args.url, interval=args.interval, start_level=args.start_level)

    try:
        asyncio.run(sensor.run(count=args.count))
    except KeyboardInterrupt:
        print("\n✅ Shutdown complete")


if __name__ == "__main__":
    main()
