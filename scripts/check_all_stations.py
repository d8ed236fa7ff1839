#!/usr/bin/env python3
"""Check if all stations in a TOML config file can be queried."""

import argparse
import asyncio
import sys
from pathlib import Path

import aiohttp

# Add src to path
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir / "src"))

from sl_departures.adapters.config import AppConfig, StationConfigurationLoader
from sl_departures.adapters.sl_api import SlApiSettings, SlDepartureRepository
from sl_departures.application.services import StationDepartureService
from sl_departures.domain.errors import StationFetchError


async def check_stations(config_file: str, raw_output: bool = False) -> None:
    """Check if all stations in config can be queried."""
    config_path = Path(config_file).resolve()

    if not config_path.exists():
        print(f"ERROR: Config file '{config_file}' not found", file=sys.stderr)
        sys.exit(1)

    config = AppConfig(config_file=str(config_path))

    try:
        stations = StationConfigurationLoader.load(config)
    except ValueError as e:
        print(f"ERROR: Failed to load config: {e}", file=sys.stderr)
        sys.exit(1)

    if not stations:
        print("ERROR: No stations found in config", file=sys.stderr)
        sys.exit(1)

    if not config.apikey:
        print("ERROR: No API key configured (set APIKEY or [api] apikey)", file=sys.stderr)
        sys.exit(1)

    print(f"Found {len(stations)} station(s) to check\n")

    # Same code path as the poller, one station at a time
    async with aiohttp.ClientSession() as session:
        repository = SlDepartureRepository(
            session,
            SlApiSettings(
                api_key=config.apikey,
                use_ssl=config.ssl,
                proxy=config.proxy,
                timeout_seconds=config.request_timeout_seconds,
                debug=config.debug,
            ),
        )
        service = StationDepartureService(repository)

        results = []
        for station in stations:
            name = station.station_name if station.station_name is not None else "NotSet"
            print(f"Checking: {name} ({station.station_id})", end=" ... ")
            sys.stdout.flush()

            try:
                raw = await repository.get_realtime_departures(station) if raw_output else None
                result = await service.fetch_station(station)
            except StationFetchError as e:
                print(f"✗ FAILED: StatusCode {e.status_code} {e.message}")
                results.append((station.station_id, name, False, 0, e.message))
                continue

            if raw is not None:
                kept, total = len(result.departures), len(raw.departures)
                print(f"✓ OK ({kept} kept, {total} raw departures)")
                print(f"  Latest update: {raw.latest_update} (data age {raw.data_age}s)")
                for idx, dep in enumerate(raw.departures):
                    when = dep.expected_time.strftime("%H:%M:%S") if dep.expected_time else "?"
                    print(
                        f"    [{idx:3d}] {when} {dep.transport_mode} {dep.line_number} "
                        f"dir {dep.journey_direction} -> {dep.destination}"
                    )
            else:
                print(f"✓ OK ({len(result.departures)} departures)")
            results.append((station.station_id, name, True, len(result.departures), None))

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)

    successful = [r for r in results if r[2]]
    failed = [r for r in results if not r[2]]

    print(f"\nSuccessful: {len(successful)}/{len(results)}")
    for station_id, name, _, count, _ in successful:
        print(f"  ✓ {name} ({station_id}): {count} departures")

    if failed:
        print(f"\nFailed: {len(failed)}/{len(results)}")
        for station_id, name, _, _, error in failed:
            print(f"  ✗ {name} ({station_id}): {error}")
        sys.exit(1)

    print("\nAll stations are accessible! ✓")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Check if all stations in a TOML config file can be queried"
    )
    parser.add_argument(
        "config_file",
        help="Path to the TOML configuration file",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Show the unfiltered departures returned by the API",
    )

    args = parser.parse_args()

    asyncio.run(check_stations(args.config_file, raw_output=args.raw))
