#!/usr/bin/env python3
"""Live aviationstack verification — run outside the sandbox with a real key.

Usage:
  1. Fill in AVIATIONSTACK_API_KEY in .env
  2. Run: python scripts/verify_api.py [DEP] [ARR]

Steps:
  Step 1: Verify .env configuration
  Step 2: Raw upstream call through AviationstackClient
  Step 3: Lookup through FlightLookupService (miss, then cache hit)
  Step 4: Booking link for the first returned airline
"""

import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def step_header(n: int, title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  Step {n}: {title}")
    print(f"{'='*60}\n")


def ok(msg: str) -> None:
    print(f"  ✅ {msg}")


def fail(msg: str) -> None:
    print(f"  ❌ {msg}")


def info(msg: str) -> None:
    print(f"  ℹ️  {msg}")


def step1_verify_env(settings) -> bool:
    step_header(1, "Verify .env Configuration")

    if not settings.has_api_key:
        fail("AVIATIONSTACK_API_KEY: NOT SET — upstream steps will fail!")
        return False

    ok(f"AVIATIONSTACK_API_KEY: set ({settings.masked_api_key})")
    ok(f"Base URL: {settings.aviationstack_base_url}")
    ok(f"Cache TTL: {settings.cache_ttl_flights}s")
    return True


async def step2_raw_upstream(client, dep: str, arr: str) -> bool:
    step_header(2, "Raw aviationstack call")
    from flight_tracker.errors import UpstreamTransportError

    info(f"GET /flights dep_iata={dep} arr_iata={arr} limit=5")
    try:
        body = await client.get_flights({"dep_iata": dep, "arr_iata": arr, "limit": 5})
    except UpstreamTransportError as e:
        fail(f"Transport error: {e}")
        return False

    if body.get("error"):
        fail(f"Upstream error: {body['error'].get('message', body['error'])}")
        return False

    ok(f"Got {len(body.get('data') or [])} flights")
    return True


async def step3_lookup(service, dep: str, arr: str):
    step_header(3, "FlightLookupService (miss → hit)")
    from flight_tracker.errors import FlightTrackerError
    from flight_tracker.schemas import FlightQuery

    query = FlightQuery(dep_iata=dep, arr_iata=arr)
    try:
        first = await service.lookup(query)
        second = await service.lookup(query)
    except FlightTrackerError as e:
        fail(f"Lookup failed ({e.status_code}): {e}")
        return None

    ok(f"{first.route} | count={first.count} | cached={first.cached}")
    if second.cached and second.data == first.data:
        ok("Second lookup served from cache")
    else:
        fail("Second lookup was not served from cache")
        return None
    return first


def step4_booking(result) -> bool:
    step_header(4, "Booking link")
    from flight_tracker.services.booking import resolve_booking_url

    airline = None
    if result.data:
        airline = (result.data[0].get("airline") or {}).get("name")
    dep, arr = result.route.split(" → ")
    link = resolve_booking_url(airline, dep, arr)
    ok(f"{link.airline or 'unknown airline'}: {link.url}")
    return True


async def main():
    from flight_tracker.config import Settings
    from flight_tracker.integrations.aviationstack import AviationstackClient
    from flight_tracker.services.cache import FlightCache
    from flight_tracker.services.flight_lookup import FlightLookupService

    dep = sys.argv[1] if len(sys.argv) > 1 else "JFK"
    arr = sys.argv[2] if len(sys.argv) > 2 else "LAX"

    print("\n✈️  Flight Tracker — Live API Verification")

    settings = Settings()
    client = AviationstackClient(
        api_key=settings.aviationstack_api_key,
        base_url=settings.aviationstack_base_url,
        timeout=settings.upstream_timeout_seconds,
    )
    service = FlightLookupService(client, FlightCache(ttl=settings.cache_ttl_flights))

    results = {}
    results[1] = step1_verify_env(settings)

    if not results[1]:
        print("\n⚠️  Skipping upstream steps (no AVIATIONSTACK_API_KEY)")
        results[2] = results[3] = results[4] = False
    else:
        results[2] = await step2_raw_upstream(client, dep, arr)
        lookup = await step3_lookup(service, dep, arr)
        results[3] = lookup is not None
        results[4] = step4_booking(lookup) if lookup else False

    # Summary
    print(f"\n{'='*60}")
    print("  SUMMARY")
    print(f"{'='*60}")
    for step_n, passed in sorted(results.items()):
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"  Step {step_n}: {status}")

    total_passed = sum(1 for v in results.values() if v)
    total = len(results)
    print(f"\n  {total_passed}/{total} steps passed")
    print(f"{'='*60}\n")

    sys.exit(0 if all(results.values()) else 1)


if __name__ == "__main__":
    asyncio.run(main())
