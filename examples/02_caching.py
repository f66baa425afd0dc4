#!/usr/bin/env python3
"""Example: Key-scoped caching

Demonstrates cache handlers: singleton handlers per cache id, keys built
from a seed, enabling and disabling, and unavailable caches.

Usage:
    python examples/02_caching.py [settings.yaml]

Requirements:
    pip install semval
"""
from __future__ import annotations

import sys

import semval
from semval.cache import CacheHandler
from semval.config import load_settings
from semval.context import configure, get_context


def lookup_population(city: str) -> int:
    print(f"  (computing population of {city})")
    return {"Berlin": 3_645_000, "Paris": 2_161_000}.get(city, 0)


def cached_population(city: str) -> int:
    generator = get_context().caches.new_key_generator({"city": city}, "population")
    cache = CacheHandler.new_from_id().set_key(generator)
    hit = cache.get()
    if hit is not None:
        return hit
    population = lookup_population(city)
    cache.set(population, ttl=60)
    return population


def main() -> None:
    if len(sys.argv) > 1:
        configure(load_settings(sys.argv[1]))

    # Step 1: The second lookup is served from the cache
    for _ in range(2):
        print(f"Berlin: {cached_population('Berlin'):,}")

    # Step 2: Disabling the handler turns it into a no-op
    cache = semval.new_cache_handler()
    cache.set_cache_enabled(False)
    print(f"Disabled handler returns: {cache.get()!r}")
    cache.set_cache_enabled(True)

    # Step 3: Unknown cache ids give a handler that never enables
    missing = semval.new_cache_handler("memcached")
    missing.set_cache_enabled(True).key("anything")
    print(f"'memcached' enabled: {missing.is_enabled()} ({missing.unavailable})")

    # Step 4: Reset drops every handler singleton
    cache.reset()
    print(f"Handlers after reset: {get_context().caches.cache_ids()}")


if __name__ == "__main__":
    main()
