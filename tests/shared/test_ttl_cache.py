"""Tests for the in-memory TTL cache and its sweeper."""

import asyncio
import threading

import pytest

from recipeagent.shared.cache.sweeper import CacheSweeper
from recipeagent.shared.cache.ttl_cache import TTLCache

from helpers import FakeClock


def test_put_then_get_returns_value(recipe_cache):
    recipe_cache.put("k", "v", 60)
    assert recipe_cache.get("k") == "v"


def test_missing_key_is_absent(recipe_cache):
    assert recipe_cache.get("nope") is None


def test_entry_readable_until_expiry(recipe_cache, clock):
    recipe_cache.put("k", "v", 60)
    clock.advance(59.9)
    assert recipe_cache.get("k") == "v"


def test_expired_get_evicts_entry(recipe_cache, clock):
    recipe_cache.put("k", "v", 60)
    recipe_cache.put("other", "w", 600)
    assert len(recipe_cache) == 2

    clock.advance(60)

    assert recipe_cache.get("k") is None
    assert len(recipe_cache) == 1
    assert recipe_cache.get("other") == "w"


def test_put_overwrites_and_resets_expiry(recipe_cache, clock):
    recipe_cache.put("k", "old", 10)
    clock.advance(5)
    recipe_cache.put("k", "new", 10)
    clock.advance(8)
    assert recipe_cache.get("k") == "new"


def test_sweep_removes_only_expired(recipe_cache, clock):
    recipe_cache.put("a", 1, 10)
    recipe_cache.put("b", 2, 20)
    recipe_cache.put("c", 3, 30)
    clock.advance(20)

    removed = recipe_cache.sweep()

    assert removed == 2
    assert len(recipe_cache) == 1
    assert recipe_cache.get("c") == 3


def test_status_counts_active_and_expired(recipe_cache, clock):
    recipe_cache.put("a", 1, 10)
    recipe_cache.put("b", 2, 100)
    clock.advance(50)

    assert recipe_cache.status() == {
        "total_entries": 2,
        "active_entries": 1,
        "expired_entries": 1,
    }


def test_clear(recipe_cache):
    recipe_cache.put("a", 1, 10)
    recipe_cache.clear()
    assert len(recipe_cache) == 0


def test_concurrent_access_keeps_map_consistent():
    cache = TTLCache("stress")
    errors = []

    def writer(n):
        try:
            for i in range(500):
                cache.put(f"{n}:{i}", i, 0 if i % 2 else 60)
                cache.get(f"{n}:{i - 1}")
        except Exception as e:  # pragma: no cover
            errors.append(e)

    def sweeper():
        try:
            for _ in range(200):
                cache.sweep()
                cache.status()
        except Exception as e:  # pragma: no cover
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads.append(threading.Thread(target=sweeper))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    cache.sweep()
    status = cache.status()
    assert status["expired_entries"] == 0
    assert status["total_entries"] == 4 * 250


@pytest.mark.asyncio
async def test_sweeper_runs_periodically():
    clock = FakeClock()
    cache = TTLCache("recipes", clock=clock)
    cache.put("a", 1, 10)
    cache.put("b", 2, 1000)
    clock.advance(10)

    sweeper = CacheSweeper({"recipes": cache}, interval_seconds=0.01)
    sweeper.start()
    assert sweeper.running
    for _ in range(50):
        if len(cache) == 1:
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()

    assert len(cache) == 1
    assert not sweeper.running


@pytest.mark.asyncio
async def test_sweeper_disabled_with_zero_interval(recipe_cache):
    sweeper = CacheSweeper({"recipes": recipe_cache}, interval_seconds=0)
    sweeper.start()
    assert not sweeper.running
    await sweeper.stop()


def test_sweep_all_reports_per_cache(recipe_cache, translation_cache, clock):
    recipe_cache.put("a", 1, 1)
    translation_cache.put("dish:x", "y", 100)
    clock.advance(1)

    sweeper = CacheSweeper({"recipes": recipe_cache, "translations": translation_cache}, 60)

    assert sweeper.sweep_all() == {"recipes": 1, "translations": 0}
