"""Debouncer: trailing-edge coalescing on asyncio tasks."""

import asyncio

import pytest

from app.application.search import Debouncer


async def test_only_last_value_fires() -> None:
    fired: list[str] = []

    async def callback(value: str) -> None:
        fired.append(value)

    debouncer: Debouncer[str] = Debouncer(0.02, callback)
    for value in ("n", "ne", "neo", "neon"):
        debouncer.schedule(value)
    await asyncio.sleep(0.08)
    assert fired == ["neon"]
    assert not debouncer.pending


async def test_cancel_prevents_callback() -> None:
    fired: list[str] = []

    async def callback(value: str) -> None:
        fired.append(value)

    debouncer: Debouncer[str] = Debouncer(0.02, callback)
    debouncer.schedule("neon")
    assert debouncer.pending
    debouncer.cancel()
    await asyncio.sleep(0.05)
    assert fired == []


async def test_closed_debouncer_rejects_schedule() -> None:
    async def callback(value: str) -> None:
        return None

    debouncer: Debouncer[str] = Debouncer(0.01, callback)
    debouncer.close()
    assert debouncer.closed
    with pytest.raises(RuntimeError):
        debouncer.schedule("x")


async def test_callback_errors_are_contained() -> None:
    calls = 0

    async def callback(value: str) -> None:
        nonlocal calls
        calls += 1
        raise ValueError("boom")

    debouncer: Debouncer[str] = Debouncer(0.0, callback)
    debouncer.schedule("a")
    await asyncio.sleep(0.02)
    debouncer.schedule("b")
    await asyncio.sleep(0.02)
    assert calls == 2


def test_negative_delay_is_clamped() -> None:
    async def callback(value: str) -> None:
        return None

    assert Debouncer(-1, callback).delay_seconds == 0.0
