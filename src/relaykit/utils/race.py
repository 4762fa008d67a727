"""
Race with grace period.

Runs several keyed probes concurrently and returns as soon as one of them
succeeds plus a bounded grace period, so that slower (but possibly better)
answers still get a chance to arrive.

Example:
    ```python
    outcome = await wait_for_success(
        [pinger.ping(url) for url in urls],
        urls,
        grace_ms=3000,
    )
    if not outcome.results:
        print("every relay failed:", outcome.errors)
    ```
"""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass, field
from typing import (
    Awaitable,
    Dict,
    Generic,
    List,
    Optional,
    Sequence,
    Set,
    TypeVar,
)

from relaykit.errors import (
    DuplicateProbeKeyError,
    EmptyProbeSetError,
    ProbeKeyMismatchError,
)

T = TypeVar("T")

# Probes still running after their race returned. Holding them here keeps
# the event loop from garbage-collecting them before they settle.
_background_probes: Set["asyncio.Future[object]"] = set()


@dataclass
class RaceOutcome(Generic[T]):
    """
    Outcome of one race.

    Attributes:
        results: Successful results, in the order they completed.
        errors: Failure of every probe that settled unsuccessfully, by key.
    """

    results: List[T] = field(default_factory=list)
    errors: Dict[str, BaseException] = field(default_factory=dict)

    @property
    def settled(self) -> int:
        """Number of probes that have completed either way."""
        return len(self.results) + len(self.errors)

    def snapshot(self) -> "RaceOutcome[T]":
        return RaceOutcome(results=list(self.results), errors=dict(self.errors))


def _validate_probes(probes: Sequence[Awaitable[T]], keys: Sequence[str]) -> None:
    if not probes and not keys:
        raise EmptyProbeSetError()
    if len(probes) != len(keys):
        raise ProbeKeyMismatchError(len(probes), len(keys))
    duplicates = [key for key, count in Counter(keys).items() if count > 1]
    if duplicates:
        raise DuplicateProbeKeyError(duplicates)


def _discard_probes(probes: Sequence[Awaitable[T]]) -> None:
    # Coroutines that will never be awaited must be closed explicitly.
    for probe in probes:
        if asyncio.iscoroutine(probe):
            probe.close()


async def wait_for_success(
    probes: Sequence[Awaitable[T]],
    keys: Sequence[str],
    grace_ms: int,
) -> RaceOutcome[T]:
    """
    Wait for keyed probes, returning shortly after the first success.

    After the first probe succeeds a timer of ``grace_ms`` is armed; every
    success that arrives before it fires is kept. The call returns when the
    timer fires or when all probes have settled, whichever comes first.
    Probes still running at that point are not cancelled; their outcome is
    ignored.

    There is no "all failed" exception: when every probe fails the call
    returns after the last failure with an empty ``results`` list.

    Args:
        probes: Awaitables to race (coroutines, tasks or futures)
        keys: One unique key per probe, used to index ``errors``
        grace_ms: How long to keep collecting after the first success

    Returns:
        Snapshot of the race at the moment it finished

    Raises:
        EmptyProbeSetError: If no probes were given
        ProbeKeyMismatchError: If ``keys`` and ``probes`` differ in length
        DuplicateProbeKeyError: If a key appears more than once
    """
    try:
        _validate_probes(probes, keys)
    except Exception:
        _discard_probes(probes)
        raise

    loop = asyncio.get_running_loop()
    outcome: RaceOutcome[T] = RaceOutcome()
    finished: "asyncio.Future[RaceOutcome[T]]" = loop.create_future()
    grace_timer: Optional[asyncio.TimerHandle] = None
    total = len(probes)

    def complete() -> None:
        if not finished.done():
            finished.set_result(outcome.snapshot())

    def on_settled(key: str, future: "asyncio.Future[T]") -> None:
        nonlocal grace_timer
        _background_probes.discard(future)
        if future.cancelled():
            outcome.errors[key] = asyncio.CancelledError(f"probe {key} was cancelled")
        elif future.exception() is not None:
            outcome.errors[key] = future.exception()  # type: ignore[assignment]
        else:
            outcome.results.append(future.result())
            if len(outcome.results) == 1 and not finished.done():
                grace_timer = loop.call_later(grace_ms / 1000, complete)
        if outcome.settled == total:
            complete()

    for key, probe in zip(keys, probes):
        future = asyncio.ensure_future(probe)
        _background_probes.add(future)
        future.add_done_callback(lambda f, key=key: on_settled(key, f))

    try:
        return await finished
    finally:
        if grace_timer is not None:
            grace_timer.cancel()
