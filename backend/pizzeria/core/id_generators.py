"""Id Generators — injectable id strategies for the entity store.

Invariants:
    - Every generator returns a str on each call
    - CounterIdGenerator is deterministic: "1", "2", "3", ... per instance
    - TimestampIdGenerator never repeats within one instance, even when the
      clock returns the same millisecond twice

Design Decisions:
    - Protocol over ABC: structural subtyping, any object exposing
      a next_id() method fits
    - Uniqueness WITHIN a collection is the store's job (it skips taken ids),
      generators only need to be fresh per call
"""

import itertools
from collections.abc import Callable
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from pizzeria.core.domain_types import IdStrategy, utc_now


class IdGenerator(Protocol):
    """Contract for id assignment — implemented below, injected into the store."""
    def next_id(self) -> str: ...


class CounterIdGenerator:
    """Incrementing integer ids rendered as strings."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return str(next(self._counter))


class UuidIdGenerator:
    """Random UUID4 ids — collision-free across processes."""

    def next_id(self) -> str:
        return str(uuid4())


class TimestampIdGenerator:
    """Millisecond-epoch ids, bumped by one when the clock has not advanced."""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock
        self._last = 0

    def next_id(self) -> str:
        stamp = int(self._clock().timestamp() * 1000)
        if stamp <= self._last:
            stamp = self._last + 1
        self._last = stamp
        return str(stamp)


def build_id_generator(strategy: IdStrategy | str) -> IdGenerator:
    """Map a configured strategy name to a fresh generator."""
    strategy = IdStrategy(strategy)
    if strategy is IdStrategy.UUID:
        return UuidIdGenerator()
    if strategy is IdStrategy.TIMESTAMP:
        return TimestampIdGenerator()
    return CounterIdGenerator()
