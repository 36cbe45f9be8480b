from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, MutableMapping, Protocol, Sequence, TextIO

from .config import DEFAULT_LABEL
from .report import per_op_ns, print_timings
from .sampling import RandomSampleGenerator

LOGGER = logging.getLogger("hashbench.runner")


class IntegrityViolation(Exception):
    """Raised when a looked-up value differs from the one inserted."""

    def __init__(self, key: int, expected: int, actual: object) -> None:
        super().__init__(f"key {key}: expected {expected}, got {actual!r}")
        self.key = key
        self.expected = expected
        self.actual = actual


class SampleSource(Protocol):
    def sample(self, count: int) -> Sequence[int]: ...


@dataclass(frozen=True)
class BenchmarkTimings:
    t1: int
    t2: int
    t3: int
    count: int

    @property
    def insert_ms(self) -> int:
        return self.t2 - self.t1

    @property
    def lookup_ms(self) -> int:
        return self.t3 - self.t2

    @property
    def insert_ns_per_op(self) -> float:
        return per_op_ns(self.insert_ms, self.count)

    @property
    def lookup_ns_per_op(self) -> float:
        return per_op_ns(self.lookup_ms, self.count)


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def bench_hashmap(
    count: int,
    do_print: bool,
    *,
    label: str = DEFAULT_LABEL,
    map_factory: Callable[[], MutableMapping[int, int]] = dict,
    sampler: SampleSource | None = None,
    clock: Callable[[], int] = monotonic_ms,
    stream: TextIO | None = None,
) -> BenchmarkTimings:
    """Time bulk insertion and verified lookup of ``count`` random pairs.

    Sample generation and map construction happen before the first
    timestamp. Lookups are checked against the last value paired with each
    key; the first mismatch raises :class:`IntegrityViolation` and nothing
    is printed for the run.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if sampler is None:
        sampler = RandomSampleGenerator()

    data = sampler.sample(count)
    keys = data[0 : count * 2 : 2]
    values = data[1 : count * 2 : 2]
    expected = _expected_values(keys, values)
    hm = map_factory()
    LOGGER.debug("Prepared %d pairs for %s", count, label)

    t1 = clock()
    for key, val in zip(keys, values):
        hm[key] = val
    t2 = clock()
    lookup = hm.get
    for key, val in zip(keys, expected):
        actual = lookup(key)
        if actual != val:
            raise IntegrityViolation(key, val, actual)
    t3 = clock()

    timings = BenchmarkTimings(t1=t1, t2=t2, t3=t3, count=count)
    LOGGER.debug(
        "%s: insert %d ms, lookup %d ms over %d pairs",
        label,
        timings.insert_ms,
        timings.lookup_ms,
        count,
    )
    if do_print:
        print_timings(label, t1, t2, t3, count, stream)
    return timings


def _expected_values(keys: Sequence[int], values: Sequence[int]) -> Sequence[int]:
    if len(set(keys)) == len(keys):
        return values
    # A repeated key holds whatever value was inserted last.
    last = dict(zip(keys, values))
    LOGGER.info("%d duplicate keys in sample", len(keys) - len(last))
    return [last[key] for key in keys]
