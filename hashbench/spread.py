from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, MutableMapping, TextIO

from .config import DEFAULT_LABEL, SpreadCase, default_spread_plan
from .report import cpu_model, format_row, heading, write_lines
from .runner import IntegrityViolation

LOGGER = logging.getLogger("hashbench.spread")


@dataclass(frozen=True)
class SpreadTimings:
    spread: int
    count: int
    elapsed_ns: int

    @property
    def ns_per_op(self) -> float:
        if self.count == 0:
            return 0.0
        return self.elapsed_ns / self.count


def bench_spread(
    count: int,
    spread: int,
    *,
    label: str = DEFAULT_LABEL,
    map_factory: Callable[[], MutableMapping[int, int]] = dict,
    clock: Callable[[], int] = time.monotonic_ns,
    stream: TextIO | None = None,
) -> SpreadTimings:
    """Time ``count`` increments of ``map[i & spread]`` on a fresh map."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if spread < 0:
        raise ValueError(f"spread must be >= 0, got {spread}")

    counters = map_factory()
    t1 = clock()
    for i in range(count):
        key = i & spread
        counters[key] = counters.get(key, 0) + 1
    t2 = clock()

    total = sum(counters.values())
    if total != count:
        raise IntegrityViolation(spread, count, total)

    timings = SpreadTimings(spread=spread, count=count, elapsed_ns=t2 - t1)
    LOGGER.debug("%s spread=%d: %d distinct keys", label, spread, len(counters))
    write_lines(
        [format_row(f"{label}::operator[]", spread, count, timings.ns_per_op)],
        stream,
    )
    return timings


def run_sweep(cases: list[SpreadCase], stream: TextIO | None = None) -> list[SpreadTimings]:
    results = []
    for case in cases:
        LOGGER.info("Running case %s (count=%d)", case.name, case.count)
        results.append(
            bench_spread(case.count, case.spread, label=case.label, stream=stream)
        )
    return results


def main() -> int:
    from .main import setup_logging

    setup_logging()
    cpu = cpu_model()
    write_lines(heading(DEFAULT_LABEL, cpu))
    run_sweep(default_spread_plan())
    return 0


if __name__ == "__main__":
    sys.exit(main())
