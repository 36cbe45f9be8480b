from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

DEFAULT_COUNT = 1_000_000
DEFAULT_LABEL = "builtins.dict"

SPREAD_COUNT = 10_000_000
SPREADS: tuple[int, ...] = (255, 1023, 16383)


@dataclass(frozen=True)
class BenchmarkCase:
    """Single insert/lookup run against a fresh map."""

    name: str
    count: int
    do_print: bool
    label: str = DEFAULT_LABEL


@dataclass(frozen=True)
class SpreadCase:
    """Counter increments over keys ``i & spread``."""

    name: str
    count: int
    spread: int
    label: str = DEFAULT_LABEL


@dataclass
class BenchmarkPlan:
    """Ordered cases the entry point will execute."""

    cases: list[BenchmarkCase] = field(default_factory=list)

    def __iter__(self) -> Iterator[BenchmarkCase]:
        return iter(self.cases)


def default_benchmark_plan(count: int = DEFAULT_COUNT) -> BenchmarkPlan:
    """Return the warm-up run followed by the measured run."""

    return BenchmarkPlan(
        cases=[
            BenchmarkCase(name="warm-up", count=count, do_print=False),
            BenchmarkCase(name="measured", count=count, do_print=True),
        ]
    )


def default_spread_plan(
    count: int = SPREAD_COUNT, spreads: Sequence[int] = SPREADS
) -> list[SpreadCase]:
    return [
        SpreadCase(name=f"spread-{spread}", count=count, spread=spread)
        for spread in spreads
    ]
