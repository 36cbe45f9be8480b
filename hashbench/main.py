from __future__ import annotations

import logging
import sys

from .config import BenchmarkPlan, default_benchmark_plan
from .report import cpu_model
from .runner import bench_hashmap

LOGGER = logging.getLogger("hashbench.benchmark")

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run_plan(plan: BenchmarkPlan) -> None:
    for case in plan:
        LOGGER.info(
            "Running case %s (count=%d, print=%s)", case.name, case.count, case.do_print
        )
        bench_hashmap(case.count, case.do_print, label=case.label)


def main() -> int:
    setup_logging()
    LOGGER.info("CPU model: %s", cpu_model() or "<unknown>")
    run_plan(default_benchmark_plan())
    return 0


if __name__ == "__main__":
    sys.exit(main())
