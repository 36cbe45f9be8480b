from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

LOGGER = logging.getLogger("hashbench.report")

NAME_WIDTH = 30
RANDOM_TAG = "random"
CPUINFO_PATH = Path("/proc/cpuinfo")


def per_op_ns(elapsed_ms: int, count: int) -> float:
    """Convert a millisecond duration into nanoseconds per operation."""
    if count == 0:
        return 0.0
    return elapsed_ms * 1_000_000 / count


def format_row(name: str, tag: object, count: int, ns_per_op: float) -> str:
    return f"|{name:<{NAME_WIDTH}}|{tag!s:>8}|{count:>12d}|{ns_per_op:>8.1f}|"


def format_timings(label: str, t1: int, t2: int, t3: int, count: int) -> list[str]:
    return [
        format_row(f"{label}::insert", RANDOM_TAG, count, per_op_ns(t2 - t1, count)),
        format_row(f"{label}::lookup", RANDOM_TAG, count, per_op_ns(t3 - t2, count)),
    ]


def print_timings(
    label: str,
    t1: int,
    t2: int,
    t3: int,
    count: int,
    stream: TextIO | None = None,
) -> None:
    write_lines(format_timings(label, t1, t2, t3, count), stream)


def write_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=out)


def heading(title: str, cpu: str | None = None) -> list[str]:
    """Markdown table header preceding a sweep of benchmark rows."""
    lines = [f"benchmark: {title}"]
    if cpu:
        lines.append(f"cpu_model: {cpu}")
    lines.append("")
    lines.append(f"|{'container':<{NAME_WIDTH}}|{'spread':>8}|{'count':>12}|{'time_ns':>8}|")
    lines.append(f"|{':' + '-' * (NAME_WIDTH - 1)}|{'-----:':>8}|{'----:':>12}|{'------:':>8}|")
    return lines


def cpu_model(path: Path = CPUINFO_PATH) -> str:
    """Return the CPU model name without its clock suffix, or "" if unknown."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        LOGGER.debug("cpu info unavailable at %s", path)
        return ""

    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip() == "model name":
            model = value.strip()
            head, at, _ = model.partition("@")
            return head.rstrip() if at else model
    return ""
