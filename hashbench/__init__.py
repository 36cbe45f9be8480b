"""
Insert/lookup throughput benchmark for the built-in hash map.

This package generates random 64-bit key/value pairs, times bulk insertion
and verified lookup against a fresh map, and prints per-operation timings
as fixed-width table rows.
"""

from .main import main
from .runner import BenchmarkTimings, IntegrityViolation, bench_hashmap

__all__ = ["main", "bench_hashmap", "BenchmarkTimings", "IntegrityViolation"]
