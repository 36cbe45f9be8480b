from __future__ import annotations

import numpy as np

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def get_random(count: int, rng: np.random.Generator | None = None) -> list[int]:
    """Draw ``count`` uniformly distributed int64 values as Python ints."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if rng is None:
        rng = np.random.default_rng()
    values = rng.integers(
        INT64_MIN, INT64_MAX, size=count, dtype=np.int64, endpoint=True
    )
    return values.tolist()


class RandomSampleGenerator:
    """Produces key/value sample buffers from an owned numpy generator."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    def sample(self, count: int) -> list[int]:
        """Return ``2 * count`` values; even indices are keys, odd are values."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return get_random(count * 2, self._rng)
