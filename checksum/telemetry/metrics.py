"""Read-throughput accounting for a single hashing pass."""
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class Timer:
    """Times a ``with`` block and counts the bytes fed through it."""

    name: str
    nbytes: int = 0
    elapsed: float = 0.0
    _t0: float = field(default=0.0, repr=False)

    def __enter__(self) -> "Timer":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed = time.perf_counter() - self._t0

    def count(self, n: int) -> None:
        self.nbytes += n

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0

    @property
    def mib_per_s(self) -> float:
        if self.elapsed <= 0.0:
            return 0.0
        return self.nbytes / self.elapsed / (1 << 20)
