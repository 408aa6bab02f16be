from dataclasses import dataclass
import time
from contextlib import asynccontextmanager


@dataclass
class Elapsed:
    elapsed: float | None = None

    def __str__(self):
        if self.elapsed is None:
            return "running"
        return f"{self.elapsed * 1000:.0f}ms"


@asynccontextmanager
async def timer():
    e = Elapsed()
    t = time.perf_counter()
    try:
        yield e
    finally:
        e.elapsed = time.perf_counter() - t
