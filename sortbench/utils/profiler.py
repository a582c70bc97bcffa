"""
Profiling utilities for sortbench.

Two granularities:
- `timed_call` wraps a single algorithm call with `time.perf_counter_ns`. It
  adds nothing else to the measured region, which matters for operations that
  finish in a few microseconds.
- `profile_block` wraps a whole benchmark size and records wall-clock time,
  peak RSS (sampled by a background thread via psutil), CPU percent and,
  optionally, the tracemalloc peak.

Usage examples:
    from sortbench.utils.profiler import profile_block, timed_call

    matches, elapsed_ns = timed_call(linear_search, records, target, BY_AUTHOR)

    with profile_block("size-1000") as stats:
        run_size()

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Callable, Generator, Optional, Tuple, TypeVar

import psutil

R = TypeVar("R")


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


def timed_call(func: Callable[..., R], *args: Any, **kwargs: Any) -> Tuple[R, int]:
    """
    Call `func` and return its result with the elapsed monotonic time in nanoseconds.
    """
    start = time.perf_counter_ns()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter_ns() - start
    return result, elapsed


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 50, enable_tracemalloc: bool = False
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling. Lower = more accurate but higher overhead.
    enable_tracemalloc : bool
        Whether to track Python-level allocations. Off by default: tracing
        slows every allocation and would distort the timings taken inside the block.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = process.memory_info().rss
    stop_sampling = threading.Event()

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                return
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    sampler = threading.Thread(target=_sample_memory, name=f"rss-sampler-{label}", daemon=True)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        sampler.join(timeout=1.0)

        stats.peak_rss_bytes = peak_rss if peak_rss > 0 else None
        stats.cpu_percent = process.cpu_percent(interval=None)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            # Stop tracemalloc only if we started it
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block", "timed_call"]
