"""
Orchestrator for running the benchmark operations over every configured size.

Usage (example from CLI):
    from sortbench.orchestrator import RunConfig, run_benchmark

    results = run_benchmark(RunConfig(sizes=[100, 1000], data_dir=Path("data")))
    print(results)

For each size the driver loads the data file, picks a search target, then runs
the operations in a fixed order on the same list:

    linear search (unsorted) -> quick sort -> binary search (sorted) -> multimap lookup

and derives "Binary search with sorting" from the sort and binary search times.

With `persist=True` outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
import random
import statistics
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from sortbench.config import Settings, get_settings
from sortbench.domain.models import Record
from sortbench.exceptions import BenchmarkError, TargetSelectionError
from sortbench.infrastructure.loader import Dataset, load_dataset
from sortbench.operations.abstract import BenchmarkOperation, OperationResult
from sortbench.operations.search import (
    BinarySearchOperation,
    LinearSearchOperation,
    MultimapLookupOperation,
)
from sortbench.operations.sort import QuickSortOperation
from sortbench.utils.logging import get_logger
from sortbench.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

COMBINED_OPERATION = "binary_search_with_sorting"
COMBINED_LABEL = "Binary search with sorting"


@dataclass
class RunConfig:
    """
    Everything one benchmark invocation needs. Unset fields fall back to Settings.

    Attributes
    ----------
    sizes : sequence[int] | None
        Record counts to benchmark, in order.
    data_dir : Path | None
        Directory holding the data files.
    file_template : str | None
        File name pattern with a `{size}` placeholder.
    runs : int | None
        Measurement runs per size; durations are aggregated when > 1.
    warmup : bool
        Run every size once, unmeasured, before measuring.
    seed : int | None
        Seed for target selection. None draws from system entropy.
    target_index : int | None
        Fixed target position; overrides random selection.
    results_dir : Path | str | None
        Directory for JSON artifacts.
    persist : bool | None
        Whether to write results to disk.
    trace_allocations : bool | None
        Enable tracemalloc while profiling each size.
    on_size_complete : callable | None
        Called with each size's result as soon as it is ready.
    """

    sizes: Optional[Sequence[int]] = None
    data_dir: Optional[Path] = None
    file_template: Optional[str] = None
    runs: Optional[int] = None
    warmup: bool = False
    seed: Optional[int] = None
    target_index: Optional[int] = None
    results_dir: Optional[Path | str] = None
    persist: Optional[bool] = None
    trace_allocations: Optional[bool] = None
    on_size_complete: Optional[Callable[[Dict[str, Any]], None]] = None

    def resolve(self, settings: Settings) -> "RunConfig":
        """
        Return a copy with every unset field filled from `settings`.

        Raises ValueError for negative sizes.
        """
        sizes = list(self.sizes if self.sizes is not None else settings.sizes)
        if any(size < 0 for size in sizes):
            raise ValueError(f"sizes must be non-negative, got {sizes}")
        return RunConfig(
            sizes=sizes,
            data_dir=Path(self.data_dir if self.data_dir is not None else settings.data_dir),
            file_template=self.file_template or settings.file_template,
            runs=self.runs if self.runs is not None else settings.runs,
            warmup=self.warmup,
            seed=self.seed if self.seed is not None else settings.seed,
            target_index=self.target_index,
            results_dir=Path(
                self.results_dir if self.results_dir is not None else settings.results_dir
            ),
            persist=self.persist if self.persist is not None else settings.persist_results,
            trace_allocations=(
                self.trace_allocations
                if self.trace_allocations is not None
                else settings.trace_allocations
            ),
            on_size_complete=self.on_size_complete,
        )

    def data_path(self, size: int) -> Path:
        template = self.file_template or "data_{size}.txt"
        return Path(self.data_dir or ".") / template.format(size=size)


def _operation_factories() -> Dict[str, Callable[[], BenchmarkOperation]]:
    """Registry of operations, in execution order."""
    return {
        "linear_search": lambda: LinearSearchOperation(),
        "quick_sort": lambda: QuickSortOperation(),
        "binary_search": lambda: BinarySearchOperation(),
        "multimap_search": lambda: MultimapLookupOperation(),
    }


def available_operations() -> List[str]:
    """List operation names in the order they run."""
    return list(_operation_factories().keys())


def select_target_index(
    size: int, rng: random.Random, target_index: Optional[int] = None
) -> int:
    """
    Position of the search target within a dataset of `size` records.

    An explicit `target_index` wins; otherwise the index is drawn uniformly
    from `[0, size)`.
    """
    if target_index is not None:
        if not 0 <= target_index < size:
            raise TargetSelectionError(target_index, size)
        return target_index
    return rng.randrange(size)


def _combined_result(sort: OperationResult, search: OperationResult) -> OperationResult:
    return OperationResult(
        operation=COMBINED_OPERATION,
        label=COMBINED_LABEL,
        size=search.get("size", 0),
        duration_ns=sort["duration_ns"] + search["duration_ns"],
        matches=search.get("matches"),
    )


def _run_operations(dataset: Dataset, target: Record) -> List[OperationResult]:
    """Run every registered operation once on `dataset`, in registry order."""
    results: List[OperationResult] = []
    by_name: Dict[str, OperationResult] = {}
    for name, factory in _operation_factories().items():
        operation = factory()
        result = operation.execute(dataset, target)
        results.append(result)
        by_name[name] = result
        if name == "binary_search" and "quick_sort" in by_name:
            results.append(_combined_result(by_name["quick_sort"], result))

    linear = by_name.get("linear_search")
    binary = by_name.get("binary_search")
    if linear and binary and linear.get("matches") != binary.get("matches"):
        log.warning(
            "Linear and binary search disagree",
            extra={
                "size": len(dataset),
                "linear_matches": linear.get("matches"),
                "binary_matches": binary.get("matches"),
            },
        )
    return results


def _aggregate_runs(run_results: List[List[OperationResult]]) -> List[Dict[str, Any]]:
    """
    Collapse repeated runs into one entry per operation.

    `duration_ns` becomes the median; the full spread is kept under `stats`.
    """
    aggregated: List[Dict[str, Any]] = []
    for position, first in enumerate(run_results[0]):
        durations = [run[position]["duration_ns"] for run in run_results]
        entry: Dict[str, Any] = {
            "operation": first["operation"],
            "label": first["label"],
            "size": first.get("size", 0),
            "matches": first.get("matches"),
            "duration_ns": int(statistics.median(durations)),
            "stats": {
                "median": int(statistics.median(durations)),
                "mean": round(statistics.mean(durations), 2),
                "stddev": round(statistics.stdev(durations), 2) if len(durations) > 1 else 0.0,
                "min": min(durations),
                "max": max(durations),
            },
            "individual_durations_ns": durations,
        }
        aggregated.append(entry)
    return aggregated


def _profile_summary(stats: ProfileStats) -> Dict[str, Any]:
    return {
        "label": stats.label,
        "duration_seconds": round(stats.duration_seconds, 4),
        "peak_rss_bytes": stats.peak_rss_bytes,
        "peak_traced_bytes": stats.peak_traced_bytes,
        "cpu_percent": round(stats.cpu_percent, 1) if stats.cpu_percent is not None else None,
    }


def _run_size(size: int, config: RunConfig, rng: random.Random) -> Dict[str, Any]:
    path = config.data_path(size)
    result: Dict[str, Any] = {"size": size, "path": str(path), "runs": config.runs}

    with profile_block(f"size-{size}", enable_tracemalloc=bool(config.trace_allocations)) as stats:
        try:
            if size == 0:
                log.info("Empty dataset; nothing to search", extra={"size": size})
                result["operations"] = []
            else:
                dataset = load_dataset(path, size)
                index = select_target_index(size, rng, config.target_index)
                target = dataset.records[index]
                result["target_index"] = index
                result["target"] = target.model_dump()

                if config.warmup:
                    log.info(f"[WARMUP] size={size}", extra={"size": size})
                    _run_operations(load_dataset(path, size), target)

                run_results: List[List[OperationResult]] = []
                for run_num in range(1, (config.runs or 1) + 1):
                    if run_num > 1:
                        # Quick sort left the previous list sorted
                        dataset = load_dataset(path, size)
                    log.info(
                        f"[RUN {run_num}/{config.runs}] size={size}",
                        extra={"size": size, "run": run_num},
                    )
                    run_results.append(_run_operations(dataset, target))

                if len(run_results) > 1:
                    result["operations"] = _aggregate_runs(run_results)
                else:
                    result["operations"] = [dict(r) for r in run_results[0]]
        except BenchmarkError as exc:
            log.error(
                f"[SIZE FAILED] size={size}: {exc}",
                extra={"size": size, "error_type": type(exc).__name__},
            )
            result["operations"] = []
            result["error"] = str(exc)
            result["error_type"] = type(exc).__name__

    result["profile"] = _profile_summary(stats)
    result["peak_rss_bytes"] = stats.peak_rss_bytes
    result["cpu_percent"] = result["profile"]["cpu_percent"]
    return result


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    with latest_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    with archive_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def run_benchmark(config: Optional[RunConfig] = None) -> List[Dict[str, Any]]:
    """
    Benchmark every configured size and optionally persist the results.

    Parameters
    ----------
    config : RunConfig | None
        Run parameters; unset fields come from `get_settings()`.

    Returns
    -------
    List[dict]
        One entry per size with the target, per-operation timings and profiler
        stats. Sizes whose data could not be loaded carry `error` and an empty
        `operations` list; later sizes still run.
    """
    resolved = (config or RunConfig()).resolve(get_settings())
    sizes = list(resolved.sizes or [])
    rng = random.Random(resolved.seed)

    results: List[Dict[str, Any]] = []
    for size in sizes:
        log.info(f"{'=' * 60}")
        log.info(f"[SIZE] {size}", extra={"size": size})
        result = _run_size(size, resolved, rng)
        results.append(result)
        if resolved.on_size_complete is not None:
            resolved.on_size_complete(result)
        log.info(f"[SIZE COMPLETE] {size}", extra={"size": size, "failed": "error" in result})

    if resolved.persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "sizes": sizes,
            "runs": resolved.runs,
            "seed": resolved.seed,
            "results": results,
        }
        _persist_results(payload, Path(resolved.results_dir or "results"))

    failed = [r["size"] for r in results if "error" in r]
    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(sizes) - len(failed)}/{len(sizes)} sizes benchmarked",
        extra={"sizes": sizes, "failed_sizes": failed},
    )
    return results


__all__ = [
    "COMBINED_LABEL",
    "COMBINED_OPERATION",
    "RunConfig",
    "available_operations",
    "run_benchmark",
    "select_target_index",
]
