"""
Report rendering for sortbench.

The plain report is one line per measurement:

    <Operation> <size> elements <duration> mcs

with the duration in whole microseconds and a blank line after each size. The
optional rich table summarises the same numbers with match counts and memory.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import psutil
from rich import box
from rich.console import Console
from rich.table import Table

NANOS_PER_MICRO = 1_000


def to_microseconds(duration_ns: int) -> int:
    """Truncate a nanosecond duration to whole microseconds."""
    return duration_ns // NANOS_PER_MICRO


def format_line(label: str, size: int, duration_ns: int) -> str:
    """Render one measurement as a report line."""
    return f"{label} {size} elements {to_microseconds(duration_ns)} mcs"


def render_size(result: Dict[str, Any]) -> List[str]:
    """
    Report lines for one size, followed by the blank separator.

    Failed sizes and sizes with no operations render nothing.
    """
    operations = result.get("operations") or []
    if "error" in result or not operations:
        return []
    lines = [format_line(op["label"], result["size"], op["duration_ns"]) for op in operations]
    lines.append("")
    return lines


def render_lines(results: List[Dict[str, Any]]) -> List[str]:
    """Report lines for every size in order."""
    lines: List[str] = []
    for result in results:
        lines.extend(render_size(result))
    return lines


def get_host_resources() -> Dict[str, Optional[str]]:
    """
    Describe the machine the benchmark ran on (logical CPUs and total memory).
    """
    resources: Dict[str, Optional[str]] = {"cpus": None, "memory": None}
    cpus = psutil.cpu_count(logical=True)
    if cpus:
        resources["cpus"] = str(cpus)
    mem_bytes = psutil.virtual_memory().total
    mem_gb = mem_bytes / (1024**3)
    if mem_gb >= 1:
        resources["memory"] = f"{mem_gb:.1f}GB"
    else:
        resources["memory"] = f"{mem_bytes / (1024**2):.0f}MB"
    return resources


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render benchmark results as a rich table.

    Handles both single-run results and aggregated multi-run results.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    resources = get_host_resources()
    resource_parts = []
    if resources["cpus"]:
        resource_parts.append(f"CPU: {resources['cpus']} cores")
    if resources["memory"]:
        resource_parts.append(f"Memory: {resources['memory']}")

    is_aggregated = any((r.get("runs") or 1) > 1 for r in results)

    title = "Sort & Search Benchmark Results"
    if resource_parts:
        title = f"{title}\n[dim]Host: {' │ '.join(resource_parts)}[/dim]"

    table = Table(title=title, box=box.ROUNDED, caption="Durations in microseconds")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Operation", style="cyan", no_wrap=True)
    if is_aggregated:
        table.add_column("Duration (µs)\n[dim](Median ± StdDev)[/dim]", justify="right", style="green")
    else:
        table.add_column("Duration (µs)", justify="right", style="green")
    table.add_column("Matches", justify="right", style="blue")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")

    for res in results:
        size = f"{res.get('size', 0):,}"
        mem_bytes = res.get("peak_rss_bytes") or 0
        mem_str = f"{mem_bytes / (1024 * 1024):.2f}"

        if "error" in res:
            table.add_row(size, f"[red]{res.get('error_type', 'Error')}[/red]", "-", "-", mem_str)
            continue

        for op in res.get("operations", []):
            duration = to_microseconds(op["duration_ns"])
            if is_aggregated and "stats" in op:
                std_us = op["stats"]["stddev"] / NANOS_PER_MICRO
                duration_str = f"{duration:,} ± {std_us:,.1f}"
            else:
                duration_str = f"{duration:,}"
            matches = op.get("matches")
            matches_str = "-" if matches is None else str(matches)
            table.add_row(size, op["label"], duration_str, matches_str, mem_str)
        table.add_section()

    console.print(table)


__all__ = [
    "format_line",
    "get_host_resources",
    "print_results",
    "render_lines",
    "render_size",
    "to_microseconds",
]
