from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from sortbench.config import get_settings
from sortbench.infrastructure.generator import generate_data_files
from sortbench.orchestrator import COMBINED_OPERATION, RunConfig, available_operations, run_benchmark
from sortbench.reporter import print_results, render_size
from sortbench.utils.logging import configure_logging

app = typer.Typer(help="Sort & search benchmark CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_dir={settings.data_dir} template={settings.file_template} | "
        f"sizes={','.join(str(s) for s in settings.sizes)} runs={settings.runs} "
        f"seed={settings.seed}"
    )


@app.command()
def operations() -> None:
    """
    List benchmark operations in execution order.
    """
    for name in available_operations():
        typer.echo(name)
        if name == "binary_search":
            typer.echo(f"{COMBINED_OPERATION} (derived)")


@app.command()
def run(
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-n",
        min=0,
        help="Data size to benchmark; repeat for several (default from settings).",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Directory holding data_<size>.txt files.",
    ),
    runs: Optional[int] = typer.Option(
        None,
        "--runs",
        "-r",
        min=1,
        help="Measurement runs per size; the median is reported when > 1.",
    ),
    warmup: bool = typer.Option(False, "--warmup", help="Run each size once before measuring."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for target selection."),
    target_index: Optional[int] = typer.Option(
        None,
        "--target-index",
        help="Search for the record at this position instead of a random one.",
    ),
    table: bool = typer.Option(False, "--table", help="Also print a summary table."),
    persist: Optional[bool] = typer.Option(
        None,
        "--persist/--no-persist",
        help="Write JSON results to the results directory.",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
) -> None:
    """
    Benchmark linear search, quick sort, binary search and multimap lookup per size.
    """
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.log_json or json_logs,
    )

    failures: List[Dict[str, Any]] = []

    def _emit(result: Dict[str, Any]) -> None:
        if "error" in result:
            failures.append(result)
            typer.echo(f"Size {result['size']} skipped: {result['error']}", err=True)
            return
        for line in render_size(result):
            typer.echo(line)

    results = run_benchmark(
        RunConfig(
            sizes=sizes or None,
            data_dir=data_dir,
            runs=runs,
            warmup=warmup,
            seed=seed,
            target_index=target_index,
            persist=persist,
            on_size_complete=_emit,
        )
    )

    if table:
        print_results(results)

    if failures:
        raise typer.Exit(code=1)


@app.command()
def generate(
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-n",
        min=0,
        help="Data size to generate; repeat for several (default from settings).",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Output directory (default from settings).",
    ),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
) -> None:
    """
    Generate data_<size>.txt files with random book records.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    target_dir = data_dir or settings.data_dir
    paths = generate_data_files(
        target_dir,
        sizes or settings.sizes,
        seed=seed,
        file_template=settings.file_template,
    )
    for path in paths:
        typer.echo(f"Wrote {path}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
