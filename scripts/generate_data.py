"""
Data generation script for sortbench.

Writes the `data_<size>.txt` files the benchmark reads, or a single file of an
arbitrary size with `--output`. Rows are deterministic pseudo-random books.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List, Optional

import typer

from sortbench.config import DEFAULT_SIZES
from sortbench.infrastructure.generator import generate_data_files, generate_records, write_records

app = typer.Typer(help="Generate synthetic book records for the sort/search benchmark.")


def _write_single(output: Path, rows: int, seed: int) -> int:
    return write_records(output, generate_records(rows, random.Random(seed)))


@app.command()
def main(
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-n",
        help="Size to generate (repeatable). Defaults to the standard size list.",
    ),
    data_dir: Path = typer.Option(
        Path("."),
        "--data-dir",
        "-d",
        help="Directory for data_<size>.txt files.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write a single file here instead of one file per size.",
    ),
    rows: int = typer.Option(
        1000,
        "--rows",
        "-r",
        help="Number of records for --output.",
    ),
) -> None:
    """
    Generate synthetic data files.
    """
    start = time.perf_counter()
    if output:
        written = _write_single(output, rows, seed)
        duration = time.perf_counter() - start
        typer.echo(f"Wrote {written:,} records -> {output} in {duration:.2f}s")
        return

    targets = sizes or DEFAULT_SIZES
    typer.echo(f"Generating {len(targets)} file(s) in {data_dir} (seed={seed})")
    paths = generate_data_files(data_dir, targets, seed=seed)
    duration = time.perf_counter() - start
    rate = sum(targets) / duration if duration > 0 else 0.0
    typer.echo(
        f"Generation completed in {duration:.2f}s ({rate:,.0f} records/s) "
        f"-> {', '.join(p.name for p in paths)}"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
