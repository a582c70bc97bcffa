"""
Synthetic data generation for sortbench.

Produces the `data_<size>.txt` files the benchmark reads: one record per line,
author and title as random upper-case words of 10 to 59 letters, a year in
1970..2019 and a page count in 1..999. Generation is deterministic for a given
seed.
"""

from __future__ import annotations

import random
import string
from pathlib import Path
from typing import Iterable, Iterator, List

from sortbench.domain.models import Record
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

MIN_WORD_LENGTH = 10
MAX_WORD_LENGTH = 59
FIRST_YEAR = 1970
LAST_YEAR = 2019
MAX_PAGES = 999


def _random_word(rng: random.Random) -> str:
    length = rng.randint(MIN_WORD_LENGTH, MAX_WORD_LENGTH)
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(length))


def generate_records(count: int, rng: random.Random) -> Iterator[Record]:
    """Yield `count` random records drawn from `rng`."""
    for _ in range(count):
        yield Record(
            author=_random_word(rng),
            title=_random_word(rng),
            year=rng.randint(FIRST_YEAR, LAST_YEAR),
            pages=rng.randint(1, MAX_PAGES),
        )


def write_records(path: Path, records: Iterable[Record]) -> int:
    """
    Write records to `path` in the data-file format. Returns the number written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with path.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(record.to_line())
            f.write("\n")
            written += 1
    return written


def generate_data_files(
    data_dir: Path,
    sizes: Iterable[int],
    seed: int = 42,
    file_template: str = "data_{size}.txt",
) -> List[Path]:
    """
    Write one data file per size under `data_dir`.

    Each file gets its own RNG derived from `seed` and the size, so regenerating
    a single size reproduces the same content.
    """
    paths: List[Path] = []
    for size in sizes:
        path = data_dir / file_template.format(size=size)
        rng = random.Random(f"{seed}:{size}")
        written = write_records(path, generate_records(size, rng))
        log.info("Data file written", extra={"path": str(path), "records": written})
        paths.append(path)
    return paths


__all__ = ["generate_data_files", "generate_records", "write_records"]
