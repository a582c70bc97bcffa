"""
Pytest configuration for sortbench.

Provides fixtures for:
- The small hand-written record set used throughout the examples
- Generated data files in a temporary directory
- Settings isolation (cache reset, environment overrides)
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator, List

import pytest

from sortbench.config import get_settings
from sortbench.domain.models import Record
from sortbench.infrastructure.generator import generate_data_files

SMALL_SIZES = [10, 50, 200]
DATA_SEED = 7


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear the settings cache and strip sortbench env vars around every test.
    """
    for name in (
        "SORTBENCH_DATA_DIR",
        "SORTBENCH_FILE_TEMPLATE",
        "SORTBENCH_SIZES",
        "SORTBENCH_RUNS",
        "SORTBENCH_SEED",
        "SORTBENCH_TRACE_ALLOCATIONS",
        "SORTBENCH_RESULTS_DIR",
        "SORTBENCH_PERSIST_RESULTS",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def library() -> List[Record]:
    """
    Three books, two by the same author, in unsorted order.
    """
    return [
        Record(author="Bell", title="X", year=2000, pages=100),
        Record(author="Adams", title="Y", year=1999, pages=200),
        Record(author="Bell", title="Z", year=2001, pages=150),
    ]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    Directory with data_<size>.txt files for SMALL_SIZES.
    """
    directory = tmp_path / "data"
    generate_data_files(directory, SMALL_SIZES, seed=DATA_SEED)
    return directory


@pytest.fixture
def write_data(tmp_path: Path):
    """
    Factory writing raw text to a data file and returning its path.
    """

    def _write(content: str, name: str = "data_custom.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
