"""
Configuration settings for sortbench.

Uses Pydantic Settings to load environment variables for the data location,
the benchmark size list, logging and result persistence. The defaults reproduce
the classic run: files named `data_<size>.txt` in the working directory, one
pass per size over 100 .. 100000 records.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SIZES: List[int] = [100, 1000, 5000, 10000, 20000, 40000, 60000, 80000, 100000]


class Settings(BaseSettings):
    # Data
    data_dir: Path = Field(Path("."), alias="SORTBENCH_DATA_DIR")
    file_template: str = Field("data_{size}.txt", alias="SORTBENCH_FILE_TEMPLATE")
    sizes: List[int] = Field(default_factory=lambda: list(DEFAULT_SIZES), alias="SORTBENCH_SIZES")

    # Benchmark
    runs: int = Field(1, alias="SORTBENCH_RUNS")
    seed: Optional[int] = Field(None, alias="SORTBENCH_SEED")
    trace_allocations: bool = Field(False, alias="SORTBENCH_TRACE_ALLOCATIONS")

    # Results
    results_dir: Path = Field(Path("results"), alias="SORTBENCH_RESULTS_DIR")
    persist_results: bool = Field(False, alias="SORTBENCH_PERSIST_RESULTS")

    # Application
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("sizes")
    @classmethod
    def _sizes_non_negative(cls, value: List[int]) -> List[int]:
        if any(size < 0 for size in value):
            raise ValueError("sizes must be non-negative")
        return value

    @field_validator("runs")
    @classmethod
    def _runs_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("runs must be at least 1")
        return value

    def data_path(self, size: int) -> Path:
        """Path of the data file holding records for `size`."""
        return self.data_dir / self.file_template.format(size=size)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_SIZES", "Settings", "get_settings"]
