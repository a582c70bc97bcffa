from __future__ import annotations

import random
import string
from pathlib import Path

from sortbench.infrastructure.generator import generate_data_files, generate_records, write_records
from sortbench.infrastructure.loader import load_dataset

ROWS = 25


def test_generate_records_respects_field_ranges():
    for record in generate_records(ROWS, random.Random(1)):
        assert 10 <= len(record.author) <= 59
        assert 10 <= len(record.title) <= 59
        assert set(record.author) <= set(string.ascii_uppercase)
        assert 1970 <= record.year <= 2019
        assert 1 <= record.pages <= 999


def test_generate_records_is_deterministic():
    first = list(generate_records(ROWS, random.Random(99)))
    second = list(generate_records(ROWS, random.Random(99)))
    assert first == second


def test_write_records_produces_loadable_file(tmp_path: Path):
    path = tmp_path / "nested" / "books.txt"
    records = list(generate_records(ROWS, random.Random(3)))
    assert write_records(path, records) == ROWS
    assert len(path.read_text(encoding="utf-8").splitlines()) == ROWS
    assert load_dataset(path, ROWS).records == records


def test_generate_data_files_names_files_by_size(tmp_path: Path):
    paths = generate_data_files(tmp_path, [5, 12], seed=11)
    assert [p.name for p in paths] == ["data_5.txt", "data_12.txt"]
    assert len(load_dataset(paths[1], 12)) == 12


def test_generate_data_files_same_seed_same_content(tmp_path: Path):
    (first,) = generate_data_files(tmp_path / "a", [8], seed=5)
    (second,) = generate_data_files(tmp_path / "b", [8], seed=5)
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")
