"""
Data file loading for sortbench.

A data file is a stream of whitespace-delimited tokens, four per record:
author, title, year, pages. Line breaks carry no meaning, and anything after
the requested number of records is ignored so one large file can serve several
sizes.

`load_dataset` returns the records in file order together with the author
multi-map used as the lookup baseline.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, TextIO

from sortbench.domain.models import FIELDS_PER_RECORD, Record
from sortbench.exceptions import (
    DataFileNotFoundError,
    DataLoadError,
    RecordParseError,
    TruncatedInputError,
)
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

Multimap = Dict[str, List[Record]]


@dataclass
class Dataset:
    """
    Records for one benchmark run plus their author index.
    """

    records: List[Record]
    by_author: Multimap = field(default_factory=dict)
    path: Path | None = None

    def __len__(self) -> int:
        return len(self.records)


def _iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _chunk_records(tokens: Iterator[str], count: int) -> Iterator[List[str]]:
    """Yield up to `count` groups of FIELDS_PER_RECORD tokens; a short tail is yielded as-is."""
    for _ in range(count):
        chunk = list(islice(tokens, FIELDS_PER_RECORD))
        if not chunk:
            return
        yield chunk
        if len(chunk) < FIELDS_PER_RECORD:
            return


def build_multimap(records: Iterable[Record]) -> Multimap:
    """
    Index records by author, keeping file order within each key.
    """
    index: Dict[str, List[Record]] = defaultdict(list)
    for record in records:
        index[record.author].append(record)
    return dict(index)


def read_records(stream: TextIO, size: int, path: Path | None = None) -> Dataset:
    """
    Read exactly `size` records from an open text stream.

    Raises TruncatedInputError when the stream ends early and
    RecordParseError when a record's numeric fields are malformed.
    """
    records: List[Record] = []
    for index, tokens in enumerate(_chunk_records(_iter_tokens(stream), size)):
        if len(tokens) < FIELDS_PER_RECORD:
            break
        try:
            records.append(Record.from_tokens(tokens))
        except RecordParseError as exc:
            raise RecordParseError(str(exc), path=path, record_index=index) from exc

    if len(records) < size:
        raise TruncatedInputError(path or Path("<stream>"), expected=size, found=len(records))

    return Dataset(records=records, by_author=build_multimap(records), path=path)


def load_dataset(path: Path | str, size: int) -> Dataset:
    """
    Load `size` records from the data file at `path`.

    Raises DataFileNotFoundError if the file does not exist, DataLoadError if
    it cannot be read and RecordParseError if it is not valid UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise DataFileNotFoundError(path)

    log.debug("Loading dataset", extra={"path": str(path), "size": size})
    try:
        with path.open("r", encoding="utf-8") as stream:
            dataset = read_records(stream, size, path=path)
    except UnicodeDecodeError as exc:
        raise RecordParseError(f"not valid UTF-8 text ({exc.reason})", path=path) from exc
    except OSError as exc:
        raise DataLoadError(f"Cannot read data file {path}: {exc}", path=path) from exc
    log.debug(
        "Dataset loaded",
        extra={"path": str(path), "records": len(dataset), "authors": len(dataset.by_author)},
    )
    return dataset


__all__ = ["Dataset", "Multimap", "build_multimap", "load_dataset", "read_records"]
