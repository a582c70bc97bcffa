"""
Domain models for sortbench.

Defines the book record the benchmark sorts and searches, matching the
whitespace-delimited line format of the data files:

    <author> <title> <year> <pages>

Sort and search never compare records with relational operators. The ordering
lives in `sortbench.domain.ordering` (see `BY_AUTHOR`), which looks only at
`author`. The model's own `==` is pydantic's structural equality over every
field and is not the search equality.
"""
from __future__ import annotations

import re
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from sortbench.exceptions import RecordParseError

FIELDS_PER_RECORD = 4
_INTEGER_TOKEN = re.compile(r"-?[0-9]+")


class Record(BaseModel):
    """
    A single book in the library.
    """

    author: str = Field("", description="Author name; the primary ordering key.")
    title: str = Field("", description="Book title.")
    year: int = Field(1970, description="Publication year.")
    pages: int = Field(300, description="Number of pages.")

    model_config = {"frozen": True}

    @classmethod
    def from_tokens(cls, tokens: Sequence[str], record_index: Optional[int] = None) -> "Record":
        """
        Build a record from the four tokens of one data-file entry.

        Raises RecordParseError if the token count is wrong or the numeric
        fields are not integers.
        """
        if len(tokens) != FIELDS_PER_RECORD:
            raise RecordParseError(
                f"expected {FIELDS_PER_RECORD} fields, got {len(tokens)}",
                record_index=record_index,
            )
        author, title, year, pages = tokens
        if not (_INTEGER_TOKEN.fullmatch(year) and _INTEGER_TOKEN.fullmatch(pages)):
            raise RecordParseError(
                f"invalid numeric field in {list(tokens)!r}", record_index=record_index
            )
        return cls(author=author, title=title, year=int(year), pages=int(pages))

    def to_line(self) -> str:
        """Render the record in the data-file line format (no trailing newline)."""
        return f"{self.author} {self.title} {self.year} {self.pages}"


__all__ = ["FIELDS_PER_RECORD", "Record"]
