"""
Base parser protocol / ABC for transfer-analytics.

All parsers implement the same contract:
1. parse() takes the raw source text and returns a ParseResult.
2. ParseResult carries the records plus the counts of lines that were
   skipped, so callers can report on data quality without re-parsing.

Parsers never raise for malformed rows. The only error a parser may
raise is ``SchemaError``, and only when a header is explicitly required.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from transfer_analytics.records import TransferRecord


@dataclass(frozen=True)
class ParseResult:
    """Standardized output from any parser.

    Attributes:
        records: Parsed rows in source order.
        columns: Header column names, in header order. Empty when the
            input carried no header.
        rows_dropped: Non-blank lines skipped because their field count
            did not match the header.
        blank_lines: Empty or whitespace-only lines that were skipped.
    """
    records: tuple[TransferRecord, ...] = ()
    columns: tuple[str, ...] = ()
    rows_dropped: int = 0
    blank_lines: int = 0

    @property
    def has_schema(self) -> bool:
        """True when the input carried a non-blank header row."""
        return bool(self.columns)


class BaseParser(ABC):
    """Abstract base class for transfer table parsers."""

    @abstractmethod
    def parse(self, text: str) -> ParseResult:
        """Parse raw source text.

        Args:
            text: The full contents of the source table.

        Returns:
            ParseResult with records and skip statistics.

        Raises:
            SchemaError: If the parser requires a header and none is present.
        """
