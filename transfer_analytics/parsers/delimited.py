"""
Quote-aware comma-delimited parser for transfer tables.

Input structure:
  - Line 1: header row, plain comma-separated column names.
  - Lines 2+: data rows. Fields may be wrapped in double quotes to carry
    literal commas. There is no escaped-quote syntax: every ``"`` simply
    toggles the quoted state and is dropped from the value.

Row handling:
  - Blank or whitespace-only lines are skipped.
  - Rows whose token count differs from the header's column count are
    dropped whole (never partially loaded) and counted in
    ``ParseResult.rows_dropped``.

Lines are split on ``\\n`` only; a trailing ``\\r`` from CRLF input ends up
at the edge of the last field and is removed by the per-field trim.
A leading byte-order mark is dropped before the header is read.
"""

from __future__ import annotations

import logging

from transfer_analytics.exceptions import SchemaError
from transfer_analytics.parsers.base import BaseParser, ParseResult
from transfer_analytics.records import TransferRecord

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'
BOM = "\ufeff"


def tokenize_line(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Split one line into trimmed field tokens.

    Scans character by character with an "inside quotes" flag:

    - ``"`` toggles the flag and is not kept.
    - The delimiter outside quotes closes the current field.
    - Everything else, including a delimiter inside quotes, is kept.

    A line with ``n`` delimiters outside quotes always yields ``n + 1``
    tokens; empty fields yield ``""``.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            tokens.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

    tokens.append("".join(buffer).strip())
    return tokens


def _parse_header(line: str, delimiter: str) -> tuple[str, ...]:
    """Split the header row on the bare delimiter (no quote handling)."""
    if not line.strip():
        return ()
    return tuple(name.strip() for name in line.split(delimiter))


class DelimitedParser(BaseParser):
    """Parser for comma-delimited transfer tables.

    Args:
        delimiter: Field separator, ``","`` by default.
        require_header: When ``True``, a missing or blank header row raises
            ``SchemaError`` instead of producing an empty result.
    """

    def __init__(self, delimiter: str = DELIMITER, require_header: bool = False) -> None:
        self.delimiter = delimiter
        self.require_header = require_header

    def parse(self, text: str) -> ParseResult:
        if text.startswith(BOM):
            text = text[len(BOM):]
        lines = text.split("\n")
        columns = _parse_header(lines[0], self.delimiter)

        if not columns:
            if self.require_header:
                raise SchemaError(
                    "No header row found: the first line of the source is empty."
                )
            logger.debug("No header row; returning an empty result")
            return ParseResult()

        records: list[TransferRecord] = []
        rows_dropped = 0
        blank_lines = 0

        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                blank_lines += 1
                continue

            tokens = tokenize_line(line, self.delimiter)
            if len(tokens) != len(columns):
                rows_dropped += 1
                logger.debug(
                    "Dropping line %d: %d fields, header has %d",
                    line_no, len(tokens), len(columns),
                )
                continue

            records.append(TransferRecord.from_row(columns, tokens))

        logger.info(
            "Parsed %d records (%d columns); dropped %d malformed rows",
            len(records), len(columns), rows_dropped,
        )
        return ParseResult(
            records=tuple(records),
            columns=columns,
            rows_dropped=rows_dropped,
            blank_lines=blank_lines,
        )


def parse(text: str, require_header: bool = False) -> tuple[TransferRecord, ...]:
    """Parse raw transfer text into an ordered tuple of records.

    Shortcut for ``DelimitedParser(require_header=...).parse(text).records``.

    Raises:
        SchemaError: Only when ``require_header`` is set and the text has
            no header row.
    """
    return DelimitedParser(require_header=require_header).parse(text).records
