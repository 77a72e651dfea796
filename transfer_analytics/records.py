"""
Record model for transfer-analytics.

A ``TransferRecord`` is one parsed row of the transfer table: a read-only
mapping from column name to the raw (trimmed) string value. Values are
never coerced at parse time; each query coerces the fields it needs via
``transforms.numbers``.

Column names used by the queries are defined here as module constants so
every query module refers to the same spelling. Any other column in the
source passes through untouched.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

# Columns read by the queries
YEAR = "Year"
TRANSFER_TYPE = "Transfer_type"
PRICE = "Price_numeric"
PREVIOUS_LEAGUE = "Previous_club_league"
NEW_LEAGUE = "New_club_league"
PREVIOUS_CLUB = "Prev_club"
NEW_CLUB = "New_club"
NATIONALITY = "Nationality"
POSITION = "Player_position"

QUERY_COLUMNS = [
    YEAR,
    TRANSFER_TYPE,
    PRICE,
    PREVIOUS_LEAGUE,
    NEW_LEAGUE,
    PREVIOUS_CLUB,
    NEW_CLUB,
    NATIONALITY,
    POSITION,
]

# Transfer_type value marking a paid transfer
FEE_TRANSFER = "fee"

# Sentinel values standing in for "no real value"
FREE_AGENT = "Free agent"
UNATTACHED = "Unattached"
MISSING_TEXT = "nan"
UNKNOWN_LEAGUE = "Unknown"


class TransferRecord(Mapping[str, str]):
    """Immutable mapping for one transfer row.

    Built once by the parser from the header columns and the row tokens.
    Supports the full read-only ``Mapping`` protocol, so it compares equal
    to a plain ``dict`` with the same items.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str]) -> None:
        self._data = dict(data)

    @classmethod
    def from_row(cls, columns: Sequence[str], values: Sequence[str]) -> TransferRecord:
        """Zip header columns with row values.

        Raises:
            ValueError: If the two sequences differ in length.
        """
        if len(columns) != len(values):
            raise ValueError(
                f"Row has {len(values)} values but the header has {len(columns)} columns"
            )
        return cls(dict(zip(columns, values)))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TransferRecord({self._data!r})"


def value_of(record: Mapping[str, str], column: str) -> str:
    """Return a column value, or ``""`` when the record lacks the column."""
    return record.get(column, "") or ""
