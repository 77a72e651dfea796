"""
Result types returned by the transfer queries.

Each query returns plain frozen dataclasses (or lists of them) rather
than DataFrames, so results compare by content and read naturally in
Python code. ``to_frame()`` turns any list of results into a DataFrame
for tabular consumers such as a dashboard.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Literal

import pandas as pd

from transfer_analytics.records import TransferRecord

Direction = Literal["in", "out"]


@dataclass(frozen=True)
class LeagueCount:
    league: str
    count: int


@dataclass(frozen=True)
class YearCount:
    year: int
    count: int


@dataclass(frozen=True)
class TransferFlow:
    """Directed count of transfers from ``source`` league to ``target`` league."""
    source: str
    target: str
    count: int


@dataclass(frozen=True)
class NationalityCount:
    nationality: str
    count: int


@dataclass(frozen=True)
class PositionCount:
    position: str
    count: int


@dataclass(frozen=True)
class LeagueFee:
    """Average fee paid by clubs of one league across its priced transfers."""
    league: str
    average: float
    count: int


@dataclass(frozen=True)
class YearTotal:
    year: int
    total: float


@dataclass(frozen=True)
class PricedTransfer:
    """A priced transfer record together with its parsed fee."""
    record: TransferRecord
    price: float


@dataclass(frozen=True)
class ClubTransfer:
    """A priced transfer involving a club, tagged with its direction.

    ``direction`` is ``"in"`` when the club is the new club and ``"out"``
    otherwise.
    """
    record: TransferRecord
    price: float
    direction: Direction


@dataclass(frozen=True)
class ClubYearCount:
    year: int
    incoming: int
    outgoing: int


@dataclass(frozen=True)
class ClubStats:
    """Aggregate transfer activity for one club.

    Attributes:
        total_transfers: ``incoming + outgoing``.
        incoming: Records where the club is the new club.
        outgoing: Records where the club is the previous club.
        total_spent: Sum of priced incoming fees.
        total_received: Sum of priced outgoing fees.
        net_spend: ``total_spent - total_received``.
        incoming_paid: Number of priced incoming transfers.
        outgoing_paid: Number of priced outgoing transfers.
    """
    total_transfers: int = 0
    incoming: int = 0
    outgoing: int = 0
    total_spent: float = 0.0
    total_received: float = 0.0
    net_spend: float = 0.0
    incoming_paid: int = 0
    outgoing_paid: int = 0


def to_frame(results: Sequence[object]) -> pd.DataFrame:
    """Flatten a list of result dataclasses into a DataFrame.

    Record-valued fields are expanded into their columns, so a list of
    ``PricedTransfer`` becomes the record columns plus ``price``.
    """
    rows: list[dict[str, object]] = []
    for result in results:
        row: dict[str, object] = {}
        for f in fields(result):  # type: ignore[arg-type]
            value = getattr(result, f.name)
            if isinstance(value, Mapping):
                row.update(value)
            else:
                row[f.name] = value
        rows.append(row)
    return pd.DataFrame(rows)
