"""
Dataset handle for transfer-analytics.

The ``TransferDataset`` class is a **handle object** binding one parsed
snapshot of transfer records to the ``AnalyticsConfig`` of a reporting
session. Every query method delegates to the pure functions in
``transfer_analytics.queries``, passing the configured leagues and
limits, so a dashboard can re-derive any view without re-parsing.

Design rationale:
- **Snapshot**: records are held as a tuple and never modified. A new
  load produces a new, independent ``TransferDataset``.
- **Handle pattern**: captures config once, avoids repeating limits in
  every call.
- **Cheap metadata**: ``describe()`` summarises the snapshot (size,
  columns, year range, data-quality counts) for a report header.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

import pandas as pd

from transfer_analytics import queries
from transfer_analytics.config import AnalyticsConfig
from transfer_analytics.exceptions import UnknownClubError
from transfer_analytics.parsers.delimited import DelimitedParser
from transfer_analytics.queries.results import (
    ClubStats,
    ClubTransfer,
    ClubYearCount,
    LeagueCount,
    LeagueFee,
    NationalityCount,
    PositionCount,
    PricedTransfer,
    TransferFlow,
    YearCount,
    YearTotal,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Value objects returned by the handle
# ---------------------------------------------------------------------------

@dataclass
class DatasetInfo:
    """Structured summary of a dataset, returned by ``TransferDataset.describe()``.

    Attributes:
        source: Where the text came from (file path), or ``None``.
        num_records: Number of parsed records.
        columns: Header columns, in header order.
        year_range: ``(first_year, last_year)`` over records with a
            parseable year, or ``None`` when there are none.
        paid_transfers: Number of priced transfers.
        rows_dropped: Malformed rows skipped by the parser.
    """

    source: str | None
    num_records: int
    columns: list[str] = field(default_factory=list)
    year_range: tuple[int, int] | None = None
    paid_transfers: int = 0
    rows_dropped: int = 0


@dataclass(frozen=True)
class ClubReport:
    """Everything a club view needs, computed in one call."""

    club: str
    stats: ClubStats
    by_year: list[ClubYearCount]
    top_transfers: list[ClubTransfer]


# ---------------------------------------------------------------------------
# TransferDataset -- the main handle class
# ---------------------------------------------------------------------------

class TransferDataset:
    """Handle object for one snapshot of transfer records.

    Attributes:
        records: The parsed records (read-only tuple).
        config: The ``AnalyticsConfig`` supplying leagues and limits.
        source: Path or label of the source text, if known.
        rows_dropped: Malformed rows skipped while parsing.
    """

    def __init__(
        self,
        records: Sequence[Mapping[str, str]],
        config: AnalyticsConfig | None = None,
        source: str | None = None,
        columns: Sequence[str] | None = None,
        rows_dropped: int = 0,
    ) -> None:
        self.records: tuple[Mapping[str, str], ...] = tuple(records)
        self.config = config if config is not None else AnalyticsConfig()
        self.source = source
        self.rows_dropped = rows_dropped
        if columns is None:
            columns = list(self.records[0]) if self.records else []
        self.columns = list(columns)

    @classmethod
    def from_text(
        cls,
        text: str,
        config: AnalyticsConfig | None = None,
        source: str | None = None,
        require_header: bool = False,
    ) -> TransferDataset:
        """Parse raw delimited text into a new dataset.

        Raises:
            SchemaError: If ``require_header`` is set and the text has no
                header row.
        """
        result = DelimitedParser(require_header=require_header).parse(text)
        return cls(
            result.records,
            config=config,
            source=source,
            columns=result.columns,
            rows_dropped=result.rows_dropped,
        )

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return (
            f"TransferDataset(records={len(self.records)}, "
            f"source={self.source!r})"
        )

    # -- Market-wide queries --------------------------------------------------

    def paid(self) -> list[Mapping[str, str]]:
        return queries.filter_paid(self.records)

    def by_league(self) -> list[LeagueCount]:
        return queries.by_league(self.records)

    def by_year(self) -> list[YearCount]:
        return queries.by_year(self.records)

    def top_transfers(self, limit: int | None = None) -> list[PricedTransfer]:
        if limit is None:
            limit = self.config.top_transfers_limit
        return queries.top_transfers(self.records, limit=limit)

    def flows(self) -> list[TransferFlow]:
        return queries.transfer_flows(self.records, leagues=self.config.top_leagues)

    def nationalities(self) -> list[NationalityCount]:
        return queries.nationality_stats(self.records, limit=self.config.nationality_limit)

    def positions(self) -> list[PositionCount]:
        return queries.position_breakdown(self.records)

    def avg_fee_by_league(self) -> list[LeagueFee]:
        return queries.avg_fee_by_league(self.records)

    def yearly_spending(self, league: str | None = None) -> list[YearTotal]:
        return queries.yearly_spending(self.records, league=league)

    # -- Club queries ---------------------------------------------------------

    def clubs(self) -> list[str]:
        return queries.all_clubs(self.records)

    def club_report(self, club: str, strict: bool = False) -> ClubReport:
        """Stats, per-year counts and top fees for one club.

        Args:
            club: Exact club name.
            strict: If ``True``, raise when no record involves ``club``
                instead of returning an all-zero report.

        Raises:
            UnknownClubError: In strict mode, when ``club`` is absent.
        """
        stats = queries.club_transfer_stats(self.records, club)
        if strict and stats.total_transfers == 0:
            raise UnknownClubError(
                f"Club '{club}' does not appear in any of the "
                f"{len(self.records)} transfer records."
            )
        logger.debug(
            "club_report(%r): %d in, %d out", club, stats.incoming, stats.outgoing
        )
        return ClubReport(
            club=club,
            stats=stats,
            by_year=queries.club_transfers_by_year(self.records, club),
            top_transfers=queries.club_top_transfers(
                self.records, club, limit=self.config.club_top_limit
            ),
        )

    # -- Tabular / metadata views ---------------------------------------------

    def to_frame(self) -> pd.DataFrame:
        """All records as a string DataFrame, in source order."""
        return pd.DataFrame(
            [dict(r) for r in self.records], columns=self.columns, dtype=object
        )

    def describe(self) -> DatasetInfo:
        """Summarise the snapshot without keeping any derived state."""
        years = self.by_year()
        year_range = (years[0].year, years[-1].year) if years else None
        return DatasetInfo(
            source=self.source,
            num_records=len(self.records),
            columns=list(self.columns),
            year_range=year_range,
            paid_transfers=len(self.paid()),
            rows_dropped=self.rows_dropped,
        )


__all__ = ["ClubReport", "DatasetInfo", "TransferDataset"]
