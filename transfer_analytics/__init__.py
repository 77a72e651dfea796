"""
transfer-analytics: parse football transfer tables and answer the
queries behind a transfer reporting dashboard.

Public API surface:

- ``parse(text)`` -- quote-aware parser. Turns raw comma-delimited text
  into an ordered tuple of read-only ``TransferRecord`` mappings.

- Query functions (``by_league``, ``by_year``, ``top_transfers``,
  ``transfer_flows``, ``club_transfer_stats``, ...) -- pure functions of
  ``(records, ...parameters)`` returning new result objects.

- ``load_transfers(path)`` -- **recommended entry point** for files on
  disk. Reads, parses and returns a ``TransferDataset`` handle whose
  methods run the queries with the session's ``AnalyticsConfig``.

Example::

    import transfer_analytics as ta

    ds = ta.load_transfers("data/transfers.csv")
    ds.by_league()[:5]
    ds.club_report("Chelsea").stats.net_spend

    records = ta.parse(text)
    ta.yearly_spending(records, league="Serie A")
"""

from __future__ import annotations

from transfer_analytics.config import AnalyticsConfig, load_config, save_config
from transfer_analytics.dataset import ClubReport, DatasetInfo, TransferDataset
from transfer_analytics.exceptions import (
    ConfigValidationError,
    SchemaError,
    TransferAnalyticsError,
    UnknownClubError,
)
from transfer_analytics.loader import load_transfers, read_source_text
from transfer_analytics.parsers import DelimitedParser, ParseResult, parse, tokenize_line
from transfer_analytics.queries import (
    all_clubs,
    avg_fee_by_league,
    by_league,
    by_year,
    club_incoming,
    club_outgoing,
    club_top_transfers,
    club_transfer_stats,
    club_transfers,
    club_transfers_by_year,
    filter_paid,
    nationality_stats,
    position_breakdown,
    to_frame,
    top_leagues,
    top_transfers,
    transfer_flows,
    yearly_spending,
)
from transfer_analytics.records import TransferRecord

__all__ = [
    "AnalyticsConfig",
    "ClubReport",
    "ConfigValidationError",
    "DatasetInfo",
    "DelimitedParser",
    "ParseResult",
    "SchemaError",
    "TransferAnalyticsError",
    "TransferDataset",
    "TransferRecord",
    "UnknownClubError",
    "all_clubs",
    "avg_fee_by_league",
    "by_league",
    "by_year",
    "club_incoming",
    "club_outgoing",
    "club_top_transfers",
    "club_transfer_stats",
    "club_transfers",
    "club_transfers_by_year",
    "filter_paid",
    "load_config",
    "load_transfers",
    "nationality_stats",
    "parse",
    "position_breakdown",
    "read_source_text",
    "save_config",
    "to_frame",
    "tokenize_line",
    "top_leagues",
    "top_transfers",
    "transfer_flows",
    "yearly_spending",
]
