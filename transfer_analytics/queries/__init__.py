"""
Queries sub-package for transfer-analytics.

A library of pure query functions over a parsed record sequence:
  - market.py: league, year, flow, nationality, position and fee queries.
  - clubs.py: per-club filters, statistics and rankings.
  - results.py: the frozen dataclasses the queries return, plus
    ``to_frame()`` for tabular consumers.

Queries are independent and can be run in any order, any number of
times, against the same snapshot.
"""

from transfer_analytics.queries.clubs import (
    all_clubs,
    club_incoming,
    club_outgoing,
    club_top_transfers,
    club_transfer_stats,
    club_transfers,
    club_transfers_by_year,
)
from transfer_analytics.queries.market import (
    avg_fee_by_league,
    by_league,
    by_year,
    filter_paid,
    nationality_stats,
    position_breakdown,
    top_leagues,
    top_transfers,
    transfer_flows,
    yearly_spending,
)
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
    to_frame,
)

__all__ = [
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
    "nationality_stats",
    "position_breakdown",
    "top_leagues",
    "top_transfers",
    "transfer_flows",
    "yearly_spending",
    "ClubStats",
    "ClubTransfer",
    "ClubYearCount",
    "LeagueCount",
    "LeagueFee",
    "NationalityCount",
    "PositionCount",
    "PricedTransfer",
    "TransferFlow",
    "YearCount",
    "YearTotal",
    "to_frame",
]
