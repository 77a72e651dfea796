"""
Market-wide transfer queries.

Every function here is pure: it takes the record sequence (plus optional
parameters), builds a private working frame, and returns new result
objects. The input sequence is never reordered or modified.

Missing-value policy per field:
  - ``New_club_league`` blank -> counted under ``"Unknown"`` in
    ``by_league`` only.
  - ``Year`` blank or unparsable -> excluded from per-year results.
  - ``Nationality`` / ``Player_position`` blank or ``"nan"`` -> excluded.
  - ``Price_numeric`` blank or unparsable -> record is not priced.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from transfer_analytics.queries.results import (
    LeagueCount,
    LeagueFee,
    NationalityCount,
    PositionCount,
    PricedTransfer,
    TransferFlow,
    YearCount,
    YearTotal,
)
from transfer_analytics.records import (
    MISSING_TEXT,
    NATIONALITY,
    NEW_LEAGUE,
    POSITION,
    PREVIOUS_LEAGUE,
    UNKNOWN_LEAGUE,
)
from transfer_analytics.transforms.frame import (
    PRICE_VALUE,
    YEAR_VALUE,
    build_frame,
    priced_mask,
    select,
)
from transfer_analytics.transforms.grouping import aggregate_by, count_by, rank

logger = logging.getLogger(__name__)

Records = Sequence[Mapping[str, str]]

TOP_LEAGUES = ("Premier League", "La Liga", "Bundesliga", "Serie A", "Ligue 1")

DEFAULT_TOP_TRANSFERS = 20
DEFAULT_NATIONALITY_LIMIT = 15

_MISSING_CATEGORIES = ("", MISSING_TEXT)


def top_leagues() -> list[str]:
    """The five reference leagues used to restrict flow analysis."""
    return list(TOP_LEAGUES)


def filter_paid(records: Records) -> list[Mapping[str, str]]:
    """Priced transfers, in source order."""
    df = build_frame(records)
    return select(records, df[priced_mask(df)].index)


def by_league(records: Records) -> list[LeagueCount]:
    """Transfers per destination league, most active first.

    Records without a ``New_club_league`` are counted under ``"Unknown"``,
    so the counts always sum to ``len(records)``.
    """
    df = build_frame(records)
    leagues = df[NEW_LEAGUE].where(df[NEW_LEAGUE] != "", UNKNOWN_LEAGUE)
    counts = count_by(leagues.to_frame("league"), ["league"])
    return [
        LeagueCount(league=league, count=int(count))
        for league, count in zip(counts["league"], counts["count"])
    ]


def by_year(records: Records) -> list[YearCount]:
    """Transfers per year, oldest first. Blank years are excluded."""
    df = build_frame(records)
    dated = df[df[YEAR_VALUE].notna()]
    counts = count_by(dated, [YEAR_VALUE])
    counts = rank(counts, YEAR_VALUE, ascending=True)
    return [
        YearCount(year=int(year), count=int(count))
        for year, count in zip(counts[YEAR_VALUE], counts["count"])
    ]


def top_transfers(records: Records, limit: int = DEFAULT_TOP_TRANSFERS) -> list[PricedTransfer]:
    """The ``limit`` most expensive priced transfers, highest fee first.

    Equal fees keep their source order.
    """
    df = build_frame(records)
    top = rank(df[priced_mask(df)], PRICE_VALUE, limit=limit)
    return [
        PricedTransfer(record=records[i], price=float(price))
        for i, price in zip(top.index, top[PRICE_VALUE])
    ]


def transfer_flows(records: Records, leagues: Sequence[str] | None = None) -> list[TransferFlow]:
    """Directed league-to-league transfer counts between reference leagues.

    Only transfers whose previous and new league both belong to
    ``leagues`` (default: ``top_leagues()``) are counted. ``A -> B`` and
    ``B -> A`` are separate flows.
    """
    if leagues is None:
        leagues = top_leagues()
    df = build_frame(records)
    inside = df[PREVIOUS_LEAGUE].isin(leagues) & df[NEW_LEAGUE].isin(leagues)
    counts = count_by(df[inside], [PREVIOUS_LEAGUE, NEW_LEAGUE])
    return [
        TransferFlow(source=source, target=target, count=int(count))
        for source, target, count in zip(
            counts[PREVIOUS_LEAGUE], counts[NEW_LEAGUE], counts["count"]
        )
    ]


def nationality_stats(records: Records, limit: int = DEFAULT_NATIONALITY_LIMIT) -> list[NationalityCount]:
    """Most common player nationalities (top 15 by default)."""
    df = build_frame(records)
    known = df[~df[NATIONALITY].isin(_MISSING_CATEGORIES)]
    counts = count_by(known, [NATIONALITY]).head(max(limit, 0))
    return [
        NationalityCount(nationality=nat, count=int(count))
        for nat, count in zip(counts[NATIONALITY], counts["count"])
    ]


def position_breakdown(records: Records) -> list[PositionCount]:
    """Transfers per playing position, most common first."""
    df = build_frame(records)
    known = df[~df[POSITION].isin(_MISSING_CATEGORIES)]
    counts = count_by(known, [POSITION])
    return [
        PositionCount(position=pos, count=int(count))
        for pos, count in zip(counts[POSITION], counts["count"])
    ]


def avg_fee_by_league(records: Records) -> list[LeagueFee]:
    """Average priced fee per destination league, highest average first.

    Only priced transfers are considered; the league is taken as-is (a
    blank league forms its own group).
    """
    df = build_frame(records)
    paid = df[priced_mask(df)]
    fees = aggregate_by(
        paid, [NEW_LEAGUE],
        total=(PRICE_VALUE, "sum"),
        count=(PRICE_VALUE, "size"),
    )
    fees["average"] = fees["total"] / fees["count"]
    fees = rank(fees, "average")
    return [
        LeagueFee(league=league, average=float(avg), count=int(count))
        for league, avg, count in zip(fees[NEW_LEAGUE], fees["average"], fees["count"])
    ]


def yearly_spending(records: Records, league: str | None = None) -> list[YearTotal]:
    """Total priced spending per year, oldest first.

    Args:
        records: Transfer records.
        league: If given, only transfers into this league are summed.
    """
    df = build_frame(records)
    paid = df[priced_mask(df) & df[YEAR_VALUE].notna()]
    if league:
        paid = paid[paid[NEW_LEAGUE] == league]
    totals = aggregate_by(paid, [YEAR_VALUE], total=(PRICE_VALUE, "sum"))
    totals = rank(totals, YEAR_VALUE, ascending=True)
    logger.debug("yearly_spending(league=%r): %d years", league, len(totals))
    return [
        YearTotal(year=int(year), total=float(total))
        for year, total in zip(totals[YEAR_VALUE], totals["total"])
    ]
