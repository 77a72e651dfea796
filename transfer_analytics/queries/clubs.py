"""
Club-level transfer queries.

A club is "incoming" on a record when it is the ``New_club`` and
"outgoing" when it is the ``Prev_club``. A record naming the same club on
both sides counts on both sides.

Club names are matched exactly (no case folding or trimming beyond what
the parser already did).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from transfer_analytics.queries.results import ClubStats, ClubTransfer, ClubYearCount
from transfer_analytics.records import FREE_AGENT, NEW_CLUB, PREVIOUS_CLUB, UNATTACHED
from transfer_analytics.transforms.frame import (
    PRICE_VALUE,
    YEAR_VALUE,
    build_frame,
    priced_mask,
    select,
)
from transfer_analytics.transforms.grouping import aggregate_by, rank

Records = Sequence[Mapping[str, str]]

DEFAULT_CLUB_TOP_TRANSFERS = 10

# Values in the club columns that do not name a real club
_NOT_PREVIOUS_CLUBS = ("", FREE_AGENT, UNATTACHED)
_NOT_NEW_CLUBS = ("", UNATTACHED)


def all_clubs(records: Records) -> list[str]:
    """Every distinct club name appearing on either side, sorted."""
    df = build_frame(records)
    previous = df.loc[~df[PREVIOUS_CLUB].isin(_NOT_PREVIOUS_CLUBS), PREVIOUS_CLUB]
    new = df.loc[~df[NEW_CLUB].isin(_NOT_NEW_CLUBS), NEW_CLUB]
    return sorted(set(previous) | set(new))


def club_transfers(records: Records, club: str) -> list[Mapping[str, str]]:
    """Records where ``club`` is the previous or the new club, in source order."""
    df = build_frame(records)
    involved = (df[PREVIOUS_CLUB] == club) | (df[NEW_CLUB] == club)
    return select(records, df[involved].index)


def club_incoming(records: Records, club: str) -> list[Mapping[str, str]]:
    """Records where ``club`` is the new club."""
    df = build_frame(records)
    return select(records, df[df[NEW_CLUB] == club].index)


def club_outgoing(records: Records, club: str) -> list[Mapping[str, str]]:
    """Records where ``club`` is the previous club."""
    df = build_frame(records)
    return select(records, df[df[PREVIOUS_CLUB] == club].index)


def club_transfer_stats(records: Records, club: str) -> ClubStats:
    """Aggregate incoming/outgoing activity and spending for one club.

    Fees only count when the transfer is priced. Unparsable fees add
    nothing to the totals and are left out of the ``*_paid`` counts.
    """
    df = build_frame(records)
    incoming = df[NEW_CLUB] == club
    outgoing = df[PREVIOUS_CLUB] == club
    priced = priced_mask(df)

    total_spent = float(df.loc[incoming & priced, PRICE_VALUE].sum())
    total_received = float(df.loc[outgoing & priced, PRICE_VALUE].sum())
    n_in = int(incoming.sum())
    n_out = int(outgoing.sum())

    return ClubStats(
        total_transfers=n_in + n_out,
        incoming=n_in,
        outgoing=n_out,
        total_spent=total_spent,
        total_received=total_received,
        net_spend=total_spent - total_received,
        incoming_paid=int((incoming & priced).sum()),
        outgoing_paid=int((outgoing & priced).sum()),
    )


def club_transfers_by_year(records: Records, club: str) -> list[ClubYearCount]:
    """Incoming and outgoing transfer counts per year for ``club``, oldest first."""
    df = build_frame(records)
    df["incoming"] = (df[NEW_CLUB] == club).astype(int)
    df["outgoing"] = (df[PREVIOUS_CLUB] == club).astype(int)
    involved = df[(df["incoming"] + df["outgoing"] > 0) & df[YEAR_VALUE].notna()]

    yearly = aggregate_by(
        involved, [YEAR_VALUE],
        incoming=("incoming", "sum"),
        outgoing=("outgoing", "sum"),
    )
    yearly = rank(yearly, YEAR_VALUE, ascending=True)
    return [
        ClubYearCount(year=int(year), incoming=int(n_in), outgoing=int(n_out))
        for year, n_in, n_out in zip(yearly[YEAR_VALUE], yearly["incoming"], yearly["outgoing"])
    ]


def club_top_transfers(
    records: Records,
    club: str,
    limit: int = DEFAULT_CLUB_TOP_TRANSFERS,
) -> list[ClubTransfer]:
    """The ``limit`` most expensive priced transfers involving ``club``.

    Each result is tagged ``"in"`` when ``club`` is the new club and
    ``"out"`` otherwise.
    """
    df = build_frame(records)
    involved = (df[PREVIOUS_CLUB] == club) | (df[NEW_CLUB] == club)
    top = rank(df[involved & priced_mask(df)], PRICE_VALUE, limit=limit)
    return [
        ClubTransfer(
            record=records[i],
            price=float(price),
            direction="in" if new_club == club else "out",
        )
        for i, price, new_club in zip(top.index, top[PRICE_VALUE], top[NEW_CLUB])
    ]
