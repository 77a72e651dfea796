"""
Unit tests for the dataset handle (transfer_analytics.dataset).

Verifies that the handle passes the session config through to the
queries and that the report/metadata views are consistent with the
underlying query functions.
"""

from __future__ import annotations

import pandas as pd
import pytest

from transfer_analytics import queries
from transfer_analytics.config import AnalyticsConfig
from transfer_analytics.dataset import ClubReport, DatasetInfo, TransferDataset
from transfer_analytics.exceptions import SchemaError, UnknownClubError
from transfer_analytics.queries import ClubStats

TEXT = (
    "Name,Year,Transfer_type,Price_numeric,Previous_club_league,New_club_league,Prev_club,New_club\n"
    "P1,2018,fee,40,Eredivisie,Premier League,Ajax,Arsenal\n"
    "P2,2019,fee,25,Premier League,Eredivisie,Arsenal,PSV\n"
    "P3,2019,loan,,Eredivisie,Premier League,PSV,Arsenal\n"
    "P4,2020,fee,60,Eredivisie,Serie A,Ajax,Juventus\n"
    "bad,row\n"
)


@pytest.fixture()
def ds() -> TransferDataset:
    return TransferDataset.from_text(TEXT, source="inline")


class TestFromText:

    def test_counts(self, ds):
        assert len(ds) == 4
        assert ds.rows_dropped == 1
        assert ds.source == "inline"
        assert ds.columns[0] == "Name"

    def test_default_config(self, ds):
        assert ds.config == AnalyticsConfig()

    def test_empty_text_is_empty_dataset(self):
        ds = TransferDataset.from_text("")
        assert len(ds) == 0
        assert ds.columns == []

    def test_empty_text_with_required_header(self):
        with pytest.raises(SchemaError):
            TransferDataset.from_text("", require_header=True)

    def test_repr(self, ds):
        assert repr(ds) == "TransferDataset(records=4, source='inline')"


class TestQueryDelegation:

    def test_matches_pure_functions(self, ds):
        assert ds.paid() == queries.filter_paid(ds.records)
        assert ds.by_league() == queries.by_league(ds.records)
        assert ds.by_year() == queries.by_year(ds.records)
        assert ds.positions() == queries.position_breakdown(ds.records)
        assert ds.avg_fee_by_league() == queries.avg_fee_by_league(ds.records)
        assert ds.yearly_spending("Serie A") == queries.yearly_spending(ds.records, league="Serie A")
        assert ds.clubs() == ["Ajax", "Arsenal", "Juventus", "PSV"]

    def test_top_transfers_uses_config_limit(self):
        ds = TransferDataset.from_text(TEXT, config=AnalyticsConfig(top_transfers_limit=2))
        assert [t.price for t in ds.top_transfers()] == [60.0, 40.0]
        assert len(ds.top_transfers(limit=3)) == 3

    def test_flows_use_configured_leagues(self, ds):
        # Eredivisie is not a default reference league
        assert ds.flows() == []
        custom = TransferDataset(ds.records, config=AnalyticsConfig(top_leagues=["Eredivisie", "Premier League"]))
        assert [(f.source, f.target, f.count) for f in custom.flows()] == [
            ("Eredivisie", "Premier League", 2),
            ("Premier League", "Eredivisie", 1),
        ]

    def test_records_are_not_modified(self, ds):
        before = [dict(r) for r in ds.records]
        ds.by_league()
        ds.club_report("Arsenal")
        ds.describe()
        assert [dict(r) for r in ds.records] == before


class TestClubReport:

    def test_report(self, ds):
        report = ds.club_report("Arsenal")
        assert isinstance(report, ClubReport)
        assert report.stats.incoming == 2
        assert report.stats.outgoing == 1
        assert report.stats.net_spend == 15.0
        assert [(y.year, y.incoming, y.outgoing) for y in report.by_year] == [
            (2018, 1, 0),
            (2019, 1, 1),
        ]
        assert [(t.price, t.direction) for t in report.top_transfers] == [(40.0, "in"), (25.0, "out")]

    def test_club_limit_from_config(self):
        ds = TransferDataset.from_text(TEXT, config=AnalyticsConfig(club_top_limit=1))
        assert len(ds.club_report("Arsenal").top_transfers) == 1

    def test_unknown_club_lenient(self, ds):
        report = ds.club_report("Chelsea")
        assert report.stats == ClubStats()
        assert report.by_year == []
        assert report.top_transfers == []

    def test_unknown_club_strict(self, ds):
        with pytest.raises(UnknownClubError, match="Chelsea"):
            ds.club_report("Chelsea", strict=True)


class TestViews:

    def test_to_frame(self, ds):
        df = ds.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ds.columns
        assert len(df) == 4
        assert df.loc[2, "Price_numeric"] == ""

    def test_result_to_frame(self, ds):
        df = queries.to_frame(ds.top_transfers())
        assert "price" in df.columns
        assert "New_club" in df.columns
        assert df["price"].tolist() == [60.0, 40.0, 25.0]

    def test_result_to_frame_empty(self):
        assert queries.to_frame([]).empty

    def test_describe(self, ds):
        info = ds.describe()
        assert isinstance(info, DatasetInfo)
        assert info.source == "inline"
        assert info.num_records == 4
        assert info.year_range == (2018, 2020)
        assert info.paid_transfers == 3
        assert info.rows_dropped == 1

    def test_describe_empty(self):
        info = TransferDataset([]).describe()
        assert info.num_records == 0
        assert info.year_range is None
        assert info.paid_transfers == 0
