"""
Unit tests for the filesystem loader (transfer_analytics.loader).
"""

import pytest

from transfer_analytics.config import AnalyticsConfig, save_config
from transfer_analytics.exceptions import SchemaError
from transfer_analytics.loader import load_transfers, read_source_text

HEADER = "Year,Transfer_type,Price_numeric,Prev_club,New_club\n"


class TestReadSourceText:

    def test_strips_bom(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_bytes(("\ufeff" + HEADER).encode("utf-8"))
        assert read_source_text(path) == HEADER

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_source_text(tmp_path / "missing.csv")


class TestLoadTransfers:

    def test_load(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text(HEADER + "2020,fee,10,Ajax,PSV\n", encoding="utf-8")
        ds = load_transfers(path)
        assert len(ds) == 1
        assert ds.source == str(path)
        assert ds.records[0]["Year"] == "2020"

    def test_bom_does_not_leak_into_columns(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_bytes(("\ufeff" + HEADER + "2020,fee,10,Ajax,PSV\n").encode("utf-8"))
        ds = load_transfers(path)
        assert ds.columns[0] == "Year"

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(SchemaError):
            load_transfers(path)

    def test_header_only(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text(HEADER, encoding="utf-8")
        assert len(load_transfers(path)) == 0

    def test_config_path(self, tmp_path):
        cfg_path = tmp_path / "report.yaml"
        save_config(AnalyticsConfig(top_transfers_limit=3), cfg_path)
        path = tmp_path / "t.csv"
        path.write_text(HEADER, encoding="utf-8")
        assert load_transfers(path, config_path=cfg_path).config.top_transfers_limit == 3

    def test_explicit_config_wins(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text(HEADER, encoding="utf-8")
        ds = load_transfers(
            path,
            config=AnalyticsConfig(top_transfers_limit=7),
            config_path=tmp_path / "never-read.yaml",
        )
        assert ds.config.top_transfers_limit == 7

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_transfers(tmp_path / "missing.csv")
