"""
Unit tests for the delimited parser (transfer_analytics.parsers.delimited).

Tests header handling, row-shape filtering, blank-line skipping, the
optional "no schema" error, and parse/serialize round-trips using small
in-memory strings.
"""

from __future__ import annotations

import pytest

from transfer_analytics.exceptions import SchemaError
from transfer_analytics.parsers import DelimitedParser, ParseResult, parse
from transfer_analytics.queries import YearCount, by_year
from transfer_analytics.records import TransferRecord


def _to_text(columns: list[str], rows: list[dict[str, str]]) -> str:
    """Helper: serialize rows without quoting (values must not hold commas)."""
    lines = [",".join(columns)]
    lines.extend(",".join(row[c] for c in columns) for row in rows)
    return "\n".join(lines)


class TestParse:
    """Tests for parse()."""

    # -----------------------------------------------------------------
    # Header and basic rows
    # -----------------------------------------------------------------

    def test_basic_rows(self):
        records = parse("Year,New_club\n2020,Chelsea\n2021,Arsenal")
        assert records == (
            {"Year": "2020", "New_club": "Chelsea"},
            {"Year": "2021", "New_club": "Arsenal"},
        )

    def test_returns_transfer_records(self):
        records = parse("Year\n2020")
        assert isinstance(records, tuple)
        assert isinstance(records[0], TransferRecord)

    def test_header_names_trimmed(self):
        records = parse(" Year , New_club \n2020,Chelsea")
        assert list(records[0]) == ["Year", "New_club"]

    def test_values_trimmed(self):
        records = parse("Year,New_club\n 2020 ,  Chelsea ")
        assert records[0] == {"Year": "2020", "New_club": "Chelsea"}

    def test_quoted_value_with_comma(self):
        records = parse('Name,Year\n"Hazard, Eden",2019')
        assert records[0]["Name"] == "Hazard, Eden"

    def test_empty_field_kept_as_empty_string(self):
        records = parse("Year,Price_numeric,New_club\n2020,,Chelsea")
        assert records[0]["Price_numeric"] == ""

    def test_crlf_line_endings(self):
        records = parse("Year,New_club\r\n2020,Chelsea\r\n")
        assert records == ({"Year": "2020", "New_club": "Chelsea"},)

    # -----------------------------------------------------------------
    # Row-shape filtering
    # -----------------------------------------------------------------

    def test_short_row_dropped(self):
        records = parse("a,b,c\n1,2,3\n1,2\n4,5,6")
        assert [r["a"] for r in records] == ["1", "4"]

    def test_long_row_dropped(self):
        records = parse("a,b\n1,2,3\n4,5")
        assert records == ({"a": "4", "b": "5"},)

    def test_header_is_split_without_quote_handling(self):
        """The header row is split on bare commas; quotes are not special."""
        records = parse('"a,b",c\n1,2,3')
        assert list(records[0]) == ['"a', 'b"', "c"]

    def test_blank_lines_skipped(self):
        records = parse("a,b\n\n1,2\n   \n3,4\n")
        assert len(records) == 2

    def test_order_preserved(self):
        text = "n\n" + "\n".join(str(i) for i in range(50))
        assert [r["n"] for r in parse(text)] == [str(i) for i in range(50)]

    # -----------------------------------------------------------------
    # Empty input
    # -----------------------------------------------------------------

    def test_empty_text(self):
        assert parse("") == ()

    def test_header_only(self):
        assert parse("Year,New_club") == ()
        assert parse("Year,New_club\n") == ()

    def test_empty_text_with_required_header_raises(self):
        with pytest.raises(SchemaError):
            parse("", require_header=True)

    def test_blank_header_with_required_header_raises(self):
        with pytest.raises(SchemaError):
            parse("   \n2020,Chelsea", require_header=True)

    def test_header_only_with_required_header_is_fine(self):
        assert parse("Year", require_header=True) == ()

    # -----------------------------------------------------------------
    # Round-trip
    # -----------------------------------------------------------------

    def test_round_trip(self):
        columns = ["Year", "Transfer_type", "Price_numeric", "New_club"]
        rows = [
            {"Year": "2019", "Transfer_type": "fee", "Price_numeric": "12.5", "New_club": "Chelsea"},
            {"Year": "2020", "Transfer_type": "loan", "Price_numeric": "", "New_club": "Inter"},
            {"Year": "", "Transfer_type": "fee", "Price_numeric": "3", "New_club": ""},
        ]
        assert list(parse(_to_text(columns, rows))) == rows

    # -----------------------------------------------------------------
    # Byte-order mark
    # -----------------------------------------------------------------

    def test_leading_bom_dropped_from_first_column(self):
        records = parse("\ufeffYear,Transfer_type\n2020,fee\n")
        assert list(records[0]) == ["Year", "Transfer_type"]
        assert records[0]["Year"] == "2020"

    def test_bom_text_feeds_year_queries(self):
        records = parse("\ufeffYear,Transfer_type\n2020,fee\n2020,loan\n")
        assert by_year(records) == [YearCount(year=2020, count=2)]

    def test_bom_only_text_has_no_header(self):
        assert parse("\ufeff") == ()
        with pytest.raises(SchemaError):
            parse("\ufeff", require_header=True)


class TestDelimitedParser:
    """Tests for DelimitedParser.parse() and its ParseResult."""

    def test_parse_result_counts(self):
        text = "a,b\n1,2\n\n1\n3,4\n1,2,3\n   "
        result = DelimitedParser().parse(text)
        assert isinstance(result, ParseResult)
        assert result.columns == ("a", "b")
        assert len(result.records) == 2
        assert result.rows_dropped == 2
        assert result.blank_lines == 2

    def test_output_length_identity(self):
        """records == non-blank data lines - malformed lines."""
        text = "a,b\n1,2\n\n1\n3,4\n1,2,3\n5,6"
        result = DelimitedParser().parse(text)
        non_blank = sum(1 for line in text.split("\n")[1:] if line.strip())
        assert len(result.records) == non_blank - result.rows_dropped

    def test_no_header_result(self):
        result = DelimitedParser().parse("")
        assert result.records == ()
        assert not result.has_schema

    def test_has_schema(self):
        assert DelimitedParser().parse("a").has_schema

    def test_custom_delimiter(self):
        result = DelimitedParser(delimiter=";").parse('a;b\n"x;y";2')
        assert result.records == ({"a": "x;y", "b": "2"},)

    def test_require_header_raises(self):
        with pytest.raises(SchemaError, match="No header row"):
            DelimitedParser(require_header=True).parse("\n1,2")
