"""Unit tests for table location, row extraction and header synthesis."""

import pytest

from kenpom_scraper.errors import KenPomError, TableIndexError, TableNotFoundError
from kenpom_scraper.parsers.tables import (
    extract_rows,
    extract_season,
    extract_text,
    find_table,
    header_cells,
    indexed_headers,
    parse_all_tables,
    parse_table,
    ranked_headers,
)

TWO_TABLES = """
<html><body>
<table id="first">
  <thead><tr><th>Team</th><th>AdjEM</th></tr></thead>
  <tbody>
    <tr><td> Duke </td><td>+30.1</td></tr>
    <tr><td>Houston</td><td>+28.4</td></tr>
  </tbody>
</table>
<table id="second">
  <tr><th>Name</th><th>Value</th></tr>
  <tr><td>a</td><td>1</td></tr>
</table>
</body></html>
"""


class TestFindTable:
    def test_returns_indexed_table(self):
        assert find_table(TWO_TABLES).get("id") == "first"
        assert find_table(TWO_TABLES, index=1).get("id") == "second"

    def test_selector(self):
        assert find_table(TWO_TABLES, selector="table#second").get("id") == "second"

    def test_no_table_raises_not_found(self):
        with pytest.raises(TableNotFoundError, match="No tables found matching selector: table") as exc:
            find_table("<html><body><p>nothing</p></body></html>")
        assert exc.value.found == 0

    def test_index_out_of_range_reports_count(self):
        with pytest.raises(TableIndexError, match="Table index 5 out of bounds. Found 2 tables.") as exc:
            find_table(TWO_TABLES, index=5)
        assert exc.value.found == 2
        assert exc.value.index == 5

    def test_locator_errors_share_base(self):
        with pytest.raises(KenPomError):
            find_table("")
        with pytest.raises(IndexError):
            find_table(TWO_TABLES, index=2)


class TestExtractRows:
    def test_uses_tbody_rows(self):
        rows = extract_rows(find_table(TWO_TABLES), ["Team", "AdjEM"])
        assert rows == [
            {"Team": "Duke", "AdjEM": "+30.1"},
            {"Team": "Houston", "AdjEM": "+28.4"},
        ]

    def test_without_tbody_skips_first_row(self):
        rows = extract_rows(find_table(TWO_TABLES, index=1), ["Name", "Value"])
        assert rows == [{"Name": "a", "Value": "1"}]

    def test_extra_cells_are_dropped(self):
        html = "<table><tbody><tr><td>1</td><td>2</td><td>3</td></tr></tbody></table>"
        assert extract_rows(find_table(html), ["A", "B"]) == [{"A": "1", "B": "2"}]

    def test_short_rows_only_fill_present_columns(self):
        html = "<table><tbody><tr><td>1</td></tr></tbody></table>"
        assert extract_rows(find_table(html), ["A", "B"]) == [{"A": "1"}]

    def test_empty_spacer_rows_are_omitted(self):
        html = (
            "<table><tbody><tr></tr><tr><th>Header</th></tr>"
            "<tr><td>x</td></tr></tbody></table>"
        )
        assert extract_rows(find_table(html), ["A"]) == [{"A": "x"}]


class TestHeaderConventions:
    HTML = """
    <table>
      <thead><tr><th>Team</th><th>AdjEM</th><th></th><th>AdjEM</th></tr></thead>
      <tbody><tr><td>Duke</td><td>30.1</td><td>x</td><td>1</td></tr></tbody>
    </table>
    """

    def test_indexed_headers_suffix_position(self):
        cells = header_cells(find_table(self.HTML))
        assert indexed_headers(cells) == ["Team", "AdjEM", "Column2", "AdjEM_3"]

    def test_ranked_headers_suffix_rank(self):
        cells = header_cells(find_table(self.HTML))
        assert ranked_headers(cells) == ["Team", "AdjEM", "Column2", "AdjEM.Rank"]

    def test_parse_table_uses_header_labels(self):
        assert parse_table(self.HTML) == [
            {"Team": "Duke", "AdjEM": "30.1", "Column2": "x", "AdjEM_3": "1"}
        ]

    def test_parse_all_tables(self):
        tables = parse_all_tables(TWO_TABLES)
        assert len(tables) == 2
        assert tables[1] == [{"Name": "a", "Value": "1"}]


class TestPageHelpers:
    def test_extract_text(self):
        html = "<div class='x'> hello </div><div class='x'>world</div>"
        assert extract_text(html, "div.x") == "hello world"
        assert extract_text(html, "span") is None

    def test_season_from_title(self):
        assert extract_season("<html><head><title>2025 Pomeroy College Basketball Ratings</title></head></html>") == 2025

    def test_season_from_content_header(self):
        html = "<html><head><title>Ratings</title></head><body><div id='content-header'><h2>2024 Ratings</h2></div></body></html>"
        assert extract_season(html) == 2024

    def test_season_missing(self):
        assert extract_season("<html><head><title>Ratings</title></head></html>") is None
