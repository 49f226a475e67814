"""Generic HTML table location and row extraction.

Every endpoint parser goes through :func:`find_table` and
:func:`extract_rows`.  Column names are supplied by the caller (ordinal
schemas from :mod:`kenpom_scraper.parsers.schemas`) or synthesized from the
header cells with one of the two duplicate-label conventions below.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import TableIndexError, TableNotFoundError

logger = logging.getLogger(__name__)

Row = Dict[str, str]

_YEAR_RE = re.compile(r"(\d{4})")


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def find_tables(soup: BeautifulSoup, selector: str = "table") -> List[Tag]:
    return soup.select(selector)


def find_table(html: str, selector: str = "table", index: int = 0) -> Tag:
    """Return the ``index``-th node matching ``selector``.

    Raises:
        TableNotFoundError: nothing matched.
        TableIndexError: fewer than ``index + 1`` nodes matched.
    """
    return locate_table(make_soup(html), selector, index)


def locate_table(soup: BeautifulSoup, selector: str = "table", index: int = 0) -> Tag:
    tables = find_tables(soup, selector)
    if not tables:
        raise TableNotFoundError(selector)
    if index >= len(tables):
        raise TableIndexError(index, len(tables), selector)
    return tables[index]


def cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def body_rows(table: Tag) -> List[Tag]:
    """Rows of the table body.

    Uses every ``<tbody>`` when present; otherwise the first row is taken to
    be the header and the remaining rows are returned.
    """
    tbodies = table.find_all("tbody")
    if tbodies:
        return [tr for tbody in tbodies for tr in tbody.find_all("tr")]
    return table.find_all("tr")[1:]


def row_cells(row: Tag, columns: Sequence[str]) -> Row:
    """Map the row's ``<td>`` cells onto ``columns`` by position.

    Cells past the end of ``columns`` are dropped.
    """
    data: Row = {}
    for col, cell in zip(columns, row.find_all("td")):
        data[col] = cell_text(cell)
    return data


def extract_rows(table: Tag, columns: Sequence[str]) -> List[Row]:
    rows: List[Row] = []
    for tr in body_rows(table):
        data = row_cells(tr, columns)
        if data:
            rows.append(data)
    logger.debug("Extracted %d rows over %d columns", len(rows), len(columns))
    return rows


# ---------------------------------------------------------------------------
# Header synthesis
# ---------------------------------------------------------------------------


def header_cells(table: Tag) -> List[Tag]:
    """All ``th``/``td`` cells under the table's ``<thead>`` rows, in order."""
    cells: List[Tag] = []
    for thead in table.find_all("thead"):
        for tr in thead.find_all("tr"):
            cells.extend(tr.find_all(["th", "td"]))
    return cells


def indexed_headers(cells: Sequence[Tag]) -> List[str]:
    """Header labels where a repeated label gets its position appended (``AdjEM_4``)."""
    headers: List[str] = []
    for i, cell in enumerate(cells):
        text = cell_text(cell) or f"Column{i}"
        if text in headers:
            text = f"{text}_{i}"
        headers.append(text)
    return headers


def ranked_headers(cells: Sequence[Tag]) -> List[str]:
    """Header labels where a repeated label is the stat's rank column (``AdjEM.Rank``)."""
    headers: List[str] = []
    for i, cell in enumerate(cells):
        text = cell_text(cell) or f"Column{i}"
        if text in headers:
            text = f"{text}.Rank"
        headers.append(text)
    return headers


def _last_header_row(table: Tag) -> Optional[Tag]:
    thead = table.find("thead")
    if thead is not None:
        rows = thead.find_all("tr")
        if rows:
            return rows[-1]
    return table.find("tr")


def parse_table_element(table: Tag) -> List[Row]:
    """Header-derived extraction of a single table node."""
    header_row = _last_header_row(table)
    cells = header_row.find_all(["th", "td"]) if header_row is not None else []
    return extract_rows(table, indexed_headers(cells))


def parse_table(html: str, selector: str = "table", index: int = 0) -> List[Row]:
    """Parse one table into rows keyed by its own header labels."""
    return parse_table_element(find_table(html, selector, index))


def parse_all_tables(html: str, selector: str = "table") -> List[List[Row]]:
    return [parse_table_element(table) for table in find_tables(make_soup(html), selector)]


# ---------------------------------------------------------------------------
# Page-level helpers
# ---------------------------------------------------------------------------


def extract_text(html: str, selector: str) -> Optional[str]:
    nodes = make_soup(html).select(selector)
    if not nodes:
        return None
    return "".join(node.get_text() for node in nodes).strip()


def extract_season(html: str) -> Optional[int]:
    """Season year from the page ``<title>``, else from ``#content-header h2``."""
    soup = make_soup(html)
    title = soup.title.get_text() if soup.title else ""
    match = _YEAR_RE.search(title)
    if match:
        return int(match.group(1))
    header = " ".join(h2.get_text() for h2 in soup.select("#content-header h2"))
    match = _YEAR_RE.search(header)
    if match:
        return int(match.group(1))
    return None
