"""Conference page parsers (conf.php, confstats.php)."""

from __future__ import annotations

import logging
from typing import Dict, List

from bs4.element import Tag

from ..normalize import split_team_seed
from .tables import Row, body_rows, cell_text, extract_rows, find_table, find_tables, header_cells, make_soup, ranked_headers

logger = logging.getLogger(__name__)

OFFENSE_TABLE_INDEX = 1
DEFENSE_TABLE_INDEX = 2


def _ranked_rows(table: Tag) -> List[Row]:
    return extract_rows(table, ranked_headers(header_cells(table)))


def parse_conference_standings(html: str) -> List[Row]:
    """Parse the standings table of conf.php; ``Team`` is split into name and ``Seed``."""
    rows = _ranked_rows(find_table(html))
    return [split_team_seed(row) if "Team" in row else row for row in rows]


def parse_conference_offense(html: str) -> List[Row]:
    return _ranked_rows(find_table(html, index=OFFENSE_TABLE_INDEX))


def parse_conference_defense(html: str) -> List[Row]:
    return _ranked_rows(find_table(html, index=DEFENSE_TABLE_INDEX))


def _stat_rows(table: Tag) -> List[Dict[str, str]]:
    rows = []
    for tr in body_rows(table):
        cells = tr.find_all("td")
        if len(cells) < 3:
            continue
        stat = cell_text(cells[0])
        if stat:
            rows.append({"Stat": stat, "Value": cell_text(cells[1]), "Rank": cell_text(cells[2])})
    return rows


def parse_conference_aggregate_stats(html: str, single_conf: bool = False) -> List[Row]:
    """Parse conference-wide aggregates.

    On a single conference page the aggregates live in the third- and
    second-to-last tables (the last one is page navigation) and come back as
    ``Stat``/``Value``/``Rank`` records with any parenthetical dropped from
    the stat name.  Otherwise the first table of confstats.php is parsed with
    ``.Rank`` header labels.
    """
    tables = find_tables(make_soup(html))
    if single_conf:
        if len(tables) < 3:
            logger.debug("Expected at least 3 tables on conference page, found %d", len(tables))
            return []
        rows = _stat_rows(tables[-3]) + _stat_rows(tables[-2])
        return [
            {"Stat": row["Stat"].split(" (")[0], "Value": row["Value"], "Rank": row["Rank"]}
            for row in rows
        ]
    if not tables:
        return []
    return _ranked_rows(tables[0])
