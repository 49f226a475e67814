"""Parsers for officials, home court, arenas, game attributes, programs and trends."""

from __future__ import annotations

import logging
from typing import Dict, List

from ..normalize import split_capacity, split_parenthetical
from .schemas import get_schema
from .summary import is_data_row
from .tables import Row, extract_rows, find_table, header_cells, indexed_headers

logger = logging.getLogger(__name__)

# Trailing trends.php rows are season summaries, not data.
TRENDS_SUMMARY_ROWS = 5


def parse_refs(html: str) -> List[Dict[str, str]]:
    """Parse officials.php, dropping the box-score link column."""
    rows = extract_rows(find_table(html), get_schema("refs"))
    return [
        {
            "Rank": row.get("Rank", ""),
            "Name": row.get("Name", ""),
            "Rating": row.get("Rating", ""),
            "Games": row.get("Games", ""),
            "Last Game": row.get("Last Game", ""),
            "Game Score": row.get("Game Score", ""),
        }
        for row in rows
        if row.get("Rating") != "Rating" and row.get("Rank") != ""
    ]


def parse_hca(html: str) -> List[Row]:
    rows = extract_rows(find_table(html), get_schema("hca"))
    return [row for row in rows if is_data_row(row, "Team")]


def parse_arenas(html: str) -> List[Dict[str, str]]:
    """Parse arenas.php; each arena cell is split into name and ``.Capacity``."""
    rows = extract_rows(find_table(html), get_schema("arenas"))
    arenas = []
    for row in rows:
        if row.get("Team") == "Team" or row.get("Rank") == "":
            continue
        arena, arena_capacity = split_capacity(row.get("Arena"))
        alternate, alternate_capacity = split_capacity(row.get("Alternate"))
        arenas.append(
            {
                "Rank": row.get("Rank", ""),
                "Team": row.get("Team", ""),
                "Conference": row.get("Conference", ""),
                "Arena": arena,
                "Arena.Capacity": arena_capacity,
                "Alternate": alternate,
                "Alternate.Capacity": alternate_capacity,
            }
        )
    logger.debug("Parsed %d arenas", len(arenas))
    return arenas


def parse_game_attribs(html: str) -> List[Dict[str, str]]:
    """Parse game_attrs.php; ``Location`` is split into city and arena."""
    rows = extract_rows(find_table(html), get_schema("game_attribs"))
    games = []
    for row in rows:
        if not is_data_row(row, "Rank"):
            continue
        location, arena = split_parenthetical(row.get("Location"))
        games.append(
            {
                "Rank": row.get("Rank", ""),
                "Date": row.get("Date", ""),
                "Game": row.get("Game", ""),
                "Location": location,
                "Arena": arena,
                "Conf.Matchup": row.get("Conf.Matchup", ""),
                "Value": row.get("Value", ""),
            }
        )
    return games


def parse_program_ratings(html: str) -> List[Row]:
    rows = extract_rows(find_table(html), get_schema("program_ratings"))
    return [row for row in rows if row.get("Team") != "Team" and row.get("Rank") != ""]


def parse_trends(html: str) -> List[Row]:
    """Parse trends.php using its own header labels.

    The layout of this page is not versioned, so columns come from the
    ``<thead>`` text rather than a fixed schema.
    """
    table = find_table(html)
    rows = extract_rows(table, indexed_headers(header_cells(table)))
    return rows[:-TRENDS_SUMMARY_ROWS]
