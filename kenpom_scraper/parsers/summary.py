"""Parsers for the team-per-row summary pages (ratings, efficiency, four factors, ...)."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from ..normalize import split_team_seed, strip_seed
from .schemas import get_schema, team_stats_schema
from .tables import Row, extract_rows, find_table

logger = logging.getLogger(__name__)


def is_data_row(row: Row, key: str) -> bool:
    """False for empty rows and for header rows repeated inside ``<tbody>``."""
    value = row.get(key)
    return value != key and value != ""


def _team_rows(html: str, columns: Sequence[str]) -> List[Dict[str, str]]:
    rows = extract_rows(find_table(html), columns)
    out = []
    for row in rows:
        if not is_data_row(row, "Team"):
            continue
        cleaned = dict(row)
        cleaned["Team"] = strip_seed(row.get("Team"))
        out.append(cleaned)
    return out


def parse_pomeroy_ratings(html: str) -> List[Dict[str, str]]:
    """Parse the main ratings table (index.php).

    ``Team`` is split into the bare name and a ``Seed`` column ("" when the
    team has no tournament seed).
    """
    rows = extract_rows(find_table(html), get_schema("ratings"))
    ratings = [split_team_seed(row) for row in rows if is_data_row(row, "Rk")]
    logger.debug("Parsed %d rating rows", len(ratings))
    return ratings


def parse_efficiency(html: str, season: Optional[int] = None) -> List[Dict[str, str]]:
    """Parse summary.php; 2010+ pages add average possession length columns."""
    return _team_rows(html, get_schema("efficiency", season))


def parse_four_factors(html: str) -> List[Dict[str, str]]:
    return _team_rows(html, get_schema("four_factors"))


def parse_team_stats(html: str, defense: bool = False) -> List[Dict[str, str]]:
    """Parse teamstats.php; the trailing pair is ``AdjDE`` on the defense view."""
    return _team_rows(html, team_stats_schema(defense=defense))


def parse_point_dist(html: str) -> List[Dict[str, str]]:
    return _team_rows(html, get_schema("point_dist"))


def parse_height(html: str, season: Optional[int] = None) -> List[Dict[str, str]]:
    """Parse height.php; Continuity columns exist from 2008 on."""
    return _team_rows(html, get_schema("height", season))
