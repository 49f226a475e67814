"""Player stats and Player of the Year parsers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4.element import Tag

from .schemas import get_schema, player_stats_columns
from .tables import Row, body_rows, cell_text, extract_rows, find_table, find_tables, make_soup

logger = logging.getLogger(__name__)

# KenPom added the MVP table in 2013.
KPOY_MVP_FIRST_SEASON = 2013

_TEAM_NAME_RE = re.compile(r"^([A-Za-z.\s&']+)")
_HEIGHT_RE = re.compile(r"(\d+-\d+)")


def split_ortg(row: Row) -> Row:
    """``"125.3 (28.1)"`` -> ``ORtg="125.3"``, ``Poss%="28.1"``."""
    out = dict(row)
    parts = row.get("ORtg", "").split(" ")
    out["ORtg"] = parts[0]
    out["Poss%"] = parts[1].replace("(", "").replace(")", "") if len(parts) > 1 and parts[1] else ""
    return out


def parse_player_stats(html: str, metric: str = "eFG") -> List[Row]:
    """Parse one playerstats.php table.

    FG metrics (2P, 3P, FT) carry made/attempted/percentage columns; the ORtg
    value embeds the possession share, split out into ``Poss%``.
    """
    rows = extract_rows(find_table(html), player_stats_columns(metric))
    players = [
        row for row in rows
        if row.get("Rank") not in ("Rank", "") and row.get("Player") != ""
    ]
    if metric == "ORtg":
        players = [split_ortg(row) for row in players]
    return players


def parse_all_player_stats_tables(html: str) -> List[List[Row]]:
    """Parse every ORtg table (one per possession-usage threshold)."""
    columns = get_schema("player_ortg")
    results: List[List[Row]] = []
    for table in find_tables(make_soup(html)):
        rows = [
            split_ortg(row)
            for row in extract_rows(table, columns)
            if row.get("Rank") and row["Rank"] != "Rank"
        ]
        if rows:
            results.append(rows)
    return results


@dataclass
class KpoyPlayer:
    rank: str
    player: str
    team: str
    height: str
    weight: str
    year: str
    hometown: str
    rating: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "Rank": self.rank,
            "Player": self.player,
            "Team": self.team,
            "Height": self.height,
            "Weight": self.weight,
            "Year": self.year,
            "Hometown": self.hometown,
            "KPOY Rating": self.rating,
        }


@dataclass
class KpoyResult:
    kpoy: List[KpoyPlayer] = field(default_factory=list)
    mvp: Optional[List[KpoyPlayer]] = None

    def to_dict(self) -> Dict:
        return {
            "kpoy": [p.to_dict() for p in self.kpoy],
            "mvp": [p.to_dict() for p in self.mvp] if self.mvp is not None else None,
        }


def parse_player_info(rank: str, info: str, rating: str) -> KpoyPlayer:
    """Decompose ``"John Smith, Duke 6-5 · 195, Jr, Durham, NC"``."""
    name_team, _, details = info.partition(" · ")
    player, _, team_info = name_team.partition(", ")

    team_match = _TEAM_NAME_RE.match(team_info)
    team = team_match.group(1).strip() if team_match else team_info
    height_match = _HEIGHT_RE.search(team_info)

    detail_parts = details.split(", ")
    return KpoyPlayer(
        rank=rank,
        player=player,
        team=team,
        height=height_match.group(1) if height_match else "",
        weight=detail_parts[0],
        year=detail_parts[1] if len(detail_parts) > 1 else "",
        hometown=", ".join(detail_parts[2:]),
        rating=rating,
    )


def _kpoy_table(table: Tag) -> List[KpoyPlayer]:
    players: List[KpoyPlayer] = []
    for tr in body_rows(table):
        cells = tr.find_all("td")
        if len(cells) < 3:
            continue
        rank = cell_text(cells[0])
        if rank in ("Rank", ""):
            continue
        players.append(parse_player_info(rank, cell_text(cells[1]), cell_text(cells[2])))
    return players


def parse_kpoy(html: str, season: Optional[int] = None) -> KpoyResult:
    """Parse kpoy.php: the KPOY leaderboard and, from 2013, the MVP table (last table)."""
    tables = find_tables(make_soup(html))
    result = KpoyResult(kpoy=_kpoy_table(tables[0]) if tables else [])
    if season and season >= KPOY_MVP_FIRST_SEASON and len(tables) > 1:
        result.mvp = _kpoy_table(tables[-1])
    logger.debug("Parsed %d KPOY rows, mvp=%s", len(result.kpoy), result.mvp is not None)
    return result
