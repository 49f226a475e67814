"""Ordinal column schemas for each KenPom table, keyed by season era.

KenPom header text is not stable enough to key on, so each table is read by
position.  An endpoint maps to a list of ``(first_season, columns)`` eras in
ascending order; a new layout is one more entry in :data:`SCHEMA_ERAS`.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..config import FG_PLAYER_METRICS

Columns = Tuple[str, ...]
Era = Tuple[int, Columns]


def _ranked(*stats: str) -> Columns:
    """Expand ``("AdjO", ...)`` into ``("AdjO", "AdjO.Rank", ...)``."""
    cols: List[str] = []
    for stat in stats:
        cols.extend((stat, f"{stat}.Rank"))
    return tuple(cols)


_TEAM_CONF = ("Team", "Conference")

_TEMPO = _ranked("Tempo-Adj", "Tempo-Raw")
_POSS_LENGTH = _ranked("Avg.Poss.Length-Off", "Avg.Poss.Length-Def")
_EFFICIENCY = _ranked(
    "Off.Efficiency-Adj", "Off.Efficiency-Raw", "Def.Efficiency-Adj", "Def.Efficiency-Raw"
)

_HEIGHT = _ranked(
    "AvgHgt", "EffHgt", "C-Hgt", "PF-Hgt", "SF-Hgt", "SG-Hgt", "PG-Hgt", "Experience", "Bench"
)

_TEAM_STATS = _ranked("3P%", "2P%", "FT%", "Blk%", "Stl%", "NST%", "A%", "3PA%")

_SCHEDULE_TAIL = (
    "Opponent Rank", "Opponent Name", "Result",
    "Possession Number", "A", "Location", "Record", "Conference", "B",
)

SCHEMA_ERAS: Dict[str, List[Era]] = {
    "ratings": [
        (1999, ("Rk", "Team", "Conf", "W-L", "AdjEM")
         + _ranked("AdjO", "AdjD", "AdjT", "Luck", "SOS-AdjEM", "SOS-OppO", "SOS-OppD", "NCSOS-AdjEM")),
    ],
    "efficiency": [
        (1999, _TEAM_CONF + _TEMPO + _EFFICIENCY),
        # Average possession length columns sit between tempo and efficiency.
        (2010, _TEAM_CONF + _TEMPO + _POSS_LENGTH + _EFFICIENCY),
    ],
    "four_factors": [
        (1999, _TEAM_CONF
         + _ranked("AdjTempo", "AdjOE", "Off-eFG%", "Off-TO%", "Off-OR%", "Off-FTRate",
                   "AdjDE", "Def-eFG%", "Def-TO%", "Def-OR%", "Def-FTRate")),
    ],
    "team_stats": [
        (1999, _TEAM_CONF + _TEAM_STATS + _ranked("AdjOE")),
    ],
    "team_stats_defense": [
        (1999, _TEAM_CONF + _TEAM_STATS + _ranked("AdjDE")),
    ],
    "point_dist": [
        (1999, _TEAM_CONF + _ranked("Off-FT", "Off-2P", "Off-3P", "Def-FT", "Def-2P", "Def-3P")),
    ],
    "height": [
        (2007, _TEAM_CONF + _HEIGHT),
        (2008, _TEAM_CONF + _HEIGHT + _ranked("Continuity")),
    ],
    "schedule": [
        (1999, ("Date",) + _SCHEDULE_TAIL),
        (2010, ("Date", "Team Rank") + _SCHEDULE_TAIL),
    ],
    "refs": [
        (2016, ("Rank", "Name", "Rating", "Games", "Last Game", "Game Score", "Box")),
    ],
    "hca": [
        (1999, _TEAM_CONF + _ranked("HCA", "PF", "Pts", "NST", "Blk", "Elev")),
    ],
    "arenas": [
        (2010, ("Rank", "Team", "Conference", "Arena", "Alternate")),
    ],
    "game_attribs": [
        (2010, ("Rank", "Date", "Game", "Box", "Location", "Conf.Matchup", "Value")),
    ],
    "program_ratings": [
        (1999, (
            "Rank", "Team", "Conference", "Rating",
            "kenpom.Best.Rank", "kenpom.Best.Season",
            "kenpom.Worst.Rank", "kenpom.Worst.Season",
            "kenpom.Median.Rank",
            "kenpom.Top10.Finishes", "kenpom.Top25.Finishes", "kenpom.Top50.Finishes",
            "NCAA.Champs", "NCAA.F4", "NCAA.S16", "NCAA.R1",
            "Change",
        )),
    ],
    "player_ortg": [
        (2004, ("Rank", "Player", "Team", "ORtg", "Ht", "Wt", "Yr")),
    ],
}


def get_schema(endpoint: str, season: Optional[int] = None) -> Columns:
    """Columns for ``endpoint`` in ``season``.

    ``None`` (or 0) selects the newest layout.  Seasons older than the first
    known era fall back to that era; callers gate on minimum seasons first.

    Raises:
        KeyError: unknown endpoint.
    """
    eras = SCHEMA_ERAS[endpoint]
    if not season:
        return eras[-1][1]
    columns = eras[0][1]
    for first_season, era_columns in eras:
        if season >= first_season:
            columns = era_columns
    return columns


def era_boundaries(endpoint: str) -> List[int]:
    """Seasons at which ``endpoint`` changed layout (excluding the first era)."""
    return [first_season for first_season, _ in SCHEMA_ERAS[endpoint][1:]]


def team_stats_schema(season: Optional[int] = None, defense: bool = False) -> Columns:
    return get_schema("team_stats_defense" if defense else "team_stats", season)


def player_stats_columns(metric: str) -> Columns:
    """Player stats columns; FG metrics expand to made/attempted/percentage."""
    if metric in FG_PLAYER_METRICS:
        stat_cols: Columns = (f"{metric}M", f"{metric}A", f"{metric}%")
    else:
        stat_cols = (metric,)
    return ("Rank", "Player", "Team") + stat_cols + ("Ht", "Wt", "Yr")
