"""Parsers for team.php (schedule, scouting report) and the team list."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Union

from ..normalize import strip_seed
from .schemas import get_schema
from .tables import Row, body_rows, locate_table, make_soup, row_cells

logger = logging.getLogger(__name__)

# The schedule is the second table on team.php; the first is the team summary.
SCHEDULE_TABLE_INDEX = 1

# Seasons before this have no per-game team rank column.
SCHEDULE_TEAM_RANK_SEASON = 2010

_TOURNAMENT_RE = re.compile(r"(?:\sConference)?\sTournament.*?$")

StatValue = Union[str, float, int]

SCOUTING_STATS = (
    "OE", "DE", "Tempo", "APLO", "APLD",
    "eFG", "DeFG", "TOPct", "DTOPct", "ORPct", "DORPct", "FTR", "DFTR",
    "3Pct", "D3Pct", "2Pct", "D2Pct", "FTPct", "DFTPct",
    "BlockPct", "DBlockPct", "StlRate", "DStlRate", "NSTRate", "DNSTRate",
    "3PARate", "D3PARate", "ARate", "DARate",
    "PD3", "DPD3", "PD2", "DPD2", "PD1", "DPD1",
)

_TABLE_START_RE = re.compile(r"function tableStart\(\) \{([^}]+)\}")
_CONFERENCE_ONLY_RE = re.compile(r"\$\(':checkbox'\)\.click\(function\(\) \{([^}]+)\}")
_STAT_ASSIGN_RE = re.compile(r'\$\("td#([A-Za-z0-9]+)"\)\.html\("(.+?)"\);')
_STAT_VALUE_RE = re.compile(r">([^<]+)</a>")
_STAT_RANK_RE = re.compile(r'class="seed">(\d+)<')


def parse_schedule(html: str, season: Optional[int] = None) -> List[Row]:
    """Parse the schedule table of team.php.

    Section rows such as "ACC Tournament" are not games; they set the
    ``Tournament`` value carried by the games that follow them.

    Raises:
        TableNotFoundError, TableIndexError: the page has no schedule table.
    """
    table = locate_table(make_soup(html), index=SCHEDULE_TABLE_INDEX)
    columns = get_schema("schedule", season)
    pre_team_rank = bool(season) and season < SCHEDULE_TEAM_RANK_SEASON

    games: List[Row] = []
    tournament = ""
    for tr in body_rows(table):
        text = tr.get_text().strip()
        if "Tournament" in text or "Postseason" in text:
            match = _TOURNAMENT_RE.search(text)
            tournament = match.group(0).strip() if match else text
            continue

        row = row_cells(tr, columns)
        if not row:
            continue
        if row.get("Date") == "Date" or row.get("Date") == row.get("Result"):
            continue

        row["Tournament"] = tournament
        row.pop("A", None)
        row.pop("B", None)
        if pre_team_rank and not row.get("Team Rank"):
            row["Team Rank"] = ""
        games.append(row)
    return games


def parse_valid_teams(html: str) -> List[str]:
    """Unique, seed-stripped team names linked to team.php, in page order."""
    teams: List[str] = []
    for link in make_soup(html).select('a[href*="team.php"]'):
        team = strip_seed(link.get_text().strip())
        if team and team != "Team" and team not in teams:
            teams.append(team)
    return teams


def default_scouting_stats() -> Dict[str, StatValue]:
    stats: Dict[str, StatValue] = {}
    for stat in SCOUTING_STATS:
        stats[stat] = ""
        stats[f"{stat}.Rank"] = ""
    return stats


def _inline_script(html: str) -> str:
    for script in make_soup(html).find_all("script", attrs={"type": "text/javascript"}):
        if not script.get("src"):
            return script.string or script.get_text()
    return ""


def parse_scouting_report(html: str, conference_only: bool = False) -> Dict[str, StatValue]:
    """Read the scouting report numbers out of team.php's inline JavaScript.

    The page fills its stat cells from a ``tableStart()`` function (all games)
    or a checkbox handler (conference games only).  Every known stat key is
    present in the result; those not found stay ``""``.
    """
    stats = default_scouting_stats()
    script = _inline_script(html)
    if not script:
        return stats

    pattern = _CONFERENCE_ONLY_RE if conference_only else _TABLE_START_RE
    block = pattern.search(script)
    if not block:
        logger.debug("Scouting report block not found (conference_only=%s)", conference_only)
        return stats

    for token, value_html in _STAT_ASSIGN_RE.findall(block.group(1)):
        value_html = value_html.replace('\\"', '"')
        value_match = _STAT_VALUE_RE.search(value_html)
        rank_match = _STAT_RANK_RE.search(value_html)
        if not value_match or not rank_match:
            continue
        try:
            value = float(value_match.group(1))
        except ValueError:
            continue
        stats[token] = value
        stats[f"{token}.Rank"] = int(rank_match.group(1))
    return stats
