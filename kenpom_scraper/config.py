"""KenPom endpoint configuration, credential loading and argument validation."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode, urljoin

BASE_URL = "https://kenpom.com"

# Query parameters are added per call by build_url().
ENDPOINTS: Dict[str, str] = {
    "INDEX": "/index.php",
    "LOGIN_HANDLER": "/handlers/login_handler.php",
    "POMEROY_RATINGS": "/index.php",  # ?y=
    "TRENDS": "/trends.php",
    "REFS": "/officials.php",  # ?y=
    "HCA": "/hca.php",
    "ARENAS": "/arenas.php",  # ?y=
    "GAME_ATTRIBS": "/game_attrs.php",  # ?s=&y=
    "PROGRAM_RATINGS": "/programs.php",
    "EFFICIENCY": "/summary.php",  # ?y=
    "FOUR_FACTORS": "/stats.php",  # ?y=
    "TEAM_STATS": "/teamstats.php",  # ?y=&od=d
    "POINT_DIST": "/pointdist.php",  # ?y=
    "HEIGHT": "/height.php",  # ?y=
    "PLAYER_STATS": "/playerstats.php",  # ?s=&y=&c=&f=
    "KPOY": "/kpoy.php",  # ?y=
    "VALID_TEAMS": "/",  # ?y=
    "TEAM": "/team.php",  # ?team=&y=
    "FANMATCH": "/fanmatch.php",  # ?d=YYYY-MM-DD
    "CONFERENCE": "/conf.php",  # ?c=&y=
    "CONFERENCE_STATS": "/confstats.php",  # ?y=
}

# First season each endpoint has data for.
MIN_SEASONS: Dict[str, int] = {
    "POMEROY_RATINGS": 1999,
    "EFFICIENCY": 1999,
    "FOUR_FACTORS": 1999,
    "TEAM_STATS": 1999,
    "POINT_DIST": 1999,
    "VALID_TEAMS": 1999,
    "SCHEDULE": 1999,
    "PLAYER_STATS": 2004,
    "HEIGHT": 2007,
    "ARENAS": 2010,
    "GAME_ATTRIBS": 2010,
    "KPOY": 2011,
    "FANMATCH": 2014,
    "REFS": 2016,
}

PLAYER_METRICS: Tuple[str, ...] = (
    "ORtg", "Min", "eFG", "Poss", "Shots", "OR", "DR", "TO",
    "ARate", "Blk", "FTRate", "Stl", "TS", "FC40", "FD40",
    "2P", "3P", "FT",
)

# Player metrics whose table expands into made / attempted / percentage columns.
FG_PLAYER_METRICS: Tuple[str, ...] = ("2P", "3P", "FT")

GAME_ATTRIB_METRICS: Tuple[str, ...] = (
    "Excitement", "Tension", "Dominance", "ComeBack",
    "FanMatch", "Upsets", "Busts",
)

CONFERENCES: Tuple[str, ...] = (
    "A10", "ACC", "AE", "Amer", "ASun", "B10", "B12", "BE", "BSky", "BSth",
    "BW", "CAA", "CUSA", "Horz", "Ivy", "MAAC", "MAC", "MEast", "MVC", "MWC",
    "NEC", "OVC", "Pac", "Pat", "SB", "SC", "SEC", "Slnd", "Sum", "SWAC",
    "WAC", "WCC",
)

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

Season = Optional[Union[int, str]]


def get_credentials(email: Optional[str] = None, password: Optional[str] = None) -> Tuple[str, str]:
    """Resolve KenPom credentials.

    Explicit arguments win; otherwise ``KENPOM_EMAIL`` / ``KENPOM_PASSWORD``
    are read from the environment.

    Raises:
        ValueError: if either value cannot be resolved.
    """
    resolved_email = email or os.getenv("KENPOM_EMAIL")
    resolved_password = password or os.getenv("KENPOM_PASSWORD")
    if not resolved_email:
        raise ValueError(
            "KenPom email not found. Set KENPOM_EMAIL or pass email explicitly."
        )
    if not resolved_password:
        raise ValueError(
            "KenPom password not found. Set KENPOM_PASSWORD or pass password explicitly."
        )
    return resolved_email, resolved_password


def season_to_int(season: Season) -> Optional[int]:
    """Coerce a season argument to ``int``; falsy values mean "latest"."""
    if not season:
        return None
    return int(season)


def validate_season(season: Season, endpoint: str) -> None:
    min_year = MIN_SEASONS.get(endpoint)
    year = season_to_int(season)
    if min_year is not None and year is not None and year < min_year:
        raise ValueError(f"Season {season} is before minimum year {min_year} for {endpoint}")


def validate_player_metric(metric: str) -> None:
    if metric not in PLAYER_METRICS:
        raise ValueError(f"Invalid metric '{metric}'. Must be one of: {', '.join(PLAYER_METRICS)}")


def validate_game_attrib_metric(metric: str) -> None:
    if metric not in GAME_ATTRIB_METRICS:
        raise ValueError(
            f"Invalid metric '{metric}'. Must be one of: {', '.join(GAME_ATTRIB_METRICS)}"
        )


def validate_conference(conf: Optional[str]) -> None:
    if conf and conf not in CONFERENCES:
        raise ValueError(f"Invalid conference '{conf}'. Must be one of: {', '.join(CONFERENCES)}")


def build_url(endpoint: str, params: Optional[Mapping[str, object]] = None) -> str:
    """Join ``endpoint`` onto ``BASE_URL`` and append non-null query params.

    Values are form-encoded, so team names come out the way team.php expects
    them (``Texas A&M`` -> ``Texas+A%26M``).
    """
    url = urljoin(BASE_URL, endpoint)
    query = [(k, str(v)) for k, v in (params or {}).items() if v is not None]
    if query:
        url = f"{url}?{urlencode(query)}"
    return url
