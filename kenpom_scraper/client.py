"""Authenticated kenpom.com session that fetches pages and hands them to the parsers."""

from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Dict, List, Optional, Union

import requests

from .config import (
    BASE_URL,
    DEFAULT_HEADERS,
    ENDPOINTS,
    PLAYER_METRICS,
    Season,
    build_url,
    get_credentials,
    season_to_int,
    validate_conference,
    validate_game_attrib_metric,
    validate_player_metric,
    validate_season,
)
from .errors import KenPomAuthError
from .parsers.conference import (
    parse_conference_aggregate_stats,
    parse_conference_defense,
    parse_conference_offense,
    parse_conference_standings,
)
from .parsers.fanmatch import FanMatchResult, parse_fanmatch
from .parsers.misc import (
    parse_arenas,
    parse_game_attribs,
    parse_hca,
    parse_program_ratings,
    parse_refs,
    parse_trends,
)
from .parsers.players import KpoyResult, parse_all_player_stats_tables, parse_kpoy, parse_player_stats
from .parsers.summary import (
    parse_efficiency,
    parse_four_factors,
    parse_height,
    parse_point_dist,
    parse_pomeroy_ratings,
    parse_team_stats,
)
from .parsers.tables import Row, extract_season
from .parsers.team import StatValue, parse_schedule, parse_scouting_report, parse_valid_teams

logger = logging.getLogger(__name__)

LOGGED_IN_MARKER = "Logged in as"

PlayerStatsResult = Union[List[Row], List[List[Row]]]


class KenPomClient:
    """Fetch and parse kenpom.com pages with a logged-in ``requests`` session.

    Every ``get_*`` method validates its arguments, builds the endpoint URL,
    downloads the page and returns the matching parser's records.  Call
    :meth:`login` first; the site serves most pages only to subscribers.
    """

    def __init__(
        self,
        email: Optional[str] = None,
        password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 45,
    ):
        self.email, self.password = get_credentials(email, password)
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.timeout = timeout
        self.logged_in = False

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def login(self) -> None:
        """Log in with the configured credentials.

        Raises:
            KenPomAuthError: the request failed or the response does not show
                a logged-in page.
        """
        logger.info("Logging in to %s as %s", BASE_URL, self.email)
        try:
            self.session.get(build_url(ENDPOINTS["INDEX"]), timeout=self.timeout)
            response = self.session.post(
                build_url(ENDPOINTS["LOGIN_HANDLER"]),
                data={"email": self.email, "password": self.password, "submit": "Login!"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            html = self._get_html(BASE_URL)
        except requests.RequestException as exc:
            logger.warning("KenPom login request failed: %s", exc)
            raise KenPomAuthError(f"Login request failed: {exc}") from exc

        if LOGGED_IN_MARKER not in html:
            logger.warning("KenPom login did not return a logged-in page")
            raise KenPomAuthError(
                'Login verification failed - "Logged in as" not found. Check credentials.'
            )
        self.logged_in = True
        logger.info("Logged in to KenPom")

    def close(self) -> None:
        self.session.close()
        self.logged_in = False

    def __enter__(self) -> "KenPomClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _require_login(self) -> None:
        if not self.logged_in:
            raise KenPomAuthError("Not logged in. Call login() first.")

    def _get_html(self, url: str) -> str:
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def _fetch(self, endpoint: str, params: Optional[Dict[str, object]] = None) -> str:
        self._require_login()
        url = build_url(ENDPOINTS[endpoint], params)
        logger.debug("Fetching %s: %s", endpoint, url)
        return self._get_html(url)

    # ------------------------------------------------------------------
    # Ratings and summary pages
    # ------------------------------------------------------------------

    def get_pomeroy_ratings(self, season: Season = None) -> List[Row]:
        validate_season(season, "POMEROY_RATINGS")
        return parse_pomeroy_ratings(self._fetch("POMEROY_RATINGS", {"y": season or None}))

    def get_efficiency(self, season: Season = None) -> List[Row]:
        validate_season(season, "EFFICIENCY")
        html = self._fetch("EFFICIENCY", {"y": season or None})
        return parse_efficiency(html, season_to_int(season))

    def get_four_factors(self, season: Season = None) -> List[Row]:
        validate_season(season, "FOUR_FACTORS")
        return parse_four_factors(self._fetch("FOUR_FACTORS", {"y": season or None}))

    def get_team_stats(self, season: Season = None, defense: bool = False) -> List[Row]:
        validate_season(season, "TEAM_STATS")
        html = self._fetch("TEAM_STATS", {"y": season or None, "od": "d" if defense else None})
        return parse_team_stats(html, defense=defense)

    def get_point_dist(self, season: Season = None) -> List[Row]:
        validate_season(season, "POINT_DIST")
        return parse_point_dist(self._fetch("POINT_DIST", {"y": season or None}))

    def get_height(self, season: Season = None) -> List[Row]:
        validate_season(season, "HEIGHT")
        html = self._fetch("HEIGHT", {"y": season or None})
        return parse_height(html, season_to_int(season))

    # ------------------------------------------------------------------
    # Miscellaneous pages
    # ------------------------------------------------------------------

    def get_trends(self) -> List[Row]:
        return parse_trends(self._fetch("TRENDS"))

    def get_refs(self, season: Season = None) -> List[Row]:
        validate_season(season, "REFS")
        return parse_refs(self._fetch("REFS", {"y": season or None}))

    def get_hca(self) -> List[Row]:
        return parse_hca(self._fetch("HCA"))

    def get_arenas(self, season: Season = None) -> List[Row]:
        validate_season(season, "ARENAS")
        return parse_arenas(self._fetch("ARENAS", {"y": season or None}))

    def get_game_attribs(self, season: Season = None, metric: str = "Excitement") -> List[Row]:
        validate_season(season, "GAME_ATTRIBS")
        validate_game_attrib_metric(metric)
        return parse_game_attribs(self._fetch("GAME_ATTRIBS", {"s": metric, "y": season or None}))

    def get_program_ratings(self) -> List[Row]:
        return parse_program_ratings(self._fetch("PROGRAM_RATINGS"))

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def get_player_stats(
        self,
        season: Season = None,
        metric: str = "eFG",
        conf: Optional[str] = None,
        conf_only: bool = False,
    ) -> PlayerStatsResult:
        """Player leaderboard for one metric.

        ``ORtg`` pages hold one table per possession-usage threshold, so that
        metric returns a list of tables instead of a single list of rows.
        """
        validate_season(season, "PLAYER_STATS")
        validate_player_metric(metric)
        validate_conference(conf)
        params = {
            "s": metric,
            "y": season or None,
            "c": conf or None,
            "f": conf if conf and conf_only else None,
        }
        html = self._fetch("PLAYER_STATS", params)
        if metric == "ORtg":
            return parse_all_player_stats_tables(html)
        return parse_player_stats(html, metric)

    def get_all_player_stats(
        self, season: Season = None, conf: Optional[str] = None, conf_only: bool = False
    ) -> Dict[str, PlayerStatsResult]:
        results: Dict[str, PlayerStatsResult] = {}
        for metric in PLAYER_METRICS:
            logger.info("Fetching player stats: %s", metric)
            results[metric] = self.get_player_stats(season, metric, conf, conf_only)
        return results

    def get_kpoy(self, season: Season = None) -> KpoyResult:
        validate_season(season, "KPOY")
        html = self._fetch("KPOY", {"y": season or None})
        return parse_kpoy(html, season_to_int(season))

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    def get_valid_teams(self, season: Season = None) -> List[str]:
        validate_season(season, "VALID_TEAMS")
        return parse_valid_teams(self._fetch("VALID_TEAMS", {"y": season or None}))

    def get_schedule(self, team: str, season: Season = None) -> List[Row]:
        if not team:
            raise ValueError("Team name is required")
        validate_season(season, "SCHEDULE")
        html = self._fetch("TEAM", {"team": team, "y": season or None})
        return parse_schedule(html, season_to_int(season))

    def get_scouting_report(
        self, team: str, season: Season = None, conference_only: bool = False
    ) -> Dict[str, StatValue]:
        if not team:
            raise ValueError("Team name is required")
        validate_season(season, "SCHEDULE")
        html = self._fetch("TEAM", {"team": team, "y": season or None})
        return parse_scouting_report(html, conference_only=conference_only)

    def get_fanmatch(self, date: Optional[str] = None) -> FanMatchResult:
        """FanMatch games for ``date`` (``YYYY-MM-DD``, default today)."""
        target = date or date_type.today().isoformat()
        url = build_url(ENDPOINTS["FANMATCH"], {"d": target})
        html = self._fetch("FANMATCH", {"d": target})
        result = parse_fanmatch(html)
        result.date = target
        result.url = url
        return result

    # ------------------------------------------------------------------
    # Conferences
    # ------------------------------------------------------------------

    def _conference_page(self, conf: str, season: Season) -> str:
        if not conf:
            raise ValueError("Conference is required")
        validate_conference(conf)
        return self._fetch("CONFERENCE", {"c": conf, "y": season or None})

    def get_conference_standings(self, conf: str, season: Season = None) -> List[Row]:
        return parse_conference_standings(self._conference_page(conf, season))

    def get_conference_offense(self, conf: str, season: Season = None) -> List[Row]:
        return parse_conference_offense(self._conference_page(conf, season))

    def get_conference_defense(self, conf: str, season: Season = None) -> List[Row]:
        return parse_conference_defense(self._conference_page(conf, season))

    def get_conference_stats(self, conf: Optional[str] = None, season: Season = None) -> List[Row]:
        """Aggregates for one conference, or the all-conference table when ``conf`` is omitted."""
        if conf:
            return parse_conference_aggregate_stats(self._conference_page(conf, season), single_conf=True)
        html = self._fetch("CONFERENCE_STATS", {"y": season or None})
        return parse_conference_aggregate_stats(html)

    # ------------------------------------------------------------------

    def current_season(self) -> int:
        """Latest season published on the front page.

        Raises:
            ValueError: no season year could be found on the page.
        """
        self._require_login()
        season = extract_season(self._get_html(BASE_URL))
        if not season:
            raise ValueError("Could not determine current season")
        return season
