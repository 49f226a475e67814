"""Parser exports."""

from .conference import (
    parse_conference_aggregate_stats,
    parse_conference_defense,
    parse_conference_offense,
    parse_conference_standings,
)
from .fanmatch import FanMatchGame, FanMatchResult, FanMatchSummary, parse_fanmatch
from .games import GameResult, Prediction, parse_game_result, parse_predicted_loser, parse_prediction
from .misc import (
    parse_arenas,
    parse_game_attribs,
    parse_hca,
    parse_program_ratings,
    parse_refs,
    parse_trends,
)
from .players import KpoyPlayer, KpoyResult, parse_all_player_stats_tables, parse_kpoy, parse_player_stats
from .schemas import get_schema
from .summary import (
    parse_efficiency,
    parse_four_factors,
    parse_height,
    parse_point_dist,
    parse_pomeroy_ratings,
    parse_team_stats,
)
from .tables import extract_season, extract_text, find_table, parse_all_tables, parse_table
from .team import parse_schedule, parse_scouting_report, parse_valid_teams

__all__ = [
    "FanMatchGame",
    "FanMatchResult",
    "FanMatchSummary",
    "GameResult",
    "KpoyPlayer",
    "KpoyResult",
    "Prediction",
    "extract_season",
    "extract_text",
    "find_table",
    "get_schema",
    "parse_all_player_stats_tables",
    "parse_all_tables",
    "parse_arenas",
    "parse_conference_aggregate_stats",
    "parse_conference_defense",
    "parse_conference_offense",
    "parse_conference_standings",
    "parse_efficiency",
    "parse_fanmatch",
    "parse_four_factors",
    "parse_game_attribs",
    "parse_game_result",
    "parse_hca",
    "parse_height",
    "parse_kpoy",
    "parse_player_stats",
    "parse_point_dist",
    "parse_pomeroy_ratings",
    "parse_predicted_loser",
    "parse_prediction",
    "parse_program_ratings",
    "parse_refs",
    "parse_schedule",
    "parse_scouting_report",
    "parse_table",
    "parse_team_stats",
    "parse_trends",
    "parse_valid_teams",
]
