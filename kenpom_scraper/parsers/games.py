"""Parsers for the compound FanMatch "Game" and "Prediction" strings.

A game cell reads differently depending on the game's state::

    233 Rice 77, 273 FIU 70          completed (winner listed first)
    1 Duke 80, 5 UNC 78 (OT)         completed, overtime
    10 Duke at 15 UNC                upcoming, true road game
    10 Duke vs. 15 UNC               upcoming, neutral site

Formats are tried in a fixed priority order; the first delimiter whose two
sides both have the expected token shape wins.  Anything else yields an
all-null :class:`GameResult` rather than an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_OT_RE = re.compile(r"\s*\((\d?OT)\)\s*$")

_PREDICTION_FULL_RE = re.compile(r"^(.+?)\s+(\d+-\d+)\s*\((\d+%)\)\s*\[(\d+)\]")
_PREDICTION_SIMPLE_RE = re.compile(r"^(.+?)\s+(\d+-\d+)\s*\((\d+%)\)")


@dataclass
class GameResult:
    """Teams, ranks and scores recovered from a game string.

    For upcoming games the "winner" slots hold the first-listed team and the
    "loser" slots the second; both scores stay ``None``.
    """

    winner: Optional[str] = None
    winner_rank: Optional[str] = None
    winner_score: Optional[str] = None
    loser: Optional[str] = None
    loser_rank: Optional[str] = None
    loser_score: Optional[str] = None
    ot: Optional[str] = None
    actual_mov: Optional[int] = None
    is_completed: bool = False
    is_neutral: bool = False
    is_away: bool = False

    def to_dict(self) -> Dict:
        return {
            "Winner": self.winner,
            "WinnerRank": self.winner_rank,
            "WinnerScore": self.winner_score,
            "Loser": self.loser,
            "LoserRank": self.loser_rank,
            "LoserScore": self.loser_score,
            "OT": self.ot,
            "ActualMOV": self.actual_mov,
            "isCompleted": self.is_completed,
            "isNeutral": self.is_neutral,
            "isAway": self.is_away,
        }


@dataclass
class Prediction:
    """KenPom's pre-game prediction for one game."""

    winner: Optional[str] = None
    score: Optional[str] = None
    win_probability: Optional[str] = None
    possessions: Optional[int] = None
    mov: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "PredictedWinner": self.winner,
            "PredictedScore": self.score,
            "WinProbability": self.win_probability,
            "PredictedPossessions": self.possessions,
            "PredictedMOV": self.mov,
        }


# A side is (rank, team name, score); score is None for upcoming games.
Side = Tuple[str, str, Optional[str]]


def _scored_side(text: str) -> Optional[Side]:
    """``"233 Rice 77"`` -> ``("233", "Rice", "77")``; needs rank, name and score."""
    tokens = text.strip().split()
    if len(tokens) < 3:
        return None
    return tokens[0], " ".join(tokens[1:-1]), tokens[-1]


def _unscored_side(text: str) -> Optional[Side]:
    """``"10 North Carolina"`` -> ``("10", "North Carolina", None)``."""
    tokens = text.strip().split()
    if len(tokens) < 2:
        return None
    return tokens[0], " ".join(tokens[1:]), None


# Priority order matters: a malformed string can contain more than one delimiter.
GAME_FORMATS: Tuple[Tuple[str, Callable[[str], Optional[Side]], str], ...] = (
    (", ", _scored_side, "is_completed"),
    (" at ", _unscored_side, "is_away"),
    (" vs. ", _unscored_side, "is_neutral"),
)


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_game_result(game: Optional[str]) -> GameResult:
    """Parse a FanMatch game string into a :class:`GameResult`."""
    result = GameResult()
    if not game:
        return result

    text = game
    ot_match = _OT_RE.search(text)
    if ot_match:
        result.ot = ot_match.group(1)
        text = text[: ot_match.start()].strip()

    for delimiter, parse_side, flag in GAME_FORMATS:
        parts = text.split(delimiter)
        if len(parts) != 2:
            continue
        first = parse_side(parts[0])
        second = parse_side(parts[1])
        if first is None or second is None:
            continue
        result.winner_rank, result.winner, result.winner_score = first
        result.loser_rank, result.loser, result.loser_score = second
        setattr(result, flag, True)
        break
    else:
        logger.debug("Unrecognized game string: %r", game)
        return result

    winner_score = _to_int(result.winner_score)
    loser_score = _to_int(result.loser_score)
    if winner_score is not None and loser_score is not None:
        result.actual_mov = winner_score - loser_score
    return result


def _score_margin(score: str) -> Optional[int]:
    parts: List[str] = score.split("-")
    if len(parts) != 2:
        return None
    high, low = _to_int(parts[0]), _to_int(parts[1])
    if high is None or low is None:
        return None
    return high - low


def parse_prediction(prediction: Optional[str]) -> Prediction:
    """Parse ``"Duke 82-75 (75%) [68]"`` (possession count optional).

    ``mov`` is derived from the predicted score; the page has no margin field.
    """
    text = prediction or ""
    match = _PREDICTION_FULL_RE.match(text)
    possessions: Optional[int] = None
    if match:
        possessions = int(match.group(4))
    else:
        match = _PREDICTION_SIMPLE_RE.match(text)
        if not match:
            return Prediction()
    score = match.group(2)
    return Prediction(
        winner=match.group(1).strip(),
        score=score,
        win_probability=match.group(3),
        possessions=possessions,
        mov=_score_margin(score),
    )


def parse_predicted_loser(game: Optional[str], predicted_winner: Optional[str]) -> Optional[str]:
    """The team in ``game`` that is not ``predicted_winner``."""
    if not predicted_winner:
        return None
    parsed = parse_game_result(game)
    if not parsed.winner or not parsed.loser:
        return None
    return parsed.winner if parsed.winner != predicted_winner else parsed.loser
