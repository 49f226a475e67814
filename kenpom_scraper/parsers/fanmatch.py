"""FanMatch page parser."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .games import GameResult, Prediction, parse_game_result, parse_prediction, parse_predicted_loser
from .tables import Row, body_rows, cell_text, find_tables, make_soup

logger = logging.getLogger(__name__)

NO_GAMES_MARKER = "Sorry, no games today"

_MVP_RE = re.compile(r"\s*MVP:\s*(.+)$")
_TOURNAMENT_RE = re.compile(r"\s+([A-Za-z0-9]{2,}-T|NCAA)\s*$")
_POSSESSIONS_RE = re.compile(r"\s*\[(\d+)\]\s*")
_LEADING_NUMBER_RE = re.compile(r"^([\d.]+)")

_PPG_RE = re.compile(r"(\d+\.?\d*)\s*PPG")
_AVG_EFF_RE = re.compile(r"(\d+\.?\d*)\s*Avg Eff")
_POS40_RE = re.compile(r"(\d+\.?\d*)\s*Pos/40")
_MEAN_ABS_ERR_RE = re.compile(r"Mean Abs Err.*?(\d+\.?\d*)")
_BIAS_RE = re.compile(r"Bias.*?(-?\d+\.?\d*)")
_RECORD_RE = re.compile(r"Record.*?(\d+-\d+)")


@dataclass
class FanMatchGame:
    game: str
    result: GameResult
    prediction: Prediction
    predicted_loser: Optional[str] = None
    mvp: Optional[str] = None
    tournament: Optional[str] = None
    possessions: Optional[str] = None
    thrill_score: str = ""
    comeback: str = ""
    excitement: str = ""

    def to_dict(self) -> Dict:
        out = {
            "Game": self.game,
            "MVP": self.mvp,
            "Tournament": self.tournament,
            "Possessions": self.possessions,
            "Thrill Score": self.thrill_score,
            "Come back": self.comeback,
            "Excite ment": self.excitement,
        }
        out.update(self.prediction.to_dict())
        out.update(self.result.to_dict())
        out["PredictedLoser"] = self.predicted_loser
        return out


@dataclass
class FanMatchSummary:
    """Aggregates printed below the game list once a night's games are final."""

    lines_of_night: List[str] = field(default_factory=list)
    ppg: Optional[float] = None
    avg_eff: Optional[float] = None
    pos40: Optional[float] = None
    mean_abs_err_pred_total_score: Optional[float] = None
    bias_pred_total_score: Optional[float] = None
    mean_abs_err_pred_mov: Optional[float] = None
    record_favs: Optional[str] = None
    expected_record_favs: Optional[str] = None
    exact_mov: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "linesOfNight": list(self.lines_of_night),
            "ppg": self.ppg,
            "avgEff": self.avg_eff,
            "pos40": self.pos40,
            "meanAbsErrPredTotalScore": self.mean_abs_err_pred_total_score,
            "biasPredTotalScore": self.bias_pred_total_score,
            "meanAbsErrPredMov": self.mean_abs_err_pred_mov,
            "recordFavs": self.record_favs,
            "expectedRecordFavs": self.expected_record_favs,
            "exactMov": self.exact_mov,
        }


@dataclass
class FanMatchResult:
    games: List[FanMatchGame] = field(default_factory=list)
    summary: Optional[FanMatchSummary] = None
    # Filled in by the client; the page itself does not echo them.
    date: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "date": self.date,
            "url": self.url,
            "games": [g.to_dict() for g in self.games],
            "summary": self.summary.to_dict() if self.summary else None,
        }


def _first_number(pattern: "re.Pattern[str]", text: str) -> Optional[float]:
    match = pattern.search(text)
    return float(match.group(1)) if match else None


def parse_summary(lines: List[str]) -> Optional[FanMatchSummary]:
    """Build the night summary; ``None`` unless a PPG line was found."""
    summary = FanMatchSummary()
    for text in lines:
        if "PPG" in text:
            summary.ppg = _first_number(_PPG_RE, text)
            summary.avg_eff = _first_number(_AVG_EFF_RE, text)
            summary.pos40 = _first_number(_POS40_RE, text)
        if "Mean Abs" in text and "Pred Total" in text:
            summary.mean_abs_err_pred_total_score = _first_number(_MEAN_ABS_ERR_RE, text)
            summary.bias_pred_total_score = _first_number(_BIAS_RE, text)
        if "Mean Abs" in text and "MOV" in text:
            summary.mean_abs_err_pred_mov = _first_number(_MEAN_ABS_ERR_RE, text)
            record = _RECORD_RE.search(text)
            if record:
                summary.record_favs = record.group(1)
        if "the night" in text and "PPG" not in text:
            summary.lines_of_night.append(text)
    return summary if summary.ppg else None


def _leading_part(value: str) -> str:
    """``"85.2·5"`` -> ``"85.2"``: the stat before its rank."""
    return value.split("·")[0].strip()


def _column(row: Row, *names: str) -> str:
    for name in names:
        if name in row:
            return row[name]
    return ""


def build_game(row: Row) -> FanMatchGame:
    """Decompose one FanMatch table row."""
    game = row.get("Game", "")

    mvp = None
    mvp_match = _MVP_RE.search(game)
    if mvp_match:
        mvp = mvp_match.group(1).strip()
        game = game[: mvp_match.start()]

    tournament = None
    tournament_match = _TOURNAMENT_RE.search(game)
    if tournament_match:
        tournament = tournament_match.group(1)
        game = game[: tournament_match.start()]

    possessions = None
    poss_match = _POSSESSIONS_RE.search(game)
    if poss_match:
        possessions = poss_match.group(1)
        game = _POSSESSIONS_RE.sub(" ", game, count=1).strip()

    thrill = _column(row, "Thrill Score", "ThrillScore")
    thrill_match = _LEADING_NUMBER_RE.match(thrill)
    thrill_score = thrill_match.group(1) if thrill_match else thrill[:5].strip()

    prediction = parse_prediction(row.get("Prediction", ""))
    if not possessions and prediction.possessions:
        possessions = str(prediction.possessions)

    return FanMatchGame(
        game=game,
        result=parse_game_result(game),
        prediction=prediction,
        predicted_loser=parse_predicted_loser(game, prediction.winner),
        mvp=mvp,
        tournament=tournament,
        possessions=possessions,
        thrill_score=thrill_score,
        comeback=_leading_part(_column(row, "Come back", "Comeback")),
        excitement=_leading_part(_column(row, "Excite ment", "Excitement")),
    )


def parse_fanmatch(html: str) -> FanMatchResult:
    """Parse a FanMatch page into games and, for finished nights, a summary.

    A day without games, or a page without a table, yields an empty result.
    """
    if NO_GAMES_MARKER in (html or ""):
        return FanMatchResult()
    tables = find_tables(make_soup(html))
    if not tables:
        return FanMatchResult()
    table = tables[0]

    header_row = table.find("tr")
    headers = [cell_text(c) for c in header_row.find_all(["th", "td"])] if header_row else []

    game_rows: List[Row] = []
    extra_lines: List[str] = []
    in_summary = False
    for tr in body_rows(table):
        text = tr.get_text().strip()
        if text.startswith("Game") and "Prediction" in text:
            continue
        if "the night" in text or "of the Night" in text:
            in_summary = True
        if in_summary:
            extra_lines.append(text)
            continue

        data: Row = {}
        for header, cell in zip(headers, tr.find_all("td")):
            if header:
                data[header] = cell_text(cell)
        if not data.get("Game") or data["Game"] == "Game":
            continue
        game_rows.append(data)

    games = [build_game(row) for row in game_rows]
    logger.debug("Parsed %d FanMatch games", len(games))
    return FanMatchResult(games=games, summary=parse_summary(extra_lines))
