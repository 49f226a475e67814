"""Unit tests for player stats and Player of the Year parsing."""

from kenpom_scraper.parsers.players import (
    parse_all_player_stats_tables,
    parse_kpoy,
    parse_player_info,
    parse_player_stats,
    split_ortg,
)


def _table(*rows):
    body = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows)
    return f"<table><thead><tr><th>Rank</th></tr></thead><tbody>{body}</tbody></table>"


class TestPlayerStats:
    def test_plain_metric(self):
        html = _table(
            ("1", "Cooper Flagg", "Duke", "62.1", "6-9", "205", "Fr"),
            ("Rank", "Player", "Team", "eFG", "Ht", "Wt", "Yr"),
            ("2", "", "Duke", "60.0", "", "", ""),
        )
        rows = parse_player_stats(html, "eFG")
        assert rows == [
            {"Rank": "1", "Player": "Cooper Flagg", "Team": "Duke", "eFG": "62.1", "Ht": "6-9", "Wt": "205", "Yr": "Fr"}
        ]

    def test_fg_metric_columns(self):
        html = _table(("1", "A Player", "Duke", "50", "100", "50.0", "6-5", "190", "Jr"))
        row = parse_player_stats(html, "2P")[0]
        assert (row["2PM"], row["2PA"], row["2P%"]) == ("50", "100", "50.0")
        assert row["Yr"] == "Jr"

    def test_ortg_splits_possession_share(self):
        html = _table(("1", "A Player", "Duke", "125.3 (28.1)", "6-5", "190", "Jr"))
        row = parse_player_stats(html, "ORtg")[0]
        assert row["ORtg"] == "125.3"
        assert row["Poss%"] == "28.1"


def test_split_ortg_without_share():
    assert split_ortg({"ORtg": "110.0"}) == {"ORtg": "110.0", "Poss%": ""}


def test_all_ortg_tables_skip_empty_tables():
    html = (
        _table(("1", "A", "Duke", "130.1 (30.0)", "6-5", "190", "Jr"))
        + _table(("Rank", "Player", "Team", "ORtg", "Ht", "Wt", "Yr"))
        + _table(("1", "B", "UNC", "120.0 (15.2)", "6-2", "180", "Sr"), ("2", "C", "UNC", "118.0 (14.0)", "6-0", "170", "So"))
    )
    tables = parse_all_player_stats_tables(html)
    assert len(tables) == 2
    assert tables[0][0]["Poss%"] == "30.0"
    assert [r["Player"] for r in tables[1]] == ["B", "C"]


class TestKpoy:
    INFO = "John Smith, Duke 6-5 · 195, Jr, Durham, NC"

    def test_player_info(self):
        player = parse_player_info("1", self.INFO, "1.234")
        assert player.to_dict() == {
            "Rank": "1",
            "Player": "John Smith",
            "Team": "Duke",
            "Height": "6-5",
            "Weight": "195",
            "Year": "Jr",
            "Hometown": "Durham, NC",
            "KPOY Rating": "1.234",
        }

    def test_multi_word_team(self):
        player = parse_player_info("3", "Jane Doe, Texas A&M 6-11 · 240, Sr, Houston, TX", "0.9")
        assert player.team == "Texas A&M"
        assert player.height == "6-11"

    def test_mvp_table_from_2013(self):
        html = _table(("1", self.INFO, "1.234")) + _table(("1", self.INFO, "2.0")) + _table(("1", self.INFO, "9.9"))
        result = parse_kpoy(html, season=2024)
        assert len(result.kpoy) == 1
        assert result.mvp is not None
        assert result.mvp[0].rating == "9.9"

    def test_no_mvp_before_2013(self):
        html = _table(("1", self.INFO, "1.234")) + _table(("1", self.INFO, "9.9"))
        result = parse_kpoy(html, season=2012)
        assert result.mvp is None
        assert result.to_dict()["mvp"] is None

    def test_short_rows_skipped(self):
        html = _table(("Rank", "Player", "Rating"), ("only", "two"), ("2", self.INFO, "1.0"))
        assert [p.rank for p in parse_kpoy(html).kpoy] == ["2"]
