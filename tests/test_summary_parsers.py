"""Unit tests for the team-per-row summary page parsers."""

from kenpom_scraper.parsers.summary import (
    parse_efficiency,
    parse_four_factors,
    parse_height,
    parse_point_dist,
    parse_pomeroy_ratings,
    parse_team_stats,
)


def _row(*cells):
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


def _page(*rows):
    return "<html><body><table><thead><tr><th>hdr</th></tr></thead><tbody>" + "".join(rows) + "</tbody></table></body></html>"


RATINGS_ROW = _row(
    "1", "Duke 1", "ACC", "35-4", "+38.9",
    "128.0", "3", "89.1", "4", "65.9", "300",
    "+.021", "120", "+14.2", "20", "112.3", "18", "98.1", "30", "+2.1", "90",
)


class TestPomeroyRatings:
    def test_seed_split(self):
        rows = parse_pomeroy_ratings(_page(RATINGS_ROW))
        assert len(rows) == 1
        assert rows[0]["Team"] == "Duke"
        assert rows[0]["Seed"] == "1"
        assert rows[0]["AdjEM"] == "+38.9"
        assert rows[0]["NCSOS-AdjEM.Rank"] == "90"

    def test_repeated_header_row_is_dropped(self):
        header = _row("Rk", "Team", "Conf", "W-L", "AdjEM")
        unseeded = _row("2", "Houston", "B12", "30-5", "+35.0")
        rows = parse_pomeroy_ratings(_page(RATINGS_ROW, header, unseeded))
        assert [r["Team"] for r in rows] == ["Duke", "Houston"]
        assert rows[1]["Seed"] == ""

    def test_empty_rank_row_is_dropped(self):
        rows = parse_pomeroy_ratings(_page(_row("", "", ""), RATINGS_ROW))
        assert len(rows) == 1


class TestEfficiency:
    ROW_2010 = _row(
        "Duke 1", "ACC", "66.1", "300", "68.0", "250",
        "16.5", "40", "17.8", "200",
        "128.0", "3", "120.1", "5", "89.1", "4", "95.5", "10",
    )

    def test_modern_layout(self):
        rows = parse_efficiency(_page(self.ROW_2010), season=2024)
        assert rows[0]["Team"] == "Duke"
        assert rows[0]["Avg.Poss.Length-Off"] == "16.5"
        assert rows[0]["Def.Efficiency-Raw.Rank"] == "10"

    def test_pre_2010_layout(self):
        row = _row("Duke", "ACC", "66.1", "300", "68.0", "250", "120.0", "3", "118.0", "5", "90.0", "4", "95.0", "10")
        rows = parse_efficiency(_page(row), season=2005)
        assert "Avg.Poss.Length-Off" not in rows[0]
        assert rows[0]["Off.Efficiency-Adj"] == "120.0"

    def test_header_team_rows_dropped(self):
        rows = parse_efficiency(_page(_row("Team", "Conf"), self.ROW_2010))
        assert len(rows) == 1


def test_four_factors():
    row = _row("Duke 2", "ACC", *[str(i) for i in range(22)])
    rows = parse_four_factors(_page(row))
    assert rows[0]["Team"] == "Duke"
    assert rows[0]["AdjTempo"] == "0"
    assert rows[0]["Def-FTRate.Rank"] == "21"
    assert "Seed" not in rows[0]


def test_team_stats_offense_and_defense():
    row = _row("Duke", "ACC", *[str(i) for i in range(18)])
    assert parse_team_stats(_page(row))[0]["AdjOE"] == "16"
    assert parse_team_stats(_page(row), defense=True)[0]["AdjDE.Rank"] == "17"


def test_point_dist():
    row = _row("Gonzaga 4", "WCC", "18.1", "200", "52.0", "30", "29.9", "250", "17.0", "100", "50.1", "60", "32.9", "150")
    rows = parse_point_dist(_page(row))
    assert rows[0]["Team"] == "Gonzaga"
    assert rows[0]["Off-2P"] == "52.0"


def test_height_continuity_by_season():
    row = _row("Duke", "ACC", *[str(i) for i in range(20)])
    assert parse_height(_page(row), season=2024)[0]["Continuity.Rank"] == "19"
    assert "Continuity" not in parse_height(_page(row), season=2007)[0]
