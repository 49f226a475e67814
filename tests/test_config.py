"""Unit tests for configuration, credentials and argument validation."""

import pytest

from kenpom_scraper.config import (
    build_url,
    get_credentials,
    season_to_int,
    validate_conference,
    validate_game_attrib_metric,
    validate_player_metric,
    validate_season,
)


class TestCredentials:
    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("KENPOM_EMAIL", "env@example.com")
        monkeypatch.setenv("KENPOM_PASSWORD", "env-pass")
        assert get_credentials("me@example.com", "secret") == ("me@example.com", "secret")

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("KENPOM_EMAIL", "env@example.com")
        monkeypatch.setenv("KENPOM_PASSWORD", "env-pass")
        assert get_credentials() == ("env@example.com", "env-pass")

    def test_missing_email(self, monkeypatch):
        monkeypatch.delenv("KENPOM_EMAIL", raising=False)
        with pytest.raises(ValueError, match="KENPOM_EMAIL"):
            get_credentials(password="secret")

    def test_missing_password(self, monkeypatch):
        monkeypatch.delenv("KENPOM_PASSWORD", raising=False)
        with pytest.raises(ValueError, match="KENPOM_PASSWORD"):
            get_credentials(email="me@example.com")


class TestValidateSeason:
    def test_before_minimum(self):
        with pytest.raises(ValueError, match="Season 2003 is before minimum year 2004 for PLAYER_STATS"):
            validate_season(2003, "PLAYER_STATS")

    @pytest.mark.parametrize("season", [None, "", 2024, "2016"])
    def test_accepted(self, season):
        validate_season(season, "REFS" if season == "2016" else "PLAYER_STATS")

    def test_string_season_compared_numerically(self):
        with pytest.raises(ValueError):
            validate_season("2015", "REFS")

    def test_endpoint_without_minimum(self):
        validate_season(1950, "TRENDS")


def test_season_to_int():
    assert season_to_int("2024") == 2024
    assert season_to_int(None) is None
    assert season_to_int(0) is None


@pytest.mark.parametrize(
    "validator,bad",
    [
        (validate_player_metric, "PPG"),
        (validate_game_attrib_metric, "Boredom"),
    ],
)
def test_invalid_metrics(validator, bad):
    with pytest.raises(ValueError, match=f"Invalid metric '{bad}'"):
        validator(bad)


def test_valid_metrics():
    validate_player_metric("ORtg")
    validate_player_metric("3P")
    validate_game_attrib_metric("Excitement")


def test_conference_validation():
    validate_conference("ACC")
    validate_conference(None)
    with pytest.raises(ValueError, match="Invalid conference 'XYZ'"):
        validate_conference("XYZ")


class TestBuildUrl:
    def test_no_params(self):
        assert build_url("/trends.php") == "https://kenpom.com/trends.php"

    def test_none_params_skipped(self):
        assert build_url("/index.php", {"y": None}) == "https://kenpom.com/index.php"

    def test_params_encoded(self):
        url = build_url("/team.php", {"team": "Texas A&M", "y": 2024})
        assert url == "https://kenpom.com/team.php?team=Texas+A%26M&y=2024"
