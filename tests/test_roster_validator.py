"""
Tests for roster validation and position label mapping.
"""
import pytest

from app.models.player import Position
from app.validators.roster_validator import RosterValidator


class TestPositionLabels:
    @pytest.mark.parametrize("label,expected", [
        ("AD Carry", Position.CARRY),
        ("adc", Position.CARRY),
        ("Mid Laner", Position.MID),
        ("mid_laner", Position.MID),
        ("Jungler", Position.JUNGLE),
        ("JG", Position.JUNGLE),
        ("Support", Position.SUPPORT),
        ("Top Laner", Position.OTHER),
        ("  bot   laner ", Position.CARRY),
        ("Coach", Position.OTHER),
        ("", Position.OTHER),
        (None, Position.OTHER),
    ])
    def test_from_label(self, label, expected):
        assert Position.from_label(label) == expected

    def test_known_labels(self):
        assert Position.is_known_label("Top Laner")
        assert not Position.is_known_label("Coach")
        assert not Position.is_known_label(None)


class TestValidate:
    def test_valid_rosters(self, roster_a, roster_b):
        result = RosterValidator.validate(roster_a, roster_b)

        assert result["valid"] is True
        assert result["errors"] == []
        assert result["breakdown"]["team_a_players"] == 6
        assert result["breakdown"]["team_b_players"] == 6
        assert sum(result["breakdown"]["positions"].values()) == 12

    def test_empty_roster_is_an_error(self, roster_a):
        result = RosterValidator.validate(roster_a, [])
        assert result["valid"] is False
        assert "Team B must field at least 1 player" in result["errors"]

    def test_duplicate_player_is_an_error(self, make_player):
        shared = make_player("p-1")
        result = RosterValidator.validate([shared], [shared, make_player("p-2")])
        assert result["valid"] is False
        assert any("p-1" in e for e in result["errors"])

    def test_out_of_range_and_unknown_position_are_warnings(self, make_player):
        wild = make_player("p-1", position="Coach", mechanical=130, form=-5)
        result = RosterValidator.validate([wild], [make_player("p-2")])

        assert result["valid"] is True
        assert len(result["warnings"]) == 2
        assert "mechanical, form" in result["warnings"][0]
        assert "Coach" in result["warnings"][1]


class TestValidateRosters:
    def test_distinct_rosters_are_valid(self, make_roster):
        result = RosterValidator.validate_rosters({"a": make_roster("a"), "b": make_roster("b", count=3)})
        assert result["valid"] is True
        assert result["breakdown"] == {"a": 5, "b": 3}

    def test_player_registered_for_two_teams_is_an_error(self, make_player):
        result = RosterValidator.validate_rosters({
            "a": [make_player("p1"), make_player("p2")],
            "b": [make_player("p1"), make_player("p3")],
        })
        assert result["valid"] is False
        assert result["errors"] == ["Player p1 appears more than once"]

    def test_empty_roster_is_an_error(self, make_roster):
        result = RosterValidator.validate_rosters({"a": make_roster("a"), "b": []})
        assert result["valid"] is False
        assert "Team b must field at least 1 player" in result["errors"]


class TestClamp:
    def test_clamp_player(self, make_player):
        player = make_player("p-1", mechanical=130, form=-5, adaptability=None)
        clamped = RosterValidator.clamp_player(player)

        assert clamped.mechanical == 100
        assert clamped.form == 0
        assert clamped.adaptability is None
        assert clamped.game_knowledge == player.game_knowledge

    def test_in_range_player_is_returned_unchanged(self, make_player):
        player = make_player("p-1")
        assert RosterValidator.clamp_player(player) is player

    def test_clamp_roster(self, make_roster):
        roster = make_roster("a", skill=120, count=3)
        assert all(p.mechanical == 100 for p in RosterValidator.clamp_roster(roster))
