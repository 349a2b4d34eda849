"""
Tests for match commentary generation.
"""
import random

import pytest

from app.engine.commentator import MatchCommentator, calculate_excitement, generate_match_commentary
from app.engine.match_engine import MatchSimulationEngine
from app.engine.types import (
    EventType, GamePhase, MatchStats, SimulationEvent, TeamMatchStats, TeamSide,
)


def create_event(time, event_type=EventType.OBJECTIVE, phase=GamePhase.EARLY_GAME,
                 side=TeamSide.TEAM_A, impact=2, description="Takes the First Tower") -> SimulationEvent:
    return SimulationEvent(
        time=time, type=event_type, phase=phase, description=description, favored_team=side, impact=impact,
    )


@pytest.fixture
def teams(make_team):
    return make_team("a", name="Phantom Legends"), make_team("b", name="Shadow Ninjas")


class TestExcitement:
    @pytest.mark.parametrize("event_type,phase,impact,expected", [
        (EventType.OBJECTIVE, GamePhase.EARLY_GAME, 1, 1),
        (EventType.PLAY, GamePhase.MID_GAME, 2, 2),
        (EventType.TEAMFIGHT, GamePhase.EARLY_GAME, 2, 3),
        (EventType.OBJECTIVE, GamePhase.LATE_GAME, 3, 4),
        (EventType.TEAMFIGHT, GamePhase.LATE_GAME, 2, 4),
        (EventType.TEAMFIGHT, GamePhase.LATE_GAME, 3, 5),
    ])
    def test_excitement_formula(self, event_type, phase, impact, expected):
        assert calculate_excitement(create_event(10, event_type, phase, impact=impact)) == expected

    def test_excitement_is_capped(self):
        event = create_event(30, EventType.TEAMFIGHT, GamePhase.LATE_GAME, impact=5)
        assert calculate_excitement(event) == 5


class TestMatchCommentary:
    def test_intro_names_both_teams_and_casters(self, teams):
        team_a, team_b = teams
        commentator = MatchCommentator(["PastryTime", "CaptainFlowers"], random.Random(1))
        lines = commentator.generate_match_commentary([], team_a, team_b)

        assert len(lines) == 1
        intro = lines[0]
        assert intro.time == 0
        assert intro.excitement == 4
        assert intro.phase == GamePhase.EARLY_GAME
        for name in ("Phantom Legends", "Shadow Ninjas", "PastryTime", "CaptainFlowers"):
            assert name in intro.text

    def test_one_line_per_event_without_stats(self, teams):
        events = [create_event(t) for t in (2, 5, 9)]
        lines = generate_match_commentary(events, *teams, rng=random.Random(2))
        assert len(lines) == 1 + len(events)
        assert [line.time for line in lines[1:]] == [2, 5, 9]

    def test_event_line_is_assembled_from_tables(self, teams, fixed_rng):
        event = create_event(4, EventType.OBJECTIVE, GamePhase.EARLY_GAME, TeamSide.TEAM_A, 3)
        text = MatchCommentator(rng=fixed_rng).generate_event_commentary(event, *teams)
        assert text == (
            "OH! Phantom Legends manages to secure takes the first tower! INCREDIBLE!"
            " This early advantage could set the tone for the entire match."
        )

    def test_other_team_is_the_opponent(self, teams, make_fixed_rng):
        event = create_event(12, EventType.PLAY, GamePhase.MID_GAME, TeamSide.TEAM_B, 1, "An outplay")

        class LastChoice(make_fixed_rng):
            def choice(self, seq):
                return seq[-1]

        text = MatchCommentator(rng=LastChoice()).generate_event_commentary(event, *teams)
        assert text.startswith("Phantom Legends had no answer for Shadow Ninjas's an outplay.")

    def test_single_caster_is_padded(self, teams):
        commentator = MatchCommentator(["Solo"], random.Random(1))
        assert commentator.commentators == ["Solo", "Solo"]

    def test_inputs_are_not_mutated(self, teams):
        events = [create_event(3), create_event(20, EventType.TEAMFIGHT, GamePhase.LATE_GAME)]
        snapshot = list(events)
        generate_match_commentary(events, *teams, rng=random.Random(4))
        assert events == snapshot


class TestConclusion:
    def test_winner_and_mvp_lines(self, teams, make_player):
        team_a, team_b = teams
        mvp = make_player("a-1", "Mid Laner", 85)
        stats = MatchStats(
            duration=33,
            team_a=TeamMatchStats(objectives=5, teamfights=3, mvp=mvp),
            team_b=TeamMatchStats(objectives=2, teamfights=1),
        )
        lines = generate_match_commentary([], team_a, team_b, stats, rng=random.Random(1))

        gg, mvp_line = lines[-2], lines[-1]
        assert gg.time == 33
        assert gg.excitement == 5
        assert "Phantom Legends takes the victory in 33 minutes" in gg.text
        assert mvp_line.time == 34
        assert mvp_line.excitement == 4
        assert mvp.name in mvp_line.text
        assert "Mid Laner" in mvp_line.text

    def test_level_control_is_called_for_team_b(self, teams, make_player):
        team_a, team_b = teams
        stats = MatchStats(
            duration=30,
            team_a=TeamMatchStats(objectives=3, teamfights=2),
            team_b=TeamMatchStats(objectives=1, teamfights=4, mvp=make_player("b-1")),
        )
        lines = generate_match_commentary([], team_a, team_b, stats, rng=random.Random(1))
        assert "Shadow Ninjas takes the victory" in lines[-2].text

    def test_no_mvp_line_without_mvp(self, teams):
        stats = MatchStats(duration=30, team_a=TeamMatchStats(objectives=4))
        lines = generate_match_commentary([], *teams, stats, rng=random.Random(1))

        assert len(lines) == 2
        assert "takes the victory" in lines[-1].text

    def test_full_match_feed(self, team_a, team_b, roster_a, roster_b):
        rng = random.Random(8)
        result = MatchSimulationEngine(rng).simulate(team_a, team_b, roster_a, roster_b)
        lines = generate_match_commentary(result.events, team_a, team_b, result.stats, rng=rng)

        assert len(lines) == 1 + len(result.events) + 2
        assert all(1 <= line.excitement <= 5 for line in lines)
