"""
Tests for phase event generation.
"""
import random

import pytest

from app.engine.event_generator import EventGenerator, PHASE_OFFSETS, win_probability
from app.engine.types import EventType, GamePhase, TeamPerformance, TeamSide


def make_performance(overall: float) -> TeamPerformance:
    return TeamPerformance(
        mechanical=overall, game_knowledge=overall, team_communication=overall,
        adaptability=overall, consistency=overall, form=overall, synergy=50, overall=overall,
    )


class TestWinProbability:
    def test_even_teams(self):
        assert win_probability(make_performance(80), make_performance(80)) == pytest.approx(0.5)

    def test_advantage_shifts_probability(self):
        assert win_probability(make_performance(90), make_performance(80)) == pytest.approx(0.6)

    def test_probability_is_clamped(self):
        """Neither team is ever a certainty"""
        assert win_probability(make_performance(200), make_performance(10)) == pytest.approx(0.7)
        assert win_probability(make_performance(10), make_performance(200)) == pytest.approx(0.3)


class TestGenerate:
    @pytest.mark.parametrize("phase", list(GamePhase))
    def test_produces_exactly_count_events_in_phase_window(self, phase, make_team):
        generator = EventGenerator(random.Random(7))
        events = generator.generate(
            phase, 5, make_team("a"), make_team("b"), make_performance(80), make_performance(80)
        )

        assert len(events) == 5
        offset = PHASE_OFFSETS[phase]
        for event in events:
            assert event.phase == phase
            assert offset <= event.time <= offset + 4 + 4
            assert 1 <= event.impact <= 3
            assert event.type in EventType

    def test_events_sorted_by_time(self, make_team):
        generator = EventGenerator(random.Random(3))
        for _ in range(50):
            events = generator.generate(
                GamePhase.MID_GAME, 5, make_team("a"), make_team("b"), make_performance(80), make_performance(75)
            )
            times = [e.time for e in events]
            assert times == sorted(times)

    def test_description_names_favored_team(self, make_team):
        team_a = make_team("a", name="Phantom Legends")
        team_b = make_team("b", name="Shadow Ninjas")
        events = EventGenerator(random.Random(11)).generate(
            GamePhase.LATE_GAME, 20, team_a, team_b, make_performance(80), make_performance(80)
        )
        for event in events:
            expected = team_a.name if event.favored_team == TeamSide.TEAM_A else team_b.name
            assert expected in event.description
            assert "{team}" not in event.description

    def test_dominant_team_wins_about_seventy_percent(self, make_team):
        generator = EventGenerator(random.Random(5))
        events = generator.generate(
            GamePhase.EARLY_GAME, 4000, make_team("a"), make_team("b"), make_performance(150), make_performance(50)
        )
        share = sum(1 for e in events if e.favored_team == TeamSide.TEAM_A) / len(events)
        assert 0.66 <= share <= 0.74

    def test_zero_count(self, make_team):
        events = EventGenerator(random.Random(1)).generate(
            GamePhase.EARLY_GAME, 0, make_team("a"), make_team("b"), make_performance(80), make_performance(80)
        )
        assert events == []
