"""
Tests for tournament rounds and single-elimination brackets.
"""
import random

import pytest

from app.engine.tournament_engine import Matchup, TournamentEngine
from app.generators.team_generator import TeamGenerator


@pytest.fixture
def rosters_for(make_roster):
    def build(teams, skill=75):
        return {team.id: make_roster(team.id, skill=skill) for team in teams}
    return build


class TestSimulateRound:
    def test_round_ids_and_commentary(self, team_a, team_b, roster_a, roster_b):
        engine = TournamentEngine(random.Random(1))
        matchups = [
            Matchup(team_a, team_b, roster_a, roster_b),
            Matchup(team_b, team_a, roster_b, roster_a),
        ]
        results = engine.simulate_round(matchups, round_number=2)

        assert [r.match_id for r in results] == ["match-r2-0", "match-r2-1"]
        assert all(r.round_number == 2 for r in results)
        assert all(r.result.commentary for r in results)

    def test_seeded_round_replays(self, team_a, team_b, roster_a, roster_b):
        matchups = [Matchup(team_a, team_b, roster_a, roster_b)]
        first = TournamentEngine(random.Random(9)).simulate_round(matchups)
        second = TournamentEngine(random.Random(9)).simulate_round(matchups)
        assert first[0].result.to_dict() == second[0].result.to_dict()


class TestBuildBracket:
    def test_needs_two_teams(self):
        with pytest.raises(ValueError):
            TournamentEngine.build_bracket(TeamGenerator.generate_teams(1))

    def test_eight_team_shape(self):
        rounds = TournamentEngine.build_bracket(TeamGenerator.generate_teams(8))
        assert [len(r.matches) for r in rounds] == [4, 2, 1]
        assert rounds[-1].name == "Final"
        assert rounds[0].matches[0].match_id == "match-r1-0"

    def test_three_teams_leave_a_bye(self):
        rounds = TournamentEngine.build_bracket(TeamGenerator.generate_teams(3))
        assert [len(r.matches) for r in rounds] == [2, 1]
        assert rounds[0].matches[1].is_bye

    def test_two_teams_play_the_final(self):
        rounds = TournamentEngine.build_bracket(TeamGenerator.generate_teams(2))
        assert len(rounds) == 1
        assert rounds[0].name == "Final"


class TestRunBracket:
    def test_eight_teams_play_seven_matches(self, rosters_for):
        teams = TeamGenerator.generate_teams(8)
        outcome = TournamentEngine(random.Random(3)).run_bracket(teams, rosters_for(teams))

        assert len(outcome.results) == 7
        assert outcome.champion in teams
        assert all(m.completed for r in outcome.rounds for m in r.matches)
        assert outcome.rounds[-1].matches[0].winner is outcome.champion

    def test_five_teams_play_four_matches(self, rosters_for):
        teams = TeamGenerator.generate_teams(5)
        outcome = TournamentEngine(random.Random(4)).run_bracket(teams, rosters_for(teams))

        assert len(outcome.results) == 4
        assert outcome.champion is not None

    def test_bye_advances_without_a_match(self, rosters_for):
        teams = TeamGenerator.generate_teams(3)
        outcome = TournamentEngine(random.Random(5)).run_bracket(teams, rosters_for(teams))

        bye = outcome.rounds[0].matches[1]
        assert bye.winner is teams[2]
        assert bye.score is None
        assert outcome.rounds[1].matches[0].team_b is teams[2]
        assert len(outcome.results) == 2

    def test_winners_advance(self, rosters_for):
        teams = TeamGenerator.generate_teams(4)
        outcome = TournamentEngine(random.Random(6)).run_bracket(teams, rosters_for(teams))

        semi_winners = [m.winner for m in outcome.rounds[0].matches]
        final = outcome.rounds[1].matches[0]
        assert [final.team_a, final.team_b] == semi_winners
