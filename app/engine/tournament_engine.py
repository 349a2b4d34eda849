"""
Tournament Engine - Handles tournament rounds and single-elimination brackets
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from app.models.player import PlayerAccount
from app.models.team import TeamAccount
from app.engine.commentator import MatchCommentator
from app.engine.match_engine import MatchSimulationEngine
from app.engine.random_source import RandomSource, make_rng
from app.engine.types import MatchResult

logger = logging.getLogger(__name__)


@dataclass
class Matchup:
    """Two teams and the rosters they field"""
    team_a: TeamAccount
    team_b: TeamAccount
    roster_a: Sequence[PlayerAccount]
    roster_b: Sequence[PlayerAccount]


@dataclass
class TournamentMatchResult:
    """Result of a simulated tournament match"""
    match_id: str
    round_number: int
    result: MatchResult


@dataclass
class BracketMatch:
    """One slot in the bracket; an empty side is a bye"""
    match_id: str
    team_a: Optional[TeamAccount] = None
    team_b: Optional[TeamAccount] = None
    winner: Optional[TeamAccount] = None
    score: Optional[tuple[int, int]] = None
    completed: bool = False

    @property
    def is_bye(self) -> bool:
        return (self.team_a is None) != (self.team_b is None)

    @property
    def is_empty(self) -> bool:
        return self.team_a is None and self.team_b is None


@dataclass
class BracketRound:
    number: int
    name: str
    matches: list[BracketMatch] = field(default_factory=list)


@dataclass
class TournamentOutcome:
    champion: Optional[TeamAccount]
    rounds: list[BracketRound]
    results: list[TournamentMatchResult]


class TournamentEngine:
    """
    Runs tournament rounds on top of the match engine.
    Every match in a tournament shares the engine's random source, so a seeded
    tournament replays identically.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else make_rng()
        self._match_engine = MatchSimulationEngine(self.rng)
        self._commentator = MatchCommentator(rng=self.rng)

    def play_match(self, matchup: Matchup, match_id: str, round_number: int) -> TournamentMatchResult:
        result = self._match_engine.simulate(matchup.team_a, matchup.team_b, matchup.roster_a, matchup.roster_b)
        result.commentary = self._commentator.generate_match_commentary(
            result.events, matchup.team_a, matchup.team_b, result.stats
        )
        return TournamentMatchResult(match_id=match_id, round_number=round_number, result=result)

    def simulate_round(self, matchups: Sequence[Matchup], round_number: int = 1) -> list[TournamentMatchResult]:
        """Simulate every matchup in a round, in order"""
        return [
            self.play_match(matchup, f"match-r{round_number}-{index}", round_number)
            for index, matchup in enumerate(matchups)
        ]

    @staticmethod
    def build_bracket(teams: Sequence[TeamAccount]) -> list[BracketRound]:
        """
        Build an empty single-elimination bracket.
        Teams are paired in seed order; slots past the last team are byes.
        """
        if len(teams) < 2:
            raise ValueError(f"A bracket needs at least 2 teams, got {len(teams)}")

        round_count = math.ceil(math.log2(len(teams)))
        match_count = 2 ** (round_count - 1)

        first_round = BracketRound(number=1, name="Final" if round_count == 1 else "Round 1")
        for i in range(match_count):
            a_index, b_index = i * 2, i * 2 + 1
            first_round.matches.append(BracketMatch(
                match_id=f"match-r1-{i}",
                team_a=teams[a_index] if a_index < len(teams) else None,
                team_b=teams[b_index] if b_index < len(teams) else None,
            ))

        rounds = [first_round]
        for number in range(2, round_count + 1):
            match_count //= 2
            rounds.append(BracketRound(
                number=number,
                name="Final" if number == round_count else f"Round {number}",
                matches=[BracketMatch(match_id=f"match-r{number}-{i}") for i in range(match_count)],
            ))
        return rounds

    def run_bracket(
        self,
        teams: Sequence[TeamAccount],
        rosters: dict[str, Sequence[PlayerAccount]],
    ) -> TournamentOutcome:
        """Play the whole bracket, advancing winners until a champion remains"""
        rounds = self.build_bracket(teams)
        results = []

        for round_index, bracket_round in enumerate(rounds):
            for match_index, match in enumerate(bracket_round.matches):
                if match.is_empty:
                    match.completed = True
                    continue

                if match.is_bye:
                    match.winner = match.team_a or match.team_b
                    logger.debug("%s advances on a bye (%s)", match.winner.name, match.match_id)
                else:
                    played = self.play_match(
                        Matchup(
                            team_a=match.team_a,
                            team_b=match.team_b,
                            roster_a=rosters.get(match.team_a.id, []),
                            roster_b=rosters.get(match.team_b.id, []),
                        ),
                        match.match_id,
                        bracket_round.number,
                    )
                    results.append(played)
                    match.winner = played.result.winner
                    match.score = played.result.score
                match.completed = True

                if round_index + 1 < len(rounds):
                    next_match = rounds[round_index + 1].matches[match_index // 2]
                    if match_index % 2 == 0:
                        next_match.team_a = match.winner
                    else:
                        next_match.team_b = match.winner

        champion = rounds[-1].matches[0].winner
        logger.info("Tournament complete: %d matches, champion %s", len(results), champion.name if champion else None)
        return TournamentOutcome(champion=champion, rounds=rounds, results=results)
