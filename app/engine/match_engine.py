import logging
import math
from typing import Optional, Sequence

from app.config import settings
from app.models.player import PlayerAccount
from app.models.team import TeamAccount
from app.engine.errors import InsufficientRosterError
from app.engine.event_generator import EventGenerator
from app.engine.random_source import RandomSource, make_rng
from app.engine.stats_analyzer import StatsAnalyzer
from app.engine.team_performance import TeamPerformanceCalculator
from app.engine.types import (
    EventType, GamePhase, MatchResult, SimulationEvent, TeamPerformance, TeamSide,
)

logger = logging.getLogger(__name__)


class MatchSimulationEngine:
    """
    Esports match simulation engine.
    Plays a match as three phases of events, then scores it from objectives
    and the performance gap, with a small chance of an upset swing.
    """

    GAME_PHASES = (GamePhase.EARLY_GAME, GamePhase.MID_GAME, GamePhase.LATE_GAME)
    UPSET_MARGIN = (1, 3)

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        phase_length: Optional[int] = None,
        upset_chance: Optional[float] = None,
    ):
        self.rng = rng if rng is not None else make_rng()
        self.phase_length = phase_length if phase_length is not None else settings.PHASE_LENGTH
        self.upset_chance = upset_chance if upset_chance is not None else settings.UPSET_CHANCE

        self.performance_calculator = TeamPerformanceCalculator(self.rng)
        self.event_generator = EventGenerator(self.rng)
        self.stats_analyzer = StatsAnalyzer(self.rng)

    def simulate(
        self,
        team_a: TeamAccount,
        team_b: TeamAccount,
        roster_a: Sequence[PlayerAccount],
        roster_b: Sequence[PlayerAccount],
    ) -> MatchResult:
        """
        Simulate a complete match.

        Raises InsufficientRosterError before any event is generated if either
        side has no players.
        """
        if not roster_a:
            raise InsufficientRosterError(team_a.name)
        if not roster_b:
            raise InsufficientRosterError(team_b.name)

        perf_a = self.performance_calculator.calculate(team_a, roster_a)
        perf_b = self.performance_calculator.calculate(team_b, roster_b)
        logger.debug("%s overall %.2f vs %s overall %.2f", team_a.name, perf_a.overall, team_b.name, perf_b.overall)

        events = self.generate_match_events(team_a, team_b, perf_a, perf_b)
        score, upset = self.calculate_final_score(events, perf_a, perf_b)

        # Team A takes ties
        if score[0] >= score[1]:
            winner, loser = team_a, team_b
        else:
            winner, loser = team_b, team_a

        stats = self.stats_analyzer.analyze(events, team_a, team_b, roster_a, roster_b)

        logger.info(
            "Simulated %s vs %s: %d-%d, winner %s%s",
            team_a.name, team_b.name, score[0], score[1], winner.name,
            " (upset)" if upset else "",
        )

        return MatchResult(
            team_a=team_a,
            team_b=team_b,
            winner=winner,
            loser=loser,
            score=score,
            events=events,
            stats=stats,
            performance_a=perf_a,
            performance_b=perf_b,
            upset=upset,
        )

    def generate_match_events(
        self,
        team_a: TeamAccount,
        team_b: TeamAccount,
        perf_a: TeamPerformance,
        perf_b: TeamPerformance,
    ) -> list[SimulationEvent]:
        """Generate every phase and merge into one time-ordered log"""
        events = []
        for phase in self.GAME_PHASES:
            events.extend(self.event_generator.generate(phase, self.phase_length, team_a, team_b, perf_a, perf_b))
        events.sort(key=lambda e: e.time)
        return events

    def calculate_final_score(
        self,
        events: Sequence[SimulationEvent],
        perf_a: TeamPerformance,
        perf_b: TeamPerformance,
    ) -> tuple[tuple[int, int], bool]:
        """Final score from objectives and performance gap; returns (score, upset_applied)"""
        objectives_a = sum(1 for e in events if e.type == EventType.OBJECTIVE and e.favored_team == TeamSide.TEAM_A)
        objectives_b = sum(1 for e in events if e.type == EventType.OBJECTIVE and e.favored_team == TeamSide.TEAM_B)

        performance_diff = math.floor((perf_a.overall - perf_b.overall) / 10)

        score_a = max(1, objectives_a + performance_diff)
        score_b = max(1, objectives_b - performance_diff)

        upset_margin = self.rng.randint(*self.UPSET_MARGIN)
        upset = self.rng.random() < self.upset_chance
        if upset:
            if score_a > score_b:
                score_b += upset_margin
            else:
                score_a += upset_margin

        return (score_a, score_b), upset
