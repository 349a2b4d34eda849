"""
Stats analysis - turns the event log and rosters into team tallies, box scores and MVPs
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from app.models.player import PlayerAccount, Position
from app.models.team import TeamAccount
from app.engine.errors import MissingPerformanceDataError
from app.engine.random_source import RandomSource, make_rng
from app.engine.team_performance import attribute_value, weighted_rating, ATTRIBUTE_WEIGHTS
from app.engine.types import (
    EventType, GamePhase, MatchStats, PlayerPerformance, SimulationEvent,
    TeamMatchStats,
)

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 30  # minutes, when there are no events
POST_EVENT_MINUTES = 5


@dataclass(frozen=True)
class BoxScoreProfile:
    """Position-specific K/D/A shape: each term is scale * score + uniform(0, noise)"""
    kill_scale: float
    kill_noise: float
    death_divisor: float
    assist_scale: float
    assist_noise: float
    death_noise: float = 2


CARRY_PROFILE = BoxScoreProfile(kill_scale=2, kill_noise=3, death_divisor=2, assist_scale=1, assist_noise=5)

POSITION_PROFILES = {
    Position.CARRY: CARRY_PROFILE,
    Position.MID: CARRY_PROFILE,
    Position.JUNGLE: BoxScoreProfile(kill_scale=1, kill_noise=3, death_divisor=2, assist_scale=1.5, assist_noise=3),
    Position.SUPPORT: BoxScoreProfile(kill_scale=0.5, kill_noise=2, death_divisor=1.5, assist_scale=2.5, assist_noise=4),
    Position.OTHER: BoxScoreProfile(kill_scale=1, kill_noise=2, death_divisor=2, assist_scale=1, assist_noise=3),
}


class StatsAnalyzer:
    """
    Consumes a finished event log and both rosters.

    Team tallies are read straight off the events. Player box scores are
    generated from each player's attributes and position, then the best
    performance score on each roster becomes that team's MVP.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else make_rng()

    def analyze(
        self,
        events: Sequence[SimulationEvent],
        team_a: TeamAccount,
        team_b: TeamAccount,
        roster_a: Sequence[PlayerAccount],
        roster_b: Sequence[PlayerAccount],
    ) -> MatchStats:
        duration = events[-1].time + POST_EVENT_MINUTES if events else DEFAULT_DURATION
        stats = MatchStats(duration=duration)

        for event in events:
            self._tally_event(stats.for_side(event.favored_team), event)

        for player in roster_a:
            stats.player_performances[player.id] = self.generate_player_performance(player)
        for player in roster_b:
            stats.player_performances[player.id] = self.generate_player_performance(player)

        stats.team_a.mvp = self.select_mvp(roster_a, stats.player_performances)
        stats.team_b.mvp = self.select_mvp(roster_b, stats.player_performances)

        logger.debug(
            "Analyzed %d events for %s vs %s (duration %d min)",
            len(events), team_a.name, team_b.name, duration,
        )
        return stats

    @staticmethod
    def _tally_event(team_stats: TeamMatchStats, event: SimulationEvent):
        if event.type == EventType.OBJECTIVE:
            team_stats.objectives += 1
        elif event.type == EventType.TEAMFIGHT:
            team_stats.teamfights += 1
        elif event.type == EventType.PLAY:
            team_stats.plays += 1

        if event.phase == GamePhase.EARLY_GAME:
            team_stats.early_game_score += event.impact
        elif event.phase == GamePhase.MID_GAME:
            team_stats.mid_game_score += event.impact
        elif event.phase == GamePhase.LATE_GAME:
            team_stats.late_game_score += event.impact

    def generate_player_performance(self, player: PlayerAccount) -> PlayerPerformance:
        """Generate a box score for one player"""
        base = weighted_rating({name: attribute_value(player, name) for name in ATTRIBUTE_WEIGHTS}) / 100
        score = base * 7 + self.rng.uniform(0, 3)  # 0-10 scale

        profile = POSITION_PROFILES[player.role]
        kills = math.floor(score * profile.kill_scale + self.rng.uniform(0, profile.kill_noise))
        deaths = math.floor((10 - score) / profile.death_divisor + self.rng.uniform(0, profile.death_noise))
        assists = math.floor(score * profile.assist_scale + self.rng.uniform(0, profile.assist_noise))

        return PlayerPerformance(
            performance_score=score,
            kills=max(0, kills),
            deaths=max(1, deaths),
            assists=max(0, assists),
            gold_earned=math.floor(5000 + score * 500 + self.rng.uniform(0, 2000)),
            gold_spent=math.floor(4500 + score * 500 + self.rng.uniform(0, 1800)),
            damage_dealt=math.floor(10000 + score * 3000 + self.rng.uniform(0, 5000)),
            damage_taken=math.floor(8000 + (10 - score) * 1000 + self.rng.uniform(0, 4000)),
            vision_score=math.floor(10 + score * 3 + self.rng.uniform(0, 5)),
        )

    @staticmethod
    def _lookup(player: PlayerAccount, performances: dict[str, PlayerPerformance]) -> PlayerPerformance:
        try:
            return performances[player.id]
        except KeyError:
            raise MissingPerformanceDataError(player.id) from None

    @classmethod
    def select_mvp(
        cls,
        roster: Sequence[PlayerAccount],
        performances: dict[str, PlayerPerformance],
    ) -> Optional[PlayerAccount]:
        """Highest performance score on the roster; the earlier roster entry wins ties"""
        best: Optional[PlayerAccount] = None
        best_score = None
        for player in roster:
            try:
                perf = cls._lookup(player, performances)
            except MissingPerformanceDataError as exc:
                logger.warning("Skipping %s in MVP ranking: %s", player.name, exc)
                continue
            if best_score is None or perf.performance_score > best_score:
                best = player
                best_score = perf.performance_score
        return best
