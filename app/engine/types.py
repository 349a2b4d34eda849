"""
Data types produced by the match simulation engine
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional

from app.models.player import PlayerAccount
from app.models.team import TeamAccount


class GamePhase(str, Enum):
    EARLY_GAME = "early_game"
    MID_GAME = "mid_game"
    LATE_GAME = "late_game"


class TeamSide(str, Enum):
    TEAM_A = "team_a"
    TEAM_B = "team_b"


class EventType(str, Enum):
    OBJECTIVE = "objective"
    TEAMFIGHT = "teamfight"
    PLAY = "play"


@dataclass(frozen=True)
class TeamPerformance:
    """Roster averages scaled by synergy, plus the jittered overall score"""
    mechanical: float
    game_knowledge: float
    team_communication: float
    adaptability: float
    consistency: float
    form: float
    synergy: float
    overall: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SimulationEvent:
    """A single moment in the match log"""
    time: int  # minutes
    type: EventType
    phase: GamePhase
    description: str
    favored_team: TeamSide
    impact: int  # 1-3

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "type": self.type.value,
            "phase": self.phase.value,
            "description": self.description,
            "favored_team": self.favored_team.value,
            "impact": self.impact,
        }


@dataclass
class PlayerPerformance:
    """Box score for one player in one match"""
    performance_score: float  # 0-10
    kills: int
    deaths: int
    assists: int
    gold_earned: int
    gold_spent: int
    damage_dealt: int
    damage_taken: int
    vision_score: int

    @property
    def kda(self) -> float:
        return (self.kills + self.assists) / max(1, self.deaths)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TeamMatchStats:
    """Per-team tallies for a match"""
    objectives: int = 0
    teamfights: int = 0
    plays: int = 0
    early_game_score: int = 0
    mid_game_score: int = 0
    late_game_score: int = 0
    mvp: Optional[PlayerAccount] = None

    @property
    def control_score(self) -> int:
        """Objectives plus teamfights, used to call the match in commentary"""
        return self.objectives + self.teamfights

    def to_dict(self) -> dict:
        return {
            "objectives": self.objectives,
            "teamfights": self.teamfights,
            "plays": self.plays,
            "early_game_score": self.early_game_score,
            "mid_game_score": self.mid_game_score,
            "late_game_score": self.late_game_score,
            "mvp": self.mvp.id if self.mvp else None,
        }


@dataclass
class MatchStats:
    duration: int  # minutes
    team_a: TeamMatchStats = field(default_factory=TeamMatchStats)
    team_b: TeamMatchStats = field(default_factory=TeamMatchStats)
    player_performances: dict[str, PlayerPerformance] = field(default_factory=dict)

    def for_side(self, side: TeamSide) -> TeamMatchStats:
        return self.team_a if side == TeamSide.TEAM_A else self.team_b

    def to_dict(self) -> dict:
        return {
            "duration": self.duration,
            "team_stats": {
                TeamSide.TEAM_A.value: self.team_a.to_dict(),
                TeamSide.TEAM_B.value: self.team_b.to_dict(),
            },
            "player_performances": {
                player_id: perf.to_dict() for player_id, perf in self.player_performances.items()
            },
        }


@dataclass(frozen=True)
class Commentary:
    time: int
    text: str
    phase: GamePhase
    excitement: int  # 1-5

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "text": self.text,
            "phase": self.phase.value,
            "excitement": self.excitement,
        }


@dataclass
class MatchResult:
    """Top-level output of a simulation run"""
    team_a: TeamAccount
    team_b: TeamAccount
    winner: TeamAccount
    loser: TeamAccount
    score: tuple[int, int]
    events: list[SimulationEvent]
    stats: MatchStats
    performance_a: TeamPerformance
    performance_b: TeamPerformance
    upset: bool = False
    commentary: list[Commentary] = field(default_factory=list)

    @property
    def winner_side(self) -> TeamSide:
        return TeamSide.TEAM_A if self.winner is self.team_a else TeamSide.TEAM_B

    def to_dict(self) -> dict:
        return {
            "team_a": self.team_a.id,
            "team_b": self.team_b.id,
            "winner": self.winner.id,
            "loser": self.loser.id,
            "score": list(self.score),
            "upset": self.upset,
            "performances": {
                TeamSide.TEAM_A.value: self.performance_a.to_dict(),
                TeamSide.TEAM_B.value: self.performance_b.to_dict(),
            },
            "events": [e.to_dict() for e in self.events],
            "stats": self.stats.to_dict(),
            "commentary": [c.to_dict() for c in self.commentary],
        }
