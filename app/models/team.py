from dataclasses import dataclass, field


@dataclass(frozen=True)
class TeamStatistics:
    """Aggregate team stats kept by the roster provider"""
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    tournament_wins: int = 0
    avg_mechanical: float = 0.0
    avg_game_knowledge: float = 0.0
    avg_team_communication: float = 0.0
    synergy_score: float = 50.0  # 0-100 team cohesion


@dataclass(frozen=True)
class TeamAccount:
    """Read-only snapshot of a team supplied by the roster provider"""
    id: str
    name: str
    statistics: TeamStatistics = field(default_factory=TeamStatistics)
    roster_ids: tuple[str, ...] = ()

    @property
    def synergy_score(self) -> float:
        return self.statistics.synergy_score

    @property
    def win_rate(self) -> float:
        if self.statistics.matches_played == 0:
            return 0.0
        return self.statistics.wins / self.statistics.matches_played

    def __repr__(self):
        return f"<Team {self.name} (synergy {self.synergy_score})>"
