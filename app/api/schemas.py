"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from app.models.player import PlayerAccount
from app.models.team import TeamAccount, TeamStatistics


# Enums
class GamePhaseEnum(str, Enum):
    EARLY_GAME = "early_game"
    MID_GAME = "mid_game"
    LATE_GAME = "late_game"


class TeamSideEnum(str, Enum):
    TEAM_A = "team_a"
    TEAM_B = "team_b"


class EventTypeEnum(str, Enum):
    OBJECTIVE = "objective"
    TEAMFIGHT = "teamfight"
    PLAY = "play"


# Roster Schemas
class PlayerIn(BaseModel):
    id: str
    name: str
    position: Optional[str] = None
    # Not range-checked here: out-of-range values are clamped before simulation
    mechanical: float
    game_knowledge: float
    team_communication: float
    consistency: float
    adaptability: Optional[float] = None
    form: Optional[float] = None

    def to_account(self) -> PlayerAccount:
        return PlayerAccount(**self.model_dump())


class TeamStatisticsIn(BaseModel):
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    tournament_wins: int = 0
    avg_mechanical: float = 0.0
    avg_game_knowledge: float = 0.0
    avg_team_communication: float = 0.0
    synergy_score: float = Field(50.0, ge=0, le=100)


class TeamIn(BaseModel):
    id: str
    name: str
    statistics: TeamStatisticsIn = Field(default_factory=TeamStatisticsIn)

    def to_account(self) -> TeamAccount:
        return TeamAccount(id=self.id, name=self.name, statistics=TeamStatistics(**self.statistics.model_dump()))


# Match Schemas
class MatchupRequest(BaseModel):
    team_a: TeamIn
    team_b: TeamIn
    roster_a: list[PlayerIn]
    roster_b: list[PlayerIn]


class SimulateMatchRequest(MatchupRequest):
    seed: Optional[int] = None
    include_commentary: bool = True


class TeamPerformanceResponse(BaseModel):
    mechanical: float
    game_knowledge: float
    team_communication: float
    adaptability: float
    consistency: float
    form: float
    synergy: float
    overall: float


class EventSchema(BaseModel):
    time: int = Field(ge=0)
    type: EventTypeEnum
    phase: GamePhaseEnum
    description: str
    favored_team: TeamSideEnum
    impact: int = Field(ge=1, le=3)


class TeamMatchStatsResponse(BaseModel):
    objectives: int
    teamfights: int
    plays: int
    early_game_score: int
    mid_game_score: int
    late_game_score: int
    mvp: Optional[str] = None  # player id


class PlayerPerformanceResponse(BaseModel):
    performance_score: float
    kills: int
    deaths: int
    assists: int
    gold_earned: int
    gold_spent: int
    damage_dealt: int
    damage_taken: int
    vision_score: int


class MatchStatsResponse(BaseModel):
    duration: int
    team_stats: dict[TeamSideEnum, TeamMatchStatsResponse]
    player_performances: dict[str, PlayerPerformanceResponse]


class CommentaryResponse(BaseModel):
    time: int
    text: str
    phase: GamePhaseEnum
    excitement: int = Field(ge=1, le=5)


class MatchResultResponse(BaseModel):
    team_a: str
    team_b: str
    winner: str
    loser: str
    score: tuple[int, int]
    upset: bool
    performances: dict[TeamSideEnum, TeamPerformanceResponse]
    events: list[EventSchema]
    stats: MatchStatsResponse
    commentary: list[CommentaryResponse]


# Commentary Schemas
class TeamMatchStatsIn(BaseModel):
    objectives: int = 0
    teamfights: int = 0
    plays: int = 0
    early_game_score: int = 0
    mid_game_score: int = 0
    late_game_score: int = 0
    mvp: Optional[PlayerIn] = None


class MatchStatsIn(BaseModel):
    duration: int = Field(ge=0)
    team_a: TeamMatchStatsIn = Field(default_factory=TeamMatchStatsIn)
    team_b: TeamMatchStatsIn = Field(default_factory=TeamMatchStatsIn)


class CommentaryRequest(BaseModel):
    team_a: TeamIn
    team_b: TeamIn
    events: list[EventSchema]
    stats: Optional[MatchStatsIn] = None
    seed: Optional[int] = None


# Recording Schemas
class RecordMatchRequest(BaseModel):
    match_id: str
    winner_id: str
    loser_id: str
    score: tuple[int, int]
    tournament_id: Optional[str] = None


class RecordMatchResponse(BaseModel):
    match_id: str
    recorded: bool
    match_stats: str  # hex-encoded payload bytes


# Tournament Schemas
class TournamentRoundRequest(BaseModel):
    matches: list[MatchupRequest]
    round_number: int = Field(1, ge=1)
    seed: Optional[int] = None


class TournamentMatchResponse(BaseModel):
    match_id: str
    round_number: int
    result: MatchResultResponse


class BracketRequest(BaseModel):
    teams: list[TeamIn] = Field(min_length=2)
    rosters: dict[str, list[PlayerIn]]
    seed: Optional[int] = None


class BracketMatchResponse(BaseModel):
    match_id: str
    team_a: Optional[str] = None
    team_b: Optional[str] = None
    winner: Optional[str] = None
    score: Optional[tuple[int, int]] = None
    completed: bool


class BracketRoundResponse(BaseModel):
    number: int
    name: str
    matches: list[BracketMatchResponse]


class BracketResponse(BaseModel):
    champion: Optional[str] = None
    rounds: list[BracketRoundResponse]
    results: list[TournamentMatchResponse]
