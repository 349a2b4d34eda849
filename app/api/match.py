from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.database import get_db
from app.engine.commentator import MatchCommentator
from app.engine.errors import InsufficientRosterError
from app.engine.random_source import make_rng
from app.engine.result_recorder import LocalMatchRecorder, MatchResultPayload, encode_match_stats
from app.engine.types import (
    EventType, GamePhase, MatchResult, MatchStats, SimulationEvent, TeamMatchStats, TeamSide,
)
from app.generators.player_generator import PlayerGenerator
from app.generators.team_generator import TeamGenerator
from app.services.match_simulation import simulate_match
from app.validators.roster_validator import RosterValidator
from app.api.schemas import (
    CommentaryRequest, CommentaryResponse, MatchResultResponse, MatchupRequest,
    RecordMatchRequest, RecordMatchResponse, SimulateMatchRequest, TeamMatchStatsIn,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/match", tags=["Match Simulation"])


def prepare_matchup(request: MatchupRequest):
    """Validate and clamp a matchup; raises 400 when it cannot be played"""
    roster_a = [p.to_account() for p in request.roster_a]
    roster_b = [p.to_account() for p in request.roster_b]

    validation = RosterValidator.validate(roster_a, roster_b)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))
    for warning in validation["warnings"]:
        logger.info("Roster warning: %s", warning)

    return (
        request.team_a.to_account(),
        request.team_b.to_account(),
        RosterValidator.clamp_roster(roster_a),
        RosterValidator.clamp_roster(roster_b),
    )


def result_response(result: MatchResult) -> MatchResultResponse:
    return MatchResultResponse(**result.to_dict())


@router.post("/simulate", response_model=MatchResultResponse)
def simulate(request: SimulateMatchRequest):
    """Simulate a match between two rosters"""
    team_a, team_b, roster_a, roster_b = prepare_matchup(request)
    try:
        result = simulate_match(team_a, team_b, roster_a, roster_b, seed=request.seed)
    except InsufficientRosterError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if not request.include_commentary:
        result.commentary = []
    return result_response(result)


@router.get("/demo", response_model=MatchResultResponse)
def demo_match(seed: Optional[int] = Query(None)):
    """Simulate the two strongest demo teams against each other"""
    team_a, team_b = TeamGenerator.generate_teams(2)
    generator = PlayerGenerator(seed)
    roster_a = generator.generate_roster(team_a, TeamGenerator.skill_level(team_a))
    roster_b = generator.generate_roster(team_b, TeamGenerator.skill_level(team_b))
    return result_response(simulate_match(team_a, team_b, roster_a, roster_b, seed=seed))


def _team_stats_from_request(data: TeamMatchStatsIn) -> TeamMatchStats:
    return TeamMatchStats(
        objectives=data.objectives,
        teamfights=data.teamfights,
        plays=data.plays,
        early_game_score=data.early_game_score,
        mid_game_score=data.mid_game_score,
        late_game_score=data.late_game_score,
        mvp=data.mvp.to_account() if data.mvp else None,
    )


@router.post("/commentary", response_model=list[CommentaryResponse])
def commentary(request: CommentaryRequest):
    """Generate commentary for an existing event log"""
    events = sorted(
        (
            SimulationEvent(
                time=e.time,
                type=EventType(e.type.value),
                phase=GamePhase(e.phase.value),
                description=e.description,
                favored_team=TeamSide(e.favored_team.value),
                impact=e.impact,
            )
            for e in request.events
        ),
        key=lambda e: e.time,
    )

    stats = None
    if request.stats:
        stats = MatchStats(
            duration=request.stats.duration,
            team_a=_team_stats_from_request(request.stats.team_a),
            team_b=_team_stats_from_request(request.stats.team_b),
        )

    commentator = MatchCommentator(rng=make_rng(request.seed))
    lines = commentator.generate_match_commentary(
        events, request.team_a.to_account(), request.team_b.to_account(), stats
    )
    return [CommentaryResponse(**line.to_dict()) for line in lines]


@router.post("/record", response_model=RecordMatchResponse)
def record(request: RecordMatchRequest, db: Session = Depends(get_db)):
    """Store a match result payload in the local result store"""
    if request.winner_id == request.loser_id:
        raise HTTPException(status_code=400, detail="Winner and loser must be different teams")
    if min(request.score) < 0:
        raise HTTPException(status_code=400, detail="Scores cannot be negative")

    payload = MatchResultPayload(
        match_id=request.match_id,
        winner_id=request.winner_id,
        loser_id=request.loser_id,
        score=request.score,
        match_stats=encode_match_stats(request.score),
        tournament_id=request.tournament_id,
    )
    recorded = LocalMatchRecorder(db).record(payload)
    if not recorded:
        raise HTTPException(status_code=409, detail=f"Match {request.match_id} could not be recorded")

    return RecordMatchResponse(match_id=payload.match_id, recorded=True, match_stats=payload.match_stats.hex())
