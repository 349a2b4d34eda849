import logging

from fastapi import APIRouter, HTTPException

from app.engine.errors import InsufficientRosterError
from app.engine.random_source import make_rng
from app.engine.tournament_engine import Matchup, TournamentEngine, TournamentMatchResult
from app.validators.roster_validator import RosterValidator
from app.api.match import prepare_matchup, result_response
from app.api.schemas import (
    BracketMatchResponse, BracketRequest, BracketResponse, BracketRoundResponse,
    TournamentMatchResponse, TournamentRoundRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tournament", tags=["Tournament"])


def _match_response(played: TournamentMatchResult) -> TournamentMatchResponse:
    return TournamentMatchResponse(
        match_id=played.match_id,
        round_number=played.round_number,
        result=result_response(played.result),
    )


@router.post("/round", response_model=list[TournamentMatchResponse])
def simulate_round(request: TournamentRoundRequest):
    """Simulate every match of a tournament round"""
    matchups = [Matchup(*prepare_matchup(m)) for m in request.matches]
    engine = TournamentEngine(make_rng(request.seed))
    return [_match_response(r) for r in engine.simulate_round(matchups, request.round_number)]


@router.post("/bracket", response_model=BracketResponse)
def run_bracket(request: BracketRequest):
    """Play a single-elimination bracket to a champion"""
    teams = [t.to_account() for t in request.teams]
    if len({t.id for t in teams}) != len(teams):
        raise HTTPException(status_code=400, detail="Team ids must be unique")

    missing = [t.name for t in teams if not request.rosters.get(t.id)]
    if missing:
        raise HTTPException(status_code=400, detail=f"No roster for: {', '.join(missing)}")

    rosters = {
        team_id: [p.to_account() for p in players]
        for team_id, players in request.rosters.items()
    }
    validation = RosterValidator.validate_rosters(rosters)
    if not validation["valid"]:
        raise HTTPException(status_code=400, detail="; ".join(validation["errors"]))
    for warning in validation["warnings"]:
        logger.info("Roster warning: %s", warning)
    rosters = {team_id: RosterValidator.clamp_roster(roster) for team_id, roster in rosters.items()}

    engine = TournamentEngine(make_rng(request.seed))
    try:
        outcome = engine.run_bracket(teams, rosters)
    except InsufficientRosterError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return BracketResponse(
        champion=outcome.champion.id if outcome.champion else None,
        rounds=[
            BracketRoundResponse(
                number=r.number,
                name=r.name,
                matches=[
                    BracketMatchResponse(
                        match_id=m.match_id,
                        team_a=m.team_a.id if m.team_a else None,
                        team_b=m.team_b.id if m.team_b else None,
                        winner=m.winner.id if m.winner else None,
                        score=m.score,
                        completed=m.completed,
                    )
                    for m in r.matches
                ],
            )
            for r in outcome.rounds
        ],
        results=[_match_response(r) for r in outcome.results],
    )
