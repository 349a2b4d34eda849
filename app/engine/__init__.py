from app.engine.match_engine import MatchSimulationEngine
from app.engine.commentator import MatchCommentator, generate_match_commentary
from app.engine.tournament_engine import TournamentEngine
from app.engine.random_source import make_rng

__all__ = [
    "MatchSimulationEngine",
    "MatchCommentator",
    "generate_match_commentary",
    "TournamentEngine",
    "make_rng",
]
