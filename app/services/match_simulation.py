"""
Match simulation entry points - engine run plus commentary, as callers consume them
"""
from typing import Optional, Sequence

from app.models.player import PlayerAccount
from app.models.team import TeamAccount
from app.engine.commentator import MatchCommentator
from app.engine.match_engine import MatchSimulationEngine
from app.engine.random_source import RandomSource, make_rng
from app.engine.types import MatchResult


def simulate_match(
    team_a: TeamAccount,
    team_b: TeamAccount,
    roster_a: Sequence[PlayerAccount],
    roster_b: Sequence[PlayerAccount],
    *,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> MatchResult:
    """
    Simulate a match and attach its commentary.

    Pass either a random source or a seed for reproducible results.
    """
    if rng is None:
        rng = make_rng(seed)
    result = MatchSimulationEngine(rng).simulate(team_a, team_b, roster_a, roster_b)
    result.commentary = MatchCommentator(rng=rng).generate_match_commentary(
        result.events, team_a, team_b, result.stats
    )
    return result
