"""
Team performance calculation - reduces a roster and synergy score to a single profile
"""
import logging
from typing import Optional, Sequence

from app.models.player import PlayerAccount
from app.models.team import TeamAccount
from app.engine.errors import EmptyRosterError
from app.engine.random_source import RandomSource, make_rng
from app.engine.types import TeamPerformance

logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTE = 50  # used when adaptability or form is missing

# Weights for the overall score (sum to 1.0)
ATTRIBUTE_WEIGHTS = {
    "mechanical": 0.25,
    "game_knowledge": 0.25,
    "team_communication": 0.20,
    "adaptability": 0.15,
    "consistency": 0.10,
    "form": 0.05,
}


def attribute_value(player: PlayerAccount, name: str) -> float:
    """Read an attribute, falling back to the default for missing optional ones"""
    value = getattr(player, name, None)
    return DEFAULT_ATTRIBUTE if value is None else value


def weighted_rating(values: dict) -> float:
    return sum(values[name] * weight for name, weight in ATTRIBUTE_WEIGHTS.items())


def synergy_multiplier(synergy_score: float) -> float:
    """0.8 at zero synergy up to 1.2 at full synergy"""
    return 0.8 + (synergy_score / 100) * 0.4


class TeamPerformanceCalculator:
    """
    Averages the six player attributes across a roster, applies the team's
    synergy multiplier to the five skill attributes and jitters the weighted
    overall score by +/-10%.
    """

    JITTER_RANGE = (0.9, 1.1)

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else make_rng()

    def calculate(self, team: TeamAccount, roster: Sequence[PlayerAccount]) -> TeamPerformance:
        if not roster:
            raise EmptyRosterError(team.name)

        count = len(roster)
        averages = {
            name: sum(attribute_value(p, name) for p in roster) / count
            for name in ATTRIBUTE_WEIGHTS
        }

        multiplier = synergy_multiplier(team.synergy_score)
        scaled = {
            name: value if name == "form" else value * multiplier
            for name, value in averages.items()
        }

        overall = weighted_rating(scaled) * self.rng.uniform(*self.JITTER_RANGE)

        performance = TeamPerformance(
            mechanical=scaled["mechanical"],
            game_knowledge=scaled["game_knowledge"],
            team_communication=scaled["team_communication"],
            adaptability=scaled["adaptability"],
            consistency=scaled["consistency"],
            form=scaled["form"],
            synergy=team.synergy_score,
            overall=overall,
        )
        logger.debug("Team %s performance: %s", team.name, performance)
        return performance
