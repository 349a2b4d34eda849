from app.models.player import PlayerAccount, Position, Rarity
from app.models.team import TeamAccount, TeamStatistics
from app.models.match_record import MatchRecord

__all__ = [
    "PlayerAccount",
    "Position",
    "Rarity",
    "TeamAccount",
    "TeamStatistics",
    "MatchRecord",
]
