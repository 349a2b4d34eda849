from dataclasses import dataclass
from typing import Optional
import enum


class Position(enum.Enum):
    CARRY = "carry"
    MID = "mid"
    JUNGLE = "jungle"
    SUPPORT = "support"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Position":
        """Map a provider position label ("AD Carry", "Jungler", ...) to a Position"""
        if not label:
            return cls.OTHER
        return POSITION_ALIASES.get(_normalize_label(label), cls.OTHER)

    @staticmethod
    def is_known_label(label: Optional[str]) -> bool:
        return bool(label) and _normalize_label(label) in POSITION_ALIASES


def _normalize_label(label: str) -> str:
    return " ".join(label.lower().replace("_", " ").replace("-", " ").split())


POSITION_ALIASES = {
    "carry": Position.CARRY,
    "ad carry": Position.CARRY,
    "adc": Position.CARRY,
    "bot": Position.CARRY,
    "bot laner": Position.CARRY,
    "bottom": Position.CARRY,
    "marksman": Position.CARRY,
    "mid": Position.MID,
    "mid laner": Position.MID,
    "midlaner": Position.MID,
    "middle": Position.MID,
    "jungle": Position.JUNGLE,
    "jungler": Position.JUNGLE,
    "jg": Position.JUNGLE,
    "support": Position.SUPPORT,
    "supp": Position.SUPPORT,
    "sup": Position.SUPPORT,
    "top": Position.OTHER,
    "top laner": Position.OTHER,
    "toplaner": Position.OTHER,
    "other": Position.OTHER,
}


class Rarity(enum.Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


@dataclass(frozen=True)
class PlayerAccount:
    """Read-only snapshot of a player supplied by the roster provider"""
    id: str
    name: str
    mechanical: float
    game_knowledge: float
    team_communication: float
    consistency: float
    adaptability: Optional[float] = None  # missing -> 50
    form: Optional[float] = None  # missing -> 50
    position: Optional[str] = None  # free text, e.g. "Mid Laner"

    # Provider metadata, not used by the engine
    potential: int = 0
    rarity: Rarity = Rarity.COMMON
    experience: int = 0
    matches_played: int = 0
    wins: int = 0
    mvp_count: int = 0

    @property
    def role(self) -> Position:
        return Position.from_label(self.position)

    @property
    def overall_rating(self) -> int:
        """Weighted rating on the 0-100 scale"""
        return int(
            self.mechanical * 0.25
            + self.game_knowledge * 0.25
            + self.team_communication * 0.2
            + (self.adaptability if self.adaptability is not None else 50) * 0.15
            + self.consistency * 0.1
            + (self.form if self.form is not None else 50) * 0.05
        )

    def __repr__(self):
        return f"<Player {self.name} ({self.role.value}) - OVR: {self.overall_rating}>"
