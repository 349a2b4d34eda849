import random
from typing import Optional
from faker import Faker
from app.models.player import PlayerAccount, Rarity
from app.models.team import TeamAccount


class PlayerGenerator:
    """Generates fictional esports players with realistic attributes"""

    # One of each on a standard five-player roster
    POSITIONS = ["Top Laner", "Jungler", "Mid Laner", "AD Carry", "Support"]

    RARITY_WEIGHTS = {
        Rarity.COMMON: 50,
        Rarity.UNCOMMON: 25,
        Rarity.RARE: 15,
        Rarity.EPIC: 8,
        Rarity.LEGENDARY: 2,
    }

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def _attribute(self, base: int, spread: int) -> int:
        return max(0, min(100, base + self.rng.randint(-spread, spread)))

    def generate_player(self, position: str, skill_level: int = 70, team_prefix: str = "") -> PlayerAccount:
        """Generate a single player around a skill level (0-100)"""
        handle = self.fake.unique.user_name()
        rarity = self.rng.choices(
            list(self.RARITY_WEIGHTS.keys()),
            weights=list(self.RARITY_WEIGHTS.values()),
        )[0]
        matches = self.rng.randint(0, 80)

        return PlayerAccount(
            id=f"{team_prefix}{handle}" if team_prefix else handle,
            name=handle,
            position=position,
            mechanical=self._attribute(skill_level, 8),
            game_knowledge=self._attribute(skill_level, 8),
            team_communication=self._attribute(skill_level, 8),
            adaptability=self._attribute(skill_level - 3, 6),
            consistency=self._attribute(skill_level - 2, 5),
            form=self._attribute(skill_level + 5, 8),
            potential=self._attribute(skill_level + 10, 5),
            rarity=rarity,
            experience=matches * 100,
            matches_played=matches,
            wins=self.rng.randint(0, matches),
            mvp_count=self.rng.randint(0, matches // 5),
        )

    def generate_roster(self, team: TeamAccount, skill_level: int = 70, count: int = 5) -> list[PlayerAccount]:
        """Generate a roster cycling through the standard positions"""
        return [
            self.generate_player(self.POSITIONS[i % len(self.POSITIONS)], skill_level, team_prefix=f"{team.id}-")
            for i in range(count)
        ]
