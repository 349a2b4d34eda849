import pytest

from app.models.player import PlayerAccount
from app.models.team import TeamAccount, TeamStatistics


class FixedRandom:
    """
    Deterministic stand-in for random.Random.
    uniform() returns the midpoint, randint() the lower bound, choice() the
    first element and random() a fixed value.
    """

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value

    def uniform(self, a, b):
        self.calls += 1
        return (a + b) / 2

    def randint(self, a, b):
        self.calls += 1
        return a

    def choice(self, seq):
        self.calls += 1
        return seq[0]


def create_test_player(player_id: str, position: str = "Top Laner", skill: float = 70, **overrides) -> PlayerAccount:
    attrs = dict(
        id=player_id,
        name=f"Player {player_id}",
        position=position,
        mechanical=skill,
        game_knowledge=skill,
        team_communication=skill,
        adaptability=skill,
        consistency=skill,
        form=skill,
    )
    attrs.update(overrides)
    return PlayerAccount(**attrs)


def create_test_team(team_id: str, synergy: float = 50, name: str = None) -> TeamAccount:
    return TeamAccount(
        id=team_id,
        name=name or team_id.replace("-", " ").title(),
        statistics=TeamStatistics(synergy_score=synergy),
    )


def create_test_roster(prefix: str, skill: float = 70, count: int = 5) -> list[PlayerAccount]:
    positions = ["Top Laner", "Jungler", "Mid Laner", "AD Carry", "Support"]
    return [
        create_test_player(f"{prefix}-{i}", positions[i % len(positions)], skill)
        for i in range(count)
    ]


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def make_player():
    return create_test_player


@pytest.fixture
def make_team():
    return create_test_team


@pytest.fixture
def make_roster():
    return create_test_roster


@pytest.fixture
def team_a():
    return create_test_team("team-a", synergy=88, name="Phantom Legends")


@pytest.fixture
def team_b():
    return create_test_team("team-b", synergy=80, name="Shadow Ninjas")


@pytest.fixture
def roster_a():
    """Six players averaging 82"""
    return create_test_roster("a", skill=82, count=6)


@pytest.fixture
def roster_b():
    """Six players averaging 78"""
    return create_test_roster("b", skill=78, count=6)


@pytest.fixture
def make_fixed_rng():
    return FixedRandom
