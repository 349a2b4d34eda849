"""
Event generation - builds the per-phase event log biased by the performance gap
"""
from typing import Optional

from app.models.team import TeamAccount
from app.engine.random_source import RandomSource, make_rng
from app.engine.types import (
    EventType, GamePhase, SimulationEvent, TeamPerformance, TeamSide,
)


EVENT_TEMPLATES = {
    GamePhase.EARLY_GAME: {
        EventType.OBJECTIVE: [
            "{team} secures the first dragon of the game",
            "{team} takes an early tower advantage",
            "{team} successfully invades the enemy jungle",
            "{team} captures the first herald",
        ],
        EventType.TEAMFIGHT: [
            "A skirmish breaks out in the river with {team} coming out ahead",
            "{team} wins an early 3v3 fight in the top lane",
            "First blood goes to {team} after a jungle invade",
            "{team} wins a close fight near the dragon pit",
        ],
        EventType.PLAY: [
            "{team}'s mid laner roams successfully to the bottom lane",
            "{team}'s jungler executes a perfect gank in the top lane",
            "{team} shows superior wave management in the early phase",
            "{team}'s support makes a roaming play to mid lane",
        ],
    },
    GamePhase.MID_GAME: {
        EventType.OBJECTIVE: [
            "{team} secures the second dragon, giving them dragon advantage",
            "{team} takes the mid lane outer tower",
            "{team} uses herald to break open the mid lane",
            "{team} gets complete control of the enemy jungle",
        ],
        EventType.TEAMFIGHT: [
            "{team} comes out ahead in a major teamfight at the dragon pit",
            "A chaotic 5v5 in the mid lane ends with {team} on top",
            "{team} catches two enemies out of position and capitalizes",
            "{team} defends their tier 2 tower with a perfect engage",
        ],
        EventType.PLAY: [
            "{team} executes a perfect split push strategy",
            "{team}'s carry begins to show dominant item advantage",
            "{team} demonstrates superior vision control around objectives",
            "{team} makes a bold call to trade objectives across the map",
        ],
    },
    GamePhase.LATE_GAME: {
        EventType.OBJECTIVE: [
            "{team} secures the Elder Dragon after a tense standoff",
            "{team} takes Baron Nashor and gains the powerful buff",
            "{team} destroys an inhibitor, creating massive map pressure",
            "{team} completes their dragon soul, gaining a huge advantage",
        ],
        EventType.TEAMFIGHT: [
            "A game-changing teamfight goes in {team}'s favor",
            "{team} aces the enemy team in a decisive battle",
            "The final teamfight erupts and {team} emerges victorious",
            "{team} wins a critical 5v5 near the Baron pit",
        ],
        EventType.PLAY: [
            "{team} executes a beautiful flanking maneuver",
            "{team}'s carry delivers a pentakill performance",
            "{team} makes the decisive call that changes the game's momentum",
            "{team} shows perfect teamwork in the final moments of the game",
        ],
    },
}

# Minute at which each phase starts
PHASE_OFFSETS = {
    GamePhase.EARLY_GAME: 0,
    GamePhase.MID_GAME: 15,
    GamePhase.LATE_GAME: 25,
}


def win_probability(perf_a: TeamPerformance, perf_b: TeamPerformance) -> float:
    """Chance that team A is favored in any single event, kept within 0.3-0.7"""
    advantage = perf_a.overall - perf_b.overall
    return min(0.7, max(0.3, 0.5 + advantage / 100))


class EventGenerator:
    """Produces the events of one game phase"""

    MAX_TIME_VARIATION = 4  # minutes
    EVENT_TYPES = (EventType.OBJECTIVE, EventType.TEAMFIGHT, EventType.PLAY)

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else make_rng()

    def generate(
        self,
        phase: GamePhase,
        count: int,
        team_a: TeamAccount,
        team_b: TeamAccount,
        perf_a: TeamPerformance,
        perf_b: TeamPerformance,
    ) -> list[SimulationEvent]:
        team_a_prob = win_probability(perf_a, perf_b)
        offset = PHASE_OFFSETS[phase]

        events = []
        for i in range(count):
            event_type = self.rng.choice(self.EVENT_TYPES)
            favored = TeamSide.TEAM_A if self.rng.random() < team_a_prob else TeamSide.TEAM_B
            team = team_a if favored == TeamSide.TEAM_A else team_b

            template = self.rng.choice(EVENT_TEMPLATES[phase][event_type])
            time = offset + i + self.rng.randint(0, self.MAX_TIME_VARIATION)

            events.append(SimulationEvent(
                time=time,
                type=event_type,
                phase=phase,
                description=template.format(team=team.name),
                favored_team=favored,
                impact=self.rng.randint(1, 3),
            ))

        events.sort(key=lambda e: e.time)
        return events
