"""
Match commentary - a narrated projection of the event log and final stats
"""
from typing import Optional, Sequence

from app.config import settings
from app.models.team import TeamAccount
from app.engine.random_source import RandomSource, make_rng
from app.engine.types import (
    Commentary, EventType, GamePhase, MatchStats, SimulationEvent, TeamSide,
)


INTRO_PHRASES = {
    EventType.OBJECTIVE: [
        "OH! {team} manages to secure ",
        "In a brilliant play, {team} has taken ",
        "{team} finds the perfect timing to claim ",
        "With superior positioning, {team} grabs ",
    ],
    EventType.TEAMFIGHT: [
        "WHAT A FIGHT! {team} absolutely dominates ",
        "The teamfight erupts and {team} comes out on top during ",
        "{team} showcases their superior coordination in ",
        "An incredible display of mechanics as {team} wins ",
    ],
    EventType.PLAY: [
        "Beautiful execution by {team} with ",
        "{team} is showing why they're feared with ",
        "That's the kind of play we expect from {team}! ",
        "{other_team} had no answer for {team}'s ",
    ],
}

# Keyed by event impact
EXCLAMATIONS = {
    3: [
        "! INCREDIBLE!",
        "! That's going to be MASSIVE!",
        "! This could be a game-changing moment!",
        "! The crowd is going wild!",
    ],
    2: [
        "! That's a significant advantage!",
        "! They're looking strong now!",
        "! What a great play!",
        "! This puts them in a great position!",
    ],
    1: [
        ". A solid play.",
        ". They'll be happy with that.",
        ". That should help them moving forward.",
        ". A nice bit of map control.",
    ],
}

PHASE_FLAVOR = {
    GamePhase.EARLY_GAME: [
        " This early advantage could set the tone for the entire match.",
        " Getting ahead early is exactly what they needed.",
        " A great start for them in this important match.",
        " The early game is going according to plan.",
    ],
    GamePhase.MID_GAME: [
        " They're really hitting their power spike now.",
        " The mid game is where this team composition really shines.",
        " This is where the game can really swing one way or the other.",
        " Momentum is definitely on their side right now.",
    ],
    GamePhase.LATE_GAME: [
        " This late in the game, every move is critical.",
        " We're approaching those decisive moments now.",
        " With game-ending objectives on the map, this is huge.",
        " The tension is palpable as we reach the late game.",
    ],
}

MAX_EXCITEMENT = 5


def calculate_excitement(event: SimulationEvent) -> int:
    """Impact, plus one for late game and one for teamfights, capped at 5"""
    excitement = event.impact
    if event.phase == GamePhase.LATE_GAME:
        excitement += 1
    if event.type == EventType.TEAMFIGHT:
        excitement += 1
    return min(MAX_EXCITEMENT, excitement)


class MatchCommentator:
    """Generates the commentary feed for a simulated match"""

    def __init__(self, commentators: Optional[Sequence[str]] = None, rng: Optional[RandomSource] = None):
        names = list(commentators) if commentators else list(settings.COMMENTATORS)
        # Booth always has two voices
        while len(names) < 2:
            names.append(names[0] if names else "Caster")
        self.commentators = names
        self.rng = rng if rng is not None else make_rng()

    def generate_match_commentary(
        self,
        events: Sequence[SimulationEvent],
        team_a: TeamAccount,
        team_b: TeamAccount,
        stats: Optional[MatchStats] = None,
    ) -> list[Commentary]:
        commentary = [
            Commentary(
                time=0,
                text=(
                    f"Welcome to today's match between {team_a.name} and {team_b.name}! "
                    f"I'm {self.commentators[0]} joined by {self.commentators[1]}, "
                    "and we're excited to bring you all the action."
                ),
                phase=GamePhase.EARLY_GAME,
                excitement=4,
            )
        ]

        for event in events:
            commentary.append(Commentary(
                time=event.time,
                text=self.generate_event_commentary(event, team_a, team_b),
                phase=event.phase,
                excitement=calculate_excitement(event),
            ))

        if stats is not None:
            commentary.extend(self._conclusion(stats, team_a, team_b))

        return commentary

    def generate_event_commentary(self, event: SimulationEvent, team_a: TeamAccount, team_b: TeamAccount) -> str:
        """Intro phrase + event description + exclamation + phase colour"""
        if event.favored_team == TeamSide.TEAM_A:
            team, other_team = team_a.name, team_b.name
        else:
            team, other_team = team_b.name, team_a.name

        intro = self.rng.choice(INTRO_PHRASES[event.type]).format(team=team, other_team=other_team)
        exclamation = self.rng.choice(EXCLAMATIONS[max(1, min(3, event.impact))])
        flavor = self.rng.choice(PHASE_FLAVOR[event.phase])
        return intro + event.description.lower() + exclamation + flavor

    def _conclusion(self, stats: MatchStats, team_a: TeamAccount, team_b: TeamAccount) -> list[Commentary]:
        # Team B is called the winner when control scores are level
        if stats.team_a.control_score > stats.team_b.control_score:
            winning_team, mvp = team_a, stats.team_a.mvp
        else:
            winning_team, mvp = team_b, stats.team_b.mvp

        lines = [Commentary(
            time=stats.duration,
            text=(
                f"And that's going to be GG! {winning_team.name} takes the victory in "
                f"{stats.duration} minutes. What an incredible match!"
            ),
            phase=GamePhase.LATE_GAME,
            excitement=5,
        )]

        if mvp is not None:
            lines.append(Commentary(
                time=stats.duration + 1,
                text=(
                    f"Our MVP of the match is {mvp.name} with an outstanding performance "
                    f"on {mvp.position or mvp.role.value}. They really showed up huge today!"
                ),
                phase=GamePhase.LATE_GAME,
                excitement=4,
            ))
        return lines


def generate_match_commentary(
    events: Sequence[SimulationEvent],
    team_a: TeamAccount,
    team_b: TeamAccount,
    stats: Optional[MatchStats] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> list[Commentary]:
    return MatchCommentator(rng=rng).generate_match_commentary(events, team_a, team_b, stats)
