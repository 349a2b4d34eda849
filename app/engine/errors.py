"""
Exceptions raised by the match simulation engine
"""
from typing import Optional


class SimulationError(Exception):
    """Base class for simulation failures"""


class EmptyRosterError(SimulationError, ValueError):
    """A team performance was requested for a roster with no players"""

    def __init__(self, team_name: Optional[str] = None, message: Optional[str] = None):
        self.team_name = team_name
        if message is None:
            message = f"Team {team_name} has no players" if team_name else "Roster is empty"
        super().__init__(message)


class InsufficientRosterError(EmptyRosterError):
    """A match cannot start because one side fielded no players"""

    def __init__(self, team_name: Optional[str] = None):
        super().__init__(
            team_name,
            "Both teams must have at least one player to simulate a match "
            f"({team_name or 'unknown team'} has none)",
        )


class MissingPerformanceDataError(SimulationError, KeyError):
    """A roster player has no entry in the computed player performances"""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"No performance data for player {player_id}")


class AudioGenerationError(SimulationError):
    """The text-to-speech service could not produce audio for a line"""


class RecorderError(SimulationError):
    """A match result payload could not be stored"""
