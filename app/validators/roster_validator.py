from dataclasses import replace

from app.models.player import PlayerAccount, Position

ATTRIBUTES = ("mechanical", "game_knowledge", "team_communication", "adaptability", "consistency", "form")


class RosterValidator:
    @staticmethod
    def clamp_player(player: PlayerAccount) -> PlayerAccount:
        """Return a copy of the player with every attribute clamped to 0-100"""
        changes = {}
        for name in ATTRIBUTES:
            value = getattr(player, name)
            if value is not None and not 0 <= value <= 100:
                changes[name] = max(0, min(100, value))
        return replace(player, **changes) if changes else player

    @classmethod
    def clamp_roster(cls, roster: list[PlayerAccount]) -> list[PlayerAccount]:
        return [cls.clamp_player(p) for p in roster]

    @staticmethod
    def _check_players(players: list[PlayerAccount], errors: list, warnings: list):
        """Duplicate ids are errors; out-of-range attributes and unknown positions are warnings"""
        seen = set()
        for player in players:
            if player.id in seen:
                errors.append(f"Player {player.id} appears more than once")
            seen.add(player.id)

            out_of_range = [
                name for name in ATTRIBUTES
                if getattr(player, name) is not None and not 0 <= getattr(player, name) <= 100
            ]
            if out_of_range:
                warnings.append(f"{player.name}: {', '.join(out_of_range)} outside 0-100")

            if player.position and not Position.is_known_label(player.position):
                warnings.append(f"{player.name}: unrecognised position '{player.position}'")

    @classmethod
    def validate(cls, roster_a: list[PlayerAccount], roster_b: list[PlayerAccount]) -> dict:
        """
        Validate two rosters before a match.

        Rules:
        1. Each side fields at least 1 player
        2. No player appears twice, within or across rosters
        Warnings (do not block the match):
        - attributes outside 0-100 (they will be clamped)
        - unrecognised position labels (treated as "other")
        """
        errors = []
        warnings = []

        if not roster_a:
            errors.append("Team A must field at least 1 player")
        if not roster_b:
            errors.append("Team B must field at least 1 player")

        cls._check_players(list(roster_a) + list(roster_b), errors, warnings)

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings,
            "breakdown": {
                "team_a_players": len(roster_a),
                "team_b_players": len(roster_b),
                "positions": {
                    position.value: sum(1 for p in list(roster_a) + list(roster_b) if p.role == position)
                    for position in Position
                },
            },
        }

    @classmethod
    def validate_rosters(cls, rosters: dict[str, list[PlayerAccount]]) -> dict:
        """
        Validate every roster entered in a tournament.
        Same rules as validate(), applied across all teams: a player may
        only be registered once in the whole tournament.
        """
        errors = []
        warnings = []

        for team_id, roster in rosters.items():
            if not roster:
                errors.append(f"Team {team_id} must field at least 1 player")

        cls._check_players([p for roster in rosters.values() for p in roster], errors, warnings)

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings,
            "breakdown": {team_id: len(roster) for team_id, roster in rosters.items()},
        }
