"""
Lineup Validator

Checks a Lineup against a roster and its formation. Validation runs in
three stages and stops at the first failure:

    1. Structure: exactly 11 distinct starters, one position per starter
    2. Availability: every starter is on the roster and available
    3. Formation: valid formation, eligible positions, exact counts
"""

from typing import Mapping

from config.simulation_settings import SimulationSettings
from player_management.player import Player
from player_management.player_types import POSITION_ORDER
from shared.domain_errors import (
    FormationRequirementError,
    InsufficientPlayersError,
    InvalidLineupError,
    PlayerNotFoundError,
    PlayerUnavailableError,
    PositionMismatchError,
)
from team_management.formation import Formation, Lineup


class LineupValidator:
    """Validates lineups against roster availability and formation rules."""

    @staticmethod
    def validate(lineup: Lineup, roster: Mapping[str, Player], team_id: str = None) -> None:
        """
        Validate a lineup, raising on the first broken rule.

        Args:
            lineup: Lineup to check
            roster: Mapping of player_id -> Player for the owning team
            team_id: Owning team (used in not-found errors)

        Raises:
            InsufficientPlayersError: Fewer than 11 distinct starters
            InvalidLineupError: Malformed lineup (positions/starters mismatch, too many subs)
            PlayerNotFoundError: Starter not on the roster
            PlayerUnavailableError: Starter injured, suspended, or unfit
            InvalidFormationError: Unsupported formation
            PositionMismatchError: Starter assigned a position they cannot play
            FormationRequirementError: Position counts differ from the formation
        """
        LineupValidator.validate_structure(lineup)
        LineupValidator.validate_availability(lineup, roster, team_id)
        LineupValidator.validate_formation(lineup, roster)

    @staticmethod
    def validate_structure(lineup: Lineup) -> None:
        """Stage 1: starter count and shape."""
        required = SimulationSettings.STARTERS
        distinct = len(set(lineup.starters))

        if len(lineup.starters) != required or distinct != required:
            raise InsufficientPlayersError(
                required=required,
                available=distinct,
                reason="Lineup must have exactly 11 distinct starters"
            )

        if len(lineup.positions) != len(lineup.starters):
            raise InvalidLineupError(
                f"Lineup has {len(lineup.positions)} positions for {len(lineup.starters)} starters",
                details={"positions": len(lineup.positions), "starters": len(lineup.starters)}
            )

        if len(lineup.substitutes) > SimulationSettings.MAX_SUBSTITUTES:
            raise InvalidLineupError(
                f"Lineup has {len(lineup.substitutes)} substitutes, "
                f"maximum is {SimulationSettings.MAX_SUBSTITUTES}",
                details={"substitutes": len(lineup.substitutes)}
            )

    @staticmethod
    def validate_availability(lineup: Lineup, roster: Mapping[str, Player], team_id: str = None) -> None:
        """Stage 2: every starter exists and can be selected."""
        for player_id in lineup.starters:
            player = roster.get(player_id)
            if player is None:
                raise PlayerNotFoundError(player_id, team_id)
            if not player.is_available():
                raise PlayerUnavailableError(
                    player_id=player.player_id,
                    player_name=player.full_name,
                    status=player.status.value,
                    fitness=player.fitness
                )

    @staticmethod
    def validate_formation(lineup: Lineup, roster: Mapping[str, Player]) -> None:
        """Stage 3: formation, per-player eligibility, per-position counts."""
        formation = Formation.parse(lineup.formation)

        for player_id, position in lineup.assignments():
            player = roster[player_id]
            if not player.can_play_position(position):
                raise PositionMismatchError(
                    player_id=player.player_id,
                    player_name=player.full_name,
                    position=position.value
                )

        requirements = formation.position_requirements()
        counts = lineup.position_counts()
        for position in POSITION_ORDER:
            required = requirements.get(position, 0)
            actual = counts.get(position, 0)
            if actual != required:
                raise FormationRequirementError(
                    formation=formation.value,
                    position=position.value,
                    required=required,
                    actual=actual
                )
