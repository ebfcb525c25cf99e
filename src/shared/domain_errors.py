"""
Domain Exception Classes

Exception hierarchy for the squad simulation core.
Every error carries a machine-readable code, a human-readable message,
and a details dict describing which rule was broken.
"""

from typing import Optional, Dict, Any


class DomainError(Exception):
    """
    Base exception for all squad simulation errors.

    Provides error code support and structured error messages.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Error code for programmatic handling (class default if omitted)
            details: Extra context (player ids, counts, positions)
        """
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with the error code."""
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses"""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details
        }


# ============================================================================
# NOT FOUND
# ============================================================================

class NotFoundError(DomainError):
    """An identity was looked up in a collection that does not contain it."""

    error_code = "NOT_FOUND"


class PlayerNotFoundError(NotFoundError):
    """Player is not part of the squad being queried."""

    error_code = "PLAYER_NOT_FOUND"

    def __init__(self, player_id: str, team_id: Optional[str] = None):
        self.player_id = player_id
        self.team_id = team_id

        message = f"Player {player_id} not found"
        if team_id:
            message += f" in team {team_id}"

        super().__init__(message, details={"player_id": player_id, "team_id": team_id})


class TeamNotFoundError(NotFoundError):
    """Team identity is unknown."""

    error_code = "TEAM_NOT_FOUND"

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found", details={"team_id": team_id})


# ============================================================================
# VALIDATION
# ============================================================================

class ValidationError(DomainError):
    """A lineup, formation, tactic, or budget rule was violated."""

    error_code = "VALIDATION_FAILED"


class InvalidFormationError(ValidationError):
    """Formation is not one of the supported shapes."""

    error_code = "INVALID_FORMATION"

    def __init__(self, formation: Any):
        self.formation = formation
        super().__init__(
            f"Invalid formation: '{formation}'",
            details={"formation": str(formation)}
        )


class InsufficientPlayersError(ValidationError):
    """Not enough players to fill a starting eleven."""

    error_code = "INSUFFICIENT_PLAYERS"

    def __init__(self, required: int, available: int, reason: str = "Not enough players for lineup"):
        self.required = required
        self.available = available
        super().__init__(
            f"{reason}: need {required}, have {available}",
            details={"required": required, "available": available}
        )


class PlayerUnavailableError(ValidationError):
    """Starter is injured, suspended, away, or not fit enough."""

    error_code = "PLAYER_UNAVAILABLE"

    def __init__(self, player_id: str, player_name: str, status: str, fitness: float):
        self.player_id = player_id
        self.player_name = player_name
        super().__init__(
            f"Player {player_name} is unavailable (status={status}, fitness={fitness:.1f})",
            details={
                "player_id": player_id,
                "player_name": player_name,
                "status": status,
                "fitness": fitness
            }
        )


class PositionMismatchError(ValidationError):
    """Player was assigned a position they are not eligible for."""

    error_code = "POSITION_MISMATCH"

    def __init__(self, player_id: str, player_name: str, position: str):
        self.player_id = player_id
        self.player_name = player_name
        self.position = position
        super().__init__(
            f"Player {player_name} cannot play {position}",
            details={"player_id": player_id, "player_name": player_name, "position": position}
        )


class FormationRequirementError(ValidationError):
    """Assigned positions do not add up to the formation's requirements."""

    error_code = "FORMATION_MISMATCH"

    def __init__(self, formation: str, position: str, required: int, actual: int):
        self.formation = formation
        self.position = position
        self.required = required
        self.actual = actual
        super().__init__(
            f"Formation {formation} requires {required} {position}, got {actual}",
            details={
                "formation": formation,
                "position": position,
                "required": required,
                "actual": actual
            }
        )


class InvalidLineupError(ValidationError):
    """Lineup is structurally malformed (e.g. positions not parallel to starters)."""

    error_code = "INVALID_LINEUP"


class InvalidTacticsError(ValidationError):
    """Tactical setting outside its allowed values."""

    error_code = "INVALID_TACTICS"

    def __init__(self, setting: str, value: Any, allowed: str):
        self.setting = setting
        self.value = value
        super().__init__(
            f"{setting} must be {allowed}, got {value!r}",
            details={"setting": setting, "value": value, "allowed": allowed}
        )


class InvalidSimulationInputError(ValidationError):
    """Engine input outside its domain (negative minutes or intensity)."""

    error_code = "INVALID_INPUT"

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be >= 0, got {value}",
            details={"name": name, "value": value}
        )


class BudgetExceededError(ValidationError):
    """Transfer fee or wages exceed what the club can afford."""

    error_code = "BUDGET_EXCEEDED"

    def __init__(self, required: int, remaining: int, wages: bool = False):
        self.required = required
        self.remaining = remaining
        label = "wage budget" if wages else "transfer budget"
        super().__init__(
            f"Insufficient {label}: need {required}, have {remaining}",
            error_code="WAGE_BUDGET_EXCEEDED" if wages else None,
            details={"required": required, "remaining": remaining}
        )


# ============================================================================
# SQUAD MUTATION
# ============================================================================

class SquadError(DomainError):
    """Roster add/remove rule was violated."""

    error_code = "SQUAD_ERROR"


class SquadSizeLimitError(SquadError):
    """Roster is already at capacity."""

    error_code = "SQUAD_FULL"

    def __init__(self, team_id: str, limit: int):
        self.team_id = team_id
        self.limit = limit
        super().__init__(
            f"Squad size limit reached for team {team_id} ({limit} players)",
            details={"team_id": team_id, "limit": limit}
        )


class DuplicatePlayerError(SquadError):
    """Player is already on the roster."""

    error_code = "DUPLICATE_PLAYER"

    def __init__(self, player_id: str, team_id: str):
        self.player_id = player_id
        self.team_id = team_id
        super().__init__(
            f"Player {player_id} already in squad of team {team_id}",
            details={"player_id": player_id, "team_id": team_id}
        )
