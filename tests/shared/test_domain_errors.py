"""
Tests for the domain exception hierarchy
"""

import pytest

from shared.domain_errors import (
    BudgetExceededError,
    DomainError,
    DuplicatePlayerError,
    FormationRequirementError,
    InsufficientPlayersError,
    InvalidFormationError,
    InvalidLineupError,
    InvalidSimulationInputError,
    NotFoundError,
    PlayerNotFoundError,
    PlayerUnavailableError,
    SquadError,
    SquadSizeLimitError,
    TeamNotFoundError,
    ValidationError,
)


class TestDomainError:
    """Base error formatting"""

    def test_message_includes_code(self):
        error = DomainError("Something broke")
        assert str(error) == "[DOMAIN_ERROR] Something broke"

    def test_explicit_code_overrides_default(self):
        error = DomainError("Custom", error_code="CUSTOM")
        assert error.error_code == "CUSTOM"
        assert str(error) == "[CUSTOM] Custom"

    def test_to_dict(self):
        error = TeamNotFoundError("t9")
        assert error.to_dict() == {
            "code": "TEAM_NOT_FOUND",
            "message": "Team t9 not found",
            "details": {"team_id": "t9"},
        }

    def test_invalid_lineup_uses_base_constructor(self):
        error = InvalidLineupError("Bad lineup", details={"starters": 3})
        assert error.error_code == "INVALID_LINEUP"
        assert error.details == {"starters": 3}


class TestCategories:
    """Callers can catch by category"""

    @pytest.mark.parametrize("error,category", [
        (PlayerNotFoundError("p1"), NotFoundError),
        (TeamNotFoundError("t1"), NotFoundError),
        (InvalidFormationError("1-2-3"), ValidationError),
        (InsufficientPlayersError(11, 9), ValidationError),
        (PlayerUnavailableError("p1", "Ada Stone", "injured", 100.0), ValidationError),
        (FormationRequirementError("4-4-2", "DEF", 4, 3), ValidationError),
        (BudgetExceededError(10, 5), ValidationError),
        (InvalidSimulationInputError("intensity", -1), ValidationError),
        (SquadSizeLimitError("t1", 30), SquadError),
        (DuplicatePlayerError("p1", "t1"), SquadError),
    ])
    def test_category(self, error, category):
        assert isinstance(error, category)
        assert isinstance(error, DomainError)


class TestMessages:
    """Errors name what went wrong"""

    def test_insufficient_players(self):
        error = InsufficientPlayersError(11, 9)
        assert error.message == "Not enough players for lineup: need 11, have 9"
        assert error.details == {"required": 11, "available": 9}

    def test_player_unavailable(self):
        error = PlayerUnavailableError("p1", "Ada Stone", "injured", 100.0)
        assert "Ada Stone" in error.message
        assert error.details["status"] == "injured"

    def test_budget_codes(self):
        assert BudgetExceededError(10, 5).error_code == "BUDGET_EXCEEDED"
        wage_error = BudgetExceededError(10, 5, wages=True)
        assert wage_error.error_code == "WAGE_BUDGET_EXCEEDED"
        assert "wage budget" in wage_error.message

    def test_codes_are_per_class(self):
        """Overriding the code on one instance leaves the class default alone"""
        BudgetExceededError(10, 5, wages=True)
        assert BudgetExceededError.error_code == "BUDGET_EXCEEDED"

    def test_invalid_input(self):
        error = InvalidSimulationInputError("minutes_played", -5)
        assert str(error) == "[INVALID_INPUT] minutes_played must be >= 0, got -5"
        assert error.details == {"name": "minutes_played", "value": -5}
