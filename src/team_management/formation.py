"""
Formation and Lineup Definitions

Supported formations, their per-position starter requirements, and the
Lineup record a team submits before a match.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from player_management.player_types import Position
from shared.domain_errors import InvalidFormationError, InvalidLineupError


class Formation(str, Enum):
    """Team formations"""
    F_4_4_2 = "4-4-2"
    F_4_3_3 = "4-3-3"
    F_4_5_1 = "4-5-1"
    F_3_5_2 = "3-5-2"
    F_5_3_2 = "5-3-2"
    F_4_2_3_1 = "4-2-3-1"
    F_4_3_1_2 = "4-3-1-2"

    @classmethod
    def default(cls) -> "Formation":
        return cls.F_4_4_2

    @classmethod
    def is_valid(cls, value: Union["Formation", str]) -> bool:
        """Check if a formation (member or raw string) is supported."""
        try:
            cls(value)
        except ValueError:
            return False
        return True

    @classmethod
    def parse(cls, value: Union["Formation", str]) -> "Formation":
        """
        Convert a raw value to a Formation.

        Raises:
            InvalidFormationError: If the value is not a supported formation
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidFormationError(value)

    def position_requirements(self) -> Dict[Position, int]:
        """Starters required per position (a copy; always sums to 11)."""
        return dict(FORMATION_REQUIREMENTS[self])

    def strength_against(self, opponent: Union["Formation", str]) -> float:
        """
        Rock-paper-scissors effectiveness multiplier against an opponent.

        Returns:
            Multiplier (1.0 when no matchup advantage is defined)

        Raises:
            InvalidFormationError: If the opponent is not a supported formation
        """
        return FORMATION_MATCHUPS.get(self, {}).get(Formation.parse(opponent), 1.0)

    def __str__(self) -> str:
        return self.value


# Starters per position (GK, DEF, MID, FWD)
FORMATION_REQUIREMENTS: Dict[Formation, Dict[Position, int]] = {
    Formation.F_4_4_2: {Position.GK: 1, Position.DEF: 4, Position.MID: 4, Position.FWD: 2},
    Formation.F_4_3_3: {Position.GK: 1, Position.DEF: 4, Position.MID: 3, Position.FWD: 3},
    Formation.F_4_5_1: {Position.GK: 1, Position.DEF: 4, Position.MID: 5, Position.FWD: 1},
    Formation.F_3_5_2: {Position.GK: 1, Position.DEF: 3, Position.MID: 5, Position.FWD: 2},
    Formation.F_5_3_2: {Position.GK: 1, Position.DEF: 5, Position.MID: 3, Position.FWD: 2},
    Formation.F_4_2_3_1: {Position.GK: 1, Position.DEF: 4, Position.MID: 5, Position.FWD: 1},  # 2 DM + 3 AM
    Formation.F_4_3_1_2: {Position.GK: 1, Position.DEF: 4, Position.MID: 4, Position.FWD: 2},  # 3 CM + 1 AM
}

FORMATION_MATCHUPS: Dict[Formation, Dict[Formation, float]] = {
    Formation.F_4_4_2: {
        Formation.F_4_3_3: 0.9,
        Formation.F_4_5_1: 1.1,
        Formation.F_3_5_2: 1.0,
    },
    Formation.F_4_3_3: {
        Formation.F_4_4_2: 1.1,
        Formation.F_4_5_1: 0.9,
        Formation.F_5_3_2: 1.1,
    },
    Formation.F_4_5_1: {
        Formation.F_4_3_3: 1.1,
        Formation.F_4_4_2: 0.9,
        Formation.F_3_5_2: 1.0,
    },
    Formation.F_3_5_2: {
        Formation.F_4_4_2: 1.0,
        Formation.F_5_3_2: 0.9,
        Formation.F_4_3_3: 0.9,
    },
    Formation.F_5_3_2: {
        Formation.F_4_3_3: 0.9,
        Formation.F_3_5_2: 1.1,
        Formation.F_4_4_2: 1.0,
    },
}


@dataclass
class Lineup:
    """
    Match lineup.

    ``positions[i]`` is the position assigned to ``starters[i]``.
    ``formation`` may hold a raw string until it is validated.
    """
    formation: Union[Formation, str]
    starters: List[str] = field(default_factory=list)
    positions: List[Position] = field(default_factory=list)
    substitutes: List[str] = field(default_factory=list)
    captain: Optional[str] = None

    def __post_init__(self):
        positions = []
        for position in self.positions:
            try:
                positions.append(Position(position))
            except ValueError:
                raise InvalidLineupError(
                    f"Unknown position {position!r}",
                    details={"position": str(position)}
                )
        self.positions = positions

    def assignments(self) -> List[Tuple[str, Position]]:
        """Starter ids paired with their assigned positions."""
        return list(zip(self.starters, self.positions))

    def players(self) -> List[str]:
        """Every player id in the lineup (starters first, then bench)."""
        return list(self.starters) + list(self.substitutes)

    def position_counts(self) -> Dict[Position, int]:
        counts: Dict[Position, int] = {}
        for position in self.positions:
            counts[position] = counts.get(position, 0) + 1
        return counts
