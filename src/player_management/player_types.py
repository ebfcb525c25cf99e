"""
Player Type Definitions

Position and status enumerations shared by the player and team packages.
"""

from enum import Enum
from typing import Tuple


class Position(str, Enum):
    """Playing positions"""
    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


class PlayerStatus(str, Enum):
    """Player availability status"""
    AVAILABLE = "available"
    INJURED = "injured"
    SUSPENDED = "suspended"
    ON_LOAN = "on_loan"
    RETIRED = "retired"


# Selection priority: goalkeeper first, forwards last
POSITION_ORDER: Tuple[Position, ...] = (
    Position.GK,
    Position.DEF,
    Position.MID,
    Position.FWD,
)
