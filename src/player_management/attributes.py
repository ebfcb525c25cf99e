"""
Player Attributes

Fifteen 0-100 skill values plus the position-weighted overall ratings
computed from them. Ratings are never stored (except ``quality``, which the
development engine refreshes); they are recomputed on every call.
"""

from dataclasses import dataclass, fields, asdict
from enum import Enum
from typing import Dict, Any, Tuple

from config.simulation_settings import SimulationSettings
from player_management.player_types import Position
from shared.player_utils import clamp_attribute


class AttributeKind(str, Enum):
    """Every attribute a player carries."""

    QUALITY = "Quality"

    # Technical
    KEEPING = "Keeping"
    TACKLING = "Tackling"
    PASSING = "Passing"
    SHOOTING = "Shooting"
    HEADING = "Heading"

    # Physical
    SPEED = "Speed"
    STAMINA = "Stamina"

    # Mental
    PERCEPTION = "Perception"
    BALL_CONTROL = "BallControl"

    # Hidden (affect development and consistency)
    CONSISTENCY = "Consistency"
    IMPORTANT_MATCHES = "ImportantMatches"
    POTENTIAL = "Potential"
    AMBITION = "Ambition"
    PROFESSIONALISM = "Professionalism"


# Dispatch table: attribute kind -> dataclass field
ATTRIBUTE_FIELDS: Dict[AttributeKind, str] = {
    AttributeKind.QUALITY: "quality",
    AttributeKind.KEEPING: "keeping",
    AttributeKind.TACKLING: "tackling",
    AttributeKind.PASSING: "passing",
    AttributeKind.SHOOTING: "shooting",
    AttributeKind.HEADING: "heading",
    AttributeKind.SPEED: "speed",
    AttributeKind.STAMINA: "stamina",
    AttributeKind.PERCEPTION: "perception",
    AttributeKind.BALL_CONTROL: "ball_control",
    AttributeKind.CONSISTENCY: "consistency",
    AttributeKind.IMPORTANT_MATCHES: "important_matches",
    AttributeKind.POTENTIAL: "potential",
    AttributeKind.AMBITION: "ambition",
    AttributeKind.PROFESSIONALISM: "professionalism",
}

VISIBLE_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.QUALITY,
    AttributeKind.KEEPING,
    AttributeKind.TACKLING,
    AttributeKind.PASSING,
    AttributeKind.SHOOTING,
    AttributeKind.HEADING,
    AttributeKind.SPEED,
    AttributeKind.STAMINA,
    AttributeKind.PERCEPTION,
    AttributeKind.BALL_CONTROL,
)

HIDDEN_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.CONSISTENCY,
    AttributeKind.IMPORTANT_MATCHES,
    AttributeKind.POTENTIAL,
    AttributeKind.AMBITION,
    AttributeKind.PROFESSIONALISM,
)

# Pool for general training; potential and professionalism are never trained
TRAINABLE_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.KEEPING,
    AttributeKind.TACKLING,
    AttributeKind.PASSING,
    AttributeKind.SHOOTING,
    AttributeKind.HEADING,
    AttributeKind.SPEED,
    AttributeKind.STAMINA,
    AttributeKind.PERCEPTION,
    AttributeKind.BALL_CONTROL,
)

# Peak ages used by can_improve()
PHYSICAL_PEAK_AGE = 28
TECHNICAL_PEAK_AGE = 32
DEFAULT_PEAK_AGE = 30

# Position-seeded starting values (keeping, tackling, passing, shooting,
# heading, speed, stamina, perception, ball_control)
POSITION_DEFAULTS: Dict[Position, Tuple[int, ...]] = {
    Position.GK: (70, 20, 50, 10, 30, 40, 70, 65, 30),
    Position.DEF: (20, 70, 55, 35, 65, 65, 75, 60, 50),
    Position.MID: (20, 55, 70, 55, 50, 70, 80, 70, 70),
    Position.FWD: (20, 30, 60, 75, 60, 75, 70, 65, 70),
}


@dataclass
class Attributes:
    """
    Player attributes on a 0-100 scale.

    Values outside the range are clamped on construction and on every
    set()/adjust() call.
    """

    quality: int = 65

    keeping: int = 50
    tackling: int = 50
    passing: int = 50
    shooting: int = 50
    heading: int = 50

    speed: int = 50
    stamina: int = 50

    perception: int = 50
    ball_control: int = 50

    consistency: int = 70
    important_matches: int = 70
    potential: int = 75
    ambition: int = 70
    professionalism: int = 70

    def __post_init__(self):
        """Clamp every field into the valid range"""
        for f in fields(self):
            setattr(self, f.name, self._clamp(getattr(self, f.name)))

    @staticmethod
    def _clamp(value: int) -> int:
        return clamp_attribute(
            value, SimulationSettings.ATTRIBUTE_MIN, SimulationSettings.ATTRIBUTE_MAX
        )

    @classmethod
    def for_position(cls, position: Position) -> "Attributes":
        """
        Create default attributes seeded by playing position.

        Args:
            position: Player's position

        Returns:
            Attributes with the position's technical/physical profile
        """
        attributes = cls()
        defaults = POSITION_DEFAULTS.get(position)
        if defaults is None:
            return attributes

        for kind, value in zip(TRAINABLE_ATTRIBUTES, defaults):
            attributes.set(kind, value)
        return attributes

    # ------------------------------------------------------------------
    # Enum-keyed access
    # ------------------------------------------------------------------

    def get(self, kind: AttributeKind) -> int:
        """Read an attribute by kind."""
        return getattr(self, ATTRIBUTE_FIELDS[kind])

    def set(self, kind: AttributeKind, value: int) -> int:
        """Write an attribute by kind (clamped). Returns the stored value."""
        stored = self._clamp(value)
        setattr(self, ATTRIBUTE_FIELDS[kind], stored)
        return stored

    def adjust(self, kind: AttributeKind, delta: int) -> int:
        """
        Add ``delta`` to an attribute, clamped to the valid range.

        Returns:
            The change actually applied (0 if already at a bound)
        """
        before = self.get(kind)
        after = self.set(kind, before + delta)
        return after - before

    # ------------------------------------------------------------------
    # Ratings
    # ------------------------------------------------------------------

    def goalkeeper_rating(self) -> int:
        """GK overall rating"""
        return int(
            self.keeping * 0.5
            + self.speed * 0.1
            + self.perception * 0.2
            + self.stamina * 0.1
            + self.passing * 0.1
        )

    def defender_rating(self) -> int:
        """DEF overall rating"""
        return int(
            self.tackling * 0.3
            + self.heading * 0.2
            + self.speed * 0.15
            + self.stamina * 0.15
            + self.passing * 0.1
            + self.perception * 0.1
        )

    def midfielder_rating(self) -> int:
        """MID overall rating"""
        return int(
            self.passing * 0.25
            + self.ball_control * 0.2
            + self.perception * 0.15
            + self.stamina * 0.15
            + self.tackling * 0.15
            + self.shooting * 0.1
        )

    def forward_rating(self) -> int:
        """FWD overall rating"""
        return int(
            self.shooting * 0.3
            + self.ball_control * 0.2
            + self.speed * 0.2
            + self.heading * 0.15
            + self.perception * 0.15
        )

    def rating_for(self, position: Position) -> int:
        """
        Overall rating for a position.

        Anything that is not one of the four positions falls back to the
        stored ``quality`` value.
        """
        if position == Position.GK:
            return self.goalkeeper_rating()
        if position == Position.DEF:
            return self.defender_rating()
        if position == Position.MID:
            return self.midfielder_rating()
        if position == Position.FWD:
            return self.forward_rating()
        return self.quality

    def can_improve(self, kind: AttributeKind, current_age: int) -> bool:
        """
        Check whether an attribute can still improve at a given age.

        Physical attributes peak earlier than technical/mental ones.
        """
        if kind in (AttributeKind.SPEED, AttributeKind.STAMINA):
            return current_age < PHYSICAL_PEAK_AGE
        if kind in (AttributeKind.PERCEPTION, AttributeKind.PASSING, AttributeKind.BALL_CONTROL):
            return current_age < TECHNICAL_PEAK_AGE
        return current_age < DEFAULT_PEAK_AGE

    def to_dict(self, include_hidden: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Args:
            include_hidden: False keeps only the scout-visible attributes
        """
        if include_hidden:
            return asdict(self)
        return {ATTRIBUTE_FIELDS[kind]: self.get(kind) for kind in VISIBLE_ATTRIBUTES}

    def hidden_profile(self) -> Dict[str, int]:
        """Attributes a scout cannot see (consistency, potential, ...)."""
        return {ATTRIBUTE_FIELDS[kind]: self.get(kind) for kind in HIDDEN_ATTRIBUTES}
