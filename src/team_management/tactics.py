"""
Team Tactics

Tactical configuration a team carries into matches. Values are validated
on construction so an out-of-range slider never reaches the match engine.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

from shared.domain_errors import InvalidTacticsError


class Mentality(str, Enum):
    DEFENSIVE = "defensive"
    BALANCED = "balanced"
    ATTACKING = "attacking"


class PassingStyle(str, Enum):
    SHORT = "short"
    MIXED = "mixed"
    DIRECT = "direct"


SLIDER_MIN = 0
SLIDER_MAX = 100


@dataclass
class TeamTactics:
    """
    Team tactical settings.

    Sliders (pressing, tempo, width, defensive_line) run 0-100 where 50 is
    neutral. Mentality and passing style accept enum members or their
    string values.
    """
    mentality: Mentality = Mentality.BALANCED
    pressing: int = 50
    tempo: int = 50
    width: int = 50
    defensive_line: int = 50
    passing_style: PassingStyle = PassingStyle.MIXED

    def __post_init__(self):
        """Validate and normalize settings."""
        self.mentality = self._coerce(Mentality, "mentality", self.mentality)
        self.passing_style = self._coerce(PassingStyle, "passing_style", self.passing_style)

        for name in ("pressing", "tempo", "width", "defensive_line"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidTacticsError(name, value, f"a number {SLIDER_MIN}-{SLIDER_MAX}")
            if not SLIDER_MIN <= value <= SLIDER_MAX:
                raise InvalidTacticsError(name, value, f"between {SLIDER_MIN} and {SLIDER_MAX}")

    @staticmethod
    def _coerce(enum_cls, name: str, value: Any):
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise InvalidTacticsError(name, value, f"one of: {allowed}")

    @property
    def is_attacking(self) -> bool:
        return self.mentality == Mentality.ATTACKING

    @property
    def is_defensive(self) -> bool:
        return self.mentality == Mentality.DEFENSIVE

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mentality"] = self.mentality.value
        data["passing_style"] = self.passing_style.value
        return data


def default_tactics() -> TeamTactics:
    """Balanced tactics with every slider at 50."""
    return TeamTactics()
