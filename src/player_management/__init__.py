"""
Player Management

Player aggregate plus the engines that evolve it over a season.

Main Components:
- Attributes / AttributeKind: 0-100 skills and position ratings
- Player: identity, status, fitness/morale/form, career stats
- FitnessManager: match fatigue, daily recovery, injury risk
- DevelopmentManager: seeded training gains and natural aging

Usage:
    from player_management import Player, Position, DevelopmentManager, TrainingType

    player = Player("p1", "Ada", "Stone", Position.MID, date(2004, 5, 1))
    DevelopmentManager(seed=42).process_training(player, TrainingType.TECHNICAL, 0.5)
"""

from player_management.player_types import Position, PlayerStatus, POSITION_ORDER
from player_management.attributes import (
    Attributes,
    AttributeKind,
    TRAINABLE_ATTRIBUTES,
)
from player_management.player import Player, CareerStats, SeasonStats
from player_management.fitness_manager import FitnessManager
from player_management.development_manager import (
    DevelopmentManager,
    TrainingType,
    TrainingResult,
)

__all__ = [
    'Position',
    'PlayerStatus',
    'POSITION_ORDER',
    'Attributes',
    'AttributeKind',
    'TRAINABLE_ATTRIBUTES',
    'Player',
    'CareerStats',
    'SeasonStats',
    'FitnessManager',
    'DevelopmentManager',
    'TrainingType',
    'TrainingResult',
]
