"""
Development Manager

Stochastic training gains and age-driven growth/decline.

All random decisions come from one random.Random instance owned by the
manager, drawn in a fixed order, so two managers built from the same seed
and fed the same call sequence produce identical attribute trajectories.
Pass ``rng`` to inject a custom stream (e.g. a mock in tests).
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from config.simulation_settings import SimulationSettings
from domain_events.player_events import PlayerTrainedEvent, PlayerProgressedEvent
from player_management.attributes import AttributeKind, TRAINABLE_ATTRIBUTES
from player_management.player import Player
from player_management.player_types import Position
from shared.domain_errors import InvalidSimulationInputError


class TrainingType(str, Enum):
    """Training session focus"""
    GENERAL = "general"
    TECHNICAL = "technical"
    PHYSICAL = "physical"
    TACTICAL = "tactical"
    SET_PIECES = "set_pieces"


TECHNICAL_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.PASSING,
    AttributeKind.BALL_CONTROL,
    AttributeKind.SHOOTING,
)

PHYSICAL_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.SPEED,
    AttributeKind.STAMINA,
    AttributeKind.HEADING,
)

TACTICAL_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.PERCEPTION,
    AttributeKind.TACKLING,
)

SET_PIECE_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.HEADING,
    AttributeKind.SHOOTING,
)

GOALKEEPER_SET_PIECE_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.KEEPING,
)

# Attributes young players pick up naturally
YOUTH_GROWTH_ATTRIBUTES: Tuple[AttributeKind, ...] = (
    AttributeKind.PASSING,
    AttributeKind.BALL_CONTROL,
    AttributeKind.PERCEPTION,
    AttributeKind.TACKLING,
)

# Chance multipliers per training focus
PHYSICAL_CHANCE_FACTOR = 0.8
SET_PIECE_CHANCE_FACTOR = 0.7
GENERAL_CHANCE_FACTOR = 0.5

PHYSICAL_DECLINE_FLOOR = 30


@dataclass
class TrainingResult:
    """Outcome of one training session"""
    training_type: TrainingType
    attribute_changes: Dict[AttributeKind, int] = field(default_factory=dict)
    fitness_change: float = 0.0
    morale_change: float = 0.0

    def total_gain(self) -> int:
        return sum(self.attribute_changes.values())


class DevelopmentManager:
    """Handles player growth through training and natural aging"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: int = SimulationSettings.DEVELOPMENT_SEED,
        reference_date: Optional[date] = None
    ):
        """
        Initialize development manager.

        Args:
            rng: Random stream to draw from (a new Random(seed) if omitted)
            seed: Seed used when no rng is supplied
            reference_date: Date used for player ages (today if omitted)
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.reference_date = reference_date
        self.logger = logging.getLogger(__name__)

        self._training_handlers: Dict[TrainingType, Callable[[Player, float, TrainingResult], None]] = {
            TrainingType.GENERAL: self._train_general,
            TrainingType.TECHNICAL: self._train_technical,
            TrainingType.PHYSICAL: self._train_physical,
            TrainingType.TACTICAL: self._train_tactical,
            TrainingType.SET_PIECES: self._train_set_pieces,
        }

    def _age(self, player: Player) -> int:
        return player.age(self.reference_date)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def process_training(
        self,
        player: Player,
        training_type: Union[TrainingType, str],
        intensity: float
    ) -> TrainingResult:
        """
        Apply one training session to a player.

        Attribute gains, the fitness cost (5 x intensity), and the morale
        effect are written to the player and reported in the result.

        Args:
            player: Player being trained
            training_type: Session focus (unknown values train as GENERAL)
            intensity: Session intensity, normally 0.0-1.0

        Returns:
            TrainingResult with the changes applied

        Raises:
            InvalidSimulationInputError: If intensity is negative
        """
        if intensity < 0:
            raise InvalidSimulationInputError("intensity", intensity)

        training_type = self._resolve_training_type(training_type)
        result = TrainingResult(training_type=training_type)

        chance = self.calculate_improvement_chance(player)
        self._training_handlers[training_type](player, chance, result)

        result.fitness_change = -SimulationSettings.TRAINING_FITNESS_COST * intensity

        # Players like moderate training
        if intensity < 0.7:
            result.morale_change = 2.0
        elif intensity > 0.9:
            result.morale_change = -3.0

        player.fitness = player.fitness + result.fitness_change
        player.adjust_morale(result.morale_change)

        gains = {kind.value: gain for kind, gain in result.attribute_changes.items()}
        player.record_event(PlayerTrainedEvent(
            player_id=player.player_id,
            training_type=training_type.value,
            attribute_gains=gains
        ))

        self.logger.debug(
            f"{player.full_name} trained {training_type.value} @ {intensity:.2f}: "
            f"chance={chance:.3f}, gains={gains}"
        )
        return result

    def _resolve_training_type(self, training_type: Union[TrainingType, str]) -> TrainingType:
        if isinstance(training_type, TrainingType):
            return training_type
        try:
            return TrainingType(training_type)
        except ValueError:
            self.logger.warning(f"Unknown training type {training_type!r}, using general training")
            return TrainingType.GENERAL

    def calculate_improvement_chance(self, player: Player) -> float:
        """
        Probability that a tested attribute improves during training.

        Base chance by age bracket, scaled by potential, professionalism,
        and morale.
        """
        age = self._age(player)

        if age < 21:
            base_chance = 0.8
        elif age < 25:
            base_chance = 0.6
        elif age < 28:
            base_chance = 0.4
        elif age < 32:
            base_chance = 0.2
        else:
            base_chance = 0.05

        base_chance *= player.attributes.potential / 100
        base_chance *= 0.5 + 0.5 * (player.attributes.professionalism / 100)
        base_chance *= 0.8 + 0.2 * (player.morale / 100)

        return base_chance

    def calculate_improvement(self, current_value: int) -> int:
        """
        Improvement amount for an attribute at ``current_value``.

        Higher attributes are harder to improve:
            >= 95: never
            >= 90: 10% chance of +1
            >= 80: 30% chance of +1
            below: +1 or +2
        """
        if current_value >= 95:
            return 0
        if current_value >= 90:
            return 1 if self.rng.random() < 0.1 else 0
        if current_value >= 80:
            return 1 if self.rng.random() < 0.3 else 0
        return 1 + self.rng.randrange(2)

    def _test_attribute(self, player: Player, kind: AttributeKind, chance: float, result: TrainingResult) -> None:
        # Gate draw first, then any draws inside calculate_improvement()
        if self.rng.random() >= chance:
            return

        improvement = self.calculate_improvement(player.attributes.get(kind))
        if improvement <= 0:
            return

        applied = player.attributes.adjust(kind, improvement)
        if applied:
            result.attribute_changes[kind] = result.attribute_changes.get(kind, 0) + applied

    def _train_attributes(
        self,
        player: Player,
        kinds: Sequence[AttributeKind],
        chance: float,
        result: TrainingResult
    ) -> None:
        for kind in kinds:
            self._test_attribute(player, kind, chance, result)

    def _train_technical(self, player: Player, chance: float, result: TrainingResult) -> None:
        self._train_attributes(player, TECHNICAL_ATTRIBUTES, chance, result)

    def _train_physical(self, player: Player, chance: float, result: TrainingResult) -> None:
        # Physical attributes are harder to improve
        self._train_attributes(player, PHYSICAL_ATTRIBUTES, chance * PHYSICAL_CHANCE_FACTOR, result)

    def _train_tactical(self, player: Player, chance: float, result: TrainingResult) -> None:
        self._train_attributes(player, TACTICAL_ATTRIBUTES, chance, result)

    def _train_set_pieces(self, player: Player, chance: float, result: TrainingResult) -> None:
        if player.position == Position.GK:
            self._train_attributes(player, GOALKEEPER_SET_PIECE_ATTRIBUTES, chance, result)
        else:
            self._train_attributes(player, SET_PIECE_ATTRIBUTES, chance * SET_PIECE_CHANCE_FACTOR, result)

    def _train_general(self, player: Player, chance: float, result: TrainingResult) -> None:
        # 2-3 picks drawn with replacement; the same attribute may be tested twice
        num_attrs = 2 + self.rng.randrange(2)
        for _ in range(num_attrs):
            kind = TRAINABLE_ATTRIBUTES[self.rng.randrange(len(TRAINABLE_ATTRIBUTES))]
            self._test_attribute(player, kind, chance * GENERAL_CHANCE_FACTOR, result)

    # ------------------------------------------------------------------
    # Natural development
    # ------------------------------------------------------------------

    def process_natural_development(self, player: Player) -> Dict[AttributeKind, int]:
        """
        Apply one aging tick: growth for under-23s, decline for over-30s.

        Quality is recomputed from the position rating afterwards.

        Returns:
            Attribute changes applied during the tick
        """
        age = self._age(player)
        changes: Dict[AttributeKind, int] = {}

        if age < 23:
            self._young_player_development(player, changes)
        elif age > 30:
            self._veteran_decline(player, age, changes)

        player.attributes.set(AttributeKind.QUALITY, player.overall_rating())

        if changes:
            player.record_event(PlayerProgressedEvent(
                player_id=player.player_id,
                attribute_changes={kind.value: delta for kind, delta in changes.items()},
                quality=player.attributes.quality
            ))
            self.logger.debug(
                f"{player.full_name} (age {age}) natural development: {changes}"
            )

        return changes

    @staticmethod
    def _apply_change(player: Player, kind: AttributeKind, delta: int, changes: Dict[AttributeKind, int]) -> None:
        applied = player.attributes.adjust(kind, delta)
        if applied:
            changes[kind] = changes.get(kind, 0) + applied

    def _young_player_development(self, player: Player, changes: Dict[AttributeKind, int]) -> None:
        # Physical growth
        if self.rng.random() < 0.3:
            self._apply_change(player, AttributeKind.SPEED, 1, changes)
            self._apply_change(player, AttributeKind.STAMINA, 1, changes)

        # Natural improvement based on potential
        if self.rng.random() < player.attributes.potential / 200:
            kind = YOUTH_GROWTH_ATTRIBUTES[self.rng.randrange(len(YOUTH_GROWTH_ATTRIBUTES))]
            self._apply_change(player, kind, 1, changes)

    def _veteran_decline(self, player: Player, age: int, changes: Dict[AttributeKind, int]) -> None:
        decline_rate = (age - 30) * 0.05

        if self.rng.random() < decline_rate:
            self._decline(player, AttributeKind.SPEED, changes)
        if self.rng.random() < decline_rate * 0.8:
            self._decline(player, AttributeKind.STAMINA, changes)

        # Experience still counts
        if self.rng.random() < 0.2:
            self._apply_change(player, AttributeKind.PERCEPTION, 1, changes)

    def _decline(self, player: Player, kind: AttributeKind, changes: Dict[AttributeKind, int]) -> None:
        # Never pushes a value below the floor; values already below it stay put
        if player.attributes.get(kind) > PHYSICAL_DECLINE_FLOOR:
            self._apply_change(player, kind, -1, changes)
