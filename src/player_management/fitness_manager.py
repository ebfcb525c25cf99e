"""
Fitness Manager

Match fatigue, daily recovery, and injury risk as pure functions of a
player's current state. The only mutation entry points are
apply_match_fitness() and apply_daily_recovery(), which write the result
back to Player.fitness (clamped by the player).

Injury risk is a probability only; deciding whether an injury happens
belongs to the match engine.
"""

import logging
from datetime import date
from typing import Dict, Optional

from config.simulation_settings import SimulationSettings
from player_management.player import Player
from player_management.player_types import Position
from shared.domain_errors import InvalidSimulationInputError


# Fatigue multiplier by position (midfielders cover the most ground)
POSITION_FATIGUE_FACTORS: Dict[Position, float] = {
    Position.GK: 0.6,
    Position.DEF: 0.85,
    Position.MID: 1.15,
    Position.FWD: 1.0,
}


class FitnessManager:
    """Handles player fitness calculations"""

    def __init__(
        self,
        fatigue_rate: float = SimulationSettings.FATIGUE_RATE,
        recovery_rate: float = SimulationSettings.RECOVERY_RATE,
        injury_threshold: float = SimulationSettings.INJURY_THRESHOLD,
        reference_date: Optional[date] = None
    ):
        """
        Initialize fitness manager.

        Args:
            fatigue_rate: Base fatigue per minute played
            recovery_rate: Base recovery per day
            injury_threshold: Fitness below which injury risk increases
            reference_date: Date used for player ages (today if omitted)
        """
        self.fatigue_rate = fatigue_rate
        self.recovery_rate = recovery_rate
        self.injury_threshold = injury_threshold
        self.reference_date = reference_date
        self.logger = logging.getLogger(__name__)

    def _age(self, player: Player) -> int:
        return player.age(self.reference_date)

    def calculate_match_fatigue(self, player: Player, minutes_played: int, intensity: float) -> float:
        """
        Calculate fitness loss from a match.

        Args:
            player: Player who took part
            minutes_played: Minutes on the pitch
            intensity: Match intensity multiplier (1.0 = normal)

        Returns:
            Fatigue points, capped at MAX_MATCH_FATIGUE (0 when minutes_played is 0)

        Raises:
            InvalidSimulationInputError: If minutes_played or intensity is negative
        """
        if minutes_played < 0:
            raise InvalidSimulationInputError("minutes_played", minutes_played)
        if intensity < 0:
            raise InvalidSimulationInputError("intensity", intensity)
        if minutes_played == 0:
            return 0.0

        fatigue = minutes_played * self.fatigue_rate
        fatigue *= intensity

        # Stamina reduces fatigue
        stamina_mod = 1.5 - (player.attributes.stamina / 100)
        fatigue *= stamina_mod

        age = self._age(player)
        if age > 30:
            fatigue *= 1.0 + (age - 30) * 0.05

        fatigue *= POSITION_FATIGUE_FACTORS.get(player.position, 1.0)

        return min(fatigue, SimulationSettings.MAX_MATCH_FATIGUE)

    def calculate_daily_recovery(self, player: Player, training_intensity: float) -> float:
        """
        Calculate fitness recovered in one day.

        Args:
            player: Player recovering
            training_intensity: Intensity of the day's training (0.0-1.0)

        Returns:
            Recovery points
        """
        if training_intensity < 0:
            raise InvalidSimulationInputError("training_intensity", training_intensity)

        recovery = self.recovery_rate
        recovery += player.attributes.stamina / 20

        age = self._age(player)
        if age < 23:
            recovery *= 1.2
        elif age > 30:
            recovery *= 0.9 - (age - 30) * 0.02

        # Harder training leaves less room to recover
        recovery *= (2 - training_intensity)

        recovery *= 1 + (player.attributes.professionalism / 200)

        return recovery

    def calculate_injury_risk(self, player: Player) -> float:
        """
        Calculate injury probability for the player's next exertion.

        Returns:
            Risk in [0, MAX_INJURY_RISK]
        """
        risk = 0.0

        if player.fitness < self.injury_threshold:
            risk += (self.injury_threshold - player.fitness) / 100

        age = self._age(player)
        if age > 30:
            risk += (age - 30) * 0.01

        return min(risk, SimulationSettings.MAX_INJURY_RISK)

    def apply_match_fitness(self, player: Player, minutes_played: int, intensity: float) -> float:
        """
        Subtract match fatigue from the player's fitness.

        Returns:
            The player's fitness after the match
        """
        fatigue = self.calculate_match_fatigue(player, minutes_played, intensity)
        player.fitness = player.fitness - fatigue
        self.logger.debug(
            f"{player.full_name}: -{fatigue:.2f} fitness after {minutes_played} min "
            f"(now {player.fitness:.1f})"
        )
        return player.fitness

    def apply_daily_recovery(self, player: Player, training_intensity: float) -> float:
        """
        Add one day of recovery to the player's fitness.

        Returns:
            The player's fitness after recovery
        """
        recovery = self.calculate_daily_recovery(player, training_intensity)
        player.fitness = player.fitness + recovery
        self.logger.debug(
            f"{player.full_name}: +{recovery:.2f} fitness recovered (now {player.fitness:.1f})"
        )
        return player.fitness
