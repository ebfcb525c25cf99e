"""
Unit tests for FitnessManager
"""

import pytest

from player_management.fitness_manager import FitnessManager
from player_management.player_types import Position
from shared.domain_errors import InvalidSimulationInputError


@pytest.fixture
def manager(reference_date):
    """Fitness manager with default rates and a fixed date for ages."""
    return FitnessManager(reference_date=reference_date)


class TestMatchFatigue:
    """calculate_match_fatigue"""

    def test_midfielder_example(self, manager, make_player):
        """25-year-old MID, stamina 80, 90 minutes at normal intensity"""
        player = make_player(position=Position.MID, age=25, stamina=80)
        fatigue = manager.calculate_match_fatigue(player, 90, 1.0)
        # 90 * 0.15 * 1.0 * (1.5 - 0.8) * 1.15
        assert fatigue == pytest.approx(10.8675)

    def test_zero_minutes(self, manager, make_player):
        assert manager.calculate_match_fatigue(make_player(), 0, 1.0) == 0

    def test_age_penalty_over_30(self, manager, make_player):
        young = make_player(position=Position.FWD, age=30, stamina=50)
        old = make_player(position=Position.FWD, age=34, stamina=50)
        base = manager.calculate_match_fatigue(young, 90, 1.0)
        assert manager.calculate_match_fatigue(old, 90, 1.0) == pytest.approx(base * 1.2)

    def test_position_factors(self, manager, make_player):
        gk = make_player(position=Position.GK, stamina=50)
        fwd = make_player(position=Position.FWD, stamina=50)
        assert manager.calculate_match_fatigue(gk, 90, 1.0) == pytest.approx(
            manager.calculate_match_fatigue(fwd, 90, 1.0) * 0.6
        )

    def test_capped_at_60(self, manager, make_player):
        player = make_player(position=Position.MID, age=36, stamina=0)
        assert manager.calculate_match_fatigue(player, 120, 3.0) == 60

    @pytest.mark.parametrize("minutes,intensity", [(-1, 1.0), (90, -0.5)])
    def test_negative_inputs_rejected(self, manager, make_player, minutes, intensity):
        with pytest.raises(InvalidSimulationInputError, match="must be >= 0") as exc_info:
            manager.calculate_match_fatigue(make_player(), minutes, intensity)
        assert exc_info.value.error_code == "INVALID_INPUT"


class TestDailyRecovery:
    """calculate_daily_recovery"""

    def test_prime_age_rest_day(self, manager, make_player):
        player = make_player(age=25, stamina=80, professionalism=70)
        # (10 + 4) * 2 * 1.35
        assert manager.calculate_daily_recovery(player, 0.0) == pytest.approx(37.8)

    def test_youth_bonus(self, manager, make_player):
        player = make_player(age=20, stamina=80, professionalism=70)
        # (10 + 4) * 1.2 * 1 * 1.35
        assert manager.calculate_daily_recovery(player, 1.0) == pytest.approx(22.68)

    def test_veteran_penalty(self, manager, make_player):
        player = make_player(age=33, stamina=60, professionalism=0)
        # (10 + 3) * (0.9 - 0.06) * 1 * 1
        assert manager.calculate_daily_recovery(player, 1.0) == pytest.approx(10.92)

    def test_negative_training_intensity_rejected(self, manager, make_player):
        with pytest.raises(InvalidSimulationInputError, match="training_intensity must be >= 0"):
            manager.calculate_daily_recovery(make_player(), -1.0)


class TestInjuryRisk:
    """calculate_injury_risk"""

    def test_fit_young_player_has_no_risk(self, manager, make_player):
        assert manager.calculate_injury_risk(make_player(age=24)) == 0

    def test_low_fitness(self, manager, make_player):
        player = make_player(age=24)
        player.fitness = 25
        assert manager.calculate_injury_risk(player) == pytest.approx(0.15)

    def test_age_component(self, manager, make_player):
        assert manager.calculate_injury_risk(make_player(age=35)) == pytest.approx(0.05)

    def test_capped(self, make_player, reference_date):
        manager = FitnessManager(injury_threshold=100.0, reference_date=reference_date)
        player = make_player(age=40)
        player.fitness = 0
        assert manager.calculate_injury_risk(player) == 0.5


class TestApplyFitness:
    """Mutation entry points keep fitness within [0, 100]"""

    def test_apply_match_fitness(self, manager, make_player):
        player = make_player(position=Position.MID, age=25, stamina=80)
        assert manager.apply_match_fitness(player, 90, 1.0) == pytest.approx(100 - 10.8675)

    def test_apply_match_fitness_floors_at_zero(self, manager, make_player):
        player = make_player(position=Position.MID, age=36, stamina=0)
        player.fitness = 20
        assert manager.apply_match_fitness(player, 120, 3.0) == 0

    def test_apply_recovery_caps_at_100(self, manager, make_player):
        player = make_player()
        player.fitness = 90
        assert manager.apply_daily_recovery(player, 0.0) == 100
