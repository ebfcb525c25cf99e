"""
Unit tests for the Player aggregate
"""

from datetime import date

import pytest

from domain_events.player_events import (
    PlayerInjuredEvent,
    PlayerRecoveredEvent,
    PlayerSuspendedEvent,
)
from player_management.player import Player
from player_management.player_types import Position, PlayerStatus


class TestPlayerCreation:
    """New players start from fixed state"""

    def test_initial_state(self):
        player = Player("p1", "Ada", "Stone", Position.MID, date(2000, 5, 1))
        assert player.status == PlayerStatus.AVAILABLE
        assert player.fitness == 100
        assert player.morale == 75
        assert player.form == 70
        assert player.attributes.passing == 70  # MID default

    def test_position_accepts_string(self):
        player = Player("p1", "Ada", "Stone", "DEF", date(2000, 5, 1))
        assert player.position is Position.DEF

    def test_position_is_read_only(self):
        player = Player("p1", "Ada", "Stone", Position.MID, date(2000, 5, 1))
        with pytest.raises(AttributeError):
            player.position = Position.FWD

    def test_full_name_prefers_nickname(self):
        player = Player("p1", "Ada", "Stone", Position.FWD, date(2000, 5, 1), nickname="Rocket")
        assert player.full_name == "Rocket"
        player.nickname = ""
        assert player.full_name == "Ada Stone"

    def test_age_is_birthday_aware(self):
        player = Player("p1", "Ada", "Stone", Position.MID, date(2000, 8, 15))
        assert player.age(date(2025, 8, 14)) == 24
        assert player.age(date(2025, 8, 15)) == 25


class TestClampedState:
    """Fitness, morale and form stay within [0, 100]"""

    def test_fitness_clamped(self, make_player):
        player = make_player()
        player.fitness = 140
        assert player.fitness == 100
        player.fitness = -5
        assert player.fitness == 0

    def test_morale_adjust_clamped(self, make_player):
        player = make_player()
        assert player.adjust_morale(50) == 100
        assert player.adjust_morale(-500) == 0

    def test_form_clamped(self, make_player):
        player = make_player()
        player.form = 101
        assert player.form == 100


class TestAvailability:
    """Availability = available status and fitness >= 70"""

    def test_available_when_fit(self, make_player):
        assert make_player().is_available()

    def test_fitness_boundary(self, make_player):
        player = make_player()
        player.fitness = 70
        assert player.is_available()
        player.fitness = 69.9
        assert not player.is_available()

    @pytest.mark.parametrize("transition", ["injure", "suspend", "loan_out", "retire"])
    def test_status_blocks_availability(self, make_player, transition):
        player = make_player()
        if transition == "injure":
            player.injure("hamstring", 14)
        elif transition == "suspend":
            player.suspend(2)
        else:
            getattr(player, transition)()
        assert not player.is_available()


class TestPositionEligibility:
    """can_play_position rules"""

    def test_goalkeeper_only_in_goal(self, make_player):
        gk = make_player(position=Position.GK, passing=99)
        assert gk.can_play_position(Position.GK)
        for position in (Position.DEF, Position.MID, Position.FWD):
            assert not gk.can_play_position(position)

    def test_defender_covers_midfield_with_good_passing(self, make_player):
        assert make_player(position=Position.DEF, passing=61).can_play_position(Position.MID)
        assert not make_player(position=Position.DEF, passing=60).can_play_position(Position.MID)

    def test_defender_never_plays_forward(self, make_player):
        assert not make_player(position=Position.DEF, passing=90).can_play_position(Position.FWD)

    def test_forward_covers_midfield_with_good_passing(self, make_player):
        assert make_player(position=Position.FWD, passing=75).can_play_position(Position.MID)
        assert not make_player(position=Position.FWD, passing=75).can_play_position(Position.DEF)

    def test_midfielder_covers_outfield(self, make_player):
        mid = make_player(position=Position.MID, passing=10)
        assert mid.can_play_position(Position.DEF)
        assert mid.can_play_position(Position.FWD)
        assert not mid.can_play_position(Position.GK)


class TestMatchStats:
    """update_match_stats and form"""

    def test_career_totals(self, make_player):
        player = make_player()
        player.update_match_stats(goals=2, assists=1, yellow_cards=1, rating=8.0)
        player.update_match_stats(clean_sheet=True)
        stats = player.career_stats
        assert stats.total_matches == 2
        assert stats.total_goals == 2
        assert stats.total_assists == 1
        assert stats.total_yellow_cards == 1
        assert stats.total_clean_sheets == 1

    def test_form_weighted_average(self, make_player):
        player = make_player()
        player.update_match_stats(rating=9.0)
        # 70 * 0.7 + 90 * 0.3
        assert player.form == pytest.approx(76.0)

    def test_season_stats_running_average(self, make_player):
        player = make_player()
        player.update_match_stats(rating=6.0, season_id="2025")
        player.update_match_stats(rating=8.0, goals=1, season_id="2025")
        season = player.career_stats.get_season("2025")
        assert season.matches == 2
        assert season.goals == 1
        assert season.average_rating == pytest.approx(7.0)
        assert player.career_stats.get_season("2024") is None

    def test_extreme_rating_keeps_form_in_range(self, make_player):
        player = make_player()
        for _ in range(20):
            player.update_match_stats(rating=15.0)
        assert player.form == 100


class TestStatusTransitions:
    """Injury, suspension, recovery and their events"""

    def test_injure_records_event(self, make_player):
        player = make_player()
        player.injure("ankle", 21)
        assert player.status == PlayerStatus.INJURED
        assert player.injury_type == "ankle"

        events = player.pull_events()
        assert len(events) == 1
        assert isinstance(events[0], PlayerInjuredEvent)
        assert events[0].expected_days == 21
        assert player.pull_events() == []

    def test_suspend_then_recover(self, make_player):
        player = make_player()
        player.suspend(3, reason="red card")
        player.recover()

        assert player.status == PlayerStatus.AVAILABLE
        assert player.suspension_matches == 0
        suspended, recovered = player.pull_events()
        assert isinstance(suspended, PlayerSuspendedEvent)
        assert isinstance(recovered, PlayerRecoveredEvent)
        assert recovered.previous_status == "suspended"

    def test_recover_when_available_is_noop(self, make_player):
        player = make_player()
        player.recover()
        assert player.pull_events() == []

    def test_retired_player_is_kept(self, make_player):
        player = make_player()
        player.retire()
        assert player.status == PlayerStatus.RETIRED
        assert player.to_dict()["status"] == "retired"


class TestOverallRating:

    def test_uses_natural_position(self, make_player):
        player = make_player(position=Position.FWD)
        assert player.overall_rating() == player.attributes.forward_rating()
