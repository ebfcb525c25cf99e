"""
Unit tests for SquadManager
"""

import pytest

from player_management.player_types import Position
from shared.domain_errors import InsufficientPlayersError, InvalidFormationError
from team_management.formation import Formation
from team_management.squad_manager import SquadManager


@pytest.fixture
def squad_manager(full_squad, reference_date):
    return SquadManager(full_squad, reference_date=reference_date)


def starters_at(lineup, position):
    return [pid for pid, pos in lineup.assignments() if pos == position]


class TestRecommendLineup:
    """Sorted, position-priority lineup recommendation"""

    def test_442_shape(self, squad_manager):
        lineup = squad_manager.recommend_lineup(Formation.F_4_4_2)
        counts = lineup.position_counts()
        assert counts == {Position.GK: 1, Position.DEF: 4, Position.MID: 4, Position.FWD: 2}
        assert lineup.captain

    def test_442_picks_best_per_position(self, squad_manager):
        lineup = squad_manager.recommend_lineup("4-4-2")
        assert lineup.starters == [
            "gk1", "def1", "def2", "def3", "def4",
            "mid1", "mid2", "mid3", "mid4", "fwd1", "fwd2",
        ]

    def test_defaults_to_team_formation(self, full_squad, squad_manager):
        full_squad.set_formation("5-3-2")
        lineup = squad_manager.recommend_lineup()
        assert lineup.formation is Formation.F_5_3_2
        assert len(starters_at(lineup, Position.DEF)) == 5

    def test_forwards_outrank_spare_midfielders(self, squad_manager):
        lineup = squad_manager.recommend_lineup("4-3-3")
        assert starters_at(lineup, Position.FWD) == ["fwd1", "fwd2", "fwd3"]

    def test_multi_eligible_player_claimed_by_earlier_position(self, full_squad, squad_manager):
        full_squad.get_player("mid1").attributes.passing = 99
        lineup = squad_manager.recommend_lineup("4-4-2")
        assert starters_at(lineup, Position.DEF) == ["mid1", "def1", "def2", "def3"]
        assert "mid1" not in starters_at(lineup, Position.MID)

    def test_substitutes_in_roster_order_capped(self, full_squad, squad_manager, make_player):
        for i in range(3):
            full_squad.add_player(make_player(f"extra{i}", position=Position.GK))
        lineup = squad_manager.recommend_lineup("4-4-2")
        assert lineup.substitutes == ["gk2", "def5", "def6", "mid5", "mid6", "fwd3", "fwd4"]

    def test_unavailable_players_skipped(self, full_squad, squad_manager):
        full_squad.get_player("def1").injure("groin", 10)
        full_squad.get_player("fwd1").fitness = 40
        lineup = squad_manager.recommend_lineup("4-4-2")
        assert "def1" not in lineup.players()
        assert "fwd1" not in lineup.players()
        assert starters_at(lineup, Position.DEF) == ["def2", "def3", "def4", "def5"]

    def test_recommendation_passes_validation(self, full_squad, squad_manager):
        for formation in Formation:
            full_squad.validate_lineup(squad_manager.recommend_lineup(formation))

    def test_invalid_formation(self, squad_manager):
        with pytest.raises(InvalidFormationError):
            squad_manager.recommend_lineup("6-6-6")

    @pytest.mark.parametrize("formation", list(Formation))
    def test_insufficient_players_any_formation(self, full_squad, squad_manager, formation):
        full_squad.get_player("gk1").injure("wrist", 7)
        full_squad.get_player("gk2").suspend(1)
        with pytest.raises(InsufficientPlayersError):
            squad_manager.recommend_lineup(formation)

    def test_insufficient_small_squad(self, make_team, make_player, reference_date):
        team = make_team()
        team.add_player(make_player("gk", position=Position.GK))
        for i in range(9):
            team.add_player(make_player(f"m{i}", position=Position.MID))
        with pytest.raises(InsufficientPlayersError, match="need 11, have 10"):
            SquadManager(team, reference_date).recommend_lineup("4-4-2")


class TestCaptainSelection:

    def test_most_experienced_starter(self, squad_manager):
        # Oldest starters are def4 and mid4 (25); def4 comes first
        assert squad_manager.recommend_lineup("4-4-2").captain == "def4"

    def test_career_matches_count(self, full_squad, squad_manager):
        full_squad.get_player("mid1").career_stats.total_matches = 40  # 22 + 4.0
        assert squad_manager.recommend_lineup("4-4-2").captain == "mid1"

    def test_current_captain_retained_when_starting(self, full_squad, squad_manager):
        full_squad.set_captain("fwd2")
        assert squad_manager.recommend_lineup("4-4-2").captain == "fwd2"

    def test_benched_captain_replaced(self, full_squad, squad_manager):
        full_squad.set_captain("gk2")
        assert squad_manager.recommend_lineup("4-4-2").captain == "def4"


class TestSquadDepth:

    def test_grouped_and_sorted(self, squad_manager):
        depth = squad_manager.get_squad_depth()
        assert list(depth) == [Position.GK, Position.DEF, Position.MID, Position.FWD]
        assert [p.player_id for p in depth[Position.DEF]] == ["def1", "def2", "def3", "def4", "def5", "def6"]

    def test_sorts_by_rating_not_roster_order(self, make_team, make_player):
        team = make_team()
        team.add_player(make_player("weak", position=Position.DEF, tackling=40))
        team.add_player(make_player("strong", position=Position.DEF, tackling=90))
        depth = SquadManager(team).get_squad_depth()
        assert [p.player_id for p in depth[Position.DEF]] == ["strong", "weak"]
        assert Position.GK not in depth

    def test_idempotent(self, squad_manager):
        first = squad_manager.get_squad_depth()
        second = squad_manager.get_squad_depth()
        assert {k: [p.player_id for p in v] for k, v in first.items()} == \
            {k: [p.player_id for p in v] for k, v in second.items()}
        assert list(first) == list(second)

    def test_groups_by_natural_position_including_unavailable(self, full_squad, squad_manager):
        full_squad.get_player("mid1").injure("hip", 3)
        depth = squad_manager.get_squad_depth()
        assert len(depth[Position.MID]) == 6


class TestSquadAggregates:

    def test_squad_age(self, squad_manager):
        # GK 22+23, DEF/MID 22..27, FWD 22..25
        assert squad_manager.get_squad_age() == pytest.approx(433 / 18)

    def test_empty_squad_age(self, make_team):
        assert SquadManager(make_team()).get_squad_age() == 0

    def test_value_and_wages(self, squad_manager):
        assert squad_manager.get_squad_value() == 55_000_000
        assert squad_manager.get_wage_bill() == 55_000

    def test_youth_and_veterans(self, full_squad, squad_manager, make_player):
        full_squad.add_player(make_player("kid", age=19))
        full_squad.add_player(make_player("prime", age=30))
        full_squad.add_player(make_player("vet", age=31))
        assert [p.player_id for p in squad_manager.get_youth_prospects()] == ["kid"]
        assert [p.player_id for p in squad_manager.get_veterans()] == ["vet"]

    def test_injured_and_suspended(self, full_squad, squad_manager):
        full_squad.get_player("def2").injure("knee", 40)
        full_squad.get_player("fwd4").suspend(2)
        assert [p.player_id for p in squad_manager.get_injured_players()] == ["def2"]
        assert [p.player_id for p in squad_manager.get_suspended_players()] == ["fwd4"]
