"""
Squad Manager

Read-model over a Team: depth charts, squad aggregates, and the lineup
recommendation used before each match. Nothing here mutates the team;
recommend_lineup() returns a Lineup the caller may pass to Team.set_lineup().
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Set, Union

from config.simulation_settings import SimulationSettings
from player_management.player import Player
from player_management.player_types import Position, PlayerStatus, POSITION_ORDER
from shared.domain_errors import InsufficientPlayersError
from team_management.formation import Formation, Lineup
from team_management.team import Team


class SquadManager:
    """Squad analysis and lineup recommendation for one team"""

    def __init__(self, team: Team, reference_date: Optional[date] = None):
        """
        Args:
            team: Team to analyze
            reference_date: Date used for player ages (today if omitted)
        """
        self.team = team
        self.reference_date = reference_date
        self.logger = logging.getLogger(__name__)

    def _age(self, player: Player) -> int:
        return player.age(self.reference_date)

    # ------------------------------------------------------------------
    # Lineup recommendation
    # ------------------------------------------------------------------

    def recommend_lineup(self, formation: Union[Formation, str, None] = None) -> Lineup:
        """
        Pick the strongest available lineup for a formation.

        Positions are filled in GK, DEF, MID, FWD order; a player eligible
        for several positions goes to whichever is filled first. Within a
        position, candidates are ranked by overall rating with ties kept in
        roster order. Leftover available players become substitutes (up to
        MAX_SUBSTITUTES, roster order).

        Args:
            formation: Target formation (team's current formation if omitted)

        Returns:
            Recommended Lineup with a captain

        Raises:
            InvalidFormationError: Formation is not supported
            InsufficientPlayersError: Fewer than 11 starters could be placed
        """
        formation = self.team.formation if formation is None else Formation.parse(formation)
        requirements = formation.position_requirements()
        available = self.team.available_players()

        lineup = Lineup(formation=formation)
        used: Set[str] = set()

        for position in POSITION_ORDER:
            count = requirements.get(position, 0)
            for candidate in self._best_candidates(available, position, used)[:count]:
                lineup.starters.append(candidate.player_id)
                lineup.positions.append(position)
                used.add(candidate.player_id)

        if len(lineup.starters) < SimulationSettings.STARTERS:
            self.logger.warning(
                f"{self.team.name}: only {len(lineup.starters)} starters placed for {formation.value}"
            )
            raise InsufficientPlayersError(
                required=SimulationSettings.STARTERS,
                available=len(lineup.starters)
            )

        for player in available:
            if len(lineup.substitutes) >= SimulationSettings.MAX_SUBSTITUTES:
                break
            if player.player_id not in used:
                lineup.substitutes.append(player.player_id)

        lineup.captain = self._select_captain(lineup.starters)

        self.logger.debug(
            f"{self.team.name}: recommended {formation.value} "
            f"with {len(lineup.substitutes)} subs, captain {lineup.captain}"
        )
        return lineup

    @staticmethod
    def _best_candidates(available: List[Player], position: Position, used: Set[str]) -> List[Player]:
        candidates = [
            player for player in available
            if player.player_id not in used and player.can_play_position(position)
        ]
        # sorted() is stable, so equal ratings keep roster order
        return sorted(candidates, key=lambda player: player.overall_rating(), reverse=True)

    def _select_captain(self, starters: List[str]) -> Optional[str]:
        if self.team.captain_id is not None and self.team.captain_id in starters:
            return self.team.captain_id

        # Otherwise the most experienced starter
        best_id = None
        best_score = 0.0
        for player_id in starters:
            player = self.team.get_player(player_id)
            score = self._age(player) + player.career_stats.total_matches / 10
            if best_id is None or score > best_score:
                best_id = player_id
                best_score = score
        return best_id

    # ------------------------------------------------------------------
    # Squad analysis
    # ------------------------------------------------------------------

    def get_squad_depth(self) -> Dict[Position, List[Player]]:
        """
        Roster grouped by natural position, best rated first.

        Keys follow GK, DEF, MID, FWD order and only positions with at least
        one player appear. Equal ratings keep roster order.
        """
        depth: Dict[Position, List[Player]] = {}
        for position in POSITION_ORDER:
            group = [player for player in self.team.players if player.position == position]
            if group:
                depth[position] = sorted(group, key=lambda player: player.overall_rating(), reverse=True)
        return depth

    def get_squad_age(self) -> float:
        """Average age; 0 for an empty squad."""
        players = self.team.players
        if not players:
            return 0.0
        return sum(self._age(player) for player in players) / len(players)

    def get_squad_value(self) -> int:
        return sum(player.market_value for player in self.team.players)

    def get_wage_bill(self) -> int:
        return sum(player.wage for player in self.team.players)

    def get_youth_prospects(self) -> List[Player]:
        return [p for p in self.team.players if self._age(p) < SimulationSettings.YOUTH_AGE]

    def get_veterans(self) -> List[Player]:
        return [p for p in self.team.players if self._age(p) > SimulationSettings.VETERAN_AGE]

    def get_injured_players(self) -> List[Player]:
        return [p for p in self.team.players if p.status == PlayerStatus.INJURED]

    def get_suspended_players(self) -> List[Player]:
        return [p for p in self.team.players if p.status == PlayerStatus.SUSPENDED]
