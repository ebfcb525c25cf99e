"""
Team Aggregate

A club's roster plus its tactical setup, recent form, season record and
budgets. Roster mutations and lineup changes go through this class so the
squad rules (size limit, unique players, valid lineups) always hold.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from config.simulation_settings import SimulationSettings
from domain_events.base_event import DomainEvent
from domain_events.team_events import (
    FormationChangedEvent,
    LineupSetEvent,
    TacticsChangedEvent,
)
from player_management.player import Player
from player_management.player_types import Position, POSITION_ORDER
from shared.domain_errors import (
    DuplicatePlayerError,
    PlayerNotFoundError,
    SquadSizeLimitError,
)
from team_management.formation import Formation, Lineup
from team_management.lineup_validator import LineupValidator
from team_management.tactics import TeamTactics, default_tactics


@dataclass
class Stadium:
    """Team's home ground"""
    name: str = ""
    capacity: int = 0
    city: str = ""
    country: str = ""
    pitch_type: str = "grass"


@dataclass
class MatchResult:
    """A recent match outcome from the team's point of view"""
    match_id: str
    opponent: str
    is_home: bool
    goals_for: int
    goals_against: int
    result: str  # "W", "D", "L"

    @classmethod
    def from_score(
        cls,
        match_id: str,
        opponent: str,
        is_home: bool,
        goals_for: int,
        goals_against: int
    ) -> "MatchResult":
        """Build a result, deriving W/D/L from the score."""
        if goals_for > goals_against:
            result = "W"
        elif goals_for < goals_against:
            result = "L"
        else:
            result = "D"
        return cls(match_id, opponent, is_home, goals_for, goals_against, result)


@dataclass
class TeamSeasonStats:
    """League record for the current season"""
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    league_position: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def record(self, result: MatchResult) -> None:
        self.played += 1
        self.goals_for += result.goals_for
        self.goals_against += result.goals_against
        if result.result == "W":
            self.won += 1
            self.points += 3
        elif result.result == "D":
            self.drawn += 1
            self.points += 1
        else:
            self.lost += 1


class Team:
    """Football club: roster, leadership, tactics, form, and finances"""

    def __init__(
        self,
        team_id: str,
        name: str,
        stadium: Optional[Stadium] = None,
        short_name: Optional[str] = None,
        founded: int = 0,
        manager_name: str = "",
        budget: int = 0,
        wage_budget: int = 0
    ):
        """
        Create a team with an empty roster, 4-4-2 and balanced tactics.

        Args:
            team_id: Unique team identity
            name: Club name
            stadium: Home ground
            short_name: Abbreviation (first three letters of name if omitted)
            founded: Year founded
            manager_name: Current manager
            budget: Transfer budget
            wage_budget: Weekly wage budget
        """
        self.team_id = team_id
        self.name = name
        self.short_name = short_name if short_name is not None else name[:3]
        self.founded = founded
        self.stadium = stadium if stadium is not None else Stadium()
        self.manager_name = manager_name

        self.players: List[Player] = []
        self.captain_id: Optional[str] = None
        self.vice_captain_id: Optional[str] = None

        self.formation = Formation.default()
        self.tactics = default_tactics()
        self.current_lineup: Optional[Lineup] = None

        self.budget = budget
        self.wage_budget = wage_budget

        self.current_form: List[MatchResult] = []
        self.season_stats = TeamSeasonStats()

        self.created_at = datetime.now()
        self.updated_at = self.created_at

        self._pending_events: List[DomainEvent] = []
        self.logger = logging.getLogger(__name__)

    def _touch(self) -> None:
        self.updated_at = datetime.now()

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_player(self, player: Player) -> None:
        """
        Add a player to the squad.

        Raises:
            SquadSizeLimitError: Roster already holds SQUAD_SIZE_LIMIT players
            DuplicatePlayerError: Player is already on the roster
        """
        if len(self.players) >= SimulationSettings.SQUAD_SIZE_LIMIT:
            raise SquadSizeLimitError(self.team_id, SimulationSettings.SQUAD_SIZE_LIMIT)
        if self.has_player(player.player_id):
            raise DuplicatePlayerError(player.player_id, self.team_id)

        self.players.append(player)
        player.current_team_id = self.team_id
        self._touch()
        self.logger.info(f"{self.name}: added {player.full_name} ({player.position.value})")

    def remove_player(self, player_id: str) -> Player:
        """
        Remove a player from the squad.

        Clears captain/vice-captain if the player held either role, and
        drops the current lineup if it names the player.

        Returns:
            The removed player

        Raises:
            PlayerNotFoundError: Player is not on the roster
        """
        player = self.get_player(player_id)
        self.players.remove(player)
        player.current_team_id = None

        if self.captain_id == player_id:
            self.captain_id = None
        if self.vice_captain_id == player_id:
            self.vice_captain_id = None
        if self.current_lineup is not None and player_id in self.current_lineup.players():
            self.current_lineup = None

        self._touch()
        self.logger.info(f"{self.name}: removed {player.full_name}")
        return player

    def get_player(self, player_id: str) -> Player:
        """Raises PlayerNotFoundError if the player is not on the roster."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        raise PlayerNotFoundError(player_id, self.team_id)

    def has_player(self, player_id: str) -> bool:
        return any(player.player_id == player_id for player in self.players)

    def roster(self) -> Dict[str, Player]:
        """Mapping of player_id -> Player in roster order."""
        return {player.player_id: player for player in self.players}

    def available_players(self) -> List[Player]:
        return [player for player in self.players if player.is_available()]

    def players_by_position(self, position: Position) -> List[Player]:
        """Players eligible for a position, regardless of availability."""
        return [player for player in self.players if player.can_play_position(position)]

    # ------------------------------------------------------------------
    # Leadership and tactics
    # ------------------------------------------------------------------

    @property
    def captain(self) -> Optional[Player]:
        return self._resolve(self.captain_id)

    @property
    def vice_captain(self) -> Optional[Player]:
        return self._resolve(self.vice_captain_id)

    def _resolve(self, player_id: Optional[str]) -> Optional[Player]:
        if player_id is None:
            return None
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def set_captain(self, player_id: str) -> None:
        self.get_player(player_id)
        self.captain_id = player_id
        self._touch()

    def set_vice_captain(self, player_id: str) -> None:
        self.get_player(player_id)
        self.vice_captain_id = player_id
        self._touch()

    def set_formation(self, formation) -> None:
        """
        Change the default formation.

        Raises:
            InvalidFormationError: Formation is not supported
        """
        new_formation = Formation.parse(formation)
        if new_formation == self.formation:
            return

        old_formation = self.formation
        self.formation = new_formation
        self._touch()
        self._pending_events.append(FormationChangedEvent(
            team_id=self.team_id,
            old_formation=old_formation.value,
            new_formation=new_formation.value
        ))
        self.logger.info(f"{self.name}: formation {old_formation.value} -> {new_formation.value}")

    def set_tactics(self, tactics: TeamTactics) -> None:
        self.tactics = tactics
        self._touch()
        self._pending_events.append(TacticsChangedEvent(
            team_id=self.team_id,
            tactics=tactics.to_dict()
        ))

    # ------------------------------------------------------------------
    # Lineups
    # ------------------------------------------------------------------

    def validate_lineup(self, lineup: Lineup) -> None:
        """Raise the first lineup rule violation, if any."""
        LineupValidator.validate(lineup, self.roster(), self.team_id)

    def set_lineup(self, lineup: Lineup, match_id: Optional[str] = None) -> None:
        """
        Validate and adopt a lineup for the next match.

        The lineup's captain (when given) becomes the team captain.
        """
        self.validate_lineup(lineup)

        if lineup.captain is not None:
            self.set_captain(lineup.captain)

        self.current_lineup = lineup
        self._touch()
        self._pending_events.append(LineupSetEvent(
            team_id=self.team_id,
            player_ids=list(lineup.starters),
            formation=Formation.parse(lineup.formation).value,
            match_id=match_id,
            captain_id=self.captain_id
        ))
        self.logger.info(f"{self.name}: lineup set ({Formation.parse(lineup.formation).value})")

    # ------------------------------------------------------------------
    # Strength
    # ------------------------------------------------------------------

    def best_eleven(self) -> List[Player]:
        """
        Quick strongest-eleven pick for the current formation.

        Fills each position in GK/DEF/MID/FWD order with the first eligible
        available players in roster order (no rating sort; SquadManager
        .recommend_lineup does the sorted selection). A player fills at most
        one slot, so a player eligible for several positions is never listed
        twice even though that leaves the later slot to a weaker option.
        With fewer than 11 available players, returns them all.
        """
        available = self.available_players()
        if len(available) < SimulationSettings.STARTERS:
            return available

        requirements = self.formation.position_requirements()
        selected: List[Player] = []
        used = set()

        for position in POSITION_ORDER:
            needed = requirements.get(position, 0)
            for player in available:
                if needed == 0:
                    break
                if player.player_id in used or not player.can_play_position(position):
                    continue
                selected.append(player)
                used.add(player.player_id)
                needed -= 1

        return selected

    def team_strength(self) -> float:
        """Mean overall rating of best_eleven(); 0 for an empty squad."""
        eleven = self.best_eleven()
        if not eleven:
            return 0.0
        return sum(player.overall_rating() for player in eleven) / len(eleven)

    # ------------------------------------------------------------------
    # Form and results
    # ------------------------------------------------------------------

    def update_form(self, result: MatchResult) -> None:
        """Prepend a result, keeping the last FORM_HISTORY_LENGTH."""
        self.current_form.insert(0, result)
        del self.current_form[SimulationSettings.FORM_HISTORY_LENGTH:]

    def form_string(self) -> str:
        """Recent form newest first, e.g. "WWLDW"."""
        return "".join(result.result for result in self.current_form)

    def record_match_result(self, result: MatchResult) -> None:
        self.season_stats.record(result)
        self.update_form(result)
        self._touch()

    # ------------------------------------------------------------------
    # Finances
    # ------------------------------------------------------------------

    def wage_bill(self) -> int:
        return sum(player.wage for player in self.players)

    def wage_budget_remaining(self) -> int:
        return self.wage_budget - self.wage_bill()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def pull_events(self) -> List[DomainEvent]:
        """Return and clear the queued domain events."""
        events, self._pending_events = self._pending_events, []
        return events

    def __repr__(self) -> str:
        return f"Team(id='{self.team_id}', name='{self.name}', players={len(self.players)})"
