"""
Player Aggregate

Wraps Attributes with identity, availability status, fitness/morale/form,
and career statistics.

Fitness, morale, and form are clamped to [0, 100] by their property
setters, so every mutation path (match updates, fitness engine,
development engine) keeps them in range.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Any, List, Optional

from config.simulation_settings import SimulationSettings
from domain_events.base_event import DomainEvent
from domain_events.player_events import (
    PlayerInjuredEvent,
    PlayerRecoveredEvent,
    PlayerSuspendedEvent,
)
from player_management.attributes import Attributes
from player_management.player_types import Position, PlayerStatus
from shared.player_utils import calculate_player_age, clamp


logger = logging.getLogger(__name__)


@dataclass
class SeasonStats:
    """Stats for one season at one club"""
    season_id: str
    team_id: Optional[str] = None
    matches: int = 0
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    clean_sheets: int = 0
    average_rating: float = 0.0

    def record_match(
        self,
        goals: int,
        assists: int,
        yellow_cards: int,
        red_cards: int,
        rating: float,
        clean_sheet: bool
    ) -> None:
        """Add one appearance, keeping a running average rating."""
        self.average_rating = (self.average_rating * self.matches + rating) / (self.matches + 1)
        self.matches += 1
        self.goals += goals
        self.assists += assists
        self.yellow_cards += yellow_cards
        self.red_cards += red_cards
        if clean_sheet:
            self.clean_sheets += 1


@dataclass
class CareerStats:
    """Cumulative career totals plus per-season breakdown"""
    total_matches: int = 0
    total_goals: int = 0
    total_assists: int = 0
    total_yellow_cards: int = 0
    total_red_cards: int = 0
    total_clean_sheets: int = 0
    season_stats: List[SeasonStats] = field(default_factory=list)

    def get_season(self, season_id: str) -> Optional[SeasonStats]:
        for season in self.season_stats:
            if season.season_id == season_id:
                return season
        return None


class Player:
    """Represents a football player with position, state, and ratings"""

    def __init__(
        self,
        player_id: str,
        first_name: str,
        last_name: str,
        position: Position,
        date_of_birth: date,
        nickname: str = "",
        nationality: str = "",
        height: int = 0,
        weight: int = 0,
        preferred_foot: str = "right",
        shirt_number: int = 0,
        contract_until: Optional[date] = None,
        market_value: int = 0,
        wage: int = 0,
        attributes: Optional[Attributes] = None,
        current_team_id: Optional[str] = None
    ):
        """
        Create a player.

        New players start available with fitness 100, morale 75, form 70,
        and position-seeded attributes unless ``attributes`` is given.

        Args:
            player_id: Unique player identity
            first_name: Given name
            last_name: Family name
            position: Natural position (fixed for the player's lifetime)
            date_of_birth: Used for every age-dependent calculation
            nickname: Display name that overrides first/last name
            nationality: Country code or name
            height: Height in cm
            weight: Weight in kg
            preferred_foot: "left", "right", or "both"
            shirt_number: Squad number
            contract_until: Contract expiry date
            market_value: Valuation in currency units
            wage: Weekly wage
            attributes: Explicit attributes (defaults seeded by position)
            current_team_id: Owning team identity
        """
        self.player_id = player_id
        self.first_name = first_name
        self.last_name = last_name
        self.nickname = nickname
        self.date_of_birth = date_of_birth
        self.nationality = nationality

        self.height = height
        self.weight = weight

        self._position = Position(position)
        self.preferred_foot = preferred_foot
        self.shirt_number = shirt_number
        self.contract_until = contract_until
        self.market_value = market_value
        self.wage = wage

        self.status = PlayerStatus.AVAILABLE
        self._fitness = 100.0
        self._morale = 75.0
        self._form = 70.0

        self.attributes = attributes if attributes is not None else Attributes.for_position(self._position)
        self.career_stats = CareerStats()
        self.current_team_id = current_team_id

        self.injury_type: Optional[str] = None
        self.expected_return_days = 0
        self.suspension_matches = 0

        self.created_at = datetime.now()
        self.updated_at = self.created_at

        self._pending_events: List[DomainEvent] = []

    # ------------------------------------------------------------------
    # Clamped state
    # ------------------------------------------------------------------

    @property
    def position(self) -> Position:
        return self._position

    @property
    def fitness(self) -> float:
        return self._fitness

    @fitness.setter
    def fitness(self, value: float) -> None:
        self._fitness = float(clamp(value))

    @property
    def morale(self) -> float:
        return self._morale

    @morale.setter
    def morale(self, value: float) -> None:
        self._morale = float(clamp(value))

    @property
    def form(self) -> float:
        return self._form

    @form.setter
    def form(self, value: float) -> None:
        self._form = float(clamp(value))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def age(self, as_of: Optional[date] = None) -> int:
        """Age in whole years on ``as_of`` (today if omitted)."""
        return calculate_player_age(self.date_of_birth, as_of)

    @property
    def full_name(self) -> str:
        if self.nickname:
            return self.nickname
        return f"{self.first_name} {self.last_name}"

    def is_available(self) -> bool:
        """Available status and fit enough to be selected"""
        return (
            self.status == PlayerStatus.AVAILABLE
            and self._fitness >= SimulationSettings.AVAILABILITY_FITNESS
        )

    def can_play_position(self, position: Position) -> bool:
        """
        Check if player can be fielded in a position.

        Rules:
            - Own position is always allowed
            - DEF and FWD can cover MID when passing > 60
            - MID can cover DEF, MID, or FWD
            - GK plays in goal only
        """
        if self._position == position:
            return True

        if self._position == Position.DEF:
            return position == Position.MID and self.attributes.passing > 60
        if self._position == Position.MID:
            return position in (Position.DEF, Position.MID, Position.FWD)
        if self._position == Position.FWD:
            return position == Position.MID and self.attributes.passing > 60
        return False

    def overall_rating(self) -> int:
        """Overall rating for the player's natural position"""
        return self.attributes.rating_for(self._position)

    # ------------------------------------------------------------------
    # Match results
    # ------------------------------------------------------------------

    def update_match_stats(
        self,
        goals: int = 0,
        assists: int = 0,
        yellow_cards: int = 0,
        red_cards: int = 0,
        rating: float = 6.0,
        clean_sheet: bool = False,
        season_id: Optional[str] = None,
        team_id: Optional[str] = None
    ) -> None:
        """
        Record one appearance from a match outcome.

        Args:
            goals: Goals scored
            assists: Assists provided
            yellow_cards: Yellow cards received
            red_cards: Red cards received
            rating: Match rating on a 0-10 scale
            clean_sheet: Whether the player kept a clean sheet
            season_id: When given, also updates that season's stats
            team_id: Club the appearance was made for (defaults to current team)
        """
        stats = self.career_stats
        stats.total_matches += 1
        stats.total_goals += goals
        stats.total_assists += assists
        stats.total_yellow_cards += yellow_cards
        stats.total_red_cards += red_cards
        if clean_sheet:
            stats.total_clean_sheets += 1

        if season_id is not None:
            season = stats.get_season(season_id)
            if season is None:
                season = SeasonStats(season_id=season_id, team_id=team_id or self.current_team_id)
                stats.season_stats.append(season)
            season.record_match(goals, assists, yellow_cards, red_cards, rating, clean_sheet)

        self._update_form(rating)
        self.updated_at = datetime.now()

    def _update_form(self, match_rating: float) -> None:
        # Weighted average: newest rating (x10 to the 0-100 scale) gets FORM_WEIGHT
        weight = SimulationSettings.FORM_WEIGHT
        self.form = self._form * (1 - weight) + (match_rating * 10) * weight

    def adjust_morale(self, delta: float) -> float:
        self.morale = self._morale + delta
        return self._morale

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    def injure(self, injury_type: str, expected_days: int) -> None:
        """Rule the player out with an injury."""
        self.status = PlayerStatus.INJURED
        self.injury_type = injury_type
        self.expected_return_days = expected_days
        self.updated_at = datetime.now()
        logger.info(f"{self.full_name} injured ({injury_type}, ~{expected_days} days)")
        self._record(PlayerInjuredEvent(self.player_id, injury_type, expected_days))

    def suspend(self, matches: int, reason: str = "") -> None:
        """Suspend the player for a number of matches."""
        self.status = PlayerStatus.SUSPENDED
        self.suspension_matches = matches
        self.updated_at = datetime.now()
        logger.info(f"{self.full_name} suspended for {matches} match(es)")
        self._record(PlayerSuspendedEvent(self.player_id, matches, reason))

    def recover(self) -> None:
        """Return an injured or suspended player to the available pool."""
        if self.status == PlayerStatus.AVAILABLE:
            return
        previous = self.status
        self.status = PlayerStatus.AVAILABLE
        self.injury_type = None
        self.expected_return_days = 0
        self.suspension_matches = 0
        self.updated_at = datetime.now()
        self._record(PlayerRecoveredEvent(self.player_id, previous.value))

    def loan_out(self) -> None:
        self.status = PlayerStatus.ON_LOAN
        self.updated_at = datetime.now()

    def retire(self) -> None:
        """Retirement is a status; the player record is kept."""
        self.status = PlayerStatus.RETIRED
        self.updated_at = datetime.now()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def record_event(self, event: DomainEvent) -> None:
        """Queue an event produced by an engine acting on this player."""
        self._record(event)

    def pull_events(self) -> List[DomainEvent]:
        """Return and clear the queued domain events."""
        events, self._pending_events = self._pending_events, []
        return events

    def to_dict(self) -> Dict[str, Any]:
        """Convert player to dictionary for reporting"""
        return {
            'player_id': self.player_id,
            'name': self.full_name,
            'position': self._position.value,
            'status': self.status.value,
            'date_of_birth': self.date_of_birth.isoformat(),
            'fitness': self._fitness,
            'morale': self._morale,
            'form': self._form,
            'overall': self.overall_rating(),
            'market_value': self.market_value,
            'wage': self.wage,
            'attributes': self.attributes.to_dict(),
        }

    def __repr__(self) -> str:
        return f"Player(id='{self.player_id}', name='{self.full_name}', position={self._position.value})"
