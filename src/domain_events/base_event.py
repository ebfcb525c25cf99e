"""
Base Domain Event

Common shape for every event the squad simulation core emits.

Events are plain records keyed by an aggregate identity and a timestamp.
Aggregates queue them; delivery and persistence belong to whoever
drains the queue.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
import uuid


class EventType(str, Enum):
    """Dotted event type identifiers."""

    # Match events
    MATCH_SCHEDULED = "match.scheduled"
    MATCH_STARTED = "match.started"
    MATCH_COMPLETED = "match.completed"
    GOAL_SCORED = "match.goal_scored"
    CARD_ISSUED = "match.card_issued"

    # Player events
    PLAYER_INJURED = "player.injured"
    PLAYER_RECOVERED = "player.recovered"
    PLAYER_SUSPENDED = "player.suspended"
    PLAYER_TRAINED = "player.trained"
    PLAYER_PROGRESSED = "player.progressed"

    # Team events
    LINEUP_SET = "team.lineup_set"
    TACTICS_CHANGED = "team.tactics_changed"
    FORMATION_CHANGED = "team.formation_changed"

    # Season events
    SEASON_STARTED = "season.started"
    SEASON_COMPLETED = "season.completed"
    FIXTURES_GENERATED = "season.fixtures_generated"


class DomainEvent(ABC):
    """
    Abstract base class for all domain events.

    Subclasses set ``event_type`` and implement ``_get_parameters`` with
    the event-specific payload.
    """

    event_type: EventType

    def __init__(
        self,
        aggregate_id: str,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        """
        Initialize base event properties.

        Args:
            aggregate_id: Identity of the player/team/match the event belongs to
            event_id: Unique identifier (generated if not provided)
            occurred_at: Event timestamp (defaults to now)
        """
        self.aggregate_id = aggregate_id
        self.event_id = event_id or str(uuid.uuid4())
        self.occurred_at = occurred_at or datetime.now()

    @abstractmethod
    def _get_parameters(self) -> Dict[str, Any]:
        """Return the event-specific payload."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type.value,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
            "parameters": self._get_parameters()
        }

    def __str__(self) -> str:
        return f"{self.event_type.value}(aggregate={self.aggregate_id})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(event_id='{self.event_id}', "
            f"aggregate_id='{self.aggregate_id}', occurred_at={self.occurred_at})"
        )
