"""
Player Events

Events recorded by the Player aggregate and the player engines.
"""

from datetime import datetime
from typing import Dict, Any, Optional

from domain_events.base_event import DomainEvent, EventType


class PlayerInjuredEvent(DomainEvent):
    """Player was ruled out with an injury."""

    event_type = EventType.PLAYER_INJURED

    def __init__(
        self,
        player_id: str,
        injury_type: str,
        expected_days: int,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=player_id, event_id=event_id, occurred_at=occurred_at)
        self.player_id = player_id
        self.injury_type = injury_type
        self.expected_days = expected_days

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "injury_type": self.injury_type,
            "expected_days": self.expected_days
        }


class PlayerRecoveredEvent(DomainEvent):
    """Player returned to the available pool."""

    event_type = EventType.PLAYER_RECOVERED

    def __init__(
        self,
        player_id: str,
        previous_status: str,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=player_id, event_id=event_id, occurred_at=occurred_at)
        self.player_id = player_id
        self.previous_status = previous_status

    def _get_parameters(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "previous_status": self.previous_status}


class PlayerSuspendedEvent(DomainEvent):
    """Player was suspended for a number of matches."""

    event_type = EventType.PLAYER_SUSPENDED

    def __init__(
        self,
        player_id: str,
        matches: int,
        reason: str = "",
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=player_id, event_id=event_id, occurred_at=occurred_at)
        self.player_id = player_id
        self.matches = matches
        self.reason = reason

    def _get_parameters(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "matches": self.matches, "reason": self.reason}


class PlayerTrainedEvent(DomainEvent):
    """
    Training session was processed for a player.

    ``attribute_gains`` is keyed by attribute name so the payload stays
    plain data for whoever consumes it.
    """

    event_type = EventType.PLAYER_TRAINED

    def __init__(
        self,
        player_id: str,
        training_type: str,
        attribute_gains: Dict[str, int],
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=player_id, event_id=event_id, occurred_at=occurred_at)
        self.player_id = player_id
        self.training_type = training_type
        self.attribute_gains = dict(attribute_gains)

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "training_type": self.training_type,
            "attribute_gains": dict(self.attribute_gains)
        }


class PlayerProgressedEvent(DomainEvent):
    """Natural development (growth or decline) changed a player's attributes."""

    event_type = EventType.PLAYER_PROGRESSED

    def __init__(
        self,
        player_id: str,
        attribute_changes: Dict[str, int],
        quality: int,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=player_id, event_id=event_id, occurred_at=occurred_at)
        self.player_id = player_id
        self.attribute_changes = dict(attribute_changes)
        self.quality = quality

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "attribute_changes": dict(self.attribute_changes),
            "quality": self.quality
        }
