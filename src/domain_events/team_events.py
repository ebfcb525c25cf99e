"""
Team Events

Events recorded by the Team aggregate when its match setup changes.
"""

from datetime import datetime
from typing import Dict, Any, List, Optional

from domain_events.base_event import DomainEvent, EventType


class LineupSetEvent(DomainEvent):
    """A validated lineup was locked in for a match."""

    event_type = EventType.LINEUP_SET

    def __init__(
        self,
        team_id: str,
        player_ids: List[str],
        formation: str,
        match_id: Optional[str] = None,
        captain_id: Optional[str] = None,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=team_id, event_id=event_id, occurred_at=occurred_at)
        self.team_id = team_id
        self.match_id = match_id
        self.player_ids = list(player_ids)
        self.formation = formation
        self.captain_id = captain_id

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "match_id": self.match_id,
            "player_ids": list(self.player_ids),
            "formation": self.formation,
            "captain_id": self.captain_id
        }


class FormationChangedEvent(DomainEvent):
    event_type = EventType.FORMATION_CHANGED

    def __init__(
        self,
        team_id: str,
        old_formation: str,
        new_formation: str,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=team_id, event_id=event_id, occurred_at=occurred_at)
        self.team_id = team_id
        self.old_formation = old_formation
        self.new_formation = new_formation

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "old_formation": self.old_formation,
            "new_formation": self.new_formation
        }


class TacticsChangedEvent(DomainEvent):
    event_type = EventType.TACTICS_CHANGED

    def __init__(
        self,
        team_id: str,
        tactics: Dict[str, Any],
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=team_id, event_id=event_id, occurred_at=occurred_at)
        self.team_id = team_id
        self.tactics = dict(tactics)

    def _get_parameters(self) -> Dict[str, Any]:
        return {"team_id": self.team_id, "tactics": dict(self.tactics)}
