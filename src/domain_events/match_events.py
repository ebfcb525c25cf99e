"""
Match and Season Events

Record types the core hands to the match-simulation and scheduling
collaborators. The core defines them; those collaborators create them.
"""

from datetime import datetime
from typing import Dict, Any, List, Optional

from domain_events.base_event import DomainEvent, EventType


class MatchScheduledEvent(DomainEvent):
    event_type = EventType.MATCH_SCHEDULED

    def __init__(
        self,
        match_id: str,
        home_team_id: str,
        away_team_id: str,
        scheduled_at: datetime,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=match_id, event_id=event_id, occurred_at=occurred_at)
        self.home_team_id = home_team_id
        self.away_team_id = away_team_id
        self.scheduled_at = scheduled_at

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "scheduled_at": self.scheduled_at.isoformat()
        }


class MatchCompletedEvent(DomainEvent):
    event_type = EventType.MATCH_COMPLETED

    def __init__(
        self,
        match_id: str,
        home_score: int,
        away_score: int,
        stats: Optional[Dict[str, Any]] = None,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=match_id, event_id=event_id, occurred_at=occurred_at)
        self.home_score = home_score
        self.away_score = away_score
        self.stats = stats or {}

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "home_score": self.home_score,
            "away_score": self.away_score,
            "stats": dict(self.stats)
        }


class GoalScoredEvent(DomainEvent):
    event_type = EventType.GOAL_SCORED

    def __init__(
        self,
        match_id: str,
        player_id: str,
        team_id: str,
        minute: int,
        assist_by: Optional[str] = None,
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=match_id, event_id=event_id, occurred_at=occurred_at)
        self.match_id = match_id
        self.player_id = player_id
        self.team_id = team_id
        self.minute = minute
        self.assist_by = assist_by

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "player_id": self.player_id,
            "team_id": self.team_id,
            "minute": self.minute,
            "assist_by": self.assist_by
        }


class SeasonStartedEvent(DomainEvent):
    event_type = EventType.SEASON_STARTED

    def __init__(
        self,
        season_id: str,
        league_id: str,
        start_date: datetime,
        team_ids: List[str],
        event_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None
    ):
        super().__init__(aggregate_id=season_id, event_id=event_id, occurred_at=occurred_at)
        self.league_id = league_id
        self.start_date = start_date
        self.team_ids = list(team_ids)

    def _get_parameters(self) -> Dict[str, Any]:
        return {
            "league_id": self.league_id,
            "start_date": self.start_date.isoformat(),
            "team_ids": list(self.team_ids)
        }
