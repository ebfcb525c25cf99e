"""
Domain Events

Plain event records emitted by the squad simulation aggregates.

Main Components:
- DomainEvent / EventType: common event shape and identifiers
- Player events: injured, recovered, suspended, trained, progressed
- Team events: lineup set, formation changed, tactics changed
- Match/season events: scheduled, completed, goal scored, season started

Usage:
    events = player.pull_events()
    for event in events:
        publisher.publish(event.to_dict())
"""

from domain_events.base_event import DomainEvent, EventType
from domain_events.player_events import (
    PlayerInjuredEvent,
    PlayerRecoveredEvent,
    PlayerSuspendedEvent,
    PlayerTrainedEvent,
    PlayerProgressedEvent,
)
from domain_events.team_events import (
    LineupSetEvent,
    FormationChangedEvent,
    TacticsChangedEvent,
)
from domain_events.match_events import (
    MatchScheduledEvent,
    MatchCompletedEvent,
    GoalScoredEvent,
    SeasonStartedEvent,
)

__all__ = [
    'DomainEvent',
    'EventType',
    'PlayerInjuredEvent',
    'PlayerRecoveredEvent',
    'PlayerSuspendedEvent',
    'PlayerTrainedEvent',
    'PlayerProgressedEvent',
    'LineupSetEvent',
    'FormationChangedEvent',
    'TacticsChangedEvent',
    'MatchScheduledEvent',
    'MatchCompletedEvent',
    'GoalScoredEvent',
    'SeasonStartedEvent',
]
