"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Player and team factories with deterministic ages
- A full, lineup-ready squad
"""

import sys
from datetime import date
from pathlib import Path
from typing import Optional

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    src must come first so tests/<package> directories never shadow the
    real packages of the same name.
    """
    new_path = [p for p in sys.path if p not in (str(tests_path), str(src_path))]
    new_path.insert(0, str(src_path))
    sys.path[:] = new_path


# All ages in the suite are measured on this date
REFERENCE_DATE = date(2025, 7, 1)


def birth_date_for_age(age: int, reference: date = REFERENCE_DATE) -> date:
    """Birth date that makes a player exactly ``age`` on the reference date."""
    return date(reference.year - age, 1, 1)


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


# ============================================================================
# PLAYER FIXTURES
# ============================================================================

@pytest.fixture
def make_player():
    """
    Factory for players.

    Usage:
        player = make_player("p1", Position.MID, age=24, passing=75)

    Attribute keyword arguments override the position defaults.
    """
    from player_management.attributes import Attributes
    from player_management.player import Player
    from player_management.player_types import Position

    def _make(
        player_id: str = "p1",
        position: Position = Position.MID,
        age: int = 25,
        first_name: Optional[str] = None,
        last_name: str = "Player",
        wage: int = 0,
        market_value: int = 0,
        **attribute_overrides
    ) -> Player:
        attributes = Attributes.for_position(Position(position))
        for name, value in attribute_overrides.items():
            setattr(attributes, name, value)

        return Player(
            player_id=player_id,
            first_name=first_name or player_id.upper(),
            last_name=last_name,
            position=position,
            date_of_birth=birth_date_for_age(age),
            wage=wage,
            market_value=market_value,
            attributes=attributes
        )

    return _make


# ============================================================================
# TEAM FIXTURES
# ============================================================================

@pytest.fixture
def make_team():
    """Factory for empty teams."""
    from team_management.team import Team, Stadium

    def _make(team_id: str = "t1", name: str = "Riverside United", **kwargs) -> Team:
        kwargs.setdefault("stadium", Stadium(name="Riverside Park", capacity=30000, city="Riverside"))
        return Team(team_id=team_id, name=name, **kwargs)

    return _make


@pytest.fixture
def full_squad(make_player, make_team):
    """
    Team with 18 available players: 2 GK, 6 DEF, 6 MID, 4 FWD.

    Ids are gk1-2, def1-6, mid1-6, fwd1-4. Ratings fall with the index
    inside each group, so the first player of each group is the strongest,
    and every DEF outrates every MID so recommended defences are all DEFs.
    Ages run 22, 23, ... inside each group. DEF and FWD passing stays at
    or below 60 (no MID cover).
    """
    from player_management.player_types import Position

    def overrides(position, drop):
        if position == Position.GK:
            return {"keeping": 80 - drop}
        if position == Position.DEF:
            return {"tackling": 80 - drop}
        if position == Position.MID:
            return {"passing": 70 - drop, "ball_control": 65 - drop, "tackling": 40, "shooting": 50}
        return {"shooting": 78 - drop, "ball_control": 72 - drop}

    team = make_team()
    layout = [
        (Position.GK, 2),
        (Position.DEF, 6),
        (Position.MID, 6),
        (Position.FWD, 4),
    ]
    for position, count in layout:
        for index in range(count):
            player = make_player(
                player_id=f"{position.value.lower()}{index + 1}",
                position=position,
                age=22 + index,
                wage=1000 * (index + 1),
                market_value=1_000_000 * (index + 1),
                **overrides(position, index * 3)
            )
            team.add_player(player)
    return team
