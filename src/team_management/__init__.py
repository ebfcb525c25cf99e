"""
Team Management

Team aggregate, lineup rules, squad analysis and club finances.

Main Components:
- Team: roster, captaincy, formation/tactics, form, season record
- Formation / Lineup: supported shapes and the match lineup record
- LineupValidator: three-stage lineup validation
- SquadManager: depth charts, squad aggregates, lineup recommendation
- FinancialManager: transfer affordability, match revenue, season budgets

Usage:
    from team_management import Team, SquadManager

    team = Team("t1", "Riverside United")
    lineup = SquadManager(team).recommend_lineup("4-3-3")
    team.set_lineup(lineup)
"""

from team_management.formation import (
    Formation,
    Lineup,
    FORMATION_REQUIREMENTS,
)
from team_management.tactics import TeamTactics, Mentality, PassingStyle, default_tactics
from team_management.lineup_validator import LineupValidator
from team_management.team import Team, Stadium, MatchResult, TeamSeasonStats
from team_management.squad_manager import SquadManager
from team_management.finances import FinancialManager, Transaction, TransactionType

__all__ = [
    'Formation',
    'Lineup',
    'FORMATION_REQUIREMENTS',
    'TeamTactics',
    'Mentality',
    'PassingStyle',
    'default_tactics',
    'LineupValidator',
    'Team',
    'Stadium',
    'MatchResult',
    'TeamSeasonStats',
    'SquadManager',
    'FinancialManager',
    'Transaction',
    'TransactionType',
]
