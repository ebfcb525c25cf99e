"""
Team Finances

Budget checks for transfers, match-day revenue, end-of-season budget
setting, and a simple transaction ledger.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, List, Optional

from shared.domain_errors import BudgetExceededError
from team_management.team import Team


class TransactionType(str, Enum):
    TRANSFER_IN = "transfer_in"     # player bought
    TRANSFER_OUT = "transfer_out"   # player sold
    WAGES = "wages"
    TICKET_SALES = "ticket_sales"
    SPONSORSHIP = "sponsorship"
    PRIZE_MONEY = "prize_money"
    OTHER = "other"


# Money leaving the club; everything else is credited
EXPENSE_TYPES: FrozenSet[TransactionType] = frozenset({
    TransactionType.TRANSFER_IN,
    TransactionType.WAGES,
})

BASE_TICKET_PRICE = 30
PREMIUM_UTILIZATION = 0.9
PREMIUM_PRICE_MULTIPLIER = 1.2
MATCHDAY_EXTRAS_MULTIPLIER = 1.3  # concessions, parking

BASE_SEASON_BUDGET = 10_000_000
WEEKS_PER_SEASON = 52

CUP_PROGRESS_BONUS = {
    "winner": 5_000_000,
    "final": 3_000_000,
    "semi": 1_500_000,
    "quarter": 500_000,
}


@dataclass
class Transaction:
    """One ledger entry. ``amount`` is always positive for typed flows."""
    type: TransactionType
    amount: int
    description: str = ""
    player_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        self.type = TransactionType(self.type)
        if self.amount < 0 and self.type != TransactionType.OTHER:
            raise ValueError(f"{self.type.value} amount must be >= 0, got {self.amount}")

    @property
    def signed_amount(self) -> int:
        """Effect on the budget: negative for expenses."""
        return -self.amount if self.type in EXPENSE_TYPES else self.amount


class FinancialManager:
    """Handles a team's budget and ledger"""

    def __init__(self, team: Team):
        self.team = team
        self.transactions: List[Transaction] = []
        self.logger = logging.getLogger(__name__)

    def total_wages(self) -> int:
        return self.team.wage_bill()

    def wage_budget_remaining(self) -> int:
        return self.team.wage_budget_remaining()

    def can_afford_transfer(self, fee: int, wages: int) -> bool:
        """Fee fits the transfer budget and the extra wages fit the wage budget."""
        if fee > self.team.budget:
            return False
        return self.total_wages() + wages <= self.team.wage_budget

    def ensure_can_afford(self, fee: int, wages: int) -> None:
        """
        Raises:
            BudgetExceededError: Fee exceeds budget (BUDGET_EXCEEDED) or the
                wages would exceed the wage budget (WAGE_BUDGET_EXCEEDED)
        """
        if fee > self.team.budget:
            raise BudgetExceededError(required=fee, remaining=self.team.budget)
        if self.total_wages() + wages > self.team.wage_budget:
            raise BudgetExceededError(required=wages, remaining=self.wage_budget_remaining(), wages=True)

    def process_match_revenue(self, attendance: int, is_home: bool) -> int:
        """
        Match-day income from a fixture.

        Away fixtures earn nothing. Tickets cost 30, rising to 36 when the
        stadium is more than 90% full; extras add 30% on top.
        """
        if not is_home:
            return 0

        ticket_price = BASE_TICKET_PRICE
        capacity = self.team.stadium.capacity
        if capacity > 0 and attendance / capacity > PREMIUM_UTILIZATION:
            ticket_price = int(ticket_price * PREMIUM_PRICE_MULTIPLIER)

        revenue = ticket_price * attendance
        return int(revenue * MATCHDAY_EXTRAS_MULTIPLIER)

    def calculate_season_budget(self, league_position: int, cup_progress: str = "") -> int:
        """
        Set next season's transfer and wage budgets from final standings.

        Args:
            league_position: Final league position (1 = champions)
            cup_progress: "winner", "final", "semi", "quarter", or anything else for no bonus

        Returns:
            The new transfer budget
        """
        budget = BASE_SEASON_BUDGET
        if league_position <= 3:
            budget *= 3
        elif league_position <= 6:
            budget *= 2
        elif league_position <= 10:
            budget = int(budget * 1.5)

        budget += CUP_PROGRESS_BONUS.get(cup_progress, 0)

        self.team.budget = budget
        self.team.wage_budget = budget // WEEKS_PER_SEASON
        self.logger.info(
            f"{self.team.name}: season budget {budget:,} "
            f"(wage budget {self.team.wage_budget:,}/week)"
        )
        return budget

    def record_transaction(self, transaction: Transaction) -> int:
        """
        Add a transaction to the ledger and apply it to the budget.

        Returns:
            The team's budget afterwards
        """
        self.transactions.append(transaction)
        self.team.budget += transaction.signed_amount
        self.logger.debug(
            f"{self.team.name}: {transaction.type.value} {transaction.signed_amount:+,} "
            f"-> budget {self.team.budget:,}"
        )
        return self.team.budget
