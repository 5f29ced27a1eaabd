"""Expense domain service."""

from datetime import datetime
from typing import Optional

from salonledger.database.base import Database
from salonledger.domain.entities import EXPENSE_CATEGORIES, Expense as ExpenseEntity, PeriodUnit
from salonledger.domain.errors import (
    NotFoundError,
    ValidationError,
    expense_not_found,
)
from salonledger.domain.period import get_period_range
from salonledger.utils.amount_parser import parse_positive_amount


class ExpenseService:
    """Service for recording salon expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_expense(
        self,
        category: str,
        amount,
        description: str = "",
        when: Optional[datetime] = None,
    ) -> str:
        """Record an expense.

        Args:
            category: One of EXPENSE_CATEGORIES
            amount: Amount, as typed or as a number
            description: Optional note
            when: Expense timestamp (defaults to now)

        Returns:
            Expense ID

        Raises:
            ValidationError: If category is unknown or amount is not positive
        """
        if category not in EXPENSE_CATEGORIES:
            raise ValidationError(
                f"Unknown expense category '{category}'. "
                f"Choose one of: {', '.join(EXPENSE_CATEGORIES)}"
            )
        try:
            value = parse_positive_amount(amount, "Amount")
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return self.db.create_expense(
            category=category,
            amount=value,
            description=(description or "").strip(),
            date=when or datetime.now(),
        )

    def month_history(self, now: Optional[datetime] = None) -> list[ExpenseEntity]:
        """Expenses of the current month, newest first."""
        period = get_period_range(PeriodUnit.MONTH, 0, now)
        return self.db.list_expenses(start=period.start, end=period.end)

    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If expense doesn't exist
        """
        if self.db.get_expense(expense_id) is None:
            raise NotFoundError(expense_not_found(expense_id))
        self.db.delete_expense(expense_id)
