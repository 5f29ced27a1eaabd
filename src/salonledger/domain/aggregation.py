"""Period aggregation domain service."""

from datetime import datetime
from typing import Iterable, Optional, Sequence, TypeVar, Union

from salonledger.database.base import Database
from salonledger.domain.entities import (
    Employee,
    EmployeeTotals,
    Expense,
    LedgerTotals,
    PeriodRange,
    PeriodReport,
    PeriodUnit,
    Transaction,
)
from salonledger.domain.period import get_period_range, period_label
from salonledger.utils.commission import coerce_commission

# Currency amounts are floats; sums are compared with this tolerance.
CURRENCY_TOLERANCE = 0.1

Dated = TypeVar("Dated", Transaction, Expense)


def filter_in_range(items: Iterable[Dated], period: PeriodRange) -> list[Dated]:
    """Keep the items whose date falls inside ``period`` (both ends inclusive)."""
    return [item for item in items if period.contains(item.date)]


def compute_employee_totals(
    employee: Employee,
    transactions: Iterable[Transaction],
    period: PeriodRange,
) -> EmployeeTotals:
    """Aggregate one employee's transactions inside a period.

    Args:
        employee: Employee to aggregate
        transactions: Any transactions; other employees' entries are ignored
        period: Range to aggregate

    Returns:
        EmployeeTotals (all zeros when the employee has nothing in range)
    """
    own = tuple(
        txn
        for txn in transactions
        if txn.employee_id == employee.id and period.contains(txn.date)
    )
    generated = sum(txn.price for txn in own)
    commission = coerce_commission(employee.commission)
    payout = generated * commission / 100
    return EmployeeTotals(
        employee=employee,
        generated=generated,
        commission_percent=commission,
        payout=payout,
        local_profit=generated - payout,
        transactions=own,
    )


def compute_ledger_totals(
    transactions: Iterable[Transaction],
    expenses: Iterable[Expense],
    period: PeriodRange,
) -> LedgerTotals:
    """Whole-ledger income and expenses inside a period.

    Transactions are not keyed by employee here, so entries that belong to a
    deleted employee still count as income.
    """
    income = sum(txn.price for txn in filter_in_range(transactions, period))
    spent = sum(exp.amount for exp in filter_in_range(expenses, period))
    return LedgerTotals(income=income, expenses=spent)


def build_report(
    employees: Sequence[Employee],
    transactions: Sequence[Transaction],
    expenses: Sequence[Expense],
    unit: Union[PeriodUnit, str],
    offset: int = 0,
    now: Optional[datetime] = None,
) -> PeriodReport:
    """Aggregate everything for one navigated period.

    One row is produced per current employee, in roster order. Transactions
    whose employee no longer exists only contribute to the ledger totals.
    """
    unit = PeriodUnit(unit)
    period = get_period_range(unit, offset, now)
    in_range = filter_in_range(transactions, period)
    rows = tuple(compute_employee_totals(emp, in_range, period) for emp in employees)
    return PeriodReport(
        unit=unit,
        offset=offset,
        range=period,
        label=period_label(unit, period),
        ledger=compute_ledger_totals(in_range, expenses, period),
        rows=rows,
    )


def amounts_match(expected: float, actual: float) -> bool:
    """Compare two currency amounts within CURRENCY_TOLERANCE.

    The difference is rounded to cents first so float drift on an exact
    0.10 gap does not tip it over the tolerance.
    """
    return round(abs(expected - actual), 2) <= CURRENCY_TOLERANCE


class ReportService:
    """Service for building period reports from the store."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_period_report(
        self,
        unit: Union[PeriodUnit, str] = PeriodUnit.WEEK,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> PeriodReport:
        """Build the report for ``unit``/``offset`` relative to ``now``.

        Args:
            unit: Period unit (day, week, month)
            offset: Periods to move from the current one
            now: Reference instant (defaults to the current time)

        Returns:
            PeriodReport with per-employee rows and ledger totals
        """
        period = get_period_range(unit, offset, now)
        return build_report(
            employees=self.db.list_employees(),
            transactions=self.db.list_transactions(start=period.start, end=period.end),
            expenses=self.db.list_expenses(start=period.start, end=period.end),
            unit=unit,
            offset=offset,
            now=now,
        )

    def employee_totals(
        self,
        employee: Employee,
        unit: Union[PeriodUnit, str] = PeriodUnit.WEEK,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> EmployeeTotals:
        """Aggregate a single employee for one period."""
        period = get_period_range(unit, offset, now)
        transactions = self.db.list_transactions(
            start=period.start, end=period.end, employee_id=employee.id
        )
        return compute_employee_totals(employee, transactions, period)

    def today_totals(self, now: Optional[datetime] = None) -> list[EmployeeTotals]:
        """Per-employee totals generated today, for the dashboard home."""
        return list(self.build_period_report(PeriodUnit.DAY, 0, now).rows)

    def monthly_overview(self, now: Optional[datetime] = None) -> LedgerTotals:
        """Current-month income, expenses and net cash."""
        return self.build_period_report(PeriodUnit.MONTH, 0, now).ledger
