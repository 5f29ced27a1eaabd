"""Domain model entities for salonledger.

These are pure data classes representing salon concepts, independent of the
database schema. The store owns every entity; instances held in memory are a
read replica and are replaced wholesale whenever the store publishes a new
snapshot.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Union


class BookingStatus(str, Enum):
    """Booking lifecycle status."""

    CONFIRMED = "confirmed"
    PENDING = "pending"


class PaymentMethod(str, Enum):
    """Accepted payment methods."""

    EFECTIVO = "EFECTIVO"
    YAPE = "YAPE"
    PLIN = "PLIN"
    TARJETA = "TARJETA"
    TRANSFERENCIA = "TRANSFERENCIA"


class PeriodUnit(str, Enum):
    """Reporting period granularity."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


EXPENSE_CATEGORIES = (
    "Pago Personal",
    "Luz",
    "Agua",
    "Internet",
    "Local",
    "Insumos",
    "Otros",
)

DEFAULT_ROLE = "Profesional"
DEFAULT_COMMISSION = 40

# Stored commission values are free text from an input box.
CommissionValue = Union[int, float, str, None]


@dataclass(frozen=True)
class Employee:
    """Staff member domain entity."""

    id: str
    name: str
    role: str
    photo: Optional[str]
    avatar_seed: str
    commission: CommissionValue
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Service:
    """Service catalog entry."""

    id: str
    name: str


@dataclass(frozen=True)
class Transaction:
    """Point-of-sale charge.

    ``service_name`` is free text, not a reference to a catalog entry, and
    ``employee_id`` may point at an employee that no longer exists.
    """

    id: str
    employee_id: str
    service_name: str
    price: float
    date: datetime
    payment_method: Optional[str] = None


@dataclass(frozen=True)
class Expense:
    """Expense entry."""

    id: str
    category: str
    amount: float
    description: str
    date: datetime


@dataclass(frozen=True)
class Booking:
    """Client appointment."""

    id: str
    client_name: str
    client_phone: str
    service: str
    professional_id: str
    date: datetime
    status: BookingStatus
    payment_method: Optional[str] = None


@dataclass(frozen=True)
class PeriodRange:
    """Range covering one reporting period.

    ``end`` is the last millisecond of the period; anything before
    ``next_start`` belongs to it, so sub-millisecond timestamps never fall
    between two periods.
    """

    start: datetime
    end: datetime

    @property
    def next_start(self) -> datetime:
        return self.end + timedelta(milliseconds=1)

    def contains(self, moment: datetime) -> bool:
        """Return True if ``moment`` falls inside the range."""
        return self.start <= moment < self.next_start


@dataclass(frozen=True)
class EmployeeTotals:
    """Per-employee aggregation for one period."""

    employee: Employee
    generated: float
    commission_percent: float
    payout: float
    local_profit: float
    transactions: tuple[Transaction, ...] = ()

    @property
    def service_count(self) -> int:
        return len(self.transactions)


@dataclass(frozen=True)
class LedgerTotals:
    """Whole-ledger totals for one period."""

    income: float
    expenses: float

    @property
    def profit(self) -> float:
        return self.income - self.expenses


@dataclass(frozen=True)
class PeriodReport:
    """Aggregated report for one navigated period."""

    unit: PeriodUnit
    offset: int
    range: PeriodRange
    label: str
    ledger: LedgerTotals
    rows: tuple[EmployeeTotals, ...]

    @property
    def total_generated(self) -> float:
        return sum(row.generated for row in self.rows)

    @property
    def total_payout(self) -> float:
        return sum(row.payout for row in self.rows)

    @property
    def total_local_profit(self) -> float:
        return sum(row.local_profit for row in self.rows)


@dataclass(frozen=True)
class ReportRow:
    """One rendered line of the tabular report."""

    label: str
    generated: float
    payout: float
    local_profit: float
    service_count: int
    commission_percent: Optional[float] = None
    is_total: bool = False


@dataclass(frozen=True)
class PartialPayment:
    """One partial entry of a split charge."""

    method: str
    amount: float


@dataclass(frozen=True)
class ChargeLine:
    """A transaction ready to be written to the store."""

    employee_id: str
    service_name: str
    price: float
    date: datetime
    payment_method: Optional[str]

