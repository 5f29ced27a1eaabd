"""In-memory read replica of the store.

The replica subscribes to every collection and replaces its copy wholesale on
each snapshot, then re-derives every registered view. Cost is proportional to
the size of the ledger on each update.
"""

from datetime import datetime
from typing import Callable, Optional

from salonledger.database.base import (
    BOOKINGS,
    COLLECTIONS,
    EMPLOYEES,
    EXPENSES,
    SERVICES,
    TRANSACTIONS,
    Database,
    Unsubscribe,
)
from salonledger.domain.aggregation import build_report
from salonledger.domain.entities import (
    Booking,
    Employee,
    Expense,
    PeriodReport,
    PeriodUnit,
    Service,
    Transaction,
)

ChangeCallback = Callable[["LiveReplica", str], None]


class LiveReplica:
    """Current copy of all five collections."""

    def __init__(self, db: Database):
        self.db = db
        self.employees: list[Employee] = []
        self.services: list[Service] = []
        self.transactions: list[Transaction] = []
        self.expenses: list[Expense] = []
        self.bookings: list[Booking] = []
        self._callbacks: list[ChangeCallback] = []
        self._unsubscribes: list[Unsubscribe] = []

    def start(self) -> None:
        """Subscribe to every collection; each delivers its snapshot at once."""
        if self._unsubscribes:
            return
        for collection in COLLECTIONS:
            self._unsubscribes.append(
                self.db.subscribe(collection, self._replacer(collection))
            )

    def stop(self) -> None:
        for unsubscribe in self._unsubscribes:
            unsubscribe()
        self._unsubscribes = []

    def on_change(self, callback: ChangeCallback) -> None:
        """Register a view to re-derive after every snapshot."""
        self._callbacks.append(callback)

    def _replacer(self, collection: str) -> Callable[[list], None]:
        attribute = {
            EMPLOYEES: "employees",
            SERVICES: "services",
            TRANSACTIONS: "transactions",
            EXPENSES: "expenses",
            BOOKINGS: "bookings",
        }[collection]

        def replace(items: list) -> None:
            setattr(self, attribute, list(items))
            for callback in list(self._callbacks):
                callback(self, collection)

        return replace

    def employee(self, employee_id: str) -> Optional[Employee]:
        """Look up an employee; orphaned references return None."""
        for emp in self.employees:
            if emp.id == employee_id:
                return emp
        return None

    def report(
        self,
        unit: PeriodUnit = PeriodUnit.WEEK,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> PeriodReport:
        """Aggregate the replica's current contents."""
        return build_report(
            employees=self.employees,
            transactions=self.transactions,
            expenses=self.expenses,
            unit=unit,
            offset=offset,
            now=now,
        )
