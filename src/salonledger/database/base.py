"""Abstract database interface.

The store is the only source of truth. Besides CRUD it publishes a full
snapshot of a collection to every subscriber after each change to that
collection.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from salonledger.domain.entities import (
    Booking,
    BookingStatus,
    CommissionValue,
    Employee,
    Expense,
    Service,
    Transaction,
)

EMPLOYEES = "employees"
SERVICES = "services"
TRANSACTIONS = "transactions"
EXPENSES = "expenses"
BOOKINGS = "bookings"

COLLECTIONS = (EMPLOYEES, SERVICES, TRANSACTIONS, EXPENSES, BOOKINGS)

PIN_SETTING = "pin"

SnapshotListener = Callable[[list[Any]], None]
Unsubscribe = Callable[[], None]


class Database(ABC):
    """Abstract database interface for salonledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Live snapshots
    @abstractmethod
    def subscribe(self, collection: str, listener: SnapshotListener) -> Unsubscribe:
        """Register a listener for full-collection snapshots.

        The listener receives the current snapshot immediately and again after
        every change to the collection. Returns a callable that removes the
        listener.
        """
        pass

    # Employee operations
    @abstractmethod
    def create_employee(
        self,
        name: str,
        role: str,
        avatar_seed: str,
        commission: CommissionValue,
        photo: Optional[str] = None,
    ) -> str:
        """Create an employee. Returns employee ID."""
        pass

    @abstractmethod
    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Get employee by ID."""
        pass

    @abstractmethod
    def list_employees(self) -> list[Employee]:
        """List all employees in creation order."""
        pass

    @abstractmethod
    def update_employee_commission(self, employee_id: str, commission: CommissionValue) -> None:
        """Store a new commission value exactly as given."""
        pass

    @abstractmethod
    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee. Their transactions are left untouched."""
        pass

    # Service catalog operations
    @abstractmethod
    def create_service(self, name: str) -> str:
        """Create a catalog service. Returns service ID."""
        pass

    @abstractmethod
    def get_service(self, service_id: str) -> Optional[Service]:
        """Get catalog service by ID."""
        pass

    @abstractmethod
    def list_services(self) -> list[Service]:
        """List catalog services."""
        pass

    @abstractmethod
    def delete_service(self, service_id: str) -> None:
        """Delete a catalog service."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        employee_id: str,
        service_name: str,
        price: float,
        date: datetime,
        payment_method: Optional[str] = None,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions ordered by date descending.

        Args:
            start: Optional inclusive lower bound
            end: Optional inclusive upper bound
            employee_id: Optional employee filter
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self, category: str, amount: float, description: str, date: datetime
    ) -> str:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: str) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Expense]:
        """List expenses ordered by date descending."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense."""
        pass

    # Booking operations
    @abstractmethod
    def create_booking(
        self,
        client_name: str,
        client_phone: str,
        service: str,
        professional_id: str,
        date: datetime,
        status: BookingStatus = BookingStatus.CONFIRMED,
        payment_method: Optional[str] = None,
    ) -> str:
        """Create a booking. Returns booking ID."""
        pass

    @abstractmethod
    def get_booking(self, booking_id: str) -> Optional[Booking]:
        """Get booking by ID."""
        pass

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """List all bookings (unordered)."""
        pass

    @abstractmethod
    def delete_booking(self, booking_id: str) -> None:
        """Delete a booking."""
        pass

    # settings/config document
    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Read one field of the settings document."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Write one field of the settings document, keeping the others."""
        pass
