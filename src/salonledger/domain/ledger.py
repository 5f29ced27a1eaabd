"""Point-of-sale ledger domain service."""

from datetime import datetime
from typing import Optional

from loguru import logger

from salonledger.database.base import Database
from salonledger.domain.entities import Transaction as TransactionEntity
from salonledger.domain.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
    employee_not_found,
    transaction_not_found,
)
from salonledger.domain.split_payment import ChargeDraft
from salonledger.utils.amount_parser import parse_positive_amount


class LedgerService:
    """Service for registering charges and managing the ledger."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_charge(
        self,
        employee_id: str,
        service_name: str,
        price,
        draft: Optional[ChargeDraft] = None,
        when: Optional[datetime] = None,
    ) -> list[str]:
        """Register a charge for a service performed by an employee.

        Everything is validated before the first write, so a rejected charge
        leaves the ledger unchanged.

        Args:
            employee_id: Employee who performed the service
            service_name: Service name (free text)
            price: Charge total, as typed or as a number
            draft: Payment draft (defaults to a single cash payment)
            when: Charge timestamp (defaults to now)

        Returns:
            IDs of the created transactions

        Raises:
            NotFoundError: If the employee doesn't exist
            ValidationError: If price is not positive or the split doesn't add up
        """
        if self.db.get_employee(employee_id) is None:
            raise NotFoundError(employee_not_found(employee_id))

        try:
            total = parse_positive_amount(price, "Price")
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if draft is None:
            draft = ChargeDraft()

        lines = draft.commit(employee_id, service_name, total, when)
        return [
            self.db.create_transaction(
                employee_id=line.employee_id,
                service_name=line.service_name,
                price=line.price,
                date=line.date,
                payment_method=line.payment_method,
            )
            for line in lines
        ]

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first."""
        return self.db.list_transactions(start=start, end=end, employee_id=employee_id)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)

    def reset_ledger(self) -> tuple[int, int]:
        """Delete every transaction and expense, one entry at a time.

        Entries are deleted independently: a failure is logged and the loop
        moves on, and earlier deletions are not rolled back.

        Returns:
            Tuple of (deleted count, failed count)
        """
        deleted = 0
        failed = 0
        for txn in self.db.list_transactions():
            try:
                self.db.delete_transaction(txn.id)
                deleted += 1
            except DomainError as e:
                failed += 1
                logger.error("Could not delete transaction {}: {}", txn.id, e)
        for exp in self.db.list_expenses():
            try:
                self.db.delete_expense(exp.id)
                deleted += 1
            except DomainError as e:
                failed += 1
                logger.error("Could not delete expense {}: {}", exp.id, e)
        logger.info("Ledger reset: {} deleted, {} failed", deleted, failed)
        return deleted, failed
