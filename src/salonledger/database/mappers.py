"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain never sees ORM rows.
"""

from salonledger.domain import entities as domain
from salonledger.database.models import (
    Booking as ORMBooking,
    Employee as ORMEmployee,
    Expense as ORMExpense,
    Service as ORMService,
    Transaction as ORMTransaction,
)


def employee_to_domain(orm_employee: ORMEmployee) -> domain.Employee:
    """Convert SQLAlchemy Employee model to domain Employee entity."""
    return domain.Employee(
        id=orm_employee.id,
        name=orm_employee.name,
        role=orm_employee.role,
        photo=orm_employee.photo,
        avatar_seed=orm_employee.avatar_seed,
        commission=orm_employee.commission,
        created_at=orm_employee.created_at,
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(id=orm_service.id, name=orm_service.name)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        employee_id=orm_transaction.employee_id,
        service_name=orm_transaction.service_name,
        price=float(orm_transaction.price),
        date=orm_transaction.date,
        payment_method=orm_transaction.payment_method,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        category=orm_expense.category,
        amount=float(orm_expense.amount),
        description=orm_expense.description or "",
        date=orm_expense.date,
    )


def booking_to_domain(orm_booking: ORMBooking) -> domain.Booking:
    """Convert SQLAlchemy Booking model to domain Booking entity."""
    return domain.Booking(
        id=orm_booking.id,
        client_name=orm_booking.client_name,
        client_phone=orm_booking.client_phone or "",
        service=orm_booking.service,
        professional_id=orm_booking.professional_id,
        date=orm_booking.date,
        status=domain.BookingStatus(orm_booking.status),
        payment_method=orm_booking.payment_method,
    )
