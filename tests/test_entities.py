"""Tests for domain entities."""

from datetime import datetime

import pytest

from salonledger.domain.entities import (
    Employee,
    EmployeeTotals,
    LedgerTotals,
    PeriodRange,
    Transaction,
)


def test_period_range_contains_is_inclusive():
    period = PeriodRange(
        start=datetime(2026, 10, 19),
        end=datetime(2026, 10, 19, 23, 59, 59, 999000),
    )

    assert period.contains(period.start)
    assert period.contains(period.end)
    assert not period.contains(datetime(2026, 10, 20))


def test_ledger_profit():
    assert LedgerTotals(income=300.0, expenses=120.5).profit == 179.5


def test_employee_totals_service_count():
    employee = Employee("e1", "Diana", "Profesional", None, "Diana", 40)
    when = datetime(2026, 10, 19, 10, 0)
    txns = (
        Transaction("t1", "e1", "Cortes", 50.0, when),
        Transaction("t2", "e1", "Tintes", 30.0, when),
    )

    totals = EmployeeTotals(employee, 80.0, 40.0, 32.0, 48.0, txns)

    assert totals.service_count == 2


def test_entities_are_immutable():
    employee = Employee("e1", "Diana", "Profesional", None, "Diana", 40)

    with pytest.raises(AttributeError):
        employee.name = "Otra"
