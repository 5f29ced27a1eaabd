"""Tests for the live read replica."""

from datetime import datetime

import pytest

from salonledger.database.base import TRANSACTIONS
from salonledger.domain.replica import LiveReplica

NOW = datetime(2026, 10, 19, 15, 30)


@pytest.fixture
def replica(temp_db):
    replica = LiveReplica(temp_db)
    yield replica
    replica.stop()


def test_start_loads_current_contents(replica, ledger_service, diana):
    ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)

    replica.start()

    assert [e.name for e in replica.employees] == ["Diana"]
    assert len(replica.transactions) == 1


def test_writes_replace_collections(replica, ledger_service, expense_service, diana):
    replica.start()

    ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)
    expense_service.register_expense("Luz", 20, when=NOW)

    assert len(replica.transactions) == 1
    assert len(replica.expenses) == 1


def test_views_are_recomputed_on_change(replica, ledger_service, diana):
    generated = []

    def track(current, collection):
        if collection == TRANSACTIONS:
            generated.append(current.report("day", 0, NOW).total_generated)

    replica.on_change(track)
    replica.start()
    ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)
    ledger_service.register_charge(diana.id, "Tintes", 30, when=NOW)

    assert generated == [0, 50, 80]


def test_deleted_employee_leaves_orphans(replica, employee_service, ledger_service, diana):
    ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)
    replica.start()

    employee_service.delete_employee(diana.id)

    assert replica.employee(diana.id) is None
    report = replica.report("day", 0, NOW)
    assert report.rows == ()
    assert report.ledger.income == 50


def test_stop_detaches(replica, ledger_service, diana):
    replica.start()
    replica.stop()

    ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)

    assert replica.transactions == []
