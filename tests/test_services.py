"""Tests for the employee, catalog, ledger, expense and booking services."""

from datetime import datetime, timedelta

import pytest

from salonledger.domain.entities import BookingStatus, PaymentMethod
from salonledger.domain.errors import (
    NotFoundError,
    SplitMismatchError,
    ValidationError,
)
from salonledger.domain.split_payment import ChargeDraft

NOW = datetime(2026, 10, 19, 15, 30)


class TestEmployeeService:
    def test_defaults(self, employee_service):
        employee_id = employee_service.create_employee("  Rosa  ")

        employee = employee_service.get_employee(employee_id)
        assert employee.name == "Rosa"
        assert employee.role == "Profesional"
        assert employee.commission == 40
        assert employee.avatar_seed == "Rosa"

    @pytest.mark.parametrize("commission", [0, "", "abc", None])
    def test_invalid_commission_falls_back_to_default(self, employee_service, commission):
        employee_id = employee_service.create_employee("Rosa", commission=commission)

        assert employee_service.get_employee(employee_id).commission == 40

    def test_string_commission_is_normalized(self, employee_service):
        employee_id = employee_service.create_employee("Rosa", commission="35")

        assert employee_service.get_employee(employee_id).commission == 35

    def test_empty_name(self, employee_service):
        with pytest.raises(ValidationError, match="Name"):
            employee_service.create_employee("   ")

    def test_update_commission_keeps_raw_value(self, employee_service, diana):
        employee_service.update_commission(diana.id, "abc")

        assert employee_service.get_employee(diana.id).commission == "abc"

    def test_find_employee(self, employee_service, diana, yolita):
        assert employee_service.find_employee(diana.id) == diana
        assert employee_service.find_employee("yolita").id == yolita.id
        with pytest.raises(NotFoundError):
            employee_service.find_employee("Nadie")

    def test_find_ambiguous_name(self, employee_service, diana):
        employee_service.create_employee("Diana")

        with pytest.raises(ValidationError, match="More than one"):
            employee_service.find_employee("Diana")

    def test_delete_missing(self, employee_service):
        with pytest.raises(NotFoundError):
            employee_service.delete_employee("missing")


class TestCatalogService:
    def test_create_list_delete(self, catalog_service):
        service_id = catalog_service.create_service("Cortes")

        assert [s.name for s in catalog_service.list_services()] == ["Cortes"]
        catalog_service.delete_service(service_id)
        assert catalog_service.list_services() == []

    def test_empty_name(self, catalog_service):
        with pytest.raises(ValidationError):
            catalog_service.create_service("")

    def test_delete_missing(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.delete_service("missing")


class TestLedgerService:
    def test_single_charge(self, ledger_service, diana):
        ids = ledger_service.register_charge(diana.id, "Cortes", "S/. 45", when=NOW)

        assert len(ids) == 1
        txn = ledger_service.get_transaction(ids[0])
        assert txn.price == 45.0
        assert txn.payment_method == PaymentMethod.EFECTIVO.value
        assert txn.date == NOW

    def test_split_charge(self, ledger_service, diana):
        draft = ChargeDraft()
        draft.add_partial("EFECTIVO", 60)
        draft.add_partial("YAPE", 39.95)

        ids = ledger_service.register_charge(diana.id, "Tintes", 100, draft=draft, when=NOW)

        txns = [ledger_service.get_transaction(i) for i in ids]
        assert [t.service_name for t in txns] == [
            "Tintes (Part. EFECTIVO)",
            "Tintes (Part. YAPE)",
        ]
        assert all(t.date == NOW for t in txns)

    def test_rejected_split_writes_nothing(self, ledger_service, diana):
        draft = ChargeDraft()
        draft.add_partial("EFECTIVO", 60)
        draft.add_partial("YAPE", 30)

        with pytest.raises(SplitMismatchError):
            ledger_service.register_charge(diana.id, "Tintes", 100, draft=draft, when=NOW)

        assert ledger_service.list_transactions() == []

    @pytest.mark.parametrize("price", ["0", "-10", "abc"])
    def test_invalid_price(self, ledger_service, diana, price):
        with pytest.raises(ValidationError):
            ledger_service.register_charge(diana.id, "Cortes", price)

        assert ledger_service.list_transactions() == []

    def test_unknown_employee(self, ledger_service):
        with pytest.raises(NotFoundError):
            ledger_service.register_charge("missing", "Cortes", 50)

    def test_delete_transaction(self, ledger_service, diana):
        (txn_id,) = ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)

        ledger_service.delete_transaction(txn_id)

        assert ledger_service.get_transaction(txn_id) is None
        with pytest.raises(NotFoundError):
            ledger_service.delete_transaction(txn_id)

    def test_reset_ledger(self, ledger_service, expense_service, employee_service, diana):
        ledger_service.register_charge(diana.id, "Cortes", 50, when=NOW)
        ledger_service.register_charge(diana.id, "Tintes", 30, when=NOW)
        expense_service.register_expense("Luz", 20, when=NOW)

        deleted, failed = ledger_service.reset_ledger()

        assert (deleted, failed) == (3, 0)
        assert ledger_service.list_transactions() == []
        assert expense_service.month_history(NOW) == []
        # Staff and settings are untouched
        assert employee_service.list_employees() == [diana]

    def test_reset_ledger_continues_after_failure(self, ledger_service, temp_db, diana, monkeypatch):
        ids = []
        for price in (10, 20, 30):
            ids.extend(ledger_service.register_charge(diana.id, "Cortes", price, when=NOW))
        real_delete = temp_db.delete_transaction

        def flaky_delete(transaction_id):
            if transaction_id == ids[1]:
                raise NotFoundError("gone")
            real_delete(transaction_id)

        monkeypatch.setattr(temp_db, "delete_transaction", flaky_delete)

        deleted, failed = ledger_service.reset_ledger()

        assert (deleted, failed) == (2, 1)
        assert [t.id for t in ledger_service.list_transactions()] == [ids[1]]


class TestExpenseService:
    def test_register_and_history(self, expense_service):
        expense_id = expense_service.register_expense("Insumos", "S/. 35.50", "tintes", NOW)
        expense_service.register_expense("Local", 500, when=NOW - timedelta(days=31))

        history = expense_service.month_history(NOW)
        assert [e.id for e in history] == [expense_id]
        assert history[0].amount == 35.5
        assert history[0].description == "tintes"

    def test_unknown_category(self, expense_service):
        with pytest.raises(ValidationError, match="Unknown expense category"):
            expense_service.register_expense("Viajes", 10)

    def test_non_positive_amount(self, expense_service):
        with pytest.raises(ValidationError):
            expense_service.register_expense("Luz", 0)

    def test_delete(self, expense_service):
        expense_id = expense_service.register_expense("Luz", 10, when=NOW)

        expense_service.delete_expense(expense_id)

        assert expense_service.month_history(NOW) == []
        with pytest.raises(NotFoundError):
            expense_service.delete_expense(expense_id)


class TestBookingService:
    def test_create_booking(self, booking_service, diana):
        booking_id = booking_service.create_booking(
            client_name="Carla",
            service="Manicure",
            professional_id=diana.id,
            date=NOW + timedelta(days=1),
            client_phone=" 999888777 ",
        )

        booking = booking_service.get_booking(booking_id)
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.client_phone == "999888777"
        assert booking.professional_id == diana.id

    def test_double_booking_and_past_dates_allowed(self, booking_service, diana):
        when = NOW - timedelta(days=3)
        booking_service.create_booking("Carla", "Cortes", diana.id, when)
        booking_service.create_booking("Lucia", "Cortes", diana.id, when)

        assert len(booking_service.list_bookings()) == 2

    def test_list_sorted_by_date(self, booking_service, diana):
        booking_service.create_booking("Late", "Cortes", diana.id, NOW + timedelta(days=2))
        booking_service.create_booking("Early", "Cortes", diana.id, NOW)

        assert [b.client_name for b in booking_service.list_bookings()] == ["Early", "Late"]

    @pytest.mark.parametrize(
        "field,kwargs",
        [
            ("Client name", {"client_name": ""}),
            ("Service", {"service": " "}),
            ("Date", {"date": None}),
        ],
    )
    def test_required_fields(self, booking_service, diana, field, kwargs):
        values = {
            "client_name": "Carla",
            "service": "Manicure",
            "professional_id": diana.id,
            "date": NOW,
        }
        values.update(kwargs)

        with pytest.raises(ValidationError, match=field):
            booking_service.create_booking(**values)

    def test_unknown_professional(self, booking_service):
        with pytest.raises(NotFoundError):
            booking_service.create_booking("Carla", "Manicure", "missing", NOW)

    def test_cancel(self, booking_service, diana):
        booking_id = booking_service.create_booking("Carla", "Manicure", diana.id, NOW)

        booking_service.cancel_booking(booking_id)

        assert booking_service.list_bookings() == []
        with pytest.raises(NotFoundError):
            booking_service.cancel_booking(booking_id)
