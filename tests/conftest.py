"""Shared pytest fixtures for salonledger tests."""

import tempfile
import os
from datetime import datetime
import pytest

from salonledger.database.factories import create_sqlite_database
from salonledger.domain.aggregation import ReportService
from salonledger.domain.booking import BookingService
from salonledger.domain.catalog import CatalogService
from salonledger.domain.employee import EmployeeService
from salonledger.domain.expense import ExpenseService
from salonledger.domain.ledger import LedgerService


# Monday 2026-10-19, mid-afternoon
NOW = datetime(2026, 10, 19, 15, 30)


@pytest.fixture
def now():
    """Fixed reference instant for period calculations."""
    return NOW


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def employee_service(temp_db):
    """Create an EmployeeService with a temporary database."""
    return EmployeeService(temp_db)


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def booking_service(temp_db):
    """Create a BookingService with a temporary database."""
    return BookingService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def diana(employee_service):
    """Employee Diana with a 40% commission."""
    employee_id = employee_service.create_employee(
        name="Diana", role="Estilista Senior", commission=40
    )
    return employee_service.get_employee(employee_id)


@pytest.fixture
def yolita(employee_service):
    """Employee Yolita with a 30% commission."""
    employee_id = employee_service.create_employee(
        name="Yolita", role="Maquilladora", commission="30"
    )
    return employee_service.get_employee(employee_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI arguments pointing at the temporary database with the default PIN."""
    return ["--db-path", temp_db.database_path, "--pin", "1234"]
