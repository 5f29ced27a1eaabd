"""Employee domain service."""

from typing import Optional

from salonledger.database.base import Database
from salonledger.domain.entities import (
    DEFAULT_COMMISSION,
    DEFAULT_ROLE,
    CommissionValue,
    Employee as EmployeeEntity,
)
from salonledger.domain.errors import (
    NotFoundError,
    ValidationError,
    employee_not_found,
    missing_field,
)
from salonledger.utils.commission import coerce_commission


class EmployeeService:
    """Service for managing staff."""

    def __init__(self, db: Database):
        """Initialize employee service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_employee(
        self,
        name: str,
        role: Optional[str] = None,
        commission: CommissionValue = DEFAULT_COMMISSION,
        photo: Optional[str] = None,
    ) -> str:
        """Create a new employee.

        Args:
            name: Employee name
            role: Job title (defaults to "Profesional")
            commission: Commission percentage; zero or non-numeric input falls
                back to the default of 40
            photo: Optional photo reference

        Returns:
            Employee ID

        Raises:
            ValidationError: If name is empty
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(missing_field("Name"))

        percent = coerce_commission(commission) or DEFAULT_COMMISSION
        if percent == int(percent):
            percent = int(percent)

        return self.db.create_employee(
            name=name,
            role=(role or "").strip() or DEFAULT_ROLE,
            avatar_seed=name,
            commission=percent,
            photo=photo,
        )

    def get_employee(self, employee_id: str) -> Optional[EmployeeEntity]:
        """Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee entity or None if not found
        """
        return self.db.get_employee(employee_id)

    def require_employee(self, employee_id: str) -> EmployeeEntity:
        """Get employee by ID, raising if it does not exist."""
        employee = self.db.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(employee_not_found(employee_id))
        return employee

    def find_employee(self, identifier: str) -> EmployeeEntity:
        """Resolve an employee by ID or case-insensitive name.

        Raises:
            NotFoundError: If nothing matches
            ValidationError: If the name matches more than one employee
        """
        employee = self.db.get_employee(identifier)
        if employee is not None:
            return employee

        wanted = identifier.strip().casefold()
        matches = [emp for emp in self.db.list_employees() if emp.name.casefold() == wanted]
        if not matches:
            raise NotFoundError(employee_not_found(identifier))
        if len(matches) > 1:
            raise ValidationError(
                f"More than one employee is named '{identifier}'; use the ID instead"
            )
        return matches[0]

    def list_employees(self) -> list[EmployeeEntity]:
        """List all employees."""
        return self.db.list_employees()

    def update_commission(self, employee_id: str, commission: CommissionValue) -> None:
        """Store a commission value exactly as typed.

        Invalid text is accepted and reads back as 0%.
        """
        self.require_employee(employee_id)
        self.db.update_employee_commission(employee_id, commission)

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee; their past transactions stay in the ledger."""
        self.require_employee(employee_id)
        self.db.delete_employee(employee_id)
