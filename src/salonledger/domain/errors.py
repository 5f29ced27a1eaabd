"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class SplitMismatchError(ValidationError):
    """Split partials do not add up to the charge total."""

    def __init__(self, difference: float):
        self.difference = difference
        super().__init__(split_mismatch(difference))


class EmptyReportError(ValidationError):
    """A messaging report was requested for a range with no transactions."""


class AccessDeniedError(DomainError):
    """Entered admin code does not match the stored secret."""


class InvalidTransitionError(DomainError):
    """Navigation event is not allowed from the current view state."""


class PersistenceError(DomainError):
    """A write to the store failed and was rolled back."""


def employee_not_found(employee_id: str) -> str:
    """Return message for missing employee."""
    return f"Employee {employee_id} not found"


def service_not_found(service_id: str) -> str:
    """Return message for missing catalog service."""
    return f"Service {service_id} not found"


def booking_not_found(booking_id: str) -> str:
    """Return message for missing booking."""
    return f"Booking {booking_id} not found"


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def non_positive_amount(field_name: str) -> str:
    """Return message for a zero or negative amount."""
    return f"{field_name} must be greater than zero"


def missing_field(field_name: str) -> str:
    """Return message for a required field left empty."""
    return f"{field_name} is required"


def split_mismatch(difference: float) -> str:
    """Return message when split partials do not cover the charge total.

    A positive difference is still owed; a negative one is an excess.
    """
    if difference > 0:
        return f"Split payments are short by {difference:.2f}"
    return f"Split payments exceed the total by {abs(difference):.2f}"


def empty_report(employee_name: str) -> str:
    """Return message for a messaging report with nothing to send."""
    return f"{employee_name} has no services in the selected period"
