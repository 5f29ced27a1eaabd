"""Charge draft with single or split payment.

A charge is settled either with one payment method (single mode) or across
several partial payments (split mode). Partials are collected freely and only
checked against the charge total on commit.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from salonledger.domain.aggregation import amounts_match
from salonledger.domain.entities import ChargeLine, PartialPayment, PaymentMethod
from salonledger.domain.errors import (
    SplitMismatchError,
    ValidationError,
    missing_field,
    non_positive_amount,
)
from salonledger.utils.amount_parser import parse_amount


class PaymentMode(str, Enum):
    SINGLE = "single"
    SPLIT = "split"


def normalize_method(method: Union[PaymentMethod, str]) -> str:
    """Return the stored spelling of a payment method."""
    if isinstance(method, PaymentMethod):
        return method.value
    text = str(method).strip().upper()
    if not text:
        raise ValidationError(missing_field("Payment method"))
    return text


def partial_service_name(service_name: str, method: str) -> str:
    """Annotate a service name as one part of a split charge."""
    return f"{service_name} (Part. {method})"


class ChargeDraft:
    """Accumulates the payment side of a charge until it is committed."""

    def __init__(self, method: Union[PaymentMethod, str, None] = PaymentMethod.EFECTIVO):
        self.mode = PaymentMode.SINGLE
        self.method: Optional[str] = normalize_method(method) if method else None
        self.partials: list[PartialPayment] = []

    def select_method(self, method: Union[PaymentMethod, str]) -> None:
        """Choose the payment method used in single mode."""
        self.method = normalize_method(method)

    def enable_split(self) -> None:
        self.mode = PaymentMode.SPLIT

    def disable_split(self) -> None:
        """Go back to single mode, discarding every partial entry."""
        self.mode = PaymentMode.SINGLE
        self.partials = []

    @property
    def is_split(self) -> bool:
        return self.mode == PaymentMode.SPLIT

    def add_partial(self, method: Union[PaymentMethod, str], amount) -> PartialPayment:
        """Append a partial payment.

        The amount must parse to a positive number; it is not compared with
        the charge total until commit.

        Raises:
            ValidationError: If the amount is not a positive number
        """
        try:
            value = parse_amount(amount)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if value <= 0:
            raise ValidationError(non_positive_amount("Partial amount"))
        partial = PartialPayment(method=normalize_method(method), amount=value)
        self.enable_split()
        self.partials.append(partial)
        return partial

    def remove_partial(self, index: int) -> PartialPayment:
        """Remove and return the partial at ``index``."""
        try:
            return self.partials.pop(index)
        except IndexError:
            raise ValidationError(f"No partial payment at position {index}")

    @property
    def partial_total(self) -> float:
        return sum(p.amount for p in self.partials)

    def remaining(self, total: float) -> float:
        """Amount still owed (negative when partials exceed the total)."""
        return total - self.partial_total

    def commit(
        self,
        employee_id: str,
        service_name: str,
        total: float,
        when: Optional[datetime] = None,
    ) -> list[ChargeLine]:
        """Turn the draft into transaction lines.

        Split mode yields one line per partial, single mode exactly one line.
        A rejected commit leaves the draft untouched; an accepted one resets it.

        Raises:
            ValidationError: If required data is missing or the total is not positive
            SplitMismatchError: If partials differ from the total by more than 0.1
        """
        if not service_name:
            raise ValidationError(missing_field("Service"))
        if total <= 0:
            raise ValidationError(non_positive_amount("Price"))
        if when is None:
            when = datetime.now()

        if self.is_split:
            if not self.partials:
                raise ValidationError("Add at least one partial payment")
            difference = self.remaining(total)
            if not amounts_match(total, self.partial_total):
                raise SplitMismatchError(difference)
            lines = [
                ChargeLine(
                    employee_id=employee_id,
                    service_name=partial_service_name(service_name, p.method),
                    price=p.amount,
                    date=when,
                    payment_method=p.method,
                )
                for p in self.partials
            ]
        else:
            lines = [
                ChargeLine(
                    employee_id=employee_id,
                    service_name=service_name,
                    price=total,
                    date=when,
                    payment_method=self.method,
                )
            ]

        self.disable_split()
        return lines
