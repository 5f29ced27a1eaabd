"""Booking domain service."""

from datetime import datetime
from typing import Optional

from salonledger.database.base import Database
from salonledger.domain.entities import Booking as BookingEntity, BookingStatus
from salonledger.domain.errors import (
    NotFoundError,
    ValidationError,
    booking_not_found,
    employee_not_found,
    missing_field,
)


class BookingService:
    """Service for client appointments.

    Double-booking is allowed and dates may lie in the past.
    """

    def __init__(self, db: Database):
        """Initialize booking service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_booking(
        self,
        client_name: str,
        service: str,
        professional_id: str,
        date: Optional[datetime],
        client_phone: str = "",
        payment_method: Optional[str] = None,
    ) -> str:
        """Book an appointment.

        Args:
            client_name: Client name
            service: Service name (free text)
            professional_id: Employee who will attend
            date: Appointment date and time
            client_phone: Optional phone number for the confirmation message
            payment_method: Optional intended payment method

        Returns:
            Booking ID

        Raises:
            ValidationError: If a required field is missing
            NotFoundError: If the professional doesn't exist
        """
        required = {
            "Client name": (client_name or "").strip(),
            "Service": (service or "").strip(),
            "Professional": (professional_id or "").strip(),
        }
        for field_name, value in required.items():
            if not value:
                raise ValidationError(missing_field(field_name))
        if date is None:
            raise ValidationError(missing_field("Date"))

        if self.db.get_employee(professional_id) is None:
            raise NotFoundError(employee_not_found(professional_id))

        return self.db.create_booking(
            client_name=required["Client name"],
            client_phone=(client_phone or "").strip(),
            service=required["Service"],
            professional_id=professional_id,
            date=date,
            status=BookingStatus.CONFIRMED,
            payment_method=payment_method,
        )

    def get_booking(self, booking_id: str) -> Optional[BookingEntity]:
        return self.db.get_booking(booking_id)

    def list_bookings(self) -> list[BookingEntity]:
        """List bookings, earliest first."""
        return sorted(self.db.list_bookings(), key=lambda b: b.date)

    def cancel_booking(self, booking_id: str) -> None:
        """Delete a booking.

        Raises:
            NotFoundError: If booking doesn't exist
        """
        if self.db.get_booking(booking_id) is None:
            raise NotFoundError(booking_not_found(booking_id))
        self.db.delete_booking(booking_id)
