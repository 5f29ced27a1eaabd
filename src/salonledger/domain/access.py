"""Admin access gate.

The admin code is a short numeric PIN stored in cleartext in the settings
document and compared character for character. Callers only see the
``AccessGate`` interface, so the comparison can later be replaced with a
salted hash without touching them.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from loguru import logger

from salonledger.database.base import PIN_SETTING, Database
from salonledger.domain.errors import ValidationError

DEFAULT_PIN = "1234"
PIN_LENGTH = 4
PIN_ERROR_SECONDS = 1.0


class AccessGate(ABC):
    """Decides whether an entered code opens the admin view."""

    @abstractmethod
    def verify(self, code: str) -> bool:
        """Return True if ``code`` grants admin access."""
        pass

    @abstractmethod
    def change_secret(self, new_code: str) -> None:
        """Replace the stored secret."""
        pass


class PlaintextPinGate(AccessGate):
    """PIN gate backed by ``settings/config.pin``."""

    def __init__(self, db: Database):
        self.db = db
        self._pin: Optional[str] = None

    @property
    def pin(self) -> str:
        """Stored PIN, read once and cached (default "1234")."""
        if self._pin is None:
            self._pin = self.db.get_setting(PIN_SETTING) or DEFAULT_PIN
        return self._pin

    def verify(self, code: str) -> bool:
        return code == self.pin

    def change_secret(self, new_code: str) -> None:
        """Store a new PIN.

        Raises:
            ValidationError: If the PIN is shorter than 4 digits or not numeric
        """
        new_code = (new_code or "").strip()
        if len(new_code) < PIN_LENGTH or not new_code.isdigit():
            raise ValidationError(f"PIN must have at least {PIN_LENGTH} digits")
        self.db.set_setting(PIN_SETTING, new_code)
        self._pin = new_code
        logger.info("Admin PIN changed")


class PinPad:
    """Operator input for the PIN entry screen.

    A wrong code clears the input and raises an error indicator that stays
    visible for PIN_ERROR_SECONDS.
    """

    def __init__(self, gate: AccessGate, error_seconds: float = PIN_ERROR_SECONDS):
        self.gate = gate
        self.error_duration = timedelta(seconds=error_seconds)
        self.entered = ""
        self._error_until: Optional[datetime] = None

    def press(self, digit: str) -> None:
        """Append one digit; input beyond PIN_LENGTH digits is ignored."""
        if len(digit) != 1 or not digit.isdigit():
            raise ValidationError(f"'{digit}' is not a digit")
        if len(self.entered) < PIN_LENGTH:
            self.entered += digit

    def backspace(self) -> None:
        self.entered = self.entered[:-1]

    def clear(self) -> None:
        self.entered = ""

    def type_code(self, code: str) -> None:
        """Replace the input with ``code`` as typed on a keyboard."""
        self.entered = code

    def submit(self, now: Optional[datetime] = None) -> bool:
        """Check the entered code and clear the input.

        Returns:
            True if access is granted
        """
        now = now or datetime.now()
        granted = self.gate.verify(self.entered)
        self.entered = ""
        if granted:
            self._error_until = None
        else:
            self._error_until = now + self.error_duration
            logger.warning("Rejected admin PIN")
        return granted

    def error_visible(self, now: Optional[datetime] = None) -> bool:
        """Whether the wrong-PIN indicator is still showing at ``now``."""
        if self._error_until is None:
            return False
        now = now or datetime.now()
        return now < self._error_until
