"""View state machine.

The application is always in exactly one of four views. Moving between them
goes through an explicit transition table instead of toggling independent
flags.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from salonledger.domain.access import AccessGate, PinPad
from salonledger.domain.errors import AccessDeniedError, InvalidTransitionError


class View(str, Enum):
    LANDING = "Landing"
    PIN_ENTRY = "PinEntry"
    ADMIN_DASHBOARD = "AdminDashboard"
    CLIENT_BOOKING = "ClientBooking"


class AdminTab(str, Enum):
    HOME = "HOME"
    FINANCE = "FINANCE"
    REPORTS = "REPORTS"
    BOOKINGS = "BOOKINGS"


class Event(str, Enum):
    OPEN_ADMIN = "open_admin"
    PIN_ACCEPTED = "pin_accepted"
    CANCEL = "cancel"
    OPEN_BOOKING = "open_booking"
    BOOKING_SUBMITTED = "booking_submitted"
    SELECT_TAB = "select_tab"
    LOGOUT = "logout"


@dataclass(frozen=True)
class ViewState:
    """Current view; ``tab`` is only set on the admin dashboard."""

    view: View
    tab: Optional[AdminTab] = None

    def __str__(self) -> str:
        if self.tab is not None:
            return f"{self.view.value}({self.tab.value})"
        return self.view.value


LANDING = ViewState(View.LANDING)

TRANSITIONS: dict[tuple[View, Event], View] = {
    (View.LANDING, Event.OPEN_ADMIN): View.PIN_ENTRY,
    (View.LANDING, Event.OPEN_BOOKING): View.CLIENT_BOOKING,
    (View.PIN_ENTRY, Event.PIN_ACCEPTED): View.ADMIN_DASHBOARD,
    (View.PIN_ENTRY, Event.CANCEL): View.LANDING,
    (View.CLIENT_BOOKING, Event.BOOKING_SUBMITTED): View.LANDING,
    (View.CLIENT_BOOKING, Event.CANCEL): View.LANDING,
    (View.ADMIN_DASHBOARD, Event.SELECT_TAB): View.ADMIN_DASHBOARD,
    (View.ADMIN_DASHBOARD, Event.LOGOUT): View.LANDING,
}


class Navigator:
    """Holds the current view and applies transitions."""

    def __init__(self, state: ViewState = LANDING):
        self.state = state

    def can(self, event: Event) -> bool:
        return (self.state.view, event) in TRANSITIONS

    def dispatch(self, event: Event, tab: Optional[AdminTab] = None) -> ViewState:
        """Apply ``event`` and return the new state.

        Entering the dashboard lands on HOME; SELECT_TAB requires ``tab``.

        Raises:
            InvalidTransitionError: If the event is not allowed from the current view
        """
        target = TRANSITIONS.get((self.state.view, event))
        if target is None:
            raise InvalidTransitionError(
                f"Cannot {event.value.replace('_', ' ')} from {self.state}"
            )
        if target == View.ADMIN_DASHBOARD:
            if event == Event.SELECT_TAB:
                if tab is None:
                    raise InvalidTransitionError("Select tab requires a tab")
                new_tab = AdminTab(tab)
            else:
                new_tab = AdminTab.HOME
            self.state = ViewState(target, new_tab)
        else:
            self.state = ViewState(target)
        return self.state


class AdminSession:
    """Ties the navigator to the PIN pad so admin views require the code."""

    def __init__(self, gate: AccessGate, navigator: Optional[Navigator] = None):
        self.gate = gate
        self.navigator = navigator or Navigator()
        self.pin_pad = PinPad(gate)

    @property
    def state(self) -> ViewState:
        return self.navigator.state

    @property
    def is_admin(self) -> bool:
        return self.state.view == View.ADMIN_DASHBOARD

    def open_admin(self) -> ViewState:
        return self.navigator.dispatch(Event.OPEN_ADMIN)

    def submit_pin(self, code: Optional[str] = None, now: Optional[datetime] = None) -> bool:
        """Submit the PIN pad (optionally typing ``code`` first).

        A wrong code keeps the session on the PIN screen.
        """
        if code is not None:
            self.pin_pad.type_code(code)
        if not self.pin_pad.submit(now):
            return False
        self.navigator.dispatch(Event.PIN_ACCEPTED)
        return True

    def login(self, code: str, tab: AdminTab = AdminTab.HOME) -> ViewState:
        """Go from the landing view straight to ``tab`` of the dashboard.

        Raises:
            AccessDeniedError: If the code is wrong
        """
        if self.state.view == View.LANDING:
            self.open_admin()
        if not self.submit_pin(code):
            raise AccessDeniedError("Incorrect PIN")
        if tab != AdminTab.HOME:
            self.navigator.dispatch(Event.SELECT_TAB, tab)
        return self.state

    def select_tab(self, tab: AdminTab) -> ViewState:
        return self.navigator.dispatch(Event.SELECT_TAB, tab)

    def logout(self) -> ViewState:
        return self.navigator.dispatch(Event.LOGOUT)
