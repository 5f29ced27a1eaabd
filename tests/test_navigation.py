"""Tests for the view state machine."""

from datetime import datetime

import pytest

from salonledger.domain.access import PlaintextPinGate
from salonledger.domain.errors import AccessDeniedError, InvalidTransitionError
from salonledger.domain.navigation import (
    LANDING,
    AdminSession,
    AdminTab,
    Event,
    Navigator,
    View,
    ViewState,
)

NOW = datetime(2026, 10, 19, 15, 30)


def test_starts_on_landing():
    assert Navigator().state == LANDING


def test_booking_flow_returns_to_landing():
    nav = Navigator()

    assert nav.dispatch(Event.OPEN_BOOKING) == ViewState(View.CLIENT_BOOKING)
    assert nav.dispatch(Event.BOOKING_SUBMITTED) == LANDING


def test_cancel_from_pin_entry_and_booking():
    nav = Navigator()
    nav.dispatch(Event.OPEN_ADMIN)
    assert nav.dispatch(Event.CANCEL) == LANDING

    nav.dispatch(Event.OPEN_BOOKING)
    assert nav.dispatch(Event.CANCEL) == LANDING


def test_dashboard_opens_on_home_tab():
    nav = Navigator()
    nav.dispatch(Event.OPEN_ADMIN)

    state = nav.dispatch(Event.PIN_ACCEPTED)

    assert state == ViewState(View.ADMIN_DASHBOARD, AdminTab.HOME)
    assert str(state) == "AdminDashboard(HOME)"


def test_select_tab_and_logout():
    nav = Navigator(ViewState(View.ADMIN_DASHBOARD, AdminTab.HOME))

    assert nav.dispatch(Event.SELECT_TAB, AdminTab.REPORTS).tab == AdminTab.REPORTS
    assert nav.dispatch(Event.SELECT_TAB, "FINANCE").tab == AdminTab.FINANCE
    assert nav.dispatch(Event.LOGOUT) == LANDING


def test_select_tab_requires_tab():
    nav = Navigator(ViewState(View.ADMIN_DASHBOARD, AdminTab.HOME))

    with pytest.raises(InvalidTransitionError):
        nav.dispatch(Event.SELECT_TAB)


@pytest.mark.parametrize(
    "state,event",
    [
        (LANDING, Event.PIN_ACCEPTED),
        (LANDING, Event.SELECT_TAB),
        (LANDING, Event.LOGOUT),
        (ViewState(View.CLIENT_BOOKING), Event.OPEN_ADMIN),
        (ViewState(View.PIN_ENTRY), Event.OPEN_BOOKING),
        (ViewState(View.ADMIN_DASHBOARD, AdminTab.HOME), Event.OPEN_BOOKING),
    ],
)
def test_disallowed_transitions(state, event):
    nav = Navigator(state)

    assert not nav.can(event)
    with pytest.raises(InvalidTransitionError):
        nav.dispatch(event, AdminTab.HOME)
    assert nav.state == state


class TestAdminSession:
    def test_wrong_pin_stays_on_pin_entry(self, temp_db):
        session = AdminSession(PlaintextPinGate(temp_db))
        session.open_admin()

        assert not session.submit_pin("0000", NOW)
        assert session.state == ViewState(View.PIN_ENTRY)
        assert session.pin_pad.error_visible(NOW)

    def test_correct_pin_enters_dashboard(self, temp_db):
        session = AdminSession(PlaintextPinGate(temp_db))
        session.open_admin()

        assert session.submit_pin("1234", NOW)
        assert session.is_admin
        assert session.state.tab == AdminTab.HOME

    def test_login_to_tab(self, temp_db):
        session = AdminSession(PlaintextPinGate(temp_db))

        state = session.login("1234", AdminTab.BOOKINGS)

        assert state == ViewState(View.ADMIN_DASHBOARD, AdminTab.BOOKINGS)

    def test_login_with_wrong_pin(self, temp_db):
        session = AdminSession(PlaintextPinGate(temp_db))

        with pytest.raises(AccessDeniedError, match="Incorrect PIN"):
            session.login("9999")
        assert not session.is_admin

    def test_logout(self, temp_db):
        session = AdminSession(PlaintextPinGate(temp_db))
        session.login("1234")

        assert session.logout() == LANDING
        assert not session.is_admin
