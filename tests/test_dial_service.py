"""Tests for DialService: validation, contact lookup, and the simulated call states."""

from datetime import datetime

import pytest

from sphone.application import CallCompleted, CallState, DialService
from sphone.domain import Contact, InvalidPhoneNumber, PhoneEntry

NOW = datetime(2026, 10, 19, 12, 0)


def _recorder():
    states: list[tuple[CallState, str, str | None]] = []

    def on_state(state, number, contact_name):
        states.append((state, number, contact_name))

    return states, on_state


def test_invalid_number_fails_before_dialing() -> None:
    states, on_state = _recorder()
    dialer = DialService(on_state=on_state, clock=lambda: NOW)

    with pytest.raises(InvalidPhoneNumber, match="exactly 10 digits"):
        dialer.dial_number("12345")
    assert states == []
    assert dialer.state is CallState.IDLE


def test_dial_emits_three_states_and_returns_completed() -> None:
    states, on_state = _recorder()
    dialer = DialService(on_state=on_state, clock=lambda: NOW)

    completed = dialer.dial_number("(555) 123-4567")
    assert completed == CallCompleted("5551234567", None, NOW)
    assert [s for s, _, _ in states] == [
        CallState.DIALING,
        CallState.CONNECTED,
        CallState.ENDED,
    ]
    assert all(number == "5551234567" for _, number, _ in states)
    assert dialer.state is CallState.IDLE


def test_lookup_resolves_contact_name() -> None:
    ana = Contact(name="Ana", phone_numbers=[PhoneEntry("5551234567")])
    looked_up: list[str] = []

    def lookup(number):
        looked_up.append(number)
        return ana if number == "5551234567" else None

    states, on_state = _recorder()
    dialer = DialService(contact_lookup=lookup, on_state=on_state, clock=lambda: NOW)

    assert dialer.dial_number("555-123-4567").contact_name == "Ana"
    assert looked_up == ["5551234567"]
    assert states[0] == (CallState.DIALING, "5551234567", "Ana")
    assert dialer.dial_number("5550000000").contact_name is None


def test_known_contact_name_skips_lookup() -> None:
    def lookup(number):
        raise AssertionError("lookup should not be called")

    dialer = DialService(contact_lookup=lookup, clock=lambda: NOW)
    assert dialer.dial_number("5551234567", "Ana").contact_name == "Ana"


def test_register_contact_lookup_after_construction() -> None:
    dialer = DialService(clock=lambda: NOW)
    assert dialer.dial_number("5551234567").contact_name is None

    bob = Contact(name="Bob", phone_numbers=[PhoneEntry("5551234567")])
    dialer.register_contact_lookup(lambda number: bob)
    assert dialer.dial_number("5551234567").contact_name == "Bob"
