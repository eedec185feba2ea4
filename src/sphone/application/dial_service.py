"""Dial Service: validates a number, simulates the call, and reports it as completed."""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum

from sphone.application.dto import CallCompleted
from sphone.application.ports import ContactLookup
from sphone.domain import validate_phone

logger = logging.getLogger(__name__)


class CallState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    DIALING = "dialing"
    CONNECTED = "connected"
    ENDED = "ended"


# Called with (state, cleaned number, contact name) for each user-visible state.
StateListener = Callable[[CallState, str, str | None], None]

_VISIBLE_STATES = (CallState.DIALING, CallState.CONNECTED, CallState.ENDED)


class DialService:
    """Simulated dialer. No telephony and no delay: dial_number runs the whole call synchronously.

    The caller receives a CallCompleted message and decides who records it.
    """

    def __init__(
        self,
        *,
        contact_lookup: ContactLookup | None = None,
        on_state: StateListener | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._contact_lookup = contact_lookup
        self._on_state = on_state
        self._clock = clock
        self.state = CallState.IDLE

    def register_contact_lookup(self, contact_lookup: ContactLookup) -> None:
        self._contact_lookup = contact_lookup

    def dial_number(
        self, number: str, known_contact_name: str | None = None
    ) -> CallCompleted:
        """Place a call. Raises InvalidPhoneNumber before any state is shown if number is invalid."""
        self.state = CallState.VALIDATING
        try:
            clean = validate_phone(number)
        except ValueError:
            self.state = CallState.IDLE
            raise

        contact_name = known_contact_name
        if contact_name is None and self._contact_lookup is not None:
            contact = self._contact_lookup(clean)
            if contact is not None:
                contact_name = contact.name

        for state in _VISIBLE_STATES:
            self.state = state
            if self._on_state is not None:
                self._on_state(state, clean, contact_name)

        completed = CallCompleted(
            number=clean, contact_name=contact_name, called_at=self._clock()
        )
        self.state = CallState.IDLE
        logger.info("Call to %s ended", clean)
        return completed
