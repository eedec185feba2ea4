"""Messages passed between services and result types for contact operations."""

from dataclasses import dataclass, field
from datetime import datetime

from sphone.domain import Contact, PhoneEntry

# --- messages routed by the orchestrator ---


@dataclass(frozen=True)
class DialRequested:
    """The user chose a contact's number to call. The Dial Service places the call."""

    number: str
    contact_name: str


@dataclass(frozen=True)
class CallCompleted:
    """A simulated call ended. The Call History Store records it."""

    number: str
    contact_name: str | None = None
    called_at: datetime = field(default_factory=datetime.now)


# --- add_phone_number results ---


@dataclass(frozen=True)
class PhoneAdded:
    """Number was added to the contact and the store was saved."""

    contact: Contact
    entry: PhoneEntry


@dataclass(frozen=True)
class PhoneAlreadyPresent:
    """The contact already holds this number. Nothing changed."""

    contact: Contact
    number: str
