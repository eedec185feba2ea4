"""Domain entities: Contact, PhoneEntry, and CallRecord."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from sphone.domain.phone import PHONE_NUMBER_LENGTH, clean_phone, is_valid_phone


class ContactType(str, Enum):
    HOME = "Home"
    WORK = "Work"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneEntry:
    """
    One phone number of a contact, already cleaned.
    Owned by exactly one Contact.
    """

    number: str
    type: ContactType = ContactType.HOME

    def __post_init__(self):
        if not is_valid_phone(self.number) or clean_phone(self.number) != self.number:
            raise ValueError(
                f"PhoneEntry number must be {PHONE_NUMBER_LENGTH} digits, got {self.number!r}."
            )

    def __str__(self) -> str:
        return f"{self.number} ({self.type.value})"


@dataclass
class Contact:
    """
    A named person in the phone book with zero or more phone entries.
    No two entries may share the same number. Contacts are never deleted;
    the only mutation is adding phone entries.
    """

    name: str = field(default="")
    phone_numbers: list[PhoneEntry] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        self.name = self.name.strip()
        seen: set[str] = set()
        for entry in self.phone_numbers:
            if entry.number in seen:
                raise ValueError(
                    f"Contact '{self.name}' lists number {entry.number} more than once."
                )
            seen.add(entry.number)

    def has_phone_number(self, number: str) -> bool:
        return any(entry.number == number for entry in self.phone_numbers)

    def add_phone_number(self, number: str, type: ContactType) -> PhoneEntry:
        """Append a phone entry. Raises ValueError if the contact already has the number."""
        if self.has_phone_number(number):
            raise ValueError(f"Contact '{self.name}' already has number {number}.")
        entry = PhoneEntry(number=number, type=type)
        self.phone_numbers.append(entry)
        return entry

    def __str__(self) -> str:
        lines = [f"Name: {self.name}"]
        lines.extend(f"  - {entry}" for entry in self.phone_numbers)
        return "\n".join(lines)


@dataclass(frozen=True)
class CallRecord:
    """
    One completed call. Immutable once created.
    contact_name is set when the dialed number belonged to a known contact.
    """

    number: str
    contact_name: str | None = None
    called_at: datetime = field(default_factory=datetime.now)

    @property
    def has_contact(self) -> bool:
        return bool(self.contact_name)

    def __str__(self) -> str:
        if self.has_contact:
            return f"{self.contact_name} - {self.number}"
        return self.number
