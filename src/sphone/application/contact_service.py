"""Contact Store: add, search, duplicate detection, and multi-number management."""

import logging
from collections.abc import Iterable

from sphone.application.dto import DialRequested, PhoneAdded, PhoneAlreadyPresent
from sphone.application.ports import Repository
from sphone.domain import (
    Contact,
    ContactType,
    DuplicateContact,
    PhoneEntry,
    clean_phone,
    validate_phone,
)

logger = logging.getLogger(__name__)


class ContactService:
    """Owns the contact list. Every mutation is persisted through the repository.

    Dialing is not done here: request_dial only produces a DialRequested message
    for whoever orchestrates the Dial Service.
    """

    def __init__(self, repository: Repository[Contact]) -> None:
        self._repo = repository

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in store order."""
        return self._repo.get_all()

    def add_contact(self, contact: Contact) -> Contact:
        """Append and persist. Raises DuplicateContact if the name+number pair already exists."""
        for entry in contact.phone_numbers:
            if self.is_duplicate(contact.name, entry.number):
                raise DuplicateContact(contact.name, entry.number)
        self._repo.add(contact)
        self._repo.save_changes()
        logger.info(
            "Contact %s added with %d number(s)", contact.name, len(contact.phone_numbers)
        )
        return contact

    def create_contact(
        self, name: str, entries: Iterable[tuple[str, ContactType]]
    ) -> Contact:
        """Build a contact from raw (number, type) pairs and add it.

        Each number is validated and cleaned (InvalidPhoneNumber on bad input).
        """
        phone_numbers = [
            PhoneEntry(number=validate_phone(number), type=contact_type)
            for number, contact_type in entries
        ]
        return self.add_contact(Contact(name=name, phone_numbers=phone_numbers))

    def add_phone_number(
        self, contact: Contact, number: str, contact_type: ContactType
    ) -> PhoneAdded | PhoneAlreadyPresent:
        """Add a number to an existing contact. A number it already holds is reported, not raised."""
        clean = validate_phone(number)
        if contact.has_phone_number(clean):
            return PhoneAlreadyPresent(contact=contact, number=clean)
        entry = contact.add_phone_number(clean, contact_type)
        self._repo.save_changes()
        return PhoneAdded(contact=contact, entry=entry)

    def search_by_name(self, term: str) -> list[Contact]:
        """Contacts whose name contains term (case-insensitive), in store order."""
        if not term or not term.strip():
            return []
        needle = term.strip().lower()
        return [c for c in self._repo.get_all() if needle in c.name.lower()]

    def search_by_number(self, term: str) -> list[Contact]:
        """Contacts with any number containing the cleaned term, in store order."""
        needle = clean_phone(term)
        if not needle:
            return []
        return [
            c
            for c in self._repo.get_all()
            if any(needle in entry.number for entry in c.phone_numbers)
        ]

    def is_duplicate(self, name: str, number: str) -> bool:
        """True iff one contact has this name (case-insensitive) and holds this number."""
        clean = clean_phone(number)
        folded = (name or "").strip().casefold()
        return any(
            c.name.casefold() == folded and c.has_phone_number(clean)
            for c in self._repo.get_all()
        )

    def find_by_number(self, number: str) -> Contact | None:
        """Return the first contact holding the cleaned number, or None."""
        clean = clean_phone(number)
        for contact in self._repo.get_all():
            if contact.has_phone_number(clean):
                return contact
        return None

    def find_by_name(self, name: str) -> Contact | None:
        """Return the first contact whose name equals name (case-insensitive), or None."""
        folded = (name or "").strip().casefold()
        for contact in self._repo.get_all():
            if contact.name.casefold() == folded:
                return contact
        return None

    def request_dial(self, number: str, contact_name: str) -> DialRequested:
        return DialRequested(number=number, contact_name=contact_name)

    def request_dial_for(self, contact: Contact, index: int = 0) -> DialRequested:
        """Request a dial of the contact's number at index (0-based)."""
        if not contact.phone_numbers:
            raise ValueError(f"Contact '{contact.name}' has no phone numbers!")
        if index < 0 or index >= len(contact.phone_numbers):
            raise ValueError("Invalid number selection!")
        return self.request_dial(contact.phone_numbers[index].number, contact.name)
