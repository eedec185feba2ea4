"""Domain layer: entities, phone numbers, and errors. No dependencies on outer layers."""

from sphone.domain.entities import CallRecord, Contact, ContactType, PhoneEntry
from sphone.domain.errors import (
    DuplicateContact,
    FeatureNotAvailable,
    InvalidPhoneNumber,
    SphoneError,
)
from sphone.domain.phone import (
    PHONE_NUMBER_LENGTH,
    clean_phone,
    format_phone,
    is_valid_phone,
    validate_phone,
)

__all__ = [
    "PHONE_NUMBER_LENGTH",
    "CallRecord",
    "Contact",
    "ContactType",
    "DuplicateContact",
    "FeatureNotAvailable",
    "InvalidPhoneNumber",
    "PhoneEntry",
    "SphoneError",
    "clean_phone",
    "format_phone",
    "is_valid_phone",
    "validate_phone",
]
