"""
Sphone core: phone book and dialer simulator.

- domain: entities (Contact, PhoneEntry, CallRecord), phone numbers, errors.
- application: services (ContactService, CallHistoryService, DialService, ExportService), ports, messages.
- infrastructure: adapters (JsonFileRepository, InMemoryRepository).
"""

from sphone.application import (
    CallCompleted,
    CallHistoryService,
    CallState,
    ContactService,
    DialRequested,
    DialService,
    ExportService,
    PhoneAdded,
    PhoneAlreadyPresent,
    Repository,
)
from sphone.domain import (
    CallRecord,
    Contact,
    ContactType,
    DuplicateContact,
    FeatureNotAvailable,
    InvalidPhoneNumber,
    PhoneEntry,
    SphoneError,
)
from sphone.infrastructure import InMemoryRepository, JsonFileRepository

__all__ = [
    "CallCompleted",
    "CallHistoryService",
    "CallRecord",
    "CallState",
    "Contact",
    "ContactService",
    "ContactType",
    "DialRequested",
    "DialService",
    "DuplicateContact",
    "ExportService",
    "FeatureNotAvailable",
    "InMemoryRepository",
    "InvalidPhoneNumber",
    "JsonFileRepository",
    "PhoneAdded",
    "PhoneAlreadyPresent",
    "PhoneEntry",
    "Repository",
    "SphoneError",
]
