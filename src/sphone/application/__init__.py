"""Application layer: services, ports, and messages. Depends only on domain."""

from sphone.application.call_history import CallHistoryService
from sphone.application.contact_service import ContactService
from sphone.application.dial_service import CallState, DialService
from sphone.application.dto import (
    CallCompleted,
    DialRequested,
    PhoneAdded,
    PhoneAlreadyPresent,
)
from sphone.application.export_service import ExportService, build_export_content
from sphone.application.ports import ContactLookup, Repository

__all__ = [
    "CallCompleted",
    "CallHistoryService",
    "CallState",
    "ContactLookup",
    "ContactService",
    "DialRequested",
    "DialService",
    "ExportService",
    "PhoneAdded",
    "PhoneAlreadyPresent",
    "Repository",
    "build_export_content",
]
