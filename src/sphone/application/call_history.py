"""Call History Store: most-recent-first list of completed calls."""

import logging
from datetime import datetime

from sphone.application.dto import CallCompleted
from sphone.application.ports import Repository
from sphone.domain import CallRecord, format_phone

logger = logging.getLogger(__name__)

NAME_WIDTH = 20
NUMBER_WIDTH = 15


def format_called_at(called_at: datetime) -> str:
    """MM/DD/YYYY hh:mm AM/PM"""
    return called_at.strftime("%m/%d/%Y %I:%M %p")


def format_record(record: CallRecord) -> str:
    number = format_phone(record.number)
    if record.has_contact:
        return f"{record.contact_name:<{NAME_WIDTH}} {number:<{NUMBER_WIDTH}}"
    return f"{number:<{NUMBER_WIDTH}}"


class CallHistoryService:
    """Records every completed call at position 0 and persists the full list."""

    def __init__(self, repository: Repository[CallRecord]) -> None:
        self._repo = repository

    def on_call_completed(
        self, number: str, contact_name: str | None, called_at: datetime
    ) -> CallRecord:
        record = CallRecord(number=number, contact_name=contact_name, called_at=called_at)
        self._repo.get_all().insert(0, record)
        self._repo.save_changes()
        logger.info("Call to %s recorded", number)
        return record

    def handle(self, event: CallCompleted) -> CallRecord:
        return self.on_call_completed(event.number, event.contact_name, event.called_at)

    def get_all(self) -> list[CallRecord]:
        """Records, most recent first."""
        return self._repo.get_all()

    def display(self) -> str:
        """Render the total followed by one numbered line per call."""
        history = self.get_all()
        lines = [f"Total calls: {len(history)}", ""]
        for i, record in enumerate(history, start=1):
            lines.append(f"{i}. {format_record(record)} - {format_called_at(record.called_at)}")
        return "\n".join(lines)
