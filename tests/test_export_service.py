"""Tests for the contact export file."""

import asyncio

import pytest

from sphone.application import ExportService, build_export_content
from sphone.domain import Contact, ContactType, PhoneEntry


def _contacts() -> list[Contact]:
    return [
        Contact(
            name="Ana",
            phone_numbers=[
                PhoneEntry("5551234567", ContactType.HOME),
                PhoneEntry("5559876543", ContactType.WORK),
            ],
        ),
        Contact(name="Bob"),
    ]


EXPECTED = (
    "Contact A) Ana\n"
    "  Number: 5551234567 (Home)\n"
    "  Number: 5559876543 (Work)\n"
    "\n"
    "Contact B) Bob\n"
    "  No phone numbers\n"
    "\n"
)


def test_build_export_content():
    assert build_export_content(_contacts()) == EXPECTED


def test_export_writes_file(tmp_path):
    path = tmp_path / "exported_contacts.txt"
    count = asyncio.run(ExportService().export_contacts(_contacts(), path))
    assert count == 2
    assert path.read_text(encoding="utf-8") == EXPECTED


def test_export_empty_list_raises(tmp_path):
    path = tmp_path / "exported_contacts.txt"
    with pytest.raises(ValueError, match="No contacts available"):
        asyncio.run(ExportService().export_contacts([], path))
    assert not path.exists()
