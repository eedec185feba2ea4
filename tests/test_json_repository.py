"""Tests for JsonFileRepository: load/save, full rewrite, and non-fatal failures."""

import json
import logging
from datetime import datetime

from sphone.domain import CallRecord, Contact, ContactType, PhoneEntry
from sphone.infrastructure import JsonFileRepository


def _ana() -> Contact:
    return Contact(
        name="Ana",
        phone_numbers=[
            PhoneEntry("5551234567", ContactType.HOME),
            PhoneEntry("5559876543", ContactType.WORK),
        ],
    )


def test_missing_file_starts_empty_without_warning(tmp_path):
    repo = JsonFileRepository(tmp_path / "contact_list.json", Contact)
    assert repo.get_all() == []
    assert repo.load_warning is None


def test_add_is_memory_only_until_saved(tmp_path):
    path = tmp_path / "contact_list.json"
    repo = JsonFileRepository(path, Contact)
    repo.add(_ana())
    assert not path.exists()
    assert repo.save_changes() is True
    assert path.exists()


def test_contacts_round_trip(tmp_path):
    path = tmp_path / "contact_list.json"
    repo = JsonFileRepository(path, Contact)
    repo.add(_ana())
    repo.add(Contact(name="Bob"))
    repo.save_changes()

    reloaded = JsonFileRepository(path, Contact)
    assert reloaded.get_all() == [_ana(), Contact(name="Bob")]
    assert reloaded.get_all()[0].phone_numbers[1].type is ContactType.WORK


def test_file_is_pretty_printed_plain_array(tmp_path):
    path = tmp_path / "contact_list.json"
    repo = JsonFileRepository(path, Contact)
    repo.add(Contact(name="Ana", phone_numbers=[PhoneEntry("5551234567", ContactType.HOME)]))
    repo.save_changes()

    text = path.read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text) == [
        {"name": "Ana", "phone_numbers": [{"number": "5551234567", "type": "Home"}]}
    ]


def test_save_rewrites_full_snapshot(tmp_path):
    path = tmp_path / "contact_list.json"
    repo = JsonFileRepository(path, Contact)
    repo.add(Contact(name="Ana"))
    repo.save_changes()
    repo.get_all()[0].add_phone_number("5551234567", ContactType.HOME)
    repo.save_changes()

    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"name": "Ana", "phone_numbers": [{"number": "5551234567", "type": "Home"}]}
    ]


def test_call_records_round_trip(tmp_path):
    path = tmp_path / "call_history_db.json"
    repo = JsonFileRepository(path, CallRecord)
    when = datetime(2026, 10, 19, 10, 15)
    repo.add(CallRecord("5551234567", "Ana", when))
    repo.add(CallRecord("5550001111", None, when))
    repo.save_changes()

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0] == {
        "number": "5551234567",
        "contact_name": "Ana",
        "called_at": "2026-10-19T10:15:00",
    }
    assert data[1]["contact_name"] is None

    reloaded = JsonFileRepository(path, CallRecord)
    assert reloaded.get_all() == [
        CallRecord("5551234567", "Ana", when),
        CallRecord("5550001111", None, when),
    ]


def test_malformed_file_starts_empty_with_warning(tmp_path, caplog):
    path = tmp_path / "contact_list.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        repo = JsonFileRepository(path, Contact)
    assert repo.get_all() == []
    assert repo.load_warning is not None
    assert str(path) in repo.load_warning
    assert "Could not load data" in caplog.text


def test_invalid_record_starts_empty_with_warning(tmp_path):
    path = tmp_path / "contact_list.json"
    path.write_text(
        json.dumps([{"name": "Ana", "phone_numbers": [{"number": "12345", "type": "Home"}]}]),
        encoding="utf-8",
    )
    repo = JsonFileRepository(path, Contact)
    assert repo.get_all() == []
    assert repo.load_warning is not None


def test_failed_save_is_not_fatal(tmp_path, caplog):
    path = tmp_path / "contact_list.json"
    repo = JsonFileRepository(path, Contact)
    path.mkdir()
    repo.add(Contact(name="Ana"))
    with caplog.at_level(logging.WARNING):
        assert repo.save_changes() is False
    assert repo.get_all() == [Contact(name="Ana")]
    assert "Could not save data" in caplog.text
