"""Tests for environment-driven settings."""

from pathlib import Path

from cli.config import Settings

ENV_VARS = (
    "SPHONE_CALL_HISTORY_FILE",
    "SPHONE_CONTACTS_FILE",
    "SPHONE_EXPORT_FILE",
    "SPHONE_MESSAGES_PATH",
    "SPHONE_LOG_LEVEL",
)


def test_defaults(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.call_history_file == Path("call_history_db.json")
    assert settings.contacts_file == Path("contact_list.json")
    assert settings.export_file == Path("exported_contacts.txt")
    assert settings.messages_path.name == "sphone.yaml"
    assert settings.log_level == "WARNING"


def test_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("SPHONE_CALL_HISTORY_FILE", str(tmp_path / "h.json"))
    monkeypatch.setenv("SPHONE_CONTACTS_FILE", str(tmp_path / "c.json"))
    monkeypatch.setenv("SPHONE_EXPORT_FILE", str(tmp_path / "out.txt"))
    monkeypatch.setenv("SPHONE_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.call_history_file == tmp_path / "h.json"
    assert settings.contacts_file == tmp_path / "c.json"
    assert settings.export_file == tmp_path / "out.txt"
    assert settings.log_level == "DEBUG"
