"""Common test fixtures."""

from datetime import datetime
from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from contact_reminders.config import ContactsConfig
from contact_reminders.markdown import OutlineParser, OutlineWriter
from contact_reminders.services.document_service import DocumentService
from contact_reminders.services.reminder_service import ReminderService

FIXED_NOW = datetime(2022, 10, 5, 9, 30)


@pytest.fixture
def config_home(tmp_path, monkeypatch) -> Path:
    # Patch HOME environment variable for the duration of the test
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("CONTACT_REMINDERS_ENV", "test")
    monkeypatch.setenv("CONTACT_REMINDERS_HOME", str(tmp_path / "contacts"))
    return tmp_path


@pytest.fixture
def contacts_config(config_home) -> ContactsConfig:
    return ContactsConfig(env="test", home=config_home / "contacts")


@pytest.fixture
def contacts_dir(contacts_config) -> Path:
    return contacts_config.contacts_dir


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def parser() -> OutlineParser:
    return OutlineParser()


@pytest.fixture
def writer() -> OutlineWriter:
    return OutlineWriter()


@pytest.fixture
def document_service(contacts_config) -> DocumentService:
    return DocumentService(contacts_config)


@pytest.fixture
def reminder_service(contacts_config, document_service, now) -> ReminderService:
    return ReminderService(contacts_config, document_service, clock=lambda: now)


@pytest.fixture
def contact_markdown() -> str:
    return dedent("""
        ---
        title: Ada Lovelace
        tags: [person]
        CONTACT_BIRTHDAY: 1985-03-15
        CONTACT_EMAILS: '("work" "ada@example.com") ("home" "ada@home.example")'
        ---

        Met at the analytical engine meetup.

        # Notes

        Likes poetry.
        """).lstrip()


@pytest.fixture
def write_document(contacts_dir) -> Callable[[str, str], Path]:
    """Write markdown into the contacts directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = contacts_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def contact_path(write_document, contact_markdown) -> Path:
    return write_document("ada.md", contact_markdown)
