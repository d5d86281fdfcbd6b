"""Service for scheduling contact reminders."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Dict, List, Optional

from loguru import logger

from contact_reminders.config import ContactsConfig
from contact_reminders.file_utils import FileError
from contact_reminders.markdown import Document
from contact_reminders.outline import HeadingPath, Scope, heading_exists, insert_reminder
from contact_reminders.properties import (
    get_birthday,
    get_contact_name,
    has_property,
    is_contact_document,
)
from contact_reminders.recurrence import YEARLY, next_annual_occurrence
from contact_reminders.services.document_service import DocumentService
from contact_reminders.services.exceptions import ContactError, MissingNameError

Clock = Callable[[], datetime]


@dataclass
class ScheduleReport:
    """Outcome of scheduling reminders across the contacts directory."""

    # path -> texts of reminders created
    updated: Dict[str, List[str]] = field(default_factory=dict)
    unchanged: List[str] = field(default_factory=list)
    # path -> error message
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def total_created(self) -> int:
        return sum(len(texts) for texts in self.updated.values())


class ReminderService:
    """Materializes birthday reminders in contact documents.

    A reminder is identified by its heading text. Reminders are only ever
    created; an existing heading with the same text anywhere in the
    document means the reminder is already there, whatever its date.
    """

    def __init__(
        self,
        config: ContactsConfig,
        document_service: Optional[DocumentService] = None,
        clock: Clock = datetime.now,
    ):
        self.config = config
        self.document_service = document_service or DocumentService(config)
        self.clock = clock

    def list_managed_properties(self) -> List[str]:
        return list(self.config.managed_properties)

    def birthday_heading(self, name: str) -> str:
        return self.config.birthday_template.format(name=name)

    def advance_notice_heading(self, name: str, days: int) -> str:
        return self.config.advance_notice_template.format(name=name, days=days)

    def schedule_birthday_reminders(self, document: Document, advance_notice_days: int) -> List[str]:
        """Insert missing birthday reminders into a contact document.

        Documents that are not contacts or have no birthday property are left
        untouched.

        Args:
            document: Document to edit in place
            advance_notice_days: Days before the birthday for the early reminder

        Returns:
            Texts of the reminders created, empty if nothing changed

        Raises:
            ValueError: If advance_notice_days is negative
            PropertyParseError: If the birthday is not a valid date
            MissingNameError: If the document has no title
            HeadingDepthError: If the reminders heading is a level 6 heading
        """
        if (
            isinstance(advance_notice_days, bool)
            or not isinstance(advance_notice_days, int)
            or advance_notice_days < 0
        ):
            raise ValueError(
                f"advance_notice_days must be a non-negative integer: {advance_notice_days!r}"
            )

        if not is_contact_document(document, self.config):
            logger.debug(f"Skipping {document.path}: not a contact document")
            return []
        if not has_property(document, self.config.birthday_key):
            logger.debug(f"Skipping {document.path}: no {self.config.birthday_key} property")
            return []

        birth_date = get_birthday(document, self.config.birthday_key)
        name = get_contact_name(document)
        if name is None:
            raise MissingNameError(
                f"Contact document has no title: {document.path}",
                path=document.path,
                key="title",
            )

        now = self.clock()
        candidates = [
            (
                self.advance_notice_heading(name, advance_notice_days),
                birth_date - timedelta(days=advance_notice_days),
            ),
            (self.birthday_heading(name), birth_date),
        ]

        created = []
        for text, anniversary in candidates:
            if heading_exists(document, text, Scope.DOCUMENT):
                logger.debug(f"Reminder '{text}' already present in {document.path}")
                continue
            reminder_time = next_annual_occurrence(anniversary, now)
            insert_reminder(
                document,
                self.config.reminders_heading,
                text,
                reminder_time,
                YEARLY,
                now=now,
            )
            created.append(text)
        return created

    def schedule_file(self, path: Path | str, advance_notice_days: int) -> List[str]:
        """Schedule reminders for one file, writing it only when something was created."""
        document = self.document_service.read_document(path)
        created = self.schedule_birthday_reminders(document, advance_notice_days)
        if created:
            self.document_service.write_document(document)
        return created

    def schedule_all(self, advance_notice_days: int) -> ScheduleReport:
        """Schedule reminders for every document in the contacts directory.

        A document that fails to parse, lacks a name or has no room for
        reminders under its reminders heading is logged and recorded in the
        report; the remaining documents are still processed.
        """
        report = ScheduleReport()
        for path in self.document_service.list_documents():
            try:
                created = self.schedule_file(path, advance_notice_days)
            except (ContactError, FileError) as e:
                logger.error(f"Failed to schedule reminders for {path}: {e}")
                report.failed[str(path)] = str(e)
                continue

            if created:
                report.updated[str(path)] = created
            else:
                report.unchanged.append(str(path))

        logger.info(
            f"Scheduled {report.total_created} reminders in {len(report.updated)} documents, "
            f"{len(report.failed)} failed"
        )
        return report

    def add_reminder(
        self,
        path: Path | str,
        reminder_text: str,
        date: datetime,
        recurrence_interval: Optional[str] = None,
    ) -> HeadingPath:
        """Insert a reminder under the reminders heading unconditionally and save.

        Raises:
            HeadingDepthError: If the reminders heading is a level 6 heading
        """
        document = self.document_service.read_document(path)
        heading_path = insert_reminder(
            document,
            self.config.reminders_heading,
            reminder_text,
            date,
            recurrence_interval,
            now=self.clock(),
        )
        self.document_service.write_document(document)
        return heading_path
