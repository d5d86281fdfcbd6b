"""Base package for markdown outline parsing."""

from contact_reminders.file_utils import ParseError
from contact_reminders.markdown.outline_parser import OutlineParser
from contact_reminders.markdown.outline_writer import OutlineWriter
from contact_reminders.markdown.schemas import Contact, Document, Heading, Timestamp

__all__ = [
    "Contact",
    "Document",
    "Heading",
    "OutlineParser",
    "OutlineWriter",
    "ParseError",
    "Timestamp",
]
