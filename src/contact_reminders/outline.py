"""Heading lookup and idempotent edits on a Document's heading tree.

Headings are addressed by explicit paths (tuples of child indices from the
document root) instead of a cursor, so no lookup or edit leaves hidden
position state behind.
"""

from datetime import datetime
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from contact_reminders.markdown.schemas import Document, Heading, Timestamp
from contact_reminders.services.exceptions import HeadingDepthError

HeadingPath = Tuple[int, ...]

MAX_HEADING_LEVEL = 6


class Scope(str, Enum):
    """Where a heading lookup searches."""

    TOP_LEVEL = "top_level"
    DOCUMENT = "document"


def _walk(
    headings: List[Heading], prefix: HeadingPath = ()
) -> Iterator[Tuple[HeadingPath, Heading]]:
    """Yield (path, heading) depth first in document order."""
    for index, heading in enumerate(headings):
        path = prefix + (index,)
        yield path, heading
        yield from _walk(heading.children, path)


def list_top_level_headings(document: Document) -> List[str]:
    return [heading.text for heading in document.headings]


def heading_at(document: Document, path: HeadingPath) -> Heading:
    """Resolve a path to its heading.

    Raises:
        IndexError: If the path does not point at a heading
    """
    if not path:
        raise IndexError("empty heading path")
    headings = document.headings
    heading = None
    for index in path:
        heading = headings[index]
        headings = heading.children
    return heading


def find_heading(
    document: Document, text: str, scope: Scope = Scope.DOCUMENT
) -> Optional[HeadingPath]:
    """Return the path of the first heading whose text is exactly text."""
    if scope == Scope.TOP_LEVEL:
        for index, heading in enumerate(document.headings):
            if heading.text == text:
                return (index,)
        return None

    for path, heading in _walk(document.headings):
        if heading.text == text:
            return path
    return None


def heading_exists(document: Document, text: str, scope: Scope = Scope.DOCUMENT) -> bool:
    return find_heading(document, text, scope) is not None


def ensure_top_level_heading(document: Document, text: str) -> bool:
    """Append a level 1 heading unless one with this text exists.

    Returns:
        True if the heading was created
    """
    if heading_exists(document, text, Scope.TOP_LEVEL):
        return False

    document.headings.append(Heading(text=text, level=1))
    logger.debug(f"Created top-level heading '{text}' in {document.path or '<unsaved document>'}")
    return True


def insert_reminder(
    document: Document,
    parent_heading_text: str,
    reminder_text: str,
    date: datetime,
    recurrence_interval: Optional[str] = None,
    now: Optional[datetime] = None,
) -> HeadingPath:
    """Append a scheduled TODO under a top-level heading, creating the heading if needed.

    This never checks for an existing reminder with the same text; callers
    wanting idempotent inserts check heading_exists first.

    Args:
        document: Document to edit
        parent_heading_text: Text of the top-level heading to file the reminder under
        reminder_text: Heading text of the reminder
        date: Scheduled moment
        recurrence_interval: Repeater such as "+1y", or None for a one-off date
        now: Creation timestamp, defaults to the current time

    Returns:
        Path of the new reminder heading

    Raises:
        HeadingDepthError: If the parent heading is already at level 6
    """
    ensure_top_level_heading(document, parent_heading_text)
    parent_path = find_heading(document, parent_heading_text, Scope.TOP_LEVEL)
    assert parent_path is not None
    parent = heading_at(document, parent_path)

    if parent.level >= MAX_HEADING_LEVEL:
        raise HeadingDepthError(
            f"Cannot nest '{reminder_text}' under level {parent.level} heading "
            f"'{parent_heading_text}' in {document.path or '<unsaved document>'}",
            path=document.path,
            key=parent_heading_text,
        )

    reminder = Heading(
        text=reminder_text,
        level=parent.level + 1,
        keyword="TODO",
        scheduled=Timestamp(moment=date, repeater=recurrence_interval),
        created_at=(now or datetime.now()).replace(microsecond=0),
    )
    parent.children.append(reminder)
    logger.info(
        f"Scheduled '{reminder_text}' for {date:%Y-%m-%d} "
        f"in {document.path or '<unsaved document>'}"
    )
    return parent_path + (len(parent.children) - 1,)
