"""Read access to a document's frontmatter properties and its contact view."""

import re
from datetime import date, datetime, time
from typing import Any, List, Optional, Tuple

import dateparser
from loguru import logger

from contact_reminders.config import ContactsConfig
from contact_reminders.markdown.schemas import Contact, Document
from contact_reminders.services.exceptions import MissingNameError, PropertyParseError

# Year used for birthdays recorded without one. It is a leap year so Feb 29 survives.
PLACEHOLDER_YEAR = 1604

# --03-15 (vCard without year) or 03-15
NO_YEAR_RE = re.compile(r"^-{0,2}(\d{1,2})-(\d{1,2})$")

# ("work" "ada@example.com") or ("work" . "ada@example.com")
PAIR_RE = re.compile(r'\(\s*"((?:[^"\\]|\\.)*)"\s*(?:\.\s*)?"((?:[^"\\]|\\.)*)"\s*\)')

DATEPARSER_SETTINGS = {
    "REQUIRE_PARTS": ["day", "month"],
    "RETURN_AS_TIMEZONE_AWARE": False,
}

LabeledValue = Tuple[str, str]


def get_property(document: Document, key: str, default: Any = None) -> Any:
    """Return the value bound to key in the property block, or default."""
    return document.metadata.get(key, default)


def has_property(document: Document, key: str) -> bool:
    """True if key is declared in the property block, even with an empty value."""
    return key in document.metadata


def get_contact_name(document: Document) -> Optional[str]:
    title = document.title
    if title is None or not title.strip():
        return None
    return title.strip()


def _naive(moment: Optional[datetime]) -> Optional[datetime]:
    """Drop any UTC offset, keeping the wall clock time as written."""
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.replace(tzinfo=None)


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a property value as a naive datetime.

    Supports:
    - YAML dates and datetimes
    - ISO strings: 1985-03-15, 1985-03-15T08:30, 1985-03-15T08:30+01:00
    - dates without a year: --03-15, 03-15
    - human friendly formats via dateparser: March 15 1985, 15 Mar 1985

    A UTC offset is dropped so the result compares with the local clock.
    """
    if isinstance(value, datetime):
        return _naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        return None

    value = value.strip()
    try:
        return _naive(datetime.fromisoformat(value))
    except ValueError:
        pass

    if match := NO_YEAR_RE.match(value):
        try:
            return datetime(PLACEHOLDER_YEAR, int(match.group(1)), int(match.group(2)))
        except ValueError:
            return None

    return _naive(dateparser.parse(value, settings=DATEPARSER_SETTINGS))


def get_birthday(document: Document, key: str) -> datetime:
    """Parse the birthday property.

    Raises:
        PropertyParseError: If the value is empty or not a date
    """
    value = get_property(document, key)
    birthday = parse_date(value)
    if birthday is None:
        raise PropertyParseError(
            f"Invalid date in {key} of {document.path or '<unsaved document>'}: {value!r}",
            path=document.path,
            key=key,
        )
    return birthday


def _parse_pair(item: Any, key: str, document: Document) -> LabeledValue:
    if isinstance(item, (list, tuple)) and len(item) == 2:
        return str(item[0]), str(item[1])
    if isinstance(item, dict) and len(item) == 1:
        label, value = next(iter(item.items()))
        return str(label), str(value)
    if isinstance(item, str):
        pairs = _parse_pair_literals(item, key, document)
        if len(pairs) == 1:
            return pairs[0]
    raise PropertyParseError(
        f"Invalid label/value pair in {key} of {document.path or '<unsaved document>'}: {item!r}",
        path=document.path,
        key=key,
    )


def _parse_pair_literals(value: str, key: str, document: Document) -> List[LabeledValue]:
    pairs = [
        (label.replace('\\"', '"'), text.replace('\\"', '"'))
        for label, text in PAIR_RE.findall(value)
    ]
    if PAIR_RE.sub("", value).strip():
        raise PropertyParseError(
            f"Invalid label/value list in {key} of {document.path or '<unsaved document>'}: "
            f"{value!r}",
            path=document.path,
            key=key,
        )
    return pairs


def get_labeled_values(document: Document, key: str) -> List[LabeledValue]:
    """Parse an ordered list of (label, value) pairs.

    Accepts '("work" "a@example.com") ("home" "b@example.com")' strings,
    lists of two item lists, and lists of single entry mappings.
    """
    value = get_property(document, key)
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return _parse_pair_literals(value, key, document)
    if isinstance(value, list):
        return [_parse_pair(item, key, document) for item in value]
    return [_parse_pair(value, key, document)]


def is_contact_document(document: Document, config: ContactsConfig) -> bool:
    """True if the document lives in the contacts directory and carries the contact tag."""
    if document.path is None or config.contacts_dir is None:
        return False

    contacts_dir = config.contacts_dir.resolve()
    if not document.path.resolve().is_relative_to(contacts_dir):
        logger.debug(f"{document.path} is outside {contacts_dir}")
        return False
    return config.contact_tag in document.tags


def get_contact(document: Document, config: ContactsConfig) -> Contact:
    """Build the contact view of a document.

    Raises:
        MissingNameError: If the document has no title
        PropertyParseError: If a contact property is malformed
    """
    name = get_contact_name(document)
    if name is None:
        raise MissingNameError(
            f"Contact document has no title: {document.path or '<unsaved document>'}",
            path=document.path,
            key="title",
        )

    birthday = None
    if get_property(document, config.birthday_key) not in (None, ""):
        birthday = get_birthday(document, config.birthday_key)

    return Contact(
        name=name,
        birthday=birthday,
        emails=get_labeled_values(document, config.emails_key),
        addresses=get_labeled_values(document, config.addresses_key),
        phones=get_labeled_values(document, config.phones_key),
    )
