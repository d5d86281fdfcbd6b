"""Services for contact-reminders."""

from contact_reminders.services.exceptions import (
    ContactError,
    DocumentNotFoundError,
    HeadingDepthError,
    MissingNameError,
    PropertyParseError,
)

__all__ = [
    "ContactError",
    "DocumentNotFoundError",
    "HeadingDepthError",
    "MissingNameError",
    "PropertyParseError",
]
