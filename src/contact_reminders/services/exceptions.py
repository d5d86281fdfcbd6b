from pathlib import Path
from typing import Optional

from contact_reminders.file_utils import ParseError


class ContactError(Exception):
    """Raised when a contact document cannot be processed"""

    def __init__(self, message: str, path: Optional[Path] = None, key: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.key = key


class MissingNameError(ContactError):
    """Raised when a contact document has no title"""

    pass


class PropertyParseError(ContactError, ParseError):
    """Raised when a contact property value cannot be parsed"""

    pass


class DocumentNotFoundError(Exception):
    """Raised when a document file cannot be found"""

    pass


class HeadingDepthError(ContactError, ValueError):
    """Raised when a reminder would nest deeper than a level 6 heading"""

    pass
