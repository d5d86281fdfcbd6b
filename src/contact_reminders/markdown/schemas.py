"""Models for outline documents parsed from markdown."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from contact_reminders.utils import parse_tags

TODO_KEYWORDS = ("TODO", "DONE")


class Timestamp(BaseModel):
    """A scheduled moment with an optional repeater like "+1y"."""

    moment: datetime
    repeater: Optional[str] = None


class Heading(BaseModel):
    """One outline node."""

    text: str
    level: int = Field(ge=1, le=6)
    keyword: Optional[str] = None  # TODO / DONE
    scheduled: Optional[Timestamp] = None
    created_at: Optional[datetime] = None
    properties: Dict[str, str] = Field(default_factory=dict)
    body: List[str] = Field(default_factory=list)
    children: List["Heading"] = Field(default_factory=list)


Heading.model_rebuild()


class Document(BaseModel):
    """A markdown document: frontmatter property block plus a heading tree."""

    path: Optional[Path] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    preamble: List[str] = Field(default_factory=list)
    headings: List[Heading] = Field(default_factory=list)

    @property
    def title(self) -> Optional[str]:
        title = self.metadata.get("title")
        if title is None:
            return None
        return str(title)

    @property
    def tags(self) -> List[str]:
        return parse_tags(self.metadata.get("tags"))


class Contact(BaseModel):
    """Contact view over a tagged document."""

    name: str
    birthday: Optional[datetime] = None
    emails: List[Tuple[str, str]] = Field(default_factory=list)
    addresses: List[Tuple[str, str]] = Field(default_factory=list)
    phones: List[Tuple[str, str]] = Field(default_factory=list)
