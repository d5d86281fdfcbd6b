"""Service for reading and writing outline documents on disk."""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from contact_reminders.config import ContactsConfig
from contact_reminders.file_utils import ensure_directory, write_file_atomic
from contact_reminders.markdown import Document, OutlineParser, OutlineWriter
from contact_reminders.services.exceptions import DocumentNotFoundError


class DocumentService:
    """
    Service for handling document files.

    Features:
    - Paths relative to the corpus home
    - Atomic writes
    - Discovery of markdown files in the contacts directory
    """

    def __init__(
        self,
        config: ContactsConfig,
        parser: Optional[OutlineParser] = None,
        writer: Optional[OutlineWriter] = None,
    ):
        self.config = config
        self.parser = parser or OutlineParser()
        self.writer = writer or OutlineWriter()

    def get_file_path(self, path: Path | str) -> Path:
        """Get absolute path for a file using the corpus home."""
        path = Path(path).expanduser()
        if path.is_absolute():
            return path
        return self.config.home / path

    def read_document(self, path: Path | str) -> Document:
        """Read and parse a document.

        Raises:
            DocumentNotFoundError: If the file does not exist
            ParseError: If the file cannot be parsed
        """
        absolute_path = self.get_file_path(path)
        if not absolute_path.is_file():
            raise DocumentNotFoundError(f"Document not found: {absolute_path}")

        logger.debug(f"Reading document {absolute_path}")
        return self.parser.parse_file(absolute_path)

    def write_document(self, document: Document) -> Path:
        """Write a document back to its path.

        Raises:
            ValueError: If the document has no path
            FileWriteError: If the write fails
        """
        if document.path is None:
            raise ValueError("Cannot write a document without a path")

        ensure_directory(document.path.parent)
        write_file_atomic(document.path, self.writer.format_document(document))
        logger.info(f"Wrote document {document.path}")
        return document.path

    def list_documents(self) -> List[Path]:
        """Markdown files under the contacts directory, skipping hidden entries."""
        root = self.config.contacts_dir or self.config.home
        if not root.is_dir():
            return []

        paths = []
        for path in sorted(root.rglob("*.md")):
            relative = path.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                paths.append(path)
        return paths
