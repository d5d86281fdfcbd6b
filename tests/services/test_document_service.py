"""Tests for DocumentService."""

import pytest

from contact_reminders.markdown import Document, Heading
from contact_reminders.services.document_service import DocumentService
from contact_reminders.services.exceptions import DocumentNotFoundError


def test_read_relative_path(document_service: DocumentService, contact_path):
    document = document_service.read_document("ada.md")
    assert document.path == contact_path
    assert document.title == "Ada Lovelace"


def test_read_missing_document(document_service: DocumentService):
    with pytest.raises(DocumentNotFoundError):
        document_service.read_document("nobody.md")


def test_write_document(document_service: DocumentService, contacts_dir):
    document = Document(
        path=contacts_dir / "new" / "grace.md",
        metadata={"title": "Grace Hopper"},
        headings=[Heading(text="Notes", level=1)],
    )

    path = document_service.write_document(document)

    assert path.read_text() == "---\ntitle: Grace Hopper\n---\n\n# Notes\n"
    assert not path.with_suffix(".tmp").exists()


def test_write_document_without_path(document_service: DocumentService):
    with pytest.raises(ValueError):
        document_service.write_document(Document())


def test_write_preserves_unrelated_content(document_service: DocumentService, contact_path):
    document = document_service.read_document(contact_path)
    document_service.write_document(document)

    reread = document_service.read_document(contact_path)
    assert reread.model_dump() == document.model_dump()


def test_list_documents(document_service: DocumentService, write_document):
    write_document("b.md", "# B\n")
    write_document("a/a.md", "# A\n")
    write_document(".trash/old.md", "# Old\n")
    write_document("notes.txt", "not markdown\n")

    names = [p.name for p in document_service.list_documents()]
    assert names == ["a.md", "b.md"]
