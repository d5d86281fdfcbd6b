"""Tests for writing outline documents."""

from datetime import datetime
from textwrap import dedent

import frontmatter

from contact_reminders.markdown import Document, Heading, OutlineParser, OutlineWriter, Timestamp
from contact_reminders.markdown.timestamps import format_timestamp, parse_timestamp


def test_format_timestamp():
    assert format_timestamp(Timestamp(moment=datetime(2023, 3, 15))) == "<2023-03-15 Wed>"
    assert (
        format_timestamp(Timestamp(moment=datetime(2023, 3, 8), repeater="+1y"))
        == "<2023-03-08 Wed +1y>"
    )
    assert format_timestamp(Timestamp(moment=datetime(2024, 5, 1, 9, 5))) == "<2024-05-01 Wed 09:05>"
    assert (
        format_timestamp(Timestamp(moment=datetime(2024, 5, 1, 9, 5, 30)))
        == "<2024-05-01 Wed 09:05:30>"
    )


def test_parse_timestamp_with_seconds():
    timestamp = parse_timestamp("<2024-05-01 Wed 09:05:30 +2w>")
    assert timestamp.moment == datetime(2024, 5, 1, 9, 5, 30)
    assert timestamp.repeater == "+2w"


def test_format_reminder_heading(writer: OutlineWriter):
    heading = Heading(
        text="Ada Lovelace's birthday",
        level=2,
        keyword="TODO",
        scheduled=Timestamp(moment=datetime(2023, 3, 15), repeater="+1y"),
        created_at=datetime(2022, 10, 5, 9, 30),
    )
    assert writer.format_heading(heading) == [
        "## TODO Ada Lovelace's birthday",
        "SCHEDULED: <2023-03-15 Wed +1y>",
        "created:: 2022-10-05T09:30:00",
    ]


def test_format_document_without_frontmatter(writer: OutlineWriter):
    doc = Document(
        preamble=["intro"],
        headings=[Heading(text="Notes", level=1, body=["text"], children=[Heading(text="Sub", level=2)])],
    )
    assert writer.format_document(doc) == "intro\n\n# Notes\n\ntext\n\n## Sub\n"


def test_format_document_keeps_frontmatter(writer: OutlineWriter):
    doc = Document(
        metadata={"title": "Ada Lovelace", "tags": ["person"], "CONTACT_BIRTHDAY": "1985-03-15"},
        headings=[Heading(text="Notes", level=1)],
    )
    post = frontmatter.loads(writer.format_document(doc))
    assert post.metadata == {
        "title": "Ada Lovelace",
        "tags": ["person"],
        "CONTACT_BIRTHDAY": "1985-03-15",
    }
    assert post.content == "# Notes"


def test_round_trip_is_stable(parser: OutlineParser, writer: OutlineWriter):
    content = dedent("""
        ---
        title: Ada Lovelace
        tags:
        - person
        ---

        Met at the analytical engine meetup.

        # Notes

        Likes poetry.

        # Reminders

        ## TODO Ada Lovelace's birthday
        SCHEDULED: <2023-03-15 Wed +1y>
        created:: 2022-10-05T09:30:00
        """).lstrip()

    once = writer.format_document(parser.parse_content(content))
    twice = writer.format_document(parser.parse_content(once))
    assert once == twice
    assert "## TODO Ada Lovelace's birthday\nSCHEDULED: <2023-03-15 Wed +1y>\n" in once
