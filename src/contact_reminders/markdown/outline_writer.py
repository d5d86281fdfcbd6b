"""Writer for outline Documents."""

from typing import List

import frontmatter

from contact_reminders.markdown.outline_parser import CREATED_PROPERTY, SCHEDULED_PREFIX
from contact_reminders.markdown.schemas import Document, Heading
from contact_reminders.markdown.timestamps import format_timestamp


class OutlineWriter:
    """Formats Documents into markdown files with frontmatter.

    Every heading is written in ATX form. Schedule and property lines follow
    the heading line directly; body text is separated by a blank line.
    """

    def format_heading(self, heading: Heading) -> List[str]:
        """Format a heading and its subtree as markdown lines."""
        text = f"{heading.keyword} {heading.text}" if heading.keyword else heading.text
        lines = [f"{'#' * heading.level} {text}".rstrip()]

        if heading.scheduled:
            lines.append(f"{SCHEDULED_PREFIX} {format_timestamp(heading.scheduled)}")
        if heading.created_at:
            lines.append(f"{CREATED_PROPERTY}:: {heading.created_at.isoformat(timespec='seconds')}")
        for key, value in heading.properties.items():
            lines.append(f"{key}:: {value}".rstrip())

        if heading.body:
            lines.append("")
            lines.extend(heading.body)

        for child in heading.children:
            lines.append("")
            lines.extend(self.format_heading(child))
        return lines

    def format_content(self, document: Document) -> str:
        """Format the document body (everything below the frontmatter)."""
        lines: List[str] = list(document.preamble)
        for heading in document.headings:
            if lines:
                lines.append("")
            lines.extend(self.format_heading(heading))
        return "\n".join(lines)

    def format_document(self, document: Document) -> str:
        """Format the complete file including frontmatter."""
        content = self.format_content(document)
        if not document.metadata:
            return f"{content}\n" if content else ""

        post = frontmatter.Post(content)
        post.metadata.update(document.metadata)
        return frontmatter.dumps(post, sort_keys=False) + "\n"
