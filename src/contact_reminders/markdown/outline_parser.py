"""Parser for markdown files into outline Documents.

Uses markdown-it to locate headings so that lines inside fenced code or
quotes are never mistaken for outline structure.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

import frontmatter
import yaml
from loguru import logger
from markdown_it import MarkdownIt

from contact_reminders.file_utils import FileError, ParseError
from contact_reminders.markdown.schemas import TODO_KEYWORDS, Document, Heading
from contact_reminders.markdown.timestamps import parse_timestamp

md = MarkdownIt("commonmark")

SCHEDULED_PREFIX = "SCHEDULED:"
CREATED_PROPERTY = "created"
PROPERTY_RE = re.compile(r"^(?P<key>[A-Za-z][\w-]*):: ?(?P<value>.*)$")


def _strip_blank_edges(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def split_keyword(text: str) -> Tuple[Optional[str], str]:
    """Split a leading TODO/DONE keyword off heading text."""
    for keyword in TODO_KEYWORDS:
        if text == keyword:
            return keyword, ""
        if text.startswith(f"{keyword} "):
            return keyword, text[len(keyword) + 1 :].strip()
    return None, text


class OutlineParser:
    """Parser for markdown files into Document objects.

    Documents have:
    - Optional YAML frontmatter (the property block)
    - Free text before the first heading
    - Headings, each optionally followed by a SCHEDULED line and
      `name:: value` property lines, then body text
    """

    def parse_file(self, path: Path) -> Document:
        """Read and parse a markdown file.

        Raises:
            FileError: If file cannot be read
            ParseError: If content cannot be parsed
        """
        if not path.exists():
            raise FileError(f"File does not exist: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeError as e:
            raise ParseError(f"Failed to decode {path}: {e}") from e
        except OSError as e:
            raise FileError(f"Failed to read {path}: {e}") from e

        return self.parse_content(content, path=path)

    def parse_content(self, content: str, path: Optional[Path] = None) -> Document:
        """Parse raw markdown into a Document."""
        try:
            post = frontmatter.loads(content)
        except yaml.YAMLError as e:
            logger.warning(
                f"Failed to parse YAML frontmatter in {path or '<string>'}: {e}. "
                f"Treating file as plain markdown without frontmatter."
            )
            post = frontmatter.Post(content)

        metadata = dict(post.metadata)
        lines = post.content.splitlines()
        spans = self._heading_spans(post.content)

        preamble_end = spans[0][0] if spans else len(lines)
        headings: List[Heading] = []
        stack: List[Heading] = []

        for index, (_, end, level, raw_text) in enumerate(spans):
            section_end = spans[index + 1][0] if index + 1 < len(spans) else len(lines)
            heading = self._build_heading(level, raw_text, lines[end:section_end], path)

            while stack and stack[-1].level >= level:
                stack.pop()
            if stack:
                stack[-1].children.append(heading)
            else:
                headings.append(heading)
            stack.append(heading)

        return Document(
            path=path,
            metadata=metadata,
            preamble=_strip_blank_edges(lines[:preamble_end]),
            headings=headings,
        )

    def _heading_spans(self, content: str) -> List[Tuple[int, int, int, str]]:
        """Return (start line, end line, level, text) for each top-level heading."""
        spans = []
        tokens = md.parse(content)
        for i, token in enumerate(tokens):
            if token.type != "heading_open" or token.level != 0 or token.map is None:
                continue
            inline = tokens[i + 1]
            spans.append((token.map[0], token.map[1], int(token.tag[1:]), inline.content.strip()))
        return spans

    def _build_heading(
        self, level: int, raw_text: str, section: List[str], path: Optional[Path]
    ) -> Heading:
        keyword, text = split_keyword(raw_text)
        heading = Heading(text=text, level=level, keyword=keyword)

        position = 0
        if section and section[0].startswith(SCHEDULED_PREFIX):
            value = section[0][len(SCHEDULED_PREFIX) :].strip()
            try:
                heading.scheduled = parse_timestamp(value)
                position = 1
            except ParseError as e:
                logger.warning(f"Ignoring schedule of '{raw_text}' in {path or '<string>'}: {e}")

        while position < len(section):
            match = PROPERTY_RE.match(section[position])
            if not match:
                break
            key, value = match.group("key"), match.group("value").strip()
            if key == CREATED_PROPERTY and heading.created_at is None:
                try:
                    heading.created_at = datetime.fromisoformat(value)
                except ValueError:
                    logger.warning(f"Invalid created timestamp '{value}' on '{raw_text}'")
                    heading.properties[key] = value
            else:
                heading.properties[key] = value
            position += 1

        heading.body = _strip_blank_edges(section[position:])
        return heading
