"""📄 Page Template - Render one SQL file as a markdown page.

Comment sections pass through as prose, code sections are fenced as
``sql``. Every section is followed by a blank line, and empty sections are
kept so the page has one block per extracted section.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..models import Document, Section, SectionKind

# Leading "NNN-" ordering prefix of source filenames
ORDER_PREFIX = re.compile(r"^\d+-")

# First markdown heading of a rendered page
HEADING_PATTERN = re.compile(r"^\s*#+[ \t]*(?P<title>.*?)[ \t#]*$", re.MULTILINE)


def render_section(section: Section) -> str:
    """Render a single section followed by a blank line."""
    text = section.text.strip()
    if section.kind is SectionKind.CODE:
        return f"```sql\n{text}\n```\n\n"
    return f"{text}\n\n"


def render_markdown(sections: list[Section]) -> str:
    """Render sections, in order, as one markdown document."""
    return "".join(render_section(s) for s in sections)


def render_document(source_file: Path, sections: list[Section]) -> Document:
    """Build the Document for a source file from its sections."""
    return Document(
        source_file=source_file,
        sections=list(sections),
        rendered_markdown=render_markdown(sections),
    )


def display_name_for(source_file: Path | str, suffix: str = ".sql") -> str:
    """Derive the page name from a source filename.

    Example:
        display_name_for("003-create_users.sql")  # "create_users"
    """
    name = Path(source_file).name
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return ORDER_PREFIX.sub("", name, count=1)


def description_for(markdown: str, fallback: str) -> str:
    """Return the text of the first heading in the page, else ``fallback``."""
    for match in HEADING_PATTERN.finditer(markdown):
        title = match.group("title").strip()
        if title:
            return title
    return fallback
