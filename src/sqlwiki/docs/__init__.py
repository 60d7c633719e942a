"""📚 Documentation System - Turn commented SQL files into markdown pages.

This module provides tools to:
- Split SQL sources into comment and code sections
- Render the sections as markdown pages
- Maintain the generated listing of an index page

Usage:
    from sqlwiki.docs import extract_sections, render_document

    sections = extract_sections(Path("001-users.sql"))
    document = render_document(Path("001-users.sql"), sections)
"""

from .generator import generate_document, generate_documents
from .models import Document, Section, SectionKind
from .parsers import SQLSectionParser, extract_sections
from .templates import (
    description_for,
    display_name_for,
    render_document,
    render_markdown,
)

__all__ = [
    "generate_document",
    "generate_documents",
    "Document",
    "Section",
    "SectionKind",
    "SQLSectionParser",
    "extract_sections",
    "render_markdown",
    "render_document",
    "display_name_for",
    "description_for",
]
