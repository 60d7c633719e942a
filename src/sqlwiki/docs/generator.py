"""📚 Documentation Generator - Extract and render every collected SQL file."""

from __future__ import annotations

from pathlib import Path

from .models import Document
from .parsers.sql_sections import SQLSectionParser
from .templates import render_document


def generate_document(source_file: Path) -> Document:
    """Extract sections from one SQL file and render its page."""
    sections = SQLSectionParser().parse_file(source_file)
    return render_document(source_file, sections)


def generate_documents(source_files: list[Path]) -> list[Document]:
    """Generate a Document per source file, keeping the input order."""
    return [generate_document(path) for path in source_files]
