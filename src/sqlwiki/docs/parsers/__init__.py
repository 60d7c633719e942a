"""📝 Documentation Parsers - Extract documentation sections from SQL.

Parsers for:
- Block comments → prose sections
- Statements between them → code sections
"""

from .sql_sections import ExtractorState, LineSource, SQLSectionParser, extract_sections

__all__ = [
    "ExtractorState",
    "LineSource",
    "SQLSectionParser",
    "extract_sections",
]
