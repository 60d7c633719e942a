"""📝 Documentation Templates - Markdown generators for SQL docs.

Templates for generating:
- one page per SQL file
- the generated listing inside the index page
"""

from .index import has_generated_region, render_index_listing, replace_generated_region
from .page import (
    description_for,
    display_name_for,
    render_document,
    render_markdown,
    render_section,
)

__all__ = [
    "render_section",
    "render_markdown",
    "render_document",
    "display_name_for",
    "description_for",
    "render_index_listing",
    "has_generated_region",
    "replace_generated_region",
]
