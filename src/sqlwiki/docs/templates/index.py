"""🗂️ Index Template - Maintain the generated listing of the index page.

The index page is hand-written except for one region bounded by two marker
lines. Everything between the markers is replaced on each run, the markers
and everything outside them are left as they are, line endings included.
"""

from __future__ import annotations


def render_index_listing(names: list[str]) -> str:
    """Render one ``* [name](name.md)`` line per page."""
    return "".join(f"* [{name}]({name}.md)\n" for name in names)


def _find_region(content: str, start_marker: str, end_marker: str) -> tuple[int, int, str] | None:
    """Locate the text between the marker lines.

    A marker only counts when it is the whole line (surrounding whitespace
    aside), so markers quoted in prose are ignored.

    Returns:
        (body start offset, body end offset, line ending of the start marker)
    """
    offset = 0
    body_start = None
    newline = "\n"
    for line in content.splitlines(keepends=True):
        stripped = line.strip()
        if body_start is None:
            if stripped == start_marker and line.endswith("\n"):
                body_start = offset + len(line)
                newline = "\r\n" if line.endswith("\r\n") else "\n"
        elif stripped == end_marker:
            return body_start, offset, newline
        offset += len(line)
    return None


def has_generated_region(content: str, start_marker: str, end_marker: str) -> bool:
    """Check that both marker lines are present, start before end."""
    return _find_region(content, start_marker, end_marker) is not None


def replace_generated_region(
    content: str,
    listing: str,
    start_marker: str,
    end_marker: str,
) -> str:
    """Replace the text between the marker lines with ``listing``.

    The listing is written with the line ending used by the start marker.

    Args:
        content: Current index page
        listing: New region body (complete lines)
        start_marker: Line opening the region
        end_marker: Line closing the region

    Returns:
        Updated index page

    Raises:
        ValueError: If the markers are missing or out of order
    """
    region = _find_region(content, start_marker, end_marker)
    if region is None:
        raise ValueError(f"Markers '{start_marker}' / '{end_marker}' not found")

    body_start, body_end, newline = region
    if listing and not listing.endswith("\n"):
        listing += "\n"
    if newline != "\n":
        listing = listing.replace("\r\n", "\n").replace("\n", newline)
    return content[:body_start] + listing + content[body_end:]
