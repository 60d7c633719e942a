"""🧭 Navigation Model - The site's table of contents as typed nodes.

The YAML navigation is a list whose items are either a bare page path, a
``{title: path}`` mapping or a ``{title: [...]}`` mapping holding a nested
list. Each shape gets its own class so traversal never has to guess what a
raw YAML value means.

A section's ``children`` list is the node identity: whoever holds it sees
every append made through it, including the final write of the tree.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Union

from ..exceptions import SqlWikiError


class InvalidNavigationError(SqlWikiError):
    """Raised when a navigation item has none of the known shapes."""

    pass


@dataclass
class NavPage:
    """Leaf entry pointing at a markdown page."""

    path: str
    title: str | None = None

    def to_yaml(self) -> Any:
        if self.title is None:
            return self.path
        return {self.title: self.path}


@dataclass
class NavSection:
    """Titled group of entries."""

    title: str
    children: list[NavEntry] = field(default_factory=list)

    def to_yaml(self) -> Any:
        return {self.title: [child.to_yaml() for child in self.children]}


NavEntry = Union[NavPage, NavSection]


def parse_entry(item: Any) -> NavEntry:
    """Convert one raw YAML navigation item into a typed entry."""
    if isinstance(item, str):
        return NavPage(path=item)

    if isinstance(item, dict) and len(item) == 1:
        title, value = next(iter(item.items()))
        if isinstance(value, list):
            return NavSection(title=str(title), children=[parse_entry(v) for v in value])
        if isinstance(value, str):
            return NavPage(path=value, title=str(title))

    raise InvalidNavigationError(f"Unsupported navigation entry: {item!r}")


@dataclass
class NavTree:
    """The navigation forest."""

    entries: list[NavEntry] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, data: Any) -> NavTree:
        """Build the tree from the raw value of the navigation key."""
        if data is None:
            return cls()
        if not isinstance(data, list):
            raise InvalidNavigationError(
                f"Navigation must be a list, got {type(data).__name__}"
            )
        return cls(entries=[parse_entry(item) for item in data])

    def to_yaml(self) -> list[Any]:
        return [entry.to_yaml() for entry in self.entries]

    def find_section(self, page_path: str) -> list[NavEntry] | None:
        """Breadth-first search for the list that references ``page_path``.

        Args:
            page_path: Page path as written in the navigation

        Returns:
            The containing list itself (not a copy), or None
        """
        queue: deque[list[NavEntry]] = deque([self.entries])
        while queue:
            current = queue.popleft()
            for entry in current:
                if isinstance(entry, NavSection):
                    queue.append(entry.children)
                elif entry.path == page_path:
                    return current
        return None


def merge_page(section: list[NavEntry], title: str, path: str) -> bool:
    """Put a ``{title: path}`` page into a section.

    An existing page with the same path is retitled in place, otherwise the
    page is appended.

    Returns:
        True if a new entry was appended
    """
    for entry in section:
        if isinstance(entry, NavPage) and entry.path == path:
            entry.title = title
            return False
    section.append(NavPage(path=path, title=title))
    return True
