"""📝 Wiki Updater - Publish rendered SQL pages into a site.

For every document, in source filename order:
- write ``<name>.md`` into the output directory (overwriting)
- add a line to the index listing
- put a ``{description: <base>/<name>.md}`` entry into the navigation section

Then the index region and the site configuration are each rewritten once.
Page writes are not rolled back if a later write fails; in that case the
index and configuration are left untouched.

Usage:
    context = locate_wiki(site_root, "schema")
    result = WikiUpdater(context).update(documents)
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..config import SqlWikiSettings, get_settings
from ..docs.models import Document
from ..docs.templates import (
    description_for,
    display_name_for,
    render_index_listing,
    replace_generated_region,
)
from ..exceptions import DuplicatePageError
from .locator import WikiContext
from .nav import merge_page


@dataclass
class UpdateResult:
    """Outcome of publishing a set of documents."""

    files_created: list[str] = field(default_factory=list)
    files_updated: list[str] = field(default_factory=list)
    nav_added: list[str] = field(default_factory=list)
    nav_updated: list[str] = field(default_factory=list)

    @property
    def pages(self) -> int:
        return len(self.files_created) + len(self.files_updated)


class WikiUpdater:
    """Write pages, index listing and navigation for one WikiContext."""

    def __init__(
        self,
        context: WikiContext,
        console: Console | None = None,
        settings: SqlWikiSettings | None = None,
    ) -> None:
        self.context = context
        self.console = console or Console()
        self.settings = settings or get_settings()

    def update(self, documents: list[Document]) -> UpdateResult:
        """Publish documents and persist the index and navigation.

        Args:
            documents: Rendered documents, in any order

        Returns:
            UpdateResult listing written files and navigation changes
        """
        result = UpdateResult()
        ordered = sorted(documents, key=lambda d: (d.base_name, str(d.source_file)))
        names = [display_name_for(d.source_file, self.settings.source_suffix) for d in ordered]
        self._check_unique(ordered, names)

        for document, name in zip(ordered, names):
            description = description_for(document.rendered_markdown, fallback=name)

            page_path = self.context.output_dir / f"{name}.md"
            self._write_file(page_path, document.rendered_markdown, result)

            url = self.context.page_url(name)
            if merge_page(self.context.target_section, description, url):
                result.nav_added.append(url)
            else:
                result.nav_updated.append(url)

            self.console.print(
                f"[green]✓[/green] {document.base_name} → [cyan]{url}[/cyan] ({description})"
            )

        self._write_index(render_index_listing(names))
        self.context.site.to_yaml()
        self.console.print(f"[dim]Updated {self.context.index_file} and {self.context.config_path}[/dim]")

        return result

    def _check_unique(self, documents: list[Document], names: list[str]) -> None:
        """Refuse to write when two sources map to the same page."""
        sources: dict[str, list[Path]] = defaultdict(list)
        for document, name in zip(documents, names):
            sources[name].append(document.source_file)
        for name, files in sources.items():
            if len(files) > 1:
                raise DuplicatePageError(name, files)

    def _write_index(self, listing: str) -> None:
        index_file = self.context.index_file
        with open(index_file, encoding="utf-8", newline="") as f:
            content = f.read()
        updated = replace_generated_region(
            content,
            listing,
            self.settings.index_start_marker,
            self.settings.index_end_marker,
        )
        with open(index_file, "w", encoding="utf-8", newline="") as f:
            f.write(updated)

    def _write_file(self, path: Path, content: str, result: UpdateResult) -> None:
        """Write content to a file and track in result."""
        existed = path.exists()
        path.write_text(content, encoding="utf-8")

        if existed:
            result.files_updated.append(path.name)
        else:
            result.files_created.append(path.name)
