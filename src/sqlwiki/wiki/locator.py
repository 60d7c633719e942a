"""📍 Wiki Locator - Resolve where generated pages go in a site.

Checks, in order, that the site has a configuration file, that the
documentation subpath is a directory under the documentation root, and that
it holds an index page with a generated region. Then finds the navigation
list that references that index page.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import SqlWikiSettings, get_settings
from ..docs.templates import has_generated_region
from ..exceptions import (
    DocsPathError,
    IndexMarkersError,
    IndexNotFoundError,
    NavEntryNotFoundError,
)
from .nav import NavEntry, NavTree
from .site import SiteConfig


@dataclass
class WikiContext:
    """Everything the updater needs to publish into one site section."""

    site: SiteConfig
    target_section: list[NavEntry]  # Live list inside site.nav
    output_dir: Path
    index_file: Path
    base_url: str

    @property
    def config_path(self) -> Path:
        return self.site.path

    @property
    def nav_tree(self) -> NavTree:
        return self.site.nav

    def page_url(self, name: str) -> str:
        """Navigation path of a generated page, relative to the docs root."""
        if self.base_url:
            return f"{self.base_url}/{name}.md"
        return f"{name}.md"


def locate_wiki(
    site_root: Path | str,
    docs_path: str,
    settings: SqlWikiSettings | None = None,
) -> WikiContext:
    """Resolve the WikiContext for a documentation subpath of a site.

    Args:
        site_root: Directory holding the site configuration
        docs_path: Directory relative to the documentation root (e.g. "schema")
        settings: Optional settings override

    Returns:
        WikiContext whose target_section is the navigation list holding the index

    Raises:
        PreconditionError: If any of the checks fails
    """
    settings = settings or get_settings()
    site = SiteConfig.from_directory(site_root, settings)

    docs_root = site.docs_dir
    output_dir = docs_root / docs_path
    if not output_dir.is_dir():
        raise DocsPathError(output_dir)

    try:
        relative = output_dir.resolve().relative_to(docs_root.resolve())
    except ValueError:
        raise DocsPathError(output_dir) from None
    base_url = relative.as_posix()
    if base_url == ".":
        base_url = ""

    index_file = output_dir / settings.index_name
    if not index_file.is_file():
        raise IndexNotFoundError(index_file)

    with open(index_file, encoding="utf-8", newline="") as f:
        content = f.read()
    if not has_generated_region(
        content, settings.index_start_marker, settings.index_end_marker
    ):
        raise IndexMarkersError(
            index_file, settings.index_start_marker, settings.index_end_marker
        )

    index_url = f"{base_url}/{settings.index_name}" if base_url else settings.index_name
    target_section = site.nav.find_section(index_url)
    if target_section is None:
        raise NavEntryNotFoundError(index_url, site.path)

    return WikiContext(
        site=site,
        target_section=target_section,
        output_dir=output_dir,
        index_file=index_file,
        base_url=base_url,
    )
