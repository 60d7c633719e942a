"""🏗️ Site Configuration - Load and rewrite the documentation site's config.

The config file is read with PyYAML, the navigation key is turned into a
NavTree, and on save the whole document is dumped back with the (possibly
mutated) tree in place of the original navigation. Comments and formatting
of the original file are not preserved.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..config import SqlWikiSettings, get_settings
from ..exceptions import SiteConfigNotFoundError, SqlWikiError
from .nav import NavTree


class SiteConfig:
    """A loaded site configuration document.

    Example:
        site_name: My Database
        docs_dir: docs
        nav:
          - Home: index.md
          - Schema:
              - Overview: schema/index.md
    """

    def __init__(
        self,
        path: Path,
        data: dict[str, Any],
        settings: SqlWikiSettings | None = None,
    ) -> None:
        self.path = path
        self.settings = settings or get_settings()
        self._data = data
        self.nav = NavTree.from_yaml(data.get(self.settings.nav_key))

    @classmethod
    def find(cls, site_root: Path | str, settings: SqlWikiSettings | None = None) -> Path:
        """Return the configuration file of a site root.

        Raises:
            SiteConfigNotFoundError: If none of the known filenames exist
        """
        settings = settings or get_settings()
        site_root = Path(site_root)
        for name in settings.config_names:
            candidate = site_root / name
            if candidate.is_file():
                return candidate
        raise SiteConfigNotFoundError(site_root, settings.config_names)

    @classmethod
    def from_yaml(cls, path: Path | str, settings: SqlWikiSettings | None = None) -> SiteConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SqlWikiError(f"Site configuration {path} is not a mapping")
        return cls(path, data, settings)

    @classmethod
    def from_directory(cls, site_root: Path | str, settings: SqlWikiSettings | None = None) -> SiteConfig:
        """Load configuration from a site root directory."""
        return cls.from_yaml(cls.find(site_root, settings), settings)

    @property
    def site_root(self) -> Path:
        return self.path.parent

    @property
    def docs_dir(self) -> Path:
        """Documentation root, as configured or the default ``docs``."""
        docs_dir = self._data.get("docs_dir") or self.settings.default_docs_dir
        return self.site_root / str(docs_dir)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self._data)
        data[self.settings.nav_key] = self.nav.to_yaml()
        return data

    def to_yaml(self, path: Path | str | None = None) -> None:
        """Save configuration to a YAML file (defaults to where it was loaded from)."""
        with open(path or self.path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.to_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
