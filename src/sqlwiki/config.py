"""⚙️ Settings - Environment-driven defaults for sqlwiki."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class SqlWikiSettings(BaseSettings):
    """Environment-based settings (``SQLWIKI_*`` variables)."""

    # Site layout
    config_names: list[str] = Field(
        default_factory=lambda: ["mkdocs.yml", "mkdocs.yaml"],
        description="Site configuration filenames, tried in order",
    )
    nav_key: str = Field(default="nav", description="Top-level key of the navigation tree")
    default_docs_dir: str = Field(
        default="docs",
        description="Documentation root when the site config sets no docs_dir",
    )
    index_name: str = Field(default="index.md")

    # Sources
    source_suffix: str = Field(default=".sql")

    # Generated region of the index page
    index_start_marker: str = Field(default="<!-- SQLWIKI INDEX START -->")
    index_end_marker: str = Field(default="<!-- SQLWIKI INDEX END -->")

    class Config:
        env_prefix = "SQLWIKI_"
        case_sensitive = False


@lru_cache()
def get_settings() -> SqlWikiSettings:
    """Get cached settings from environment."""
    return SqlWikiSettings()
