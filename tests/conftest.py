"""🧪 Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from sqlwiki.config import get_settings

START = "<!-- SQLWIKI INDEX START -->"
END = "<!-- SQLWIKI INDEX END -->"


@pytest.fixture
def sample_sql():
    """Sample documented SQL file content."""
    return """/*
 # Users Table
 Stores user records.
*/
CREATE TABLE users (id INT);
"""


@pytest.fixture
def site(tmp_path) -> Path:
    """Create a temporary documentation site with a schema section."""
    root = tmp_path / "site"
    (root / "docs" / "schema").mkdir(parents=True)

    (root / "mkdocs.yml").write_text(
        """site_name: Test Database
nav:
  - Home: index.md
  - Schema:
      - Overview: schema/index.md
  - About: about.md
"""
    )
    (root / "docs" / "index.md").write_text("# Home\n")
    (root / "docs" / "schema" / "index.md").write_text(
        f"# Schema\n\nHand-written intro.\n\n{START}\n* [stale](stale.md)\n{END}\n\nFooter.\n"
    )
    return root


@pytest.fixture
def sql_dir(tmp_path) -> Path:
    """Directory with two documented migrations."""
    src = tmp_path / "sql"
    src.mkdir()
    (src / "002-orders.sql").write_text(
        "/*\n# Orders\nOne row per order.\n*/\nCREATE TABLE orders (id INT);\n"
    )
    (src / "001-users.sql").write_text("CREATE TABLE users (id INT);\n")
    return src


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Make every test read settings from a clean environment."""
    for name in ("SQLWIKI_INDEX_NAME", "SQLWIKI_NAV_KEY", "SQLWIKI_DEFAULT_DOCS_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
